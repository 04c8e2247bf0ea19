"""Configuration settings for the enquiry API.

This module manages environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings.

    Attributes:
        API_PREFIX: Path prefix for the enquiry routes
        PROJECT_NAME: Name of the project
        DEBUG: Debug mode flag
        LOG_LEVEL: Root logging level name
        SITE_NAME: Short site name used in email subjects
        SITE_TITLE: Full site name used in email bodies
        RESEND_API_KEY: API key for the Resend email API
        ENQUIRIES_TO: Address that receives enquiry notifications
        ENQUIRIES_FROM: Sender address for enquiry notifications
    """
    def __init__(self):
        self.API_PREFIX = os.getenv("API_PREFIX", "/api")
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "Enquiry API")
        self.DEBUG = os.getenv("DEBUG", "False").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # Site Settings
        self.SITE_NAME = os.getenv("SITE_NAME", "Nsagu Park")
        self.SITE_TITLE = os.getenv("SITE_TITLE", "Nsagu Industrial Park")

        # Email Settings
        self.RESEND_API_KEY = os.getenv("RESEND_API_KEY")
        self.RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com")
        self.ENQUIRIES_TO = os.getenv("ENQUIRIES_TO")
        self.ENQUIRIES_FROM = os.getenv("ENQUIRIES_FROM") or "onboarding@resend.dev"
        self.MAIL_TIMEOUT_SECONDS = float(os.getenv("MAIL_TIMEOUT_SECONDS", 10))


settings = Settings()
