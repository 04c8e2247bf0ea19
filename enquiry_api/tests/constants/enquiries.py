from datetime import datetime, timezone
from enum import Enum


class EnquiryTestConstants(Enum):
    MOCK_RECIPIENT = "enquiries@nsagupark.com"
    MOCK_SENDER = "website@nsagupark.com"
    MOCK_SITE_NAME = "Nsagu Park"
    MOCK_SITE_TITLE = "Nsagu Industrial Park"
    MOCK_API_KEY = "re_test_123"
    MOCK_API_URL = "https://api.resend.test"
    MOCK_RECEIVED_AT = datetime(2025, 3, 1, 9, 30, 0, 120000, tzinfo=timezone.utc)
    MOCK_RECEIVED_AT_ISO = "2025-03-01T09:30:00.120Z"


MOCK_VALID_SUBMISSION = {
    "name": "Jo",
    "email": "jo@x.com",
    "role": "tenant",
    "message": "I am interested in leasing space.",
    "source_page": "/contact",
}

MOCK_FULL_SUBMISSION = {
    "name": "  Ama Mensah ",
    "email": "ama.mensah@logistics.com.gh",
    "organisation": " Mensah Logistics ",
    "role": "investor",
    "message": "We would like to discuss a warehouse build.\nPlease call me.",
    "source_page": "/invest ",
    "phone": " +233 24 000 0000 ",
    "utm_source": "newsletter",
}

MOCK_INVALID_SUBMISSION = {
    "name": "A",
    "email": "bad",
    "role": "x",
    "message": "hi",
}

MOCK_PROVIDER_RESULT = {
    "status": True,
    "message_id": "4ef9a417-02e9-4d39-ad75-9611e0fcc33c",
    "response": {"id": "4ef9a417-02e9-4d39-ad75-9611e0fcc33c"},
}

SUCCESS_BODY = {
    "status": "ok",
    "message": "Thank you. We have received your enquiry and will be in touch shortly.",
}

HONEYPOT_BODY = {"status": "ok", "message": "Thanks."}

GENERIC_ERROR_BODY = {
    "status": "error",
    "message": "Something went wrong on our side. Please try again later.",
}

EXPECTED_CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}
