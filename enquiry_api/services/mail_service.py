"""
MailService Module

This module sends notification emails through the Resend HTTP API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from enquiry_api.core.config import settings
from enquiry_api.models.enquiry import EmailMessage

logger = logging.getLogger(__name__)


class MailServiceError(Exception):
    """Raised when the mail provider rejects or fails to accept a message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MailService:
    """Mail service backed by the Resend email API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.RESEND_API_KEY
        self.api_url = (api_url or settings.RESEND_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.MAIL_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def send_email(self, message: EmailMessage) -> Dict[str, Any]:
        """
        Send an email through the provider.

        Args:
            message: Sender, recipient, subject and both text and HTML bodies

        Returns:
            Dictionary containing the status, the provider message id and the
            raw provider response

        Raises:
            MailServiceError: If the service has no API key, the request
                cannot be made, or the provider answers with a non-2xx status
        """
        if not self.is_configured:
            raise MailServiceError("Mail service is not configured with an API key")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.api_url}/emails",
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json=message.model_dump(by_alias=True),
                )
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach mail provider: {str(e)}")
            raise MailServiceError(f"Failed to reach mail provider: {str(e)}") from e

        if response.status_code not in (200, 201, 202):
            logger.error(
                f"Mail provider rejected email to {message.to}: {response.status_code} - {response.text}"
            )
            raise MailServiceError(
                f"Mail provider returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError:
            body = {}

        logger.info(f"Email accepted by provider for {message.to}")
        return {
            "status": True,
            "message_id": body.get("id", "undefined") if isinstance(body, dict) else "undefined",
            "response": body,
        }


mail_service = MailService()
