"""Enquiry processing service.

Turns a parsed request body into a validated ``Enquiry`` record and forwards
it by email. Email delivery is best-effort: once a submission has passed
validation the caller is told it succeeded, whatever the mail provider says.
"""

import html
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from enquiry_api.core.config import settings
from enquiry_api.core.exceptions import EnquiryValidationError
from enquiry_api.models.enquiry import (
    EmailMessage,
    Enquiry,
    EnquiryResponse,
    EnquirySubmission,
    FIELD_ERROR_MESSAGES,
    HONEYPOT_MESSAGE,
)
from enquiry_api.services.mail_service import MailService, MailServiceError, mail_service
from enquiry_api.utils.helper_functions import clean_optional_text, display_or_dash

logger = logging.getLogger(__name__)


class EnquiryService:
    """Service for validating enquiries and emailing them to the site owner."""

    def __init__(
        self,
        mail: MailService,
        recipient: Optional[str] = None,
        sender: Optional[str] = None,
        site_name: Optional[str] = None,
        site_title: Optional[str] = None,
    ):
        self.mail_service = mail
        self.recipient = recipient
        self.sender = sender or settings.ENQUIRIES_FROM
        self.site_name = site_name or settings.SITE_NAME
        self.site_title = site_title or settings.SITE_TITLE

    @property
    def mail_enabled(self) -> bool:
        return bool(self.mail_service.is_configured and self.recipient)

    @staticmethod
    def is_honeypot_triggered(payload: Dict[str, Any]) -> bool:
        """Check the hidden spam-trap field.

        Args:
            payload: Raw submission

        Returns:
            True if ``honeypot`` holds anything other than whitespace
        """
        return clean_optional_text(payload.get("honeypot")) != ""

    @staticmethod
    def validate(payload: Dict[str, Any]) -> EnquirySubmission:
        """Validate a raw submission, collecting every failed field.

        Args:
            payload: Raw submission

        Returns:
            The validated submission with required fields trimmed

        Raises:
            EnquiryValidationError: With one message per failed field
        """
        try:
            return EnquirySubmission.model_validate(payload)
        except ValidationError as e:
            errors: Dict[str, str] = {}
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else None
                if field in FIELD_ERROR_MESSAGES:
                    errors.setdefault(field, FIELD_ERROR_MESSAGES[field])
            if not errors:
                raise
            raise EnquiryValidationError(errors) from e

    def build_subject(self, enquiry: Enquiry) -> str:
        return f"New {self.site_name} enquiry – {enquiry.role.value} – {enquiry.name}"

    def build_text_body(self, enquiry: Enquiry) -> str:
        lines = [
            f"New {self.site_title} enquiry",
            "",
            f"Name: {enquiry.name}",
            f"Email: {enquiry.email}",
            f"Organisation: {display_or_dash(enquiry.organisation)}",
            f"Role: {enquiry.role.value}",
            f"Phone: {display_or_dash(enquiry.phone)}",
            f"Source page: {enquiry.source_page}",
            f"UTM source: {display_or_dash(enquiry.utm_source)}",
            "",
            "Message:",
            enquiry.message,
            "",
            f"Received at: {enquiry.received_at_iso}",
        ]
        return "\n".join(lines)

    def build_html_body(self, enquiry: Enquiry) -> str:
        def field(label: str, value: str) -> str:
            return f"<p><strong>{label}:</strong> {html.escape(value)}</p>"

        message = html.escape(enquiry.message).replace("\r\n", "\n").replace("\n", "<br />")
        parts = [
            f"<h2>New {html.escape(self.site_title)} enquiry</h2>",
            field("Name", enquiry.name),
            field("Email", enquiry.email),
            field("Organisation", display_or_dash(enquiry.organisation)),
            field("Role", enquiry.role.value),
            field("Phone", display_or_dash(enquiry.phone)),
            field("Source page", enquiry.source_page),
            field("UTM source", display_or_dash(enquiry.utm_source)),
            "<p><strong>Message:</strong></p>",
            f"<p>{message}</p>",
            f"<p><em>Received at: {enquiry.received_at_iso}</em></p>",
        ]
        return "\n".join(parts)

    def compose_email(self, enquiry: Enquiry) -> EmailMessage:
        return EmailMessage(
            sender=self.sender,
            to=self.recipient or "",
            subject=self.build_subject(enquiry),
            text=self.build_text_body(enquiry),
            html=self.build_html_body(enquiry),
        )

    async def dispatch_email(self, enquiry: Enquiry) -> bool:
        """Email the enquiry to the configured recipient.

        Never raises: provider and transport failures are logged and
        reported through the return value only.

        Args:
            enquiry: The accepted enquiry

        Returns:
            True if the provider accepted the email
        """
        if not self.mail_enabled:
            logger.warning("Email not sent: RESEND_API_KEY or ENQUIRIES_TO not configured.")
            return False

        message = self.compose_email(enquiry)
        try:
            result = await self.mail_service.send_email(message)
            logger.info(f"Enquiry email result: {result}")
            return True
        except MailServiceError as e:
            logger.error(f"Error sending enquiry email: {str(e)}")
        except Exception:
            logger.exception("Unexpected error sending enquiry email")
        return False

    async def process(self, payload: Dict[str, Any]) -> EnquiryResponse:
        """Handle one submission end to end.

        Args:
            payload: Parsed request body

        Returns:
            The success response, or the short acknowledgement for a
            honeypot hit

        Raises:
            EnquiryValidationError: If any required field is invalid
        """
        if self.is_honeypot_triggered(payload):
            logger.info("Spam / bot submission detected (honeypot filled).")
            return EnquiryResponse(message=HONEYPOT_MESSAGE)

        try:
            submission = self.validate(payload)
        except EnquiryValidationError as e:
            logger.info(f"Enquiry rejected, invalid fields: {sorted(e.errors)}")
            raise

        enquiry = Enquiry.from_submission(submission)
        logger.info(f"New {self.site_name} enquiry: {enquiry.model_dump(mode='json')}")

        await self.dispatch_email(enquiry)
        return EnquiryResponse()


enquiry_service = EnquiryService(mail=mail_service, recipient=settings.ENQUIRIES_TO)


def get_enquiry_service() -> EnquiryService:
    """FastAPI dependency returning the process-wide enquiry service."""
    return enquiry_service
