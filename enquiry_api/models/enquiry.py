"""Enquiry models for the enquiry API.

This module contains the Pydantic models for website enquiry submissions,
the normalized enquiry record, the notification email payload and the
response bodies returned by the endpoint.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Dict, Literal, Optional
from typing_extensions import Annotated
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)

from enquiry_api.utils.helper_functions import (
    clean_optional_text,
    to_iso_timestamp,
    utc_now,
)


class EnquiryRole(str, Enum):
    TENANT = "tenant"
    INVESTOR = "investor"
    PARTNER = "partner"
    OTHER = "other"


EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

FIELD_ERROR_MESSAGES: Dict[str, str] = {
    "name": "Name is required.",
    "email": "Valid email required.",
    "message": "Message is too short.",
    "role": "Invalid role.",
    "source_page": "Source page missing.",
}

SUCCESS_MESSAGE = "Thank you. We have received your enquiry and will be in touch shortly."
HONEYPOT_MESSAGE = "Thanks."

OptionalText = Annotated[str, BeforeValidator(clean_optional_text)]


class EnquirySubmission(BaseModel):
    """Request model for an enquiry form submission.

    Required fields are checked here; every failed field is reported at
    once by pydantic and mapped to ``FIELD_ERROR_MESSAGES`` by the
    enquiry service.

    Attributes:
        name: Name of the person enquiring, at least 2 characters
        email: Contact email address
        role: Relationship to the site, one of ``EnquiryRole``
        message: Enquiry text, at least 10 characters
        source_page: Page the form was submitted from
        organisation: Optional organisation name
        phone: Optional phone number
        utm_source: Optional campaign source
    """

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str, Field(..., description="Name of the person enquiring")]
    email: Annotated[str, Field(..., description="Contact email address")]
    role: Annotated[
        Literal["tenant", "investor", "partner", "other"],
        Field(..., description="Relationship to the site"),
    ]
    message: Annotated[str, Field(..., description="Enquiry text")]
    source_page: Annotated[str, Field(..., description="Page the form was submitted from")]
    organisation: Annotated[OptionalText, Field("", description="Organisation name")]
    phone: Annotated[OptionalText, Field("", description="Phone number")]
    utm_source: Annotated[OptionalText, Field("", description="Campaign source")]

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError(FIELD_ERROR_MESSAGES["name"])
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        # fullmatch so a trailing newline is rejected
        if not EMAIL_PATTERN.fullmatch(value):
            raise ValueError(FIELD_ERROR_MESSAGES["email"])
        return value.strip()

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 10:
            raise ValueError(FIELD_ERROR_MESSAGES["message"])
        return value

    @field_validator("source_page")
    @classmethod
    def validate_source_page(cls, value: str) -> str:
        if not value:
            raise ValueError(FIELD_ERROR_MESSAGES["source_page"])
        return value.strip()


class Enquiry(BaseModel):
    """Normalized, validated enquiry record.

    Built once per request from an ``EnquirySubmission`` and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    organisation: str = ""
    role: EnquiryRole
    message: str
    source_page: str
    phone: str = ""
    utm_source: str = ""
    received_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_submission(
        cls, submission: EnquirySubmission, received_at: Optional[datetime] = None
    ) -> "Enquiry":
        return cls(
            name=submission.name,
            email=submission.email,
            organisation=submission.organisation,
            role=submission.role,
            message=submission.message,
            source_page=submission.source_page,
            phone=submission.phone,
            utm_source=submission.utm_source,
            received_at=received_at or utc_now(),
        )

    @field_serializer("received_at")
    def serialize_received_at(self, value: datetime) -> str:
        return to_iso_timestamp(value)

    @property
    def received_at_iso(self) -> str:
        return to_iso_timestamp(self.received_at)


class EmailMessage(BaseModel):
    """Payload handed to the mail service.

    Serialize with ``model_dump(by_alias=True)`` to get the provider's
    ``from`` key.
    """

    model_config = ConfigDict(populate_by_name=True)

    sender: Annotated[str, Field(..., alias="from", description="Sender address")]
    to: Annotated[str, Field(..., description="Recipient address")]
    subject: str
    text: str
    html: str


class EnquiryResponse(BaseModel):
    """Response body for an accepted (or silently discarded) enquiry."""

    status: Literal["ok"] = "ok"
    message: str = SUCCESS_MESSAGE


class EnquiryErrorResponse(BaseModel):
    """Response body for rejected requests.

    Attributes:
        status: Always ``"error"``
        message: Set for 405 and 500 responses
        errors: Set for 400 responses, field name to message
    """

    status: Literal["error"] = "error"
    message: Optional[str] = None
    errors: Optional[Dict[str, str]] = None
