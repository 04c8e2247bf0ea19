"""Error types raised while handling enquiry requests.

Each error knows the HTTP status it maps to and how to render itself as a
JSON body, so the exception handlers in ``enquiry_api.main`` stay trivial.
"""

from typing import Any, Dict, Optional

GENERIC_ERROR_MESSAGE = "Something went wrong on our side. Please try again later."
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed. Use POST."
ALLOWED_METHODS = "POST, OPTIONS"


class EnquiryAPIError(Exception):
    """Base error for anything the enquiry endpoint reports to the client."""

    status_code = 500
    message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None

    def to_content(self) -> Dict[str, Any]:
        return {"status": "error", "message": self.message}


class MethodNotAllowedError(EnquiryAPIError):
    status_code = 405
    message = METHOD_NOT_ALLOWED_MESSAGE

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"Allow": ALLOWED_METHODS}


class EnquiryValidationError(EnquiryAPIError):
    """One or more submitted fields failed validation.

    Attributes:
        errors: Mapping of field name to a user-facing message, only for
            the fields that failed
    """

    status_code = 400

    def __init__(self, errors: Dict[str, str]):
        super().__init__("Enquiry validation failed.")
        self.errors = dict(errors)

    def to_content(self) -> Dict[str, Any]:
        return {"status": "error", "errors": self.errors}


class ParseError(EnquiryAPIError):
    """The request body is not valid JSON.

    Rendered with the generic message; the detail is only logged.
    """

    def __init__(self, detail: str = "Invalid JSON in request body"):
        super().__init__()
        self.detail = detail

    def __str__(self) -> str:
        return self.detail


class InternalError(EnquiryAPIError):
    """Unexpected failure while processing an enquiry."""

    pass
