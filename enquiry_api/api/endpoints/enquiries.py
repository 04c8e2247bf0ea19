"""Enquiry endpoints for the enquiry API.

This module contains the FastAPI routes that receive website enquiry form
submissions.
"""

import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status

from enquiry_api.core.exceptions import EnquiryAPIError, InternalError, ParseError
from enquiry_api.models.enquiry import EnquiryErrorResponse, EnquiryResponse
from enquiry_api.services.enquiry_service import EnquiryService, get_enquiry_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Read and parse the request body.

    The body is parsed by hand rather than declared as a pydantic parameter
    so that malformed JSON and invalid fields are reported in the enquiry
    response format instead of FastAPI's 422.

    Args:
        request: Incoming request

    Returns:
        The decoded JSON object; an empty dict for an empty body or for
        JSON that is not an object

    Raises:
        ParseError: If the body is not valid JSON
    """
    raw = await request.body()
    if not raw:
        return {}

    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError(f"Invalid JSON in request body: {str(e)}") from e

    if not isinstance(body, dict):
        return {}
    return body


@router.post(
    "",
    response_model=EnquiryResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": EnquiryErrorResponse, "description": "Invalid fields"},
        500: {"model": EnquiryErrorResponse, "description": "Malformed body or internal failure"},
    },
    summary="Submit enquiry",
    description="Submit a website enquiry form. The enquiry is emailed to the site owner when mail is configured.",
)
async def submit_enquiry(
    request: Request,
    service: EnquiryService = Depends(get_enquiry_service),
) -> EnquiryResponse:
    """
    Submit a website enquiry.

    This endpoint:
    - Silently accepts submissions that fill the honeypot field
    - Validates all required fields and reports every failure at once
    - Emails the normalized enquiry, ignoring delivery failures
    - Does not require authentication (public endpoint)

    Args:
        request: FastAPI request object, read for the raw JSON body
        service: Enquiry service dependency

    Returns:
        Confirmation response

    Raises:
        EnquiryValidationError: If any required field is invalid
        ParseError: If the body is not valid JSON
        InternalError: For any other failure
    """
    try:
        payload = await read_json_body(request)
        return await service.process(payload)
    except EnquiryAPIError:
        raise
    except Exception as e:
        logger.exception(f"Enquiry handler error: {str(e)}")
        raise InternalError() from e


@router.options(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    include_in_schema=False,
)
async def enquiry_preflight() -> Response:
    """Answer CORS preflight requests."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)
