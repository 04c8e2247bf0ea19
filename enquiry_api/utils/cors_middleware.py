"""CORS header middleware.

The enquiry form may be posted from any origin, so every response carries
the same fixed set of CORS headers, including error responses and the
bare 204 preflight reply.
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that stamps ``CORS_HEADERS`` onto every response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
