from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from enquiry_api.api.endpoints import enquiries
from enquiry_api.core.config import settings
from enquiry_api.core.exceptions import (
    EnquiryAPIError,
    InternalError,
    MethodNotAllowedError,
)
from enquiry_api.core.logging import setup_logging, uvicorn_log_config
from enquiry_api.utils.cors_middleware import CORS_HEADERS, CORSHeadersMiddleware

setup_logging()

logger = logging.getLogger(__name__)

ENQUIRIES_PATH = f"{settings.API_PREFIX}/enquiries"


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for receiving website enquiries and forwarding them by email",
    version="0.1.0",
    debug=settings.DEBUG,
)

app.add_middleware(CORSHeadersMiddleware)

app.include_router(
    enquiries.router,
    prefix=ENQUIRIES_PATH,
    tags=["enquiries"],
)


@app.get("/", tags=["status"])
async def root():
    return {"status": "online", "service": settings.PROJECT_NAME}


@app.exception_handler(EnquiryAPIError)
async def enquiry_api_error_handler(request: Request, exc: EnquiryAPIError):
    if exc.status_code >= 500:
        logger.error(f"Enquiry handler error on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers=exc.headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405 and request.url.path.rstrip("/") == ENQUIRIES_PATH:
        return await enquiry_api_error_handler(request, MethodNotAllowedError())
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}", exc_info=exc)
    # Runs outside the middleware stack, so CORS headers are added here.
    return JSONResponse(
        status_code=500,
        content=InternalError().to_content(),
        headers=CORS_HEADERS,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "enquiry_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_config=uvicorn_log_config(),
    )
