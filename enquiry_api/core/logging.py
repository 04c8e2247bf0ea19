import logging
import sys
from typing import Any, Dict, Optional

from enquiry_api.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-request chatter from the server and the mail client
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "asyncio", "httpx", "httpcore")


def resolve_log_level(level_name: Optional[str] = None) -> int:
    """Map a level name such as ``"debug"`` to its logging constant, defaulting to INFO."""
    level = logging.getLevelName((level_name or settings.LOG_LEVEL).upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level_name: Optional[str] = None) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=resolve_log_level(level_name),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def uvicorn_log_config(level_name: Optional[str] = None) -> Dict[str, Any]:
    """Build the ``log_config`` handed to ``uvicorn.run`` so server logs share the app format."""
    level = logging.getLevelName(resolve_log_level(level_name))
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "uvicorn.error": {"level": "WARNING"},
            "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "enquiry_api": {"level": level},
        },
    }
