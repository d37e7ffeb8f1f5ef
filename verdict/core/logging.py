"""Logging helpers for verdict.

verdict logs through the "verdict" logger hierarchy and leaves handler
configuration to the embedding application. setup_logging() is a
convenience for scripts that want console output.
"""

import logging
import logging.config
import sys
from typing import Any, Dict, Optional

from verdict.core.config import settings


def setup_logging() -> None:
    """Send "verdict" log records to stderr at the configured level."""
    log_level = settings.log_level.upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "verdict": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    })


def get_logger(name: str = "verdict") -> logging.Logger:
    """Get a logger instance with the specified name.

    Args:
        name: Logger name, defaults to "verdict"

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_log_context(
    prefix: Optional[str] = None,
    tag: Optional[str] = None,
    status_code: Optional[int] = None,
    rule_index: Optional[int] = None,
    **extra
) -> Dict[str, Any]:
    """Create a log context dictionary for use with extra parameter.

    Args:
        prefix: Configured error identifier prefix
        tag: Classification tag
        status_code: HTTP status under evaluation
        rule_index: Index of the matching fail rule
        **extra: Additional custom fields

    Returns:
        Dictionary suitable for passing as extra= parameter to logging calls

    Example:
        >>> logger.debug(
        ...     "Response rejected",
        ...     extra=get_log_context(prefix="LOGIN_REQ", tag="S_STATUS", status_code=404)
        ... )
    """
    context = {
        "prefix": prefix,
        "tag": tag,
        "status_code": status_code,
        "rule_index": rule_index,
    }
    context.update(extra)
    # Filter out None values
    return {k: v for k, v in context.items() if v is not None}
