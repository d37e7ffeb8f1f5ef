"""Core utilities for verdict."""

from verdict.core.config import Settings, settings
from verdict.core.http_client import create_async_http_client, create_http_client
from verdict.core.logging import get_log_context, get_logger, setup_logging

__all__ = [
    "Settings",
    "settings",
    "create_http_client",
    "create_async_http_client",
    "get_logger",
    "get_log_context",
    "setup_logging",
]
