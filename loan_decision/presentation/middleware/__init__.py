"""Middleware and exception handlers wrapped around the API routes."""

from .error_handler import register_exception_handlers
from .logging import LoggingMiddleware
from .request_context import RequestContextMiddleware, get_request_id

__all__ = [
    "register_exception_handlers",
    "LoggingMiddleware",
    "RequestContextMiddleware",
    "get_request_id",
]
