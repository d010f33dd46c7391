# app/shared/middleware/__init__.py (async version)

from app.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    request_validation_exception_handler,
)
from app.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "request_validation_exception_handler",
]
