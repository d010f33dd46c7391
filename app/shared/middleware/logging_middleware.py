# app/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

Every request gets a request id (taken from the X-Request-ID header when
the caller sends a usable one) that is attached to the log lines and
echoed back in the response, so a registry call can be traced across the
service, repository and exception logs.
"""

import re
import time
import uuid
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER)
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return uuid.uuid4().hex


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    Logs method, path, status and timing of each request under its id.
    Headers are never logged, they may carry client secrets.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = resolve_request_id(request)
        request.state.request_id = request_id

        if settings.ENVIRONMENT == "production":
            logger.info(f"[{request_id}] Request: {request.method} {request.url.path}")
        else:
            logger.info(
                f"[{request_id}] Request: {request.method} {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        if settings.ENVIRONMENT == "production":
            logger.info(f"[{request_id}] Response: {response.status_code} for {request.method} {request.url.path}")
        else:
            logger.info(
                f"[{request_id}] Response: {response.status_code} for {request.method} {request.url.path} | "
                f"Time: {process_time:.4f}s"
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
