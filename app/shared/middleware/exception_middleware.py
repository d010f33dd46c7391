# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client.
"""

import time
import logging
from typing import Callable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import DomainException, DatabaseOperationException, InvalidInputException
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# Mapping from domain 'internal_code' to HTTP status
STATUS_BY_CODE = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
}


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "N/A"


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


def _error_body(exc: DomainException) -> dict:
    return {"detail": exc.detail, "code": exc.internal_code, "errors": exc.details}


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
            if isinstance(exc, DatabaseOperationException):
                # Store internals go to the log, never to the caller
                logger.error(
                    f"[{_request_id(request)}] Domain exception: {exc.detail} | Code: {exc.internal_code} | "
                    f"Cause: {exc.original_error!r} | Path: {request.url.path}"
                )
            else:
                logger.warning(
                    f"[{_request_id(request)}] Domain exception: {exc.detail} | Code: {exc.internal_code} | "
                    f"Path: {request.url.path}"
                )

            return JSONResponse(
                status_code=status_code,
                content=_error_body(exc)
            )

        except SQLAlchemyError as exc:
            # SQLAlchemy errors that escaped the repository
            logger.error(
                f"[{_request_id(request)}] Database error: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | Client: {_client_host(request)}"
                + ("" if settings.ENVIRONMENT == "production" else f" | Error: {exc}")
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": "Erro interno de banco de dados",
                    "code": "DATABASE_ERROR"
                }
            )

        except Exception as exc:
            # Unhandled exceptions
            logger.exception(
                f"[{_request_id(request)}] Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | Client: {_client_host(request)}"
            )
            error_message = "Erro interno do servidor" if settings.ENVIRONMENT == "production" else str(exc)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Reports malformed request input (wrong JSON types, unparsable body)
    as INVALID_INPUT with the same body as the domain errors.
    """
    invalid = []
    for error in exc.errors():
        names = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        if names and names[-1] not in invalid:
            invalid.append(names[-1])

    domain_exc = InvalidInputException(detail="Dados de entrada inválidos", invalid_fields=invalid)
    logger.warning(
        f"[{_request_id(request)}] Domain exception: {domain_exc.detail} | Code: {domain_exc.internal_code} | "
        f"Path: {request.url.path}"
    )
    return JSONResponse(
        status_code=STATUS_BY_CODE[domain_exc.internal_code],
        content=_error_body(domain_exc),
    )
