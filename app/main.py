# app/main.py (async version)

import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from contextlib import asynccontextmanager

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import create_tables, get_db_context
from app.adapters.outbound.persistence.repositories.client_repository import client_repository
from app.application.use_cases.client_use_cases import ClientRegistryService
from app.core.container import RegistryContainer

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


async def warm_secret_index(container: RegistryContainer) -> int:
    """Loads every stored client into the secret index."""
    async with get_db_context() as db:
        service = ClientRegistryService(
            db_session=db,
            repository=client_repository,
            response_cache=container.response_cache,
            secret_index=container.secret_index,
            secret_generator=container.secret_generator,
        )
        return await service.warm_secret_index()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    # Startup
    logger.info("Application starting up...")

    # Create database tables if they don't exist
    await create_tables()

    loaded = await warm_secret_index(app.state.container)
    logger.info(f"Secret index warmed with {loaded} clients")

    yield

    # Shutdown
    logger.info("Application shutting down...")


# Create FastAPI instance
app = FastAPI(
    title="Registro de Clientes",
    description="API de registro de clientes por CNPJ",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Process-wide registry state (response cache, secret index, secret generator)
app.state.container = RegistryContainer.from_settings(settings)

# Middlewares
from app.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    request_validation_exception_handler,
)

# The logging middleware is outermost so error responses carry the request id
app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Routers
from app.adapters.inbound.api.v1.router import api_router as api_v1_router

app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url="/docs")
