# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access, the registry service and
authentication.
"""

import logging
from typing import Optional
from fastapi import Depends, Header, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import get_db
from app.adapters.outbound.persistence.repositories.client_repository import client_repository
from app.adapters.outbound.security.admin_auth import AdminAuthManager
from app.application.ports.outbound import IClientRepository
from app.application.use_cases.client_use_cases import ClientRegistryService
from app.core.container import RegistryContainer
from app.domain.exceptions import InvalidCredentialsException

# Configure logger
logger = logging.getLogger(__name__)

# Bearer scheme for client secret authentication
bearer_scheme = HTTPBearer(auto_error=False)

########################################################################
# Database Session Management
########################################################################

get_db_session = get_db


########################################################################
# Registry Service
########################################################################

def get_container(request: Request) -> RegistryContainer:
    """Process-wide registry state stored on the application."""
    return request.app.state.container


def get_client_repository() -> IClientRepository:
    return client_repository


async def get_client_registry_service(
        db: AsyncSession = Depends(get_db_session),
        repository: IClientRepository = Depends(get_client_repository),
        container: RegistryContainer = Depends(get_container),
) -> ClientRegistryService:
    return ClientRegistryService(
        db_session=db,
        repository=repository,
        response_cache=container.response_cache,
        secret_index=container.secret_index,
        secret_generator=container.secret_generator,
    )


########################################################################
# Admin Authentication
########################################################################

async def verify_admin(
        x_admin_password: Optional[str] = Header(None, alias="X-Admin-Password"),
) -> None:
    """
    Validates the administrative password of the management routes.

    Raises:
        InvalidCredentialsException: If a hash is configured and the header
            is missing or does not match
    """
    if not settings.ADMIN_PASSWORD_HASH:
        return
    if not AdminAuthManager.validate(x_admin_password, settings.ADMIN_PASSWORD_HASH):
        logger.warning("Attempt with invalid administrative password")
        raise InvalidCredentialsException(detail="Senha administrativa inválida")


########################################################################
# Client Secret Authentication
########################################################################

async def get_current_client_nome(
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
        container: RegistryContainer = Depends(get_container),
) -> str:
    """
    Resolve the client name from the bearer secret.

    Only the in-memory secret index is consulted; no database session
    is opened.

    Raises:
        InvalidCredentialsException: If the secret is missing or unknown
    """
    if credentials is None or not credentials.credentials:
        raise InvalidCredentialsException(detail="Secret de cliente não informado")

    service = ClientRegistryService(
        db_session=None,
        repository=client_repository,
        response_cache=container.response_cache,
        secret_index=container.secret_index,
        secret_generator=container.secret_generator,
    )
    return service.resolve_client_by_secret(credentials.credentials)
