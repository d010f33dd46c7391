# app/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta exceções e modelos do domínio.
"""

# Exportar todas as exceções para facilitar a importação
from app.domain.exceptions import (
    DomainException,               # Exceção base pura do domínio
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    InvalidCredentialsException,
    DatabaseOperationException,
    InvalidInputException,
)
from app.domain.models.client_domain_model import Client
from app.domain.models.cache_keys import AllClients, ClientByCnpj, CacheKey, ALL_CLIENTS, keys_for_cnpj

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ResourceAlreadyExistsException",
    "InvalidCredentialsException",
    "DatabaseOperationException",
    "InvalidInputException",
    "Client",
    "AllClients",
    "ClientByCnpj",
    "CacheKey",
    "ALL_CLIENTS",
    "keys_for_cnpj",
]
