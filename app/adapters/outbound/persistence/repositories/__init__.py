# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repository module.

This module exports the repository classes and instances
for the system entities, implementing the Repository pattern.
"""

from app.adapters.outbound.persistence.repositories.client_repository import (
    AsyncClientRepository,
    client_repository,
)

__all__ = [
    "AsyncClientRepository",
    "client_repository",
]
