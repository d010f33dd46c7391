# app/domain/models/cache_keys.py

"""
Typed keys for the response cache.

Keys are value objects so that the read path and the invalidation path
always agree on the key for a given client. A client whose CNPJ is
literally "ALL" does not collide with the full listing key.
"""

from dataclasses import dataclass
from typing import Tuple, Union

CACHE_NAMESPACE = "CLIENTES"


@dataclass(frozen=True)
class AllClients:
    """Key of the full, name-ordered client listing."""

    def render(self) -> str:
        return f"{CACHE_NAMESPACE}:ALL"


@dataclass(frozen=True)
class ClientByCnpj:
    """Key of a single client projection."""
    cnpj: str

    def render(self) -> str:
        return f"{CACHE_NAMESPACE}:{self.cnpj}"


CacheKey = Union[AllClients, ClientByCnpj]

ALL_CLIENTS = AllClients()


def keys_for_cnpj(cnpj: str) -> Tuple[CacheKey, ...]:
    """Every key that may hold data about the given client."""
    return ALL_CLIENTS, ClientByCnpj(cnpj)
