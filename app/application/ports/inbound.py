# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class IClientRegistryUseCase(ABC):
    """Interface for client registry use cases."""

    @abstractmethod
    async def register_client(self, cnpj: Optional[str], nome: Optional[str]) -> Dict[str, object]:
        """Register a client and return its plaintext token (only once)."""
        pass

    @abstractmethod
    async def list_clients(self) -> List[Dict[str, str]]:
        """List every client as {cnpj, nome}, ordered by name."""
        pass

    @abstractmethod
    async def get_client(self, cnpj: Optional[str]) -> Dict[str, str]:
        """Get a single client as {cnpj, nome}."""
        pass

    @abstractmethod
    async def delete_client(self, cnpj: Optional[str]) -> Dict[str, object]:
        """Delete a client and its cached data."""
        pass

    @abstractmethod
    def resolve_client_by_secret(self, token: str) -> str:
        """Resolve a presented plaintext secret to the client name."""
        pass

    @abstractmethod
    async def warm_secret_index(self) -> int:
        """Rebuild the secret index from the client store."""
        pass
