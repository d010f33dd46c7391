# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple

from app.domain.models.cache_keys import CacheKey
from app.domain.models.client_domain_model import Client

# (invalidation clock, monotonic time) captured before a store read
FillToken = Tuple[int, float]


class IClientRepository(ABC):
    """Client persistence interface (the relational client store)."""

    @abstractmethod
    async def exists(self, db: Any, cnpj: str) -> bool:
        """Check whether a client with this CNPJ is stored."""
        pass

    @abstractmethod
    async def get_by_cnpj(self, db: Any, cnpj: str) -> Optional[Client]:
        """Get client by CNPJ."""
        pass

    @abstractmethod
    async def list_ordered_by_nome(self, db: Any) -> List[Client]:
        """List all clients ordered by name."""
        pass

    @abstractmethod
    async def get_secret_enc(self, db: Any, cnpj: str) -> Optional[str]:
        """Get the encrypted secret stored for a CNPJ."""
        pass

    @abstractmethod
    async def create(self, db: Any, client: Client) -> Client:
        """Insert and commit a new client."""
        pass

    @abstractmethod
    async def delete_by_cnpj(self, db: Any, cnpj: str) -> bool:
        """Delete and commit; returns False when no row was removed."""
        pass

    @abstractmethod
    async def list_secrets(self, db: Any) -> List[Tuple[str, str]]:
        """List (secret_enc, nome) pairs of every stored client."""
        pass


class IResponseCache(ABC):
    """Process-wide cache of read projections."""

    @abstractmethod
    def get(self, key: CacheKey) -> Optional[Any]:
        pass

    @abstractmethod
    def set(self, key: CacheKey, value: Any, generation: Optional[FillToken] = None) -> bool:
        pass

    @abstractmethod
    def invalidate(self, key: CacheKey) -> None:
        pass

    @abstractmethod
    def generation(self, key: CacheKey) -> FillToken:
        pass


class ISecretIndex(ABC):
    """Process-wide mapping of encrypted secret to client name."""

    @abstractmethod
    def add(self, secret_enc: str, nome: str, digest: str) -> None:
        pass

    @abstractmethod
    def remove(self, secret_enc: str) -> None:
        pass

    @abstractmethod
    def get(self, secret_enc: str) -> Optional[str]:
        pass

    @abstractmethod
    def lookup(self, digest: str) -> Optional[Tuple[str, str]]:
        """Return (secret_enc, nome) for a plaintext digest."""
        pass

    @abstractmethod
    def items(self) -> List[Tuple[str, str]]:
        pass

    @abstractmethod
    def load(self, entries: Iterable[Tuple[str, str, str]]) -> int:
        pass


class ISecretGenerator(ABC):
    """Secret generation and encryption interface."""

    @abstractmethod
    def generate(self) -> Tuple[str, str]:
        """Return (plaintext, encrypted)."""
        pass

    @abstractmethod
    def digest(self, plaintext: str) -> str:
        """Deterministic keyed digest used to index a plaintext secret."""
        pass

    @abstractmethod
    def stored_digest(self, secret_enc: str) -> Optional[str]:
        """Digest of an encrypted secret, or None if it cannot be decrypted."""
        pass

    @abstractmethod
    def matches(self, plaintext: str, secret_enc: str) -> bool:
        """Check whether an encrypted secret was produced from plaintext."""
        pass
