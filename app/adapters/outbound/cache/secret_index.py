# app/adapters/outbound/cache/secret_index.py

import logging
import threading
from typing import Dict, Iterable, List, Optional, Tuple

from app.application.ports.outbound import ISecretIndex

logger = logging.getLogger(__name__)


class SecretIndex(ISecretIndex):
    """
    In-memory mapping from encrypted secret to client name.

    Used to resolve a presented secret to its owner without a database
    round-trip. Each entry is also reachable through the keyed digest of
    its plaintext, so resolution is a single dict lookup. Entries follow
    the lifecycle of the stored clients.
    """

    def __init__(self):
        self._entries: Dict[str, str] = {}
        self._by_digest: Dict[str, str] = {}
        self._digest_of: Dict[str, str] = {}
        self._lock = threading.Lock()

    def add(self, secret_enc: str, nome: str, digest: str) -> None:
        with self._lock:
            self._entries[secret_enc] = nome
            self._by_digest[digest] = secret_enc
            self._digest_of[secret_enc] = digest

    def remove(self, secret_enc: str) -> None:
        # Idempotent: removing an absent key is a no-op
        with self._lock:
            self._entries.pop(secret_enc, None)
            digest = self._digest_of.pop(secret_enc, None)
            if digest is not None:
                self._by_digest.pop(digest, None)

    def get(self, secret_enc: str) -> Optional[str]:
        with self._lock:
            return self._entries.get(secret_enc)

    def lookup(self, digest: str) -> Optional[Tuple[str, str]]:
        """(secret_enc, nome) of the entry with this digest, if any."""
        with self._lock:
            secret_enc = self._by_digest.get(digest)
            if secret_enc is None:
                return None
            return secret_enc, self._entries[secret_enc]

    def items(self) -> List[Tuple[str, str]]:
        """Snapshot of the current (secret_enc, nome) entries."""
        with self._lock:
            return list(self._entries.items())

    def load(self, entries: Iterable[Tuple[str, str, str]]) -> int:
        """Replace the index content with the given (secret_enc, nome, digest) triples."""
        by_enc: Dict[str, str] = {}
        by_digest: Dict[str, str] = {}
        digest_of: Dict[str, str] = {}
        for secret_enc, nome, digest in entries:
            by_enc[secret_enc] = nome
            by_digest[digest] = secret_enc
            digest_of[secret_enc] = digest
        with self._lock:
            self._entries = by_enc
            self._by_digest = by_digest
            self._digest_of = digest_of
        logger.info(f"Secret index loaded with {len(by_enc)} entries")
        return len(by_enc)

    def __contains__(self, secret_enc: str) -> bool:
        with self._lock:
            return secret_enc in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
