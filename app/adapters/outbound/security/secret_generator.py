# app/adapters/outbound/security/secret_generator.py

import hashlib
import hmac
import logging
import secrets
from typing import Optional, Tuple

from cryptography.fernet import Fernet, InvalidToken

from app.application.ports.outbound import ISecretGenerator

logger = logging.getLogger(__name__)


class SecretGenerator(ISecretGenerator):
    """
    Generates client secrets and their encrypted form for storage.

    The plaintext is a URL-safe token drawn from the OS CSPRNG. The stored
    form is a Fernet token (random IV and HMAC), so it never equals the
    plaintext and cannot be reversed without the encryption key.

    Fernet output is not deterministic, so lookups go through `digest`,
    an HMAC-SHA256 of the plaintext under a key derived from the
    encryption key.
    """

    def __init__(self, encryption_key: str, token_bytes: int = 32):
        key = encryption_key.encode() if isinstance(encryption_key, str) else encryption_key
        self._fernet = Fernet(key)
        self._digest_key = hmac.new(key, b"clientes-secret-index", hashlib.sha256).digest()
        self._token_bytes = token_bytes

    def generate(self) -> Tuple[str, str]:
        plaintext = secrets.token_urlsafe(self._token_bytes)
        return plaintext, self.encrypt(plaintext)

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")

    def decrypt(self, secret_enc: str) -> str:
        return self._fernet.decrypt(secret_enc.encode("ascii")).decode("utf-8")

    def digest(self, plaintext: str) -> str:
        return hmac.new(self._digest_key, plaintext.encode("utf-8"), hashlib.sha256).hexdigest()

    def stored_digest(self, secret_enc: str) -> Optional[str]:
        """Digest of a stored secret, or None if it cannot be decrypted."""
        try:
            return self.digest(self.decrypt(secret_enc))
        except (InvalidToken, ValueError):
            logger.warning("Stored secret could not be decrypted with the configured key")
            return None

    def matches(self, plaintext: str, secret_enc: str) -> bool:
        try:
            stored = self.decrypt(secret_enc)
        except (InvalidToken, ValueError):
            logger.warning("Stored secret could not be decrypted with the configured key")
            return False
        return hmac.compare_digest(stored.encode("utf-8"), plaintext.encode("utf-8"))
