# app/core/container.py

from dataclasses import dataclass, field

from app.adapters.configuration.config import Settings
from app.adapters.outbound.cache.response_cache import ResponseCache
from app.adapters.outbound.cache.secret_index import SecretIndex
from app.adapters.outbound.security.secret_generator import SecretGenerator


@dataclass
class RegistryContainer:
    """
    Estado do registro de clientes que vive durante todo o processo.

    Instanciado uma vez na inicialização da aplicação e guardado em
    app.state; os testes criam instâncias isoladas.
    """
    secret_generator: SecretGenerator
    response_cache: ResponseCache = field(default_factory=ResponseCache)
    secret_index: SecretIndex = field(default_factory=SecretIndex)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RegistryContainer":
        return cls(
            secret_generator=SecretGenerator(
                settings.SECRET_ENCRYPTION_KEY,
                token_bytes=settings.SECRET_TOKEN_BYTES,
            ),
            response_cache=ResponseCache(
                maxsize=settings.CACHE_MAXSIZE,
                ttl=settings.CACHE_TTL_SECONDS,
                fill_window=settings.CACHE_FILL_WINDOW_SECONDS,
            ),
            secret_index=SecretIndex(),
        )
