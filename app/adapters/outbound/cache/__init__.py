# app/adapters/outbound/cache/__init__.py

from app.adapters.outbound.cache.response_cache import ResponseCache
from app.adapters.outbound.cache.secret_index import SecretIndex

__all__ = [
    "ResponseCache",
    "SecretIndex",
]
