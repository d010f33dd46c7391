"""
Shared fixtures for the client registry tests.

Settings are read from the environment when the app package is imported,
so the variables below must be set before any test module imports it.
"""

import os

from cryptography.fernet import Fernet

os.environ.setdefault("POSTGRES_USER", "test")
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("POSTGRES_DB", "clientes_test")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SECRET_ENCRYPTION_KEY", Fernet.generate_key().decode())

import pytest  # noqa: E402

from app.adapters.outbound.cache.response_cache import ResponseCache  # noqa: E402
from app.adapters.outbound.cache.secret_index import SecretIndex  # noqa: E402
from app.adapters.outbound.security.secret_generator import SecretGenerator  # noqa: E402
from app.application.use_cases.client_use_cases import ClientRegistryService  # noqa: E402
from app.core.container import RegistryContainer  # noqa: E402
from tests.fakes import FakeClientRepository  # noqa: E402


@pytest.fixture
def secret_generator() -> SecretGenerator:
    return SecretGenerator(Fernet.generate_key().decode())


@pytest.fixture
def container(secret_generator) -> RegistryContainer:
    return RegistryContainer(
        secret_generator=secret_generator,
        response_cache=ResponseCache(maxsize=64, ttl=60),
        secret_index=SecretIndex(),
    )


@pytest.fixture
def repository() -> FakeClientRepository:
    return FakeClientRepository()


@pytest.fixture
def service(repository, container) -> ClientRegistryService:
    return ClientRegistryService(
        db_session=None,
        repository=repository,
        response_cache=container.response_cache,
        secret_index=container.secret_index,
        secret_generator=container.secret_generator,
    )
