# migrations/env.py

from logging.config import fileConfig
from sqlalchemy import engine_from_config
from sqlalchemy.pool import NullPool
from alembic import context

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.models import Base

# URL síncrona do banco (driver configurado em DB_DRIVER)
DB_URL = str(settings.DATABASE_URL)

# Config Alembic
alembic_config = context.config

# Logging padrão do Alembic
if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

# Seta a URL do banco no alembic.ini dinamicamente
alembic_config.set_main_option("sqlalchemy.url", DB_URL)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Migrations offline"""
    url = alembic_config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Migrations online"""
    connectable = engine_from_config(
        alembic_config.get_section(alembic_config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
