# app/adapters/configuration/config.py

from typing import Optional
from logging import getLevelName
from pydantic import PostgresDsn, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Database
    DB_DRIVER: str = "psycopg2"
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    POSTGRES_HOST: str
    POSTGRES_PORT: int
    TEST_MODE: bool = False
    TEST_POSTGRES_DB: str = ""
    DATABASE_URL: Optional[PostgresDsn] = None

    # Pool
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800

    DEBUG: bool = False

    # Secrets dos clientes
    SECRET_ENCRYPTION_KEY: str  # chave Fernet (urlsafe base64, 32 bytes)
    SECRET_TOKEN_BYTES: int = 32

    # Cache de respostas
    CACHE_TTL_SECONDS: int = 300
    CACHE_MAXSIZE: int = 1024
    # Idade máxima de uma leitura que ainda pode preencher o cache;
    # precisa ser maior que a consulta mais lenta ao banco
    CACHE_FILL_WINDOW_SECONDS: int = 60

    # Senha administrativa (hash passlib); None desativa a verificação
    ADMIN_PASSWORD_HASH: Optional[str] = None

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        if value:
            return value

        data = info.data
        db_name = data.get("TEST_POSTGRES_DB") if data.get("TEST_MODE") else data.get("POSTGRES_DB")
        return PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER', 'psycopg2')}",
            username=data["POSTGRES_USER"],
            password=data["POSTGRES_PASSWORD"],
            host=data["POSTGRES_HOST"],
            port=data["POSTGRES_PORT"],
            path=db_name,
        )

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Garante que o valor é um nível válido do logging"""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"LOG_LEVEL inválido: {v!r}")
        return lvl

    @field_validator("CACHE_FILL_WINDOW_SECONDS")
    def validate_fill_window(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("CACHE_FILL_WINDOW_SECONDS deve ser positivo")
        return v

    @field_validator("SECRET_TOKEN_BYTES")
    def validate_token_bytes(cls, v: int) -> int:
        if v < 16:
            raise ValueError("SECRET_TOKEN_BYTES deve ser no mínimo 16")
        return v

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
