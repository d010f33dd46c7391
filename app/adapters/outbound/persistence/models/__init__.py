# app/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

from app.adapters.outbound.persistence.models.base_model import Base
from app.adapters.outbound.persistence.models.client_model import ClienteApi

__all__ = [
    "Base",
    "ClienteApi",
]
