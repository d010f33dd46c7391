# app/adapters/outbound/persistence/models/client_model.py

"""
Modelo de cliente do registro da API.

Este módulo define o modelo ClienteApi que representa empresas
(identificadas por CNPJ) autorizadas a acessar a API.
"""

from sqlalchemy import Column, String, DateTime, func
from app.adapters.outbound.persistence.models.base_model import Base


class ClienteApi(Base):
    """
    Modelo que representa um cliente registrado.

    Attributes:
        cnpj: CNPJ do cliente (chave primária, portanto único)
        nome: Nome de exibição do cliente
        secret_enc: Secret criptografado gerado no registro
        created_at: Data e hora de criação
    """
    __tablename__ = "clientes_api"

    cnpj = Column(String(32), primary_key=True)
    nome = Column(String(255), nullable=False, index=True)
    secret_enc = Column(String(512), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        """Representação em string do objeto ClienteApi."""
        return f"<ClienteApi(cnpj={self.cnpj}, nome={self.nome})>"
