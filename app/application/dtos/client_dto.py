# app/application/dtos/client_dto.py

"""
Schemas para dados de clientes do registro.

Este módulo define os dtos Pydantic para validação e serialização
dos dados de clientes identificados por CNPJ.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClientCreate(BaseModel):
    """
    Schema de entrada para registro de cliente.

    Os campos são opcionais aqui para que a ausência seja reportada
    pelo caso de uso com a lista de campos faltantes (HTTP 400).
    """
    cnpj: Optional[str] = Field(None, description="CNPJ do cliente")
    nome: Optional[str] = Field(None, description="Nome de exibição do cliente")

    @field_validator("cnpj", "nome", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        # CNPJ costuma chegar como número JSON; o caso de uso apara o texto
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ClientOutput(BaseModel):
    """
    Schema para retorno de dados de cliente, sem expor o secret.
    """
    cnpj: str = Field(..., description="CNPJ do cliente")
    nome: str = Field(..., description="Nome do cliente")

    model_config = ConfigDict(from_attributes=True)


class ClientCreateResponse(BaseModel):
    """
    Schema para resposta de registro.

    O token em texto puro é exibido apenas nesta resposta.
    """
    success: bool = Field(True, description="Indica sucesso da operação")
    token: str = Field(..., description="Secret do cliente em texto puro")


class ClientDeleteResponse(BaseModel):
    """Schema para resposta de exclusão."""
    success: bool = Field(True, description="Indica sucesso da operação")
    cnpj: str = Field(..., description="CNPJ do cliente excluído")


class ClientIdentity(BaseModel):
    """Cliente identificado a partir do secret apresentado."""
    nome: str = Field(..., description="Nome do cliente dono do secret")
