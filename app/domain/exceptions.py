# app/domain/exceptions.py

"""
Exceções de domínio do registro de clientes.

Este módulo define exceções puras (sem dependência do framework HTTP).
Cada exceção carrega um 'internal_code' que o middleware de exceções
traduz para o código de status HTTP correspondente.
"""

from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """
    Exceção base para todas as exceções do domínio.
    """

    internal_code: str = "DOMAIN_ERROR"

    def __init__(self, detail: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(detail)
        self.detail = detail
        self.details = details or {}


class ResourceNotFoundException(DomainException):
    """Recurso não encontrado."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Recurso não encontrado", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(f"{detail}{resource_info}")
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    """Recurso já existe."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Recurso já existe", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(f"{detail}{resource_info}")
        self.resource_id = resource_id


class InvalidCredentialsException(DomainException):
    """Credenciais inválidas."""

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Credenciais inválidas"):
        super().__init__(detail)


class DatabaseOperationException(DomainException):
    """
    Erro na operação de banco de dados.

    O erro original fica disponível em 'original_error' para log,
    mas nunca compõe a mensagem devolvida ao chamador.
    """

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Erro ao executar operação no banco de dados",
                 original_error: Optional[Exception] = None):
        super().__init__(detail)
        self.original_error = original_error


class InvalidInputException(DomainException):
    """Dados de entrada inválidos."""

    internal_code = "INVALID_INPUT"

    def __init__(
            self,
            detail: str = "Dados de entrada inválidos",
            missing_fields: Optional[List[str]] = None,
            invalid_fields: Optional[List[str]] = None,
    ):
        self.missing_fields = list(missing_fields or [])
        self.invalid_fields = list(invalid_fields or [])
        named = self.missing_fields + [f for f in self.invalid_fields if f not in self.missing_fields]
        if named:
            detail = f"{detail}: {', '.join(named)}"
        details = {}
        if self.missing_fields:
            details["missing_fields"] = self.missing_fields
        if self.invalid_fields:
            details["invalid_fields"] = self.invalid_fields
        super().__init__(detail, details=details or None)
