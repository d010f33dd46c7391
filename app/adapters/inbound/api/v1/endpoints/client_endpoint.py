# app/adapters/inbound/api/v1/endpoints/client_endpoint.py

"""
Endpoints do registro de clientes.

Este módulo contém as rotas de registro, listagem, consulta e exclusão
de clientes identificados por CNPJ. Os erros de domínio são traduzidos
para HTTP pelo middleware de exceções.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, status

from app.adapters.inbound.api.deps import (
    get_client_registry_service,
    get_current_client_nome,
    verify_admin,
)
from app.application.dtos.client_dto import (
    ClientCreate,
    ClientCreateResponse,
    ClientDeleteResponse,
    ClientIdentity,
    ClientOutput,
)
from app.application.use_cases.client_use_cases import ClientRegistryService

# Configurar logging
logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ClientCreateResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(verify_admin)],
)
async def register_client(
        payload: Optional[ClientCreate] = None,
        service: ClientRegistryService = Depends(get_client_registry_service),
):
    """
    Registra um novo cliente e devolve o secret em texto puro.

    O secret só é exibido nesta resposta.
    """
    payload = payload or ClientCreate()
    return await service.register_client(payload.cnpj, payload.nome)


@router.get(
    "",
    response_model=List[ClientOutput],
    dependencies=[Depends(verify_admin)],
)
async def list_clients(service: ClientRegistryService = Depends(get_client_registry_service)):
    """
    Lista todos os clientes ordenados por nome.
    """
    return await service.list_clients()


@router.get("/me", response_model=ClientIdentity)
async def current_client(nome: str = Depends(get_current_client_nome)):
    """
    Identifica o cliente dono do secret enviado como Bearer.
    """
    return {"nome": nome}


@router.get(
    "/{cnpj}",
    response_model=ClientOutput,
    dependencies=[Depends(verify_admin)],
)
async def get_client(cnpj: str, service: ClientRegistryService = Depends(get_client_registry_service)):
    """
    Busca um cliente pelo CNPJ.
    """
    return await service.get_client(cnpj)


@router.delete(
    "/{cnpj}",
    response_model=ClientDeleteResponse,
    dependencies=[Depends(verify_admin)],
)
async def delete_client(cnpj: str, service: ClientRegistryService = Depends(get_client_registry_service)):
    """
    Exclui um cliente e invalida os dados em cache.
    """
    return await service.delete_client(cnpj)
