# app/application/use_cases/client_use_cases.py (async version)

"""
Service for the client registry.

This module implements the four registry operations (register, list,
get, delete) and keeps the response cache and the secret index
consistent with the client store.

Persistence failures propagate as DatabaseOperationException; the
repository logs their cause and the exception middleware logs the
failed request, so they are not logged again here.
"""

import logging
from typing import Any, Dict, List, Optional

from app.application.ports.inbound import IClientRegistryUseCase
from app.application.ports.outbound import (
    IClientRepository,
    IResponseCache,
    ISecretGenerator,
    ISecretIndex,
)
from app.domain.exceptions import (
    InvalidCredentialsException,
    InvalidInputException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from app.domain.models.cache_keys import ALL_CLIENTS, ClientByCnpj, keys_for_cnpj
from app.domain.models.client_domain_model import Client

logger = logging.getLogger(__name__)


def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


class ClientRegistryService(IClientRegistryUseCase):
    """
    Service for client registry management.

    Reads are cache-first. Writes go to the store first and only after the
    commit succeed are the cache keys of the affected client invalidated and
    the secret index updated. A failed write leaves both untouched.
    """

    def __init__(
            self,
            db_session: Any,
            repository: IClientRepository,
            response_cache: IResponseCache,
            secret_index: ISecretIndex,
            secret_generator: ISecretGenerator,
    ):
        self.db_session = db_session
        self.repository = repository
        self.response_cache = response_cache
        self.secret_index = secret_index
        self.secret_generator = secret_generator

    def _invalidate_client(self, cnpj: str) -> None:
        for key in keys_for_cnpj(cnpj):
            self.response_cache.invalidate(key)

    async def register_client(self, cnpj: Optional[str], nome: Optional[str]) -> Dict[str, Any]:
        """
        Registers a new client and returns its plaintext secret.

        The secret is shown only in this response; only the encrypted
        form is persisted.
        """
        fields = {"cnpj": _clean(cnpj), "nome": _clean(nome)}
        missing = [name for name, value in fields.items() if not value]
        if missing:
            logger.warning(f"register_client rejected: missing fields {missing}")
            raise InvalidInputException(
                detail="Campos obrigatórios ausentes",
                missing_fields=missing
            )

        cnpj, nome = fields["cnpj"], fields["nome"]
        try:
            if await self.repository.exists(self.db_session, cnpj):
                raise ResourceAlreadyExistsException(detail="Cliente já existente")

            plaintext, secret_enc = self.secret_generator.generate()
            await self.repository.create(
                self.db_session,
                Client(cnpj=cnpj, nome=nome, secret_enc=secret_enc)
            )

        except ResourceAlreadyExistsException:
            logger.warning(f"register_client conflict: client {cnpj} already exists")
            raise

        self.secret_index.add(secret_enc, nome, self.secret_generator.digest(plaintext))
        self._invalidate_client(cnpj)

        logger.info(f"Client registered: {cnpj}")
        return {"success": True, "token": plaintext}

    async def list_clients(self) -> List[Dict[str, str]]:
        """
        Lists every client as {cnpj, nome}, ordered by name.
        """
        cached = self.response_cache.get(ALL_CLIENTS)
        if cached is not None:
            return cached

        generation = self.response_cache.generation(ALL_CLIENTS)
        clients = await self.repository.list_ordered_by_nome(self.db_session)

        formatted = [client.projection() for client in clients]
        self.response_cache.set(ALL_CLIENTS, formatted, generation=generation)
        return formatted

    async def get_client(self, cnpj: Optional[str]) -> Dict[str, str]:
        cnpj = _clean(cnpj)
        if not cnpj:
            logger.warning("get_client rejected: missing cnpj")
            raise InvalidInputException(detail="CNPJ não informado", missing_fields=["cnpj"])

        key = ClientByCnpj(cnpj)
        cached = self.response_cache.get(key)
        if cached is not None:
            return cached

        generation = self.response_cache.generation(key)
        client = await self.repository.get_by_cnpj(self.db_session, cnpj)

        if client is None:
            logger.warning(f"get_client: client {cnpj} not found")
            raise ResourceNotFoundException(detail="Cliente não encontrado", resource_id=cnpj)

        response = client.projection()
        self.response_cache.set(key, response, generation=generation)
        return response

    async def delete_client(self, cnpj: Optional[str]) -> Dict[str, Any]:
        """
        Deletes a client.

        The encrypted secret is read before the delete so the secret index
        entry can be removed afterwards. Cache keys are invalidated only
        once the row is gone.
        """
        cnpj = _clean(cnpj)
        if not cnpj:
            logger.warning("delete_client rejected: missing cnpj")
            raise InvalidInputException(detail="CNPJ não informado", missing_fields=["cnpj"])

        try:
            secret_enc = await self.repository.get_secret_enc(self.db_session, cnpj)
            if secret_enc is None:
                raise ResourceNotFoundException(
                    detail="Cliente não encontrado para exclusão",
                    resource_id=cnpj
                )

            # A concurrent delete may have removed the row after the read
            if not await self.repository.delete_by_cnpj(self.db_session, cnpj):
                raise ResourceNotFoundException(
                    detail="Cliente não encontrado para exclusão",
                    resource_id=cnpj
                )

        except ResourceNotFoundException:
            logger.warning(f"delete_client: client {cnpj} not found")
            raise

        self._invalidate_client(cnpj)
        self.secret_index.remove(secret_enc)

        logger.info(f"Client deleted: {cnpj}")
        return {"success": True, "cnpj": cnpj}

    def resolve_client_by_secret(self, token: str) -> str:
        """
        Resolves a presented plaintext secret to the owning client name
        using only the secret index: one digest lookup, then one
        constant-time check against the stored secret.
        """
        if token:
            entry = self.secret_index.lookup(self.secret_generator.digest(token))
            if entry is not None:
                secret_enc, nome = entry
                if self.secret_generator.matches(token, secret_enc):
                    return nome

        logger.warning("Secret resolution failed: no matching client")
        raise InvalidCredentialsException(detail="Secret de cliente inválido")

    async def warm_secret_index(self) -> int:
        """
        Replaces the secret index with every stored client.

        Stored secrets that the configured key cannot decrypt are skipped.
        """
        entries = []
        skipped = 0
        for secret_enc, nome in await self.repository.list_secrets(self.db_session):
            digest = self.secret_generator.stored_digest(secret_enc)
            if digest is None:
                skipped += 1
                continue
            entries.append((secret_enc, nome, digest))

        if skipped:
            logger.warning(f"warm_secret_index: {skipped} stored secrets could not be indexed")
        return self.secret_index.load(entries)
