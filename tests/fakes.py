"""In-memory stand-ins for the client store."""

from collections import Counter
from typing import Callable, Dict, List, Optional, Set, Tuple

from app.application.ports.outbound import IClientRepository
from app.domain.exceptions import DatabaseOperationException, ResourceAlreadyExistsException
from app.domain.models.client_domain_model import Client


class FakeClientRepository(IClientRepository):
    """
    Dict-backed repository.

    `fail_on` names methods that raise DatabaseOperationException;
    `hooks` run just before a method returns, to simulate concurrent work.
    """

    def __init__(self):
        self.rows: Dict[str, Client] = {}
        self.calls: Counter = Counter()
        self.fail_on: Set[str] = set()
        self.hooks: Dict[str, Callable[[], None]] = {}

    def _enter(self, name: str) -> None:
        self.calls[name] += 1
        if name in self.fail_on:
            raise DatabaseOperationException(
                detail="Erro ao executar operação no banco de dados",
                original_error=RuntimeError("ORA-12541: TNS:no listener"),
            )

    def _leave(self, name: str) -> None:
        hook = self.hooks.get(name)
        if hook is not None:
            hook()

    async def exists(self, db, cnpj: str) -> bool:
        self._enter("exists")
        return cnpj in self.rows

    async def get_by_cnpj(self, db, cnpj: str) -> Optional[Client]:
        self._enter("get_by_cnpj")
        client = self.rows.get(cnpj)
        self._leave("get_by_cnpj")
        return client

    async def list_ordered_by_nome(self, db) -> List[Client]:
        self._enter("list_ordered_by_nome")
        clients = sorted(self.rows.values(), key=lambda c: (c.nome, c.cnpj))
        self._leave("list_ordered_by_nome")
        return clients

    async def get_secret_enc(self, db, cnpj: str) -> Optional[str]:
        self._enter("get_secret_enc")
        client = self.rows.get(cnpj)
        self._leave("get_secret_enc")
        return client.secret_enc if client else None

    async def create(self, db, client: Client) -> Client:
        self._enter("create")
        if client.cnpj in self.rows:
            raise ResourceAlreadyExistsException(detail="Cliente já existente", resource_id=client.cnpj)
        self.rows[client.cnpj] = client
        return client

    async def delete_by_cnpj(self, db, cnpj: str) -> bool:
        self._enter("delete_by_cnpj")
        return self.rows.pop(cnpj, None) is not None

    async def list_secrets(self, db) -> List[Tuple[str, str]]:
        self._enter("list_secrets")
        return [(c.secret_enc, c.nome) for c in self.rows.values()]
