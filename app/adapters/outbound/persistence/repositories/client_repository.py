# app/adapters/outbound/persistence/repositories/client_repository.py (async version)

"""
Repository for registered clients.

This module implements the repository that performs database operations
related to clients, implementing the IClientRepository interface.
"""

import logging
from typing import List, Optional, Tuple
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.adapters.outbound.persistence.models import ClienteApi
from app.application.ports.outbound import IClientRepository
from app.domain.models.client_domain_model import Client as DomainClient
from app.domain.exceptions import (
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)


class AsyncClientRepository(IClientRepository):
    """
    Async repository for the ClienteApi entity.

    Every write commits explicitly, so the caller only applies side effects
    (cache invalidation, secret index) after the data is durable.

    Attributes:
        model: SQLAlchemy model class
        logger: Configured logger for the class
    """

    def __init__(self, model=ClienteApi):
        self.model = model
        self.logger = logging.getLogger(f"{__name__}.{model.__name__}")

    async def exists(self, db: AsyncSession, cnpj: str) -> bool:
        """
        Check if a client with the given CNPJ is stored.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(self.model.cnpj).where(self.model.cnpj == cnpj)
            result = await db.execute(select(query.exists()))
            return bool(result.scalar())
        except SQLAlchemyError as e:
            self.logger.error(f"Error checking existence of client '{cnpj}': {str(e)}")
            raise DatabaseOperationException(
                detail="Erro ao verificar cliente",
                original_error=e
            )

    async def get_by_cnpj(self, db: AsyncSession, cnpj: str) -> Optional[DomainClient]:
        """
        Find a client by CNPJ.

        Args:
            db: Async database session
            cnpj: Client CNPJ

        Returns:
            Client found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(self.model).where(self.model.cnpj == cnpj)
            result = await db.execute(query)
            row = result.scalar_one_or_none()
            return self.to_domain(row) if row is not None else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching client by cnpj '{cnpj}': {str(e)}")
            raise DatabaseOperationException(
                detail="Erro ao buscar cliente",
                original_error=e
            )

    async def list_ordered_by_nome(self, db: AsyncSession) -> List[DomainClient]:
        """
        List all clients ordered by name (ascending).

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(self.model).order_by(self.model.nome.asc(), self.model.cnpj.asc())
            result = await db.execute(query)
            return [self.to_domain(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing clients: {str(e)}")
            raise DatabaseOperationException(
                detail="Erro ao obter clientes",
                original_error=e
            )

    async def get_secret_enc(self, db: AsyncSession, cnpj: str) -> Optional[str]:
        try:
            query = select(self.model.secret_enc).where(self.model.cnpj == cnpj)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching secret of client '{cnpj}': {str(e)}")
            raise DatabaseOperationException(
                detail="Erro ao buscar cliente",
                original_error=e
            )

    async def create(self, db: AsyncSession, client: DomainClient) -> DomainClient:
        """
        Insert a new client and commit.

        Args:
            db: Async database session
            client: Domain client carrying the encrypted secret

        Returns:
            The stored client

        Raises:
            ResourceAlreadyExistsException: If the CNPJ is already stored
            DatabaseOperationException: In case of database error
        """
        row = self.model(cnpj=client.cnpj, nome=client.nome, secret_enc=client.secret_enc)
        try:
            db.add(row)
            await db.commit()
            await db.refresh(row)
        except IntegrityError as e:
            await db.rollback()
            self.logger.warning(f"Unique violation inserting client '{client.cnpj}': {str(e.orig)}")
            raise ResourceAlreadyExistsException(
                detail="Cliente já existente",
                resource_id=client.cnpj
            )
        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error creating client '{client.cnpj}': {str(e)}")
            raise DatabaseOperationException(
                detail="Erro interno ao registrar cliente",
                original_error=e
            )

        self.logger.info(f"Client created: {client.cnpj}")
        return self.to_domain(row)

    async def delete_by_cnpj(self, db: AsyncSession, cnpj: str) -> bool:
        """
        Delete a client by CNPJ and commit.

        Returns:
            True if a row was removed, False otherwise

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            result = await db.execute(delete(self.model).where(self.model.cnpj == cnpj))
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error deleting client '{cnpj}': {str(e)}")
            raise DatabaseOperationException(
                detail="Erro ao excluir cliente",
                original_error=e
            )

        deleted = result.rowcount > 0
        if deleted:
            self.logger.info(f"Client deleted: {cnpj}")
        return deleted

    async def list_secrets(self, db: AsyncSession) -> List[Tuple[str, str]]:
        """List (secret_enc, nome) of every stored client."""
        try:
            result = await db.execute(select(self.model.secret_enc, self.model.nome))
            return [(secret_enc, nome) for secret_enc, nome in result.all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading client secrets: {str(e)}")
            raise DatabaseOperationException(
                detail="Erro ao carregar secrets dos clientes",
                original_error=e
            )

    def to_domain(self, db_model: ClienteApi) -> DomainClient:
        """
        Convert database model to domain model.
        """
        return DomainClient(
            cnpj=db_model.cnpj,
            nome=db_model.nome,
            secret_enc=db_model.secret_enc,
            created_at=db_model.created_at,
        )


# Public instance to be used by use cases
client_repository = AsyncClientRepository(ClienteApi)
