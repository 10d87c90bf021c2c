"""
Update Client Use Case
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import CLIENT_NOT_FOUND, PERSISTENCE_ERROR, VALIDATION_ERROR

from .dtos import ClientForm, ClientInfo

logger = logging.getLogger(__name__)


class UpdateClientUseCase:
    """
    Use case for editing a client.

    Business Rules:
    - Partial update: fields left out of the request keep their value
    - trade_name cannot be cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, client_id: UUID, form: ClientForm) -> Result[ClientInfo]:
        patch = form.model_dump(exclude_unset=True)

        if "trade_name" in patch:
            trade_name = (patch["trade_name"] or "").strip()
            if not trade_name:
                return Return.err(Error(VALIDATION_ERROR, "trade_name required"))
            patch["trade_name"] = trade_name

        if patch.get("active", False) is None:
            return Return.err(Error(VALIDATION_ERROR, "active cannot be null"))

        async with self.uow:
            try:
                client = await self.uow.clients.update(client_id, patch)
                if client is not None:
                    await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error(f"Error updating client {client_id}: {exc!r}")
                await self.uow.rollback()
                return Return.err(Error(PERSISTENCE_ERROR, "Client could not be saved"))

            if client is None:
                return Return.err(Error(CLIENT_NOT_FOUND, "Client not found"))

            return Return.ok(ClientInfo.from_entity(client))
