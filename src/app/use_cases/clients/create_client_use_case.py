"""
Create Client Use Case
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import PERSISTENCE_ERROR, VALIDATION_ERROR
from src.domain.entities import Client

from .dtos import ClientForm, ClientInfo

logger = logging.getLogger(__name__)


class CreateClientUseCase:
    """
    Use case for registering a new client.

    Business Rules:
    - trade_name is required
    - New clients are active unless stated otherwise
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, form: ClientForm) -> Result[ClientInfo]:
        trade_name = (form.trade_name or "").strip()
        if not trade_name:
            return Return.err(Error(VALIDATION_ERROR, "trade_name required"))

        fields = form.model_dump(exclude_none=True)
        fields["trade_name"] = trade_name

        async with self.uow:
            try:
                client = await self.uow.clients.create(Client(**fields))
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error(f"Error creating client {trade_name!r}: {exc!r}")
                await self.uow.rollback()
                return Return.err(Error(PERSISTENCE_ERROR, "Client could not be saved"))

            return Return.ok(ClientInfo.from_entity(client))
