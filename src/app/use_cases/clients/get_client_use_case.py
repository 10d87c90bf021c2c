"""
Get Client Use Case
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import CLIENT_NOT_FOUND

from .dtos import ClientInfo


class GetClientUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, client_id: UUID) -> Result[ClientInfo]:
        async with self.uow:
            client = await self.uow.clients.get_by_id(client_id)
            if client is None:
                return Return.err(Error(CLIENT_NOT_FOUND, "Client not found"))

            return Return.ok(ClientInfo.from_entity(client))
