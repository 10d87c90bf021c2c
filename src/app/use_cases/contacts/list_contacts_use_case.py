"""
List Contacts Use Case
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import CLIENT_NOT_FOUND

from .dtos import ContactInfo


class ListContactsUseCase:
    """Use case for listing the contacts of a client, ordered by name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, client_id: UUID) -> Result[List[ContactInfo]]:
        async with self.uow:
            client = await self.uow.clients.get_by_id(client_id)
            if client is None:
                return Return.err(Error(CLIENT_NOT_FOUND, "Client not found"))

            contacts = await self.uow.contacts.list_by_client(client_id)
            return Return.ok([ContactInfo.from_entity(c) for c in contacts])
