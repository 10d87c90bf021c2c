"""
List Clients Use Case
"""

from typing import List, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ClientInfo


class ListClientsUseCase:
    """Use case for listing clients ordered by trade name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, active: Optional[bool] = None, search: Optional[str] = None
    ) -> Result[List[ClientInfo]]:
        """
        Args:
            active: Keep only active (True) or inactive (False) clients
            search: Case-insensitive match on trade or legal name
        """
        async with self.uow:
            clients = await self.uow.clients.list(active=active, search=search or None)
            return Return.ok([ClientInfo.from_entity(c) for c in clients])
