from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.client_repository import IClientRepository
from src.domain.entities import Client


class ClientRepository(IClientRepository):
    """Client repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID"""
        stmt = select(Client).where(Client.id == client_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self, active: Optional[bool] = None, search: Optional[str] = None
    ) -> List[Client]:
        """List clients, optionally filtered by status and name"""
        stmt = select(Client)
        if active is not None:
            stmt = stmt.where(Client.active == active)
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                or_(Client.trade_name.ilike(pattern), Client.legal_name.ilike(pattern))
            )
        stmt = stmt.order_by(Client.trade_name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, client: Client) -> Client:
        """Create a new client"""
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def update(self, client_id: UUID, patch: Dict[str, Any]) -> Optional[Client]:
        """Apply a partial update"""
        client = await self.get_by_id(client_id)
        if client is None:
            return None
        for field, value in patch.items():
            setattr(client, field, value)
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client
