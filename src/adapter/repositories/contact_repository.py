from datetime import UTC, datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.contact_repository import IContactRepository
from src.domain.entities import Contact


class ContactRepository(IContactRepository):
    """Contact repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, contact_id: UUID) -> Optional[Contact]:
        """Get contact by ID"""
        stmt = select(Contact).where(Contact.id == contact_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_client(self, client_id: UUID) -> List[Contact]:
        """Get all contacts of a client"""
        stmt = (
            select(Contact)
            .where(Contact.client_id == client_id)
            .order_by(Contact.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, contact: Contact) -> Contact:
        """Create a new contact"""
        self.session.add(contact)
        await self.session.flush()
        await self.session.refresh(contact)
        return contact

    async def update(self, contact_id: UUID, patch: Dict[str, Any]) -> Optional[Contact]:
        """Apply a partial update, only the supplied fields change"""
        contact = await self.get_by_id(contact_id)
        if contact is None:
            return None
        for field, value in patch.items():
            setattr(contact, field, value)
        contact.updated_at = datetime.now(UTC)
        self.session.add(contact)
        await self.session.flush()
        await self.session.refresh(contact)
        return contact

    async def delete(self, contact_id: UUID) -> None:
        """Delete contact"""
        contact = await self.get_by_id(contact_id)
        if contact is not None:
            await self.session.delete(contact)
            await self.session.flush()
