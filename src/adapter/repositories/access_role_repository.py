from datetime import UTC, datetime
from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.access_role_repository import IAccessRoleRepository
from src.domain.entities import AccessRoleEntry


class AccessRoleRepository(IAccessRoleRepository):
    """Access role repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: str) -> Optional[AccessRoleEntry]:
        """Get access role entry of a portal user"""
        stmt = select(AccessRoleEntry).where(AccessRoleEntry.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(self, entry: AccessRoleEntry) -> AccessRoleEntry:
        """Insert the entry, or overwrite the one with the same user_id"""
        existing = await self.get_by_user_id(entry.user_id)
        if existing is None:
            target = entry
        else:
            existing.email = entry.email
            existing.role = entry.role
            existing.client_id = entry.client_id
            existing.updated_at = datetime.now(UTC)
            target = existing
        self.session.add(target)
        await self.session.flush()
        await self.session.refresh(target)
        return target
