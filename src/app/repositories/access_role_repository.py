from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import AccessRoleEntry


class IAccessRoleRepository(ABC):
    """Access role repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[AccessRoleEntry]:
        """Get access role entry of a portal user"""
        pass

    @abstractmethod
    async def upsert(self, entry: AccessRoleEntry) -> AccessRoleEntry:
        """Insert the entry, or overwrite the one with the same user_id"""
        pass
