from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from src.domain.entities import Contact


class IContactRepository(ABC):
    """Contact repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, contact_id: UUID) -> Optional[Contact]:
        """Get contact by ID"""
        pass

    @abstractmethod
    async def list_by_client(self, client_id: UUID) -> List[Contact]:
        """Get all contacts of a client"""
        pass

    @abstractmethod
    async def create(self, contact: Contact) -> Contact:
        """Create a new contact"""
        pass

    @abstractmethod
    async def update(self, contact_id: UUID, patch: Dict[str, Any]) -> Optional[Contact]:
        """Apply a partial update, only the supplied fields change"""
        pass

    @abstractmethod
    async def delete(self, contact_id: UUID) -> None:
        """Delete contact"""
        pass
