from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from src.domain.entities import Client


class IClientRepository(ABC):
    """Client repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, client_id: UUID) -> Optional[Client]:
        """Get client by ID"""
        pass

    @abstractmethod
    async def list(
        self, active: Optional[bool] = None, search: Optional[str] = None
    ) -> List[Client]:
        """List clients, optionally filtered by status and name"""
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Create a new client"""
        pass

    @abstractmethod
    async def update(self, client_id: UUID, patch: Dict[str, Any]) -> Optional[Client]:
        """Apply a partial update, returns None if the client does not exist"""
        pass
