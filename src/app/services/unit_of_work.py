from abc import ABC, abstractmethod

from src.app.repositories.access_role_repository import IAccessRoleRepository
from src.app.repositories.client_repository import IClientRepository
from src.app.repositories.contact_repository import IContactRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    clients: IClientRepository
    contacts: IContactRepository
    access_roles: IAccessRoleRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
