from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_role_repository import AccessRoleRepository
from src.adapter.repositories.client_repository import ClientRepository
from src.adapter.repositories.contact_repository import ContactRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.clients = ClientRepository(self.session)
        self.contacts = ContactRepository(self.session)
        self.access_roles = AccessRoleRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
