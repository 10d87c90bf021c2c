import pytest
from unittest.mock import AsyncMock, MagicMock

from libs.result import Return


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.clients = MagicMock()
    uow.clients.get_by_id = AsyncMock()
    uow.clients.list = AsyncMock(return_value=[])
    uow.clients.create = AsyncMock(side_effect=lambda client: client)
    uow.clients.update = AsyncMock()

    uow.contacts = MagicMock()
    uow.contacts.get_by_id = AsyncMock()
    uow.contacts.list_by_client = AsyncMock(return_value=[])
    uow.contacts.create = AsyncMock()
    uow.contacts.update = AsyncMock()
    uow.contacts.delete = AsyncMock()

    uow.access_roles = MagicMock()
    uow.access_roles.upsert = AsyncMock(side_effect=lambda entry: entry)
    return uow


@pytest.fixture
def credential_verifier():
    verifier = MagicMock()
    verifier.verify = AsyncMock(return_value=Return.ok(None))
    return verifier


@pytest.fixture
def invitation_issuer():
    issuer = MagicMock()
    issuer.invite = AsyncMock(return_value=Return.ok("portal-user-1"))
    return issuer
