from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from httpx import AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error, Return
from tests.fixtures.json_loader import TestDataLoader
from src.app.services.credential_verifier import ICredentialVerifier
from src.app.services.invitation_issuer import IInvitationIssuer
from src.depends import get_credential_verifier, get_invitation_issuer, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


class FakeCredentialVerifier(ICredentialVerifier):
    """Accepts a single password; can simulate an outage"""

    def __init__(self, password: str = "correct"):
        self.password = password
        self.available = True
        self.calls = []

    async def verify(self, email: str, password: str):
        self.calls.append((email, password))
        if not self.available:
            return Return.err(
                Error("VERIFIER_UNAVAILABLE", "Credential verifier unavailable")
            )
        if password != self.password:
            return Return.err(Error("WRONG_CREDENTIAL", "wrong credential"))
        return Return.ok(None)


class FakeInvitationIssuer(IInvitationIssuer):
    """Issues sequential portal user ids; can simulate a rejection"""

    def __init__(self):
        self.failure = None
        self.invites = []

    async def invite(self, email: str, redirect_url: str):
        if self.failure is not None:
            return Return.err(Error("INVITATION_ERROR", self.failure))
        user_id = f"portal-user-{len(self.invites) + 1}"
        self.invites.append((email, redirect_url, user_id))
        return Return.ok(user_id)


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def credential_verifier():
    return FakeCredentialVerifier()


@pytest.fixture
def invitation_issuer():
    return FakeInvitationIssuer()


@pytest.fixture
def auth_headers(test_data):
    operator = test_data.get("operator")
    now = datetime.now(UTC)
    token = jwt.encode(
        {
            "sub": operator["sub"],
            "email": operator["email"],
            "aud": "authenticated",
            "iat": now,
            "exp": now + timedelta(minutes=15),
        },
        ApplicationConfig.JWT_SECRET,
        algorithm="HS256",
    )
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, credential_verifier, invitation_issuer):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_credential_verifier] = lambda: credential_verifier
    app.dependency_overrides[get_invitation_issuer] = lambda: invitation_issuer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client_record(client, auth_headers, test_data):
    """A client organization created through the API"""
    response = await client.post(
        "/clients", json=test_data.payload("client"), headers=auth_headers
    )
    assert response.status_code == 201
    return response.json()
