from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.hosted_auth import (
    HostedAuthCredentialVerifier,
    HostedAuthInvitationIssuer,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.credential_verifier import ICredentialVerifier
from src.app.services.invitation_issuer import IInvitationIssuer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_credential_verifier() -> ICredentialVerifier:
    return HostedAuthCredentialVerifier(
        ApplicationConfig.AUTH_URL,
        ApplicationConfig.AUTH_ANON_KEY,
        timeout=ApplicationConfig.AUTH_TIMEOUT_SECONDS,
    )


def get_invitation_issuer() -> IInvitationIssuer:
    return HostedAuthInvitationIssuer(
        ApplicationConfig.AUTH_URL,
        ApplicationConfig.AUTH_SERVICE_ROLE_KEY,
        timeout=ApplicationConfig.AUTH_TIMEOUT_SECONDS,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing sub and email

    Raises:
        HTTPException: 401 if token is invalid, expired or carries no email
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    # Re-authentication needs the operator's own email
    if not payload.get("email"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token does not identify an operator",
        )

    return payload
