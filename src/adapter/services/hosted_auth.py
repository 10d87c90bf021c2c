"""
Hosted Auth Adapters

Credential verification and invitation issuing against a GoTrue-compatible
auth REST API. Provider responses and transport failures are normalised
into the application error codes here, so no httpx exception leaks out.
"""

import logging
from typing import Optional

import httpx

from libs.result import Error, Result, Return
from src.app.services.credential_verifier import (
    VERIFIER_UNAVAILABLE,
    WRONG_CREDENTIAL,
    ICredentialVerifier,
)
from src.app.services.invitation_issuer import INVITATION_ERROR, IInvitationIssuer

logger = logging.getLogger(__name__)


class HostedAuthCredentialVerifier(ICredentialVerifier):
    """Verifies a password through the provider's password grant"""

    def __init__(
        self,
        auth_url: str,
        anon_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.auth_url = auth_url.rstrip("/")
        self.anon_key = anon_key
        self.timeout = timeout
        self.transport = transport

    async def verify(self, email: str, password: str) -> Result[None]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    f"{self.auth_url}/token",
                    params={"grant_type": "password"},
                    headers={"apikey": self.anon_key},
                    json={"email": email, "password": password},
                )
        except httpx.HTTPError as exc:
            logger.error(f"Credential verifier unreachable: {exc!r}")
            return Return.err(
                Error(VERIFIER_UNAVAILABLE, "Credential verifier unavailable")
            )

        if response.is_success:
            return Return.ok(None)

        # The password grant answers 400 (invalid_grant) for bad credentials
        if response.status_code in (400, 401):
            return Return.err(Error(WRONG_CREDENTIAL, "wrong credential"))

        logger.error(f"Credential verifier returned {response.status_code}")
        return Return.err(Error(VERIFIER_UNAVAILABLE, "Credential verifier unavailable"))


class HostedAuthInvitationIssuer(IInvitationIssuer):
    """Invites a user through the provider's admin invite endpoint"""

    def __init__(
        self,
        auth_url: str,
        service_role_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.auth_url = auth_url.rstrip("/")
        self.service_role_key = service_role_key
        self.timeout = timeout
        self.transport = transport

    async def invite(self, email: str, redirect_url: str) -> Result[str]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    f"{self.auth_url}/invite",
                    params={"redirect_to": redirect_url},
                    headers={
                        "apikey": self.service_role_key,
                        "Authorization": f"Bearer {self.service_role_key}",
                    },
                    json={"email": email},
                )
        except httpx.HTTPError as exc:
            logger.error(f"Invitation issuer unreachable: {exc!r}")
            return Return.err(Error(INVITATION_ERROR, "Invitation service unavailable"))

        if not response.is_success:
            message = _provider_message(response) or "Error sending invitation"
            logger.error(f"Invitation issuer returned {response.status_code}: {message}")
            return Return.err(Error(INVITATION_ERROR, message))

        try:
            user_id = response.json().get("id")
        except ValueError:
            user_id = None

        if not user_id:
            return Return.err(Error(INVITATION_ERROR, "No user returned from invite"))

        return Return.ok(str(user_id))


def _provider_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    return body.get("msg") or body.get("message") or body.get("error_description") or ""
