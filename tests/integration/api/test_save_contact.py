import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import AccessRoleEntry, Contact
from tests.utils.json_compare import strip_server_fields


@pytest.mark.asyncio
async def test_create_contact_without_invite(
    client: AsyncClient, auth_headers, client_record, test_data, credential_verifier
):
    """Given a client, saving a contact stores exactly the submitted fields"""
    payload = test_data.payload("contact")

    response = await client.post(
        f"/clients/{client_record['id']}/contacts", json=payload, headers=auth_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["outcome"] == "saved"
    assert data["completed_steps"] == ["validating", "persisting"]
    assert data["error"] is None

    contact = data["contact"]
    assert strip_server_fields(
        contact, {"client_id", "linked_user_id", "has_portal_access"}
    ) == payload
    assert contact["client_id"] == client_record["id"]
    assert contact["has_portal_access"] is False
    assert credential_verifier.calls == []


@pytest.mark.asyncio
async def test_invite_new_contact_full_success(
    client: AsyncClient,
    auth_headers,
    client_record,
    test_data,
    db_session,
    credential_verifier,
    invitation_issuer,
):
    """Ana with the correct password is created, invited, linked and provisioned"""
    payload = {
        "name": "Ana",
        "email": "ana@x.com",
        "invite_user": True,
        "password": "correct",
    }

    response = await client.post(
        f"/clients/{client_record['id']}/contacts", json=payload, headers=auth_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["outcome"] == "invited"
    assert data["warnings"] == []
    assert data["completed_steps"] == [
        "validating",
        "persisting",
        "authorizing",
        "inviting",
        "linking",
        "provisioning",
    ]
    assert data["contact"]["linked_user_id"] == "portal-user-1"

    # The operator from the token is re-authenticated
    assert credential_verifier.calls == [(test_data.operator_email, "correct")]
    email, redirect_url, _ = invitation_issuer.invites[0]
    assert email == "ana@x.com"
    assert redirect_url.endswith("signup?email=ana%40x.com")

    result = await db_session.exec(
        select(AccessRoleEntry).where(AccessRoleEntry.user_id == "portal-user-1")
    )
    entries = result.all()
    assert len(entries) == 1
    assert str(entries[0].client_id) == client_record["id"]
    assert entries[0].role.value == "admin"


@pytest.mark.asyncio
async def test_invite_with_wrong_password_keeps_contact(
    client: AsyncClient, auth_headers, client_record, db_session, invitation_issuer
):
    """A rejected password still saves the contact, without linkage"""
    payload = {
        "name": "Ana",
        "email": "ana@x.com",
        "invite_user": True,
        "password": "wrong",
    }

    response = await client.post(
        f"/clients/{client_record['id']}/contacts", json=payload, headers=auth_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["outcome"] == "partial"
    assert data["error"] == {
        "step": "authorizing",
        "code": "WRONG_CREDENTIAL",
        "message": "wrong credential",
    }
    assert data["contact"]["linked_user_id"] is None
    assert invitation_issuer.invites == []

    result = await db_session.exec(select(Contact).where(Contact.email == "ana@x.com"))
    contacts = result.all()
    assert len(contacts) == 1
    assert contacts[0].linked_user_id is None

    result = await db_session.exec(select(AccessRoleEntry))
    assert result.all() == []


@pytest.mark.asyncio
async def test_verifier_outage_is_distinguished(
    client: AsyncClient, auth_headers, client_record, credential_verifier
):
    credential_verifier.available = False

    response = await client.post(
        f"/clients/{client_record['id']}/contacts",
        json={"name": "Ana", "email": "ana@x.com", "invite_user": True, "password": "correct"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["error"]["code"] == "VERIFIER_UNAVAILABLE"


@pytest.mark.asyncio
async def test_reinvite_of_linked_contact_is_skipped(
    client: AsyncClient, auth_headers, client_record, credential_verifier, invitation_issuer
):
    base = f"/clients/{client_record['id']}/contacts"
    invite = {"name": "Ana", "email": "ana@x.com", "invite_user": True, "password": "correct"}

    created = await client.post(base, json=invite, headers=auth_headers)
    assert created.json()["outcome"] == "invited"
    contact_id = created.json()["contact"]["id"]

    response = await client.put(f"{base}/{contact_id}", json=invite, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["outcome"] == "already_linked"
    assert data["contact"]["linked_user_id"] == "portal-user-1"
    assert len(credential_verifier.calls) == 1
    assert len(invitation_issuer.invites) == 1


@pytest.mark.asyncio
async def test_update_contact_by_masked_id_changes_only_supplied_fields(
    client: AsyncClient, auth_headers, client_record, test_data
):
    base = f"/clients/{client_record['masked_id']}/contacts"
    created = await client.post(base, json=test_data.payload("contact"), headers=auth_headers)
    contact = created.json()["contact"]

    response = await client.put(
        f"{base}/{contact['masked_id']}",
        json={"name": "Ana Maria", "phone": "555"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.json()["contact"]
    assert updated["name"] == "Ana Maria"
    assert updated["phone"] == "555"
    assert updated["email"] == contact["email"]
    assert updated["notes"] == contact["notes"]


@pytest.mark.asyncio
async def test_linked_user_id_cannot_be_set_from_form(
    client: AsyncClient, auth_headers, client_record
):
    response = await client.post(
        f"/clients/{client_record['id']}/contacts",
        json={"name": "Mallory", "linked_user_id": "forged"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["contact"]["linked_user_id"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": ""}, "name required"),
        ({"name": "Ana", "invite_user": True, "password": "correct"}, "email required for invite"),
        ({"name": "Ana", "email": "ana@x.com", "invite_user": True}, "credential required"),
    ],
)
async def test_validation_errors(
    client: AsyncClient, auth_headers, client_record, payload, message
):
    response = await client.post(
        f"/clients/{client_record['id']}/contacts", json=payload, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["error"] == {"code": "VALIDATION_ERROR", "message": message}


@pytest.mark.asyncio
async def test_unknown_client(client: AsyncClient, auth_headers):
    response = await client.post(
        "/clients/3f1e1c5e-7f4b-4f8e-9c55-5b8f0a9a0c01/contacts",
        json={"name": "Ana"},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "CLIENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_requires_authentication(client: AsyncClient, client_record):
    response = await client.post(
        f"/clients/{client_record['id']}/contacts",
        json={"name": "Ana"},
        headers={"Authorization": "Bearer not-a-jwt"},
    )

    assert response.status_code == 401
