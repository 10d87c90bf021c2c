from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.api.utils.identifiers import parse_identifier
from src.app.services.credential_verifier import ICredentialVerifier
from src.app.services.invitation_issuer import IInvitationIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.contacts import (
    ContactForm,
    ContactInfo,
    DeleteContactResponse,
    DeleteContactUseCase,
    ListContactsUseCase,
    SaveContactCommand,
    SaveContactResponse,
    SaveContactUseCase,
)
from src.depends import (
    get_credential_verifier,
    get_current_user,
    get_invitation_issuer,
    get_unit_of_work,
)
from config import ApplicationConfig

router = APIRouter(prefix="/clients/{client_id}/contacts", tags=["Contacts"])

FORM_FIELDS = {"name", "email", "phone", "position", "notes"}


class SaveContactRequest(BaseModel):
    """
    Save contact HTTP request payload

    The contact form plus the optional portal invitation. linked_user_id is
    not accepted here; it is only set by the invitation workflow.
    """

    name: str = Field("", description="Contact name (required)")
    email: Optional[str] = Field(None, description="Required when inviting")
    phone: Optional[str] = None
    position: Optional[str] = None
    notes: Optional[str] = None
    invite_user: bool = Field(False, description="Invite the contact to the portal")
    password: Optional[str] = Field(
        None, description="Operator password, required when inviting"
    )

    def to_form(self) -> ContactForm:
        return ContactForm(**self.model_dump(exclude_unset=True, include=FORM_FIELDS))


def _raise_for_save_error(error: Error):
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("CLIENT_NOT_FOUND", "CONTACT_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ContactInfo])
async def list_contacts(
    client_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Contacts of a client

    Raises:
        - 400 Bad Request: INVALID_IDENTIFIER
        - 404 Not Found: CLIENT_NOT_FOUND
    """
    client_uuid = parse_identifier(client_id, "client")

    use_case = ListContactsUseCase(uow)
    result = await use_case.execute(client_uuid)

    if result.is_err():
        error = result.error
        if error.code == "CLIENT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=SaveContactResponse
)
async def create_contact(
    client_id: str,
    request: SaveContactRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    credential_verifier: ICredentialVerifier = Depends(get_credential_verifier),
    invitation_issuer: IInvitationIssuer = Depends(get_invitation_issuer),
):
    """
    Create Contact, optionally inviting it to the portal

    The contact is saved even if the invitation fails; the response tells
    which steps completed (outcome saved / invited / already_linked / partial).

    Raises:
        - 400 Bad Request: INVALID_IDENTIFIER, VALIDATION_ERROR
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: CLIENT_NOT_FOUND
        - 500 Internal Server Error: PERSISTENCE_ERROR
    """
    client_uuid = parse_identifier(client_id, "client")

    command = SaveContactCommand(
        client_id=client_uuid,
        form=request.to_form(),
        invite_requested=request.invite_user,
        password=request.password,
    )

    use_case = SaveContactUseCase(
        uow, credential_verifier, invitation_issuer, ApplicationConfig.PORTAL_SIGNUP_URL
    )
    result = await use_case.execute(command, operator_email=current_user["email"])

    if result.is_err():
        _raise_for_save_error(result.error)

    return result.value


@router.put(
    "/{contact_id}", status_code=status.HTTP_200_OK, response_model=SaveContactResponse
)
async def update_contact(
    client_id: str,
    contact_id: str,
    request: SaveContactRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    credential_verifier: ICredentialVerifier = Depends(get_credential_verifier),
    invitation_issuer: IInvitationIssuer = Depends(get_invitation_issuer),
):
    """
    Update Contact, optionally inviting it to the portal

    Only the supplied form fields change. A contact that already has portal
    access is not invited again (outcome already_linked).

    Raises:
        - 400 Bad Request: INVALID_IDENTIFIER, VALIDATION_ERROR
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: CLIENT_NOT_FOUND, CONTACT_NOT_FOUND
        - 500 Internal Server Error: PERSISTENCE_ERROR
    """
    client_uuid = parse_identifier(client_id, "client")
    contact_uuid = parse_identifier(contact_id, "contact")

    command = SaveContactCommand(
        client_id=client_uuid,
        contact_id=contact_uuid,
        form=request.to_form(),
        invite_requested=request.invite_user,
        password=request.password,
    )

    use_case = SaveContactUseCase(
        uow, credential_verifier, invitation_issuer, ApplicationConfig.PORTAL_SIGNUP_URL
    )
    result = await use_case.execute(command, operator_email=current_user["email"])

    if result.is_err():
        _raise_for_save_error(result.error)

    return result.value


@router.delete(
    "/{contact_id}", status_code=status.HTTP_200_OK, response_model=DeleteContactResponse
)
async def delete_contact(
    client_id: str,
    contact_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Contact

    Raises:
        - 400 Bad Request: INVALID_IDENTIFIER
        - 404 Not Found: CONTACT_NOT_FOUND
        - 500 Internal Server Error: PERSISTENCE_ERROR
    """
    client_uuid = parse_identifier(client_id, "client")
    contact_uuid = parse_identifier(contact_id, "contact")

    use_case = DeleteContactUseCase(uow)
    result = await use_case.execute(client_uuid, contact_uuid)

    if result.is_err():
        error = result.error
        if error.code == "CONTACT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
