from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from libs.result import Error
from src.api.error import FunctionError
from libs.url_mask import resolve_uuid
from src.app.services.credential_verifier import ICredentialVerifier
from src.app.services.invitation_issuer import IInvitationIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.contacts import InviteContactResponse, InviteContactUseCase
from src.depends import (
    get_credential_verifier,
    get_current_user,
    get_invitation_issuer,
    get_unit_of_work,
)
from config import ApplicationConfig

router = APIRouter(prefix="/functions", tags=["Functions"])

# Everything else, request errors included, is a 500 with the code in `details`
FUNCTION_STATUS_CODES = {
    "WRONG_CREDENTIAL": status.HTTP_403_FORBIDDEN,
}


class InviteClientContactRequest(BaseModel):
    """
    invite-client-contact payload

    contactId and clientId may be raw or masked identifiers.
    """

    email: str = Field(..., description="Email to invite, must match the contact")
    contact_id: str = Field(..., alias="contactId")
    client_id: str = Field(..., alias="clientId")
    password: Optional[str] = Field(None, description="Operator password")


def _function_error(error: Error) -> FunctionError:
    status_code = FUNCTION_STATUS_CODES.get(
        error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return FunctionError(error, status_code=status_code)


@router.post(
    "/invite-client-contact",
    status_code=status.HTTP_200_OK,
    response_model=InviteContactResponse,
)
async def invite_client_contact(
    request: InviteClientContactRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    credential_verifier: ICredentialVerifier = Depends(get_credential_verifier),
    invitation_issuer: IInvitationIssuer = Depends(get_invitation_issuer),
):
    """
    Invite Client Contact

    Re-verifies the operator's password, invites the contact's email to the
    portal, links the new user to the contact and grants its access role.
    Linking and role failures come back as warnings on a successful response.
    A contact that already has portal access is left untouched and answered
    with its existing user id and `alreadyLinked: true`.

    Returns:
        {success, userId, message, alreadyLinked, warnings}

    Raises:
        - 403 Forbidden: WRONG_CREDENTIAL
        - 500 Internal Server Error: any other failure (VALIDATION_ERROR,
          INVALID_IDENTIFIER, CONTACT_NOT_FOUND, EMAIL_MISMATCH,
          VERIFIER_UNAVAILABLE, INVITATION_ERROR)
    """
    client_uuid = resolve_uuid(request.client_id)
    contact_uuid = resolve_uuid(request.contact_id)
    if client_uuid is None or contact_uuid is None:
        raise _function_error(Error("INVALID_IDENTIFIER", "Invalid contact or client id"))

    use_case = InviteContactUseCase(
        uow, credential_verifier, invitation_issuer, ApplicationConfig.PORTAL_SIGNUP_URL
    )
    result = await use_case.execute(
        operator_email=current_user["email"],
        client_id=client_uuid,
        contact_id=contact_uuid,
        email=request.email,
        password=request.password,
    )

    if result.is_err():
        raise _function_error(result.error)

    return result.value
