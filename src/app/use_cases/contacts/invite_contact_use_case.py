"""
Invite Contact Use Case

Grants portal access to an existing contact: re-authenticates the operator,
issues the invitation, links the new portal user to the contact and
provisions its access role.
"""

import logging
from typing import Optional
from urllib.parse import quote
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.access_role_provisioner import AccessRoleProvisioner
from src.app.services.credential_verifier import ICredentialVerifier
from src.app.services.invitation_issuer import IInvitationIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    CONTACT_NOT_FOUND,
    EMAIL_MISMATCH,
    LINKING_ERROR,
    VALIDATION_ERROR,
)
from src.domain.entities import Contact

from .dtos import InvitationOutcome, InviteContactResponse, StepIssue, WorkflowStep

logger = logging.getLogger(__name__)


class InviteContactUseCase:
    """
    Use case for inviting a contact to the client portal.

    Business Rules:
    - The operator's own credential is re-verified, not the contact's
    - A contact that already has a linked user is never re-invited; the
      request succeeds with its existing user id and nothing is sent
    - Steps run strictly in order: authorize, invite, link, provision
    - Once the invitation is issued, linking and provisioning failures are
      warnings; the issued invitation is never revoked
    """

    def __init__(
        self,
        uow: UnitOfWork,
        credential_verifier: ICredentialVerifier,
        invitation_issuer: IInvitationIssuer,
        signup_url_template: str,
    ):
        self.uow = uow
        self.credential_verifier = credential_verifier
        self.invitation_issuer = invitation_issuer
        self.signup_url_template = signup_url_template
        self.provisioner = AccessRoleProvisioner(uow)

    async def execute(
        self,
        operator_email: str,
        client_id: UUID,
        contact_id: UUID,
        email: str,
        password: Optional[str],
    ) -> Result[InviteContactResponse]:
        """
        Execute invite contact use case.

        Args:
            operator_email: Email of the authenticated operator
            client_id: Client the contact must belong to
            contact_id: Contact to invite
            email: Email to invite, must match the contact's email
            password: Operator password for re-authentication

        Returns:
            Result with InviteContactResponse, or Error
        """
        if not password:
            return Return.err(Error(VALIDATION_ERROR, "credential required"))

        async with self.uow:
            contact = await self.uow.contacts.get_by_id(contact_id)
            if contact is None or contact.client_id != client_id:
                return Return.err(Error(CONTACT_NOT_FOUND, "Contact not found"))

            if not contact.email or contact.email.lower() != email.strip().lower():
                return Return.err(
                    Error(EMAIL_MISMATCH, "Email does not match the contact's email")
                )

            outcome = await self.run(contact, operator_email, password)

            if outcome.already_linked:
                return Return.ok(
                    InviteContactResponse(
                        success=True,
                        user_id=outcome.user_id,
                        message="Contact already has portal access",
                        already_linked=True,
                    )
                )
            if outcome.error is not None:
                return Return.err(Error(outcome.error.code, outcome.error.message))

            return Return.ok(
                InviteContactResponse(
                    success=True,
                    user_id=outcome.user_id,
                    message="Invitation sent successfully",
                    warnings=outcome.warnings,
                )
            )

    async def run(
        self, contact: Contact, operator_email: str, password: str
    ) -> InvitationOutcome:
        """
        Run the invitation steps for a persisted contact.

        The caller must have entered the unit of work. Never raises for
        collaborator failures: they are recorded on the returned outcome.
        """
        outcome = InvitationOutcome()

        if contact.is_linked:
            logger.info(f"Contact {contact.id} already linked, skipping invitation")
            outcome.already_linked = True
            outcome.user_id = contact.linked_user_id
            return outcome

        # Rollbacks expire loaded instances, keep plain values around
        contact_id = contact.id
        client_id = contact.client_id
        email = contact.email

        # Authorizing
        verified = await self.credential_verifier.verify(operator_email, password)
        if verified.is_err():
            logger.warning(
                f"Re-authentication failed for {operator_email}: {verified.error.code}"
            )
            outcome.error = StepIssue(
                step=WorkflowStep.authorizing,
                code=verified.error.code,
                message=verified.error.message,
            )
            return outcome
        outcome.completed_steps.append(WorkflowStep.authorizing)

        # Inviting
        issued = await self.invitation_issuer.invite(email, self.signup_url(email))
        if issued.is_err():
            logger.error(f"Error inviting contact {contact_id}: {issued.error.message}")
            outcome.error = StepIssue(
                step=WorkflowStep.inviting,
                code=issued.error.code,
                message=issued.error.message,
            )
            return outcome
        user_id = issued.value
        outcome.user_id = user_id
        outcome.completed_steps.append(WorkflowStep.inviting)
        logger.info(f"Contact {contact_id} invited as portal user {user_id}")

        # Linking
        try:
            linked = await self.uow.contacts.update(
                contact_id, {"linked_user_id": user_id}
            )
            await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Error linking contact {contact_id} to {user_id}: {exc!r}")
            await self.uow.rollback()
            linked = None

        if linked is not None:
            outcome.completed_steps.append(WorkflowStep.linking)
        else:
            outcome.warnings.append(
                StepIssue(
                    step=WorkflowStep.linking,
                    code=LINKING_ERROR,
                    message="Invitation sent, but the contact could not be linked",
                )
            )

        # Provisioning
        provisioned = await self.provisioner.provision(user_id, email, client_id)
        if provisioned.is_err():
            outcome.warnings.append(
                StepIssue(
                    step=WorkflowStep.provisioning,
                    code=provisioned.error.code,
                    message="Invitation sent, but permissions may need manual review",
                )
            )
        else:
            outcome.completed_steps.append(WorkflowStep.provisioning)

        return outcome

    def signup_url(self, email: str) -> str:
        return self.signup_url_template.format(email=quote(email, safe=""))
