"""
Save Contact Use Case

Creates or updates a contact and, on request, invites it to the client
portal. The contact write always survives a failed invitation.
"""

import logging
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.credential_verifier import ICredentialVerifier
from src.app.services.invitation_issuer import IInvitationIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import (
    CLIENT_NOT_FOUND,
    CONTACT_NOT_FOUND,
    PERSISTENCE_ERROR,
    VALIDATION_ERROR,
)
from src.domain.entities import Contact

from .dtos import (
    ContactForm,
    ContactInfo,
    InvitationOutcome,
    SaveContactCommand,
    SaveContactResponse,
    SaveOutcome,
    WorkflowStep,
)
from .invite_contact_use_case import InviteContactUseCase

logger = logging.getLogger(__name__)


class SaveContactUseCase:
    """
    Use case for saving a contact with an optional portal invitation.

    Business Rules:
    - name is required; email and the operator password are required
      when an invitation is requested
    - A failed write aborts everything (PERSISTENCE_ERROR)
    - A failed re-authentication or invitation leaves the contact saved and
      is reported as a partial outcome
    - Linking and provisioning failures are warnings on an invited outcome
    - A contact that already has portal access is not invited again
    """

    def __init__(
        self,
        uow: UnitOfWork,
        credential_verifier: ICredentialVerifier,
        invitation_issuer: IInvitationIssuer,
        signup_url_template: str,
    ):
        self.uow = uow
        self.invitations = InviteContactUseCase(
            uow, credential_verifier, invitation_issuer, signup_url_template
        )

    async def execute(
        self, command: SaveContactCommand, operator_email: Optional[str] = None
    ) -> Result[SaveContactResponse]:
        """
        Execute save contact use case.

        Args:
            command: Target client/contact, form draft and invitation request
            operator_email: Email of the authenticated operator, used for
                re-authentication when an invitation is requested

        Returns:
            Result with SaveContactResponse, or Error for validation,
            lookup and persistence failures
        """
        validation_error = self._validate(command)
        if validation_error is not None:
            return Return.err(validation_error)

        completed_steps: List[WorkflowStep] = [WorkflowStep.validating]
        fields = _form_fields(command.form)

        async with self.uow:
            client = await self.uow.clients.get_by_id(command.client_id)
            if client is None:
                return Return.err(Error(CLIENT_NOT_FOUND, "Client not found"))

            if command.contact_id is not None:
                existing = await self.uow.contacts.get_by_id(command.contact_id)
                if existing is None or existing.client_id != command.client_id:
                    return Return.err(Error(CONTACT_NOT_FOUND, "Contact not found"))

            # Persisting
            try:
                if command.contact_id is None:
                    contact = await self.uow.contacts.create(
                        Contact(client_id=command.client_id, **fields)
                    )
                else:
                    contact = await self.uow.contacts.update(command.contact_id, fields)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.error(f"Error saving contact for client {command.client_id}: {exc!r}")
                await self.uow.rollback()
                return Return.err(Error(PERSISTENCE_ERROR, "Contact could not be saved"))

            if contact is None:
                return Return.err(Error(CONTACT_NOT_FOUND, "Contact not found"))

            completed_steps.append(WorkflowStep.persisting)
            contact_id = contact.id

            if not command.invite_requested:
                return Return.ok(
                    SaveContactResponse(
                        contact=ContactInfo.from_entity(contact),
                        outcome=SaveOutcome.saved,
                        message="Contact saved",
                        completed_steps=completed_steps,
                    )
                )

            outcome = await self.invitations.run(contact, operator_email, command.password)
            completed_steps.extend(outcome.completed_steps)

            # Reload: linking may have changed the row or rolled the session back
            contact = await self.uow.contacts.get_by_id(contact_id)

            return Return.ok(
                SaveContactResponse(
                    contact=ContactInfo.from_entity(contact),
                    outcome=_save_outcome(outcome),
                    message=_summary(outcome),
                    completed_steps=completed_steps,
                    warnings=outcome.warnings,
                    error=outcome.error,
                )
            )

    def _validate(self, command: SaveContactCommand) -> Optional[Error]:
        form = command.form
        if not form.name.strip():
            return Error(VALIDATION_ERROR, "name required")

        if not command.invite_requested:
            return None

        email = (form.email or "").strip()
        if not email:
            return Error(VALIDATION_ERROR, "email required for invite")
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            return Error(VALIDATION_ERROR, "email required for invite")

        if not command.password:
            return Error(VALIDATION_ERROR, "credential required")

        return None


def _form_fields(form: ContactForm) -> Dict[str, Any]:
    """Fields supplied on the form, trimmed; blank optional fields become None"""
    fields = form.model_dump(exclude_unset=True)
    fields["name"] = form.name.strip()
    for key, value in fields.items():
        if key != "name" and isinstance(value, str):
            fields[key] = value.strip() or None
    return fields


def _save_outcome(outcome: InvitationOutcome) -> SaveOutcome:
    if outcome.already_linked:
        return SaveOutcome.already_linked
    if outcome.error is not None:
        return SaveOutcome.partial
    return SaveOutcome.invited


def _summary(outcome: InvitationOutcome) -> str:
    if outcome.already_linked:
        return "Contact saved; it already has portal access, no invitation sent"
    if outcome.error is not None:
        return f"Contact saved, but invite failed: {outcome.error.message}"
    if outcome.warnings:
        return "Contact saved and invitation sent; permissions may need manual review"
    return "Contact saved and invitation sent"
