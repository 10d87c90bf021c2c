"""
Contact Use Cases

Contact records and the portal invitation workflow.
"""

from .delete_contact_use_case import DeleteContactUseCase
from .dtos import (
    ContactForm,
    ContactInfo,
    DeleteContactResponse,
    InvitationOutcome,
    InviteContactResponse,
    SaveContactCommand,
    SaveContactResponse,
    SaveOutcome,
    StepIssue,
    WorkflowStep,
)
from .invite_contact_use_case import InviteContactUseCase
from .list_contacts_use_case import ListContactsUseCase
from .save_contact_use_case import SaveContactUseCase

__all__ = [
    "SaveContactUseCase",
    "InviteContactUseCase",
    "ListContactsUseCase",
    "DeleteContactUseCase",
    "ContactForm",
    "ContactInfo",
    "DeleteContactResponse",
    "InvitationOutcome",
    "InviteContactResponse",
    "SaveContactCommand",
    "SaveContactResponse",
    "SaveOutcome",
    "StepIssue",
    "WorkflowStep",
]
