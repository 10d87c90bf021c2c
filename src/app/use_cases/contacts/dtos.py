"""
Contact Use Case DTOs (Data Transfer Objects)

Commands, workflow bookkeeping and responses for the contact domain.
"""

from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from libs.url_mask import mask_identifier
from src.domain.entities import Contact


class WorkflowStep(str, Enum):
    """Steps of a contact save, in execution order"""

    validating = "validating"
    persisting = "persisting"
    authorizing = "authorizing"
    inviting = "inviting"
    linking = "linking"
    provisioning = "provisioning"


class SaveOutcome(str, Enum):
    saved = "saved"
    invited = "invited"
    already_linked = "already_linked"
    partial = "partial"


# ============================================================================
# Commands
# ============================================================================


class ContactForm(BaseModel):
    """Draft of the contact form, submitted as a whole"""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    notes: Optional[str] = None


class SaveContactCommand(BaseModel):
    """Create (contact_id=None) or update a contact, optionally inviting it"""

    client_id: UUID
    contact_id: Optional[UUID] = None
    form: ContactForm
    invite_requested: bool = False
    password: Optional[str] = None


# ============================================================================
# Workflow bookkeeping
# ============================================================================


class StepIssue(BaseModel):
    """Failure or warning attached to a workflow step"""

    step: WorkflowStep
    code: str
    message: str


class InvitationOutcome(BaseModel):
    """What the invitation sub-flow achieved"""

    completed_steps: List[WorkflowStep] = Field(default_factory=list)
    user_id: Optional[str] = None
    already_linked: bool = False
    warnings: List[StepIssue] = Field(default_factory=list)
    error: Optional[StepIssue] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ContactInfo(BaseModel):
    id: str
    masked_id: str
    client_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    notes: Optional[str] = None
    linked_user_id: Optional[str] = None
    has_portal_access: bool

    @classmethod
    def from_entity(cls, contact: Contact) -> "ContactInfo":
        return cls(
            id=str(contact.id),
            masked_id=mask_identifier(str(contact.id)),
            client_id=str(contact.client_id),
            name=contact.name,
            email=contact.email,
            phone=contact.phone,
            position=contact.position,
            notes=contact.notes,
            linked_user_id=contact.linked_user_id,
            has_portal_access=contact.linked_user_id is not None,
        )


class SaveContactResponse(BaseModel):
    """Response for save contact use case"""

    contact: ContactInfo
    outcome: SaveOutcome
    message: str
    completed_steps: List[WorkflowStep]
    warnings: List[StepIssue] = Field(default_factory=list)
    error: Optional[StepIssue] = None


class InviteContactResponse(BaseModel):
    """Response of the invite-client-contact function"""

    success: bool
    user_id: str = Field(serialization_alias="userId")
    message: str
    already_linked: bool = Field(False, serialization_alias="alreadyLinked")
    warnings: List[StepIssue] = Field(default_factory=list)


class DeleteContactResponse(BaseModel):
    status: str
