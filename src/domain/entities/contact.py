"""
Contact Entity

A person attached to a client, optionally linked to a portal login.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Contact(SQLModel, table=True):
    """
    Contact entity - a person belonging to exactly one client.

    Business Rules:
    - name is required
    - email is required only when the contact is invited to the portal
    - linked_user_id is set once, by the invitation workflow, never by a form
    - A linked contact is not re-invited
    """

    __tablename__ = "crm_contacts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    client_id: UUID = Field(foreign_key="clients.id", nullable=False, index=True)

    name: str = Field(max_length=255, nullable=False)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=40)
    position: Optional[str] = Field(default=None, max_length=120)
    notes: Optional[str] = None

    # Portal identity issued by the hosted auth provider
    linked_user_id: Optional[str] = Field(default=None, max_length=64)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_contact_client_name", "client_id", "name"),
        Index("idx_contact_linked_user", "linked_user_id"),
    )

    @property
    def is_linked(self) -> bool:
        return self.linked_user_id is not None
