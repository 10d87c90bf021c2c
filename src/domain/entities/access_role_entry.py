"""
AccessRoleEntry Entity

Authorization scope of a portal user within one client.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel

from .enums import ClientUserRole


class AccessRoleEntry(SQLModel, table=True):
    """
    AccessRoleEntry entity - one row per portal user.

    Business Rules:
    - Keyed on user_id: writes are upserts, last write wins on role/client
    - Created right after a successful invitation
    """

    __tablename__ = "client_user_roles"

    user_id: str = Field(primary_key=True, max_length=64)

    email: str = Field(max_length=255, nullable=False)
    role: ClientUserRole = Field(default=ClientUserRole.admin, nullable=False)
    client_id: UUID = Field(foreign_key="clients.id", nullable=False, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
