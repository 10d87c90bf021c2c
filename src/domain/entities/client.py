"""
Client Entity

An organization served by the agency.
"""

from datetime import UTC, date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Client(SQLModel, table=True):
    """
    Client entity - an organization that owns contacts.

    Business Rules:
    - trade_name is required
    - Inactive clients are kept for history and filtered out of listings on demand
    """

    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    trade_name: str = Field(max_length=255, nullable=False, index=True)
    legal_name: Optional[str] = Field(default=None, max_length=255)
    tax_id: Optional[str] = Field(default=None, max_length=32)
    segment: Optional[str] = Field(default=None, max_length=120)
    responsible_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=40)
    contract_date: Optional[date] = None
    active: bool = Field(default=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_client_active", "active"),)
