"""
Client Use Case DTOs (Data Transfer Objects)
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from libs.url_mask import mask_identifier
from src.domain.entities import Client


class ClientForm(BaseModel):
    """Editable client fields; on update only the supplied ones change"""

    trade_name: Optional[str] = None
    legal_name: Optional[str] = None
    tax_id: Optional[str] = None
    segment: Optional[str] = None
    responsible_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    contract_date: Optional[date] = None
    active: Optional[bool] = None


class ClientInfo(BaseModel):
    id: str
    masked_id: str
    trade_name: str
    legal_name: Optional[str] = None
    tax_id: Optional[str] = None
    segment: Optional[str] = None
    responsible_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    contract_date: Optional[date] = None
    active: bool

    @classmethod
    def from_entity(cls, client: Client) -> "ClientInfo":
        return cls(
            id=str(client.id),
            masked_id=mask_identifier(str(client.id)),
            trade_name=client.trade_name,
            legal_name=client.legal_name,
            tax_id=client.tax_id,
            segment=client.segment,
            responsible_name=client.responsible_name,
            email=client.email,
            phone=client.phone,
            contract_date=client.contract_date,
            active=client.active,
        )
