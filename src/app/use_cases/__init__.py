"""
Use Cases

Organized into domain folders:
- clients/: Client records
- contacts/: Contacts and the portal invitation workflow

Import from subdirectories for better organization.
"""

from .clients import (
    CreateClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    UpdateClientUseCase,
)
from .contacts import (
    DeleteContactUseCase,
    InviteContactUseCase,
    ListContactsUseCase,
    SaveContactUseCase,
)

__all__ = [
    # Clients
    "CreateClientUseCase",
    "GetClientUseCase",
    "ListClientsUseCase",
    "UpdateClientUseCase",
    # Contacts
    "SaveContactUseCase",
    "InviteContactUseCase",
    "ListContactsUseCase",
    "DeleteContactUseCase",
]
