"""
CRM Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import ClientUserRole

from .client import Client
from .contact import Contact
from .access_role_entry import AccessRoleEntry

__all__ = [
    # Enums
    "ClientUserRole",
    # Entities
    "Client",
    "Contact",
    "AccessRoleEntry",
]
