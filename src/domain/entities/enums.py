"""
CRM Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ClientUserRole(str, Enum):
    """Role of a portal user within a client organization"""

    # Contact-originated invitations always grant this level
    admin = "admin"
