from uuid import UUID

from fastapi import status

from libs.result import Error
from src.api.error import ClientError
from libs.url_mask import resolve_uuid


def parse_identifier(value: str, label: str) -> UUID:
    """
    Resolve a masked or raw path identifier.

    Raises:
        ClientError: 400 INVALID_IDENTIFIER when the value is neither
    """
    resolved = resolve_uuid(value)
    if resolved is None:
        raise ClientError(
            Error("INVALID_IDENTIFIER", f"Invalid {label} identifier"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return resolved
