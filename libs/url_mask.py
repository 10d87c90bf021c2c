"""
Identifier Masking

Reversible, URL-safe masking of identifiers used in shareable links.
This is obfuscation only: an unmasked value is caller-controlled input
and must still go through the usual ownership checks.
"""

import base64
import binascii
import logging
from typing import Optional
from uuid import UUID

logger = logging.getLogger(__name__)


def mask_identifier(value: Optional[str]) -> str:
    """
    Mask an identifier as unpadded base64url text.

    Args:
        value: Raw identifier

    Returns:
        Token without '+', '/' or '=' characters ("" for empty input)
    """
    if not value:
        return ""

    encoded = base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def unmask_identifier(value: Optional[str]) -> str:
    """
    Recover the identifier behind a masked token.

    A token that does not decode is returned unchanged, so a broken mask
    (or a raw identifier) never blocks navigation.

    Args:
        value: Masked token

    Returns:
        Raw identifier, the input itself when it is not a valid token,
        or "" for empty input
    """
    if not value:
        return ""

    padded = value + "=" * (-len(value) % 4)
    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        logger.warning(f"Could not unmask identifier {value!r}: {exc}")
        return value


def resolve_uuid(value: str) -> Optional[UUID]:
    """
    Parse a path identifier that may be masked or raw.

    Returns:
        The UUID, or None if neither form parses
    """
    for candidate in (unmask_identifier(value), value):
        try:
            return UUID(candidate)
        except ValueError:
            continue
    return None
