from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode an access token issued by the hosted auth provider

    Args:
        token: JWT token string (HS256, signed with the shared JWT secret)

    Returns:
        Decoded payload dict (sub, email, ...) or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=["HS256"],
            options={"verify_aud": False},
        )
        return payload
    except JWTError:
        return None
