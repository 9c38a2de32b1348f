from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    user_id: UUID,
    email: str,
    is_super_admin: bool = False,
    expires_delta: timedelta = timedelta(minutes=15),
) -> str:
    """
    Generate JWT access token

    Tokens are issued by the identity provider; this helper mints the same
    claims for local development and tests.

    Args:
        user_id: User UUID
        email: User email, matched against invitation addressees
        is_super_admin: Owner-equivalent access to every project
        expires_delta: Token lifetime

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "is_super_admin": is_super_admin,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
        return payload
    except JWTError:
        return None
