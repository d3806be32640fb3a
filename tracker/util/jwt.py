"""Session token encoding and verification (PyJWT)."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from tracker.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id"]


class TokenPayload(BaseModel):
    """Claims carried by a tracker session token."""

    user_id: str
    username: str | None = None
    exp: datetime


class JWTError(Exception):
    """Token could not be trusted (bad signature, expired or malformed)."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a session token with the configured secret.

    Sessions are issued by the tracker's login flow; this exists for tests
    and operator tooling.
    """
    now = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "username": username,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` and check its signature and expiry.

    Raises:
        JWTError: If the token is expired, forged or missing required claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e
    return TokenPayload.model_validate(claims)
