"""Security helpers for password hashing and bearer token management."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Sequence
from uuid import uuid4

from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import Settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(slots=True)
class GeneratedToken:
    """Represents a generated JWT token with associated metadata."""

    token: str
    expires_at: datetime
    jti: str


def get_password_hash(password: str) -> str:
    """Return a hashed representation of ``password``."""

    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a plain password against its hashed counterpart.

    Without a stored hash a dummy verification still runs, so a missing account
    costs as much time as a wrong password.
    """

    if hashed_password is None:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)


def _unique_roles(roles: Sequence[str] | None) -> list[str]:
    if not roles:
        return []
    return list(dict.fromkeys(roles))


def create_access_token(
    *,
    subject: str | int,
    roles: Sequence[str] | None,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> GeneratedToken:
    """Create a signed JWT access token for the provided subject."""

    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = now + expires_delta
    payload: dict[str, Any] = {
        "sub": str(subject),
        "iat": now,
        "exp": expire,
        "roles": _unique_roles(roles),
        "jti": uuid4().hex,
    }
    token = jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return GeneratedToken(token=token, expires_at=expire, jti=payload["jti"])


def decode_token(*, token: str, secret: str, algorithm: str) -> dict[str, Any]:
    """Decode a JWT token and return its payload."""

    return jwt.decode(token, secret, algorithms=[algorithm])


def resolve_identity(token: str, settings: Settings) -> int:
    """Return the user id carried by ``token``.

    Raises ``JWTError`` when the signature, expiry or subject is invalid.
    """

    payload = decode_token(
        token=token,
        secret=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise JWTError("Token subject is not a user identifier.") from exc


__all__ = [
    "GeneratedToken",
    "JWTError",
    "create_access_token",
    "decode_token",
    "get_password_hash",
    "resolve_identity",
    "verify_password",
]
