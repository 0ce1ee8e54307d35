"""
Security utilities for authentication and authorization.

Provides password hashing (bcrypt), JWT token management and the
Principal that request handlers pass to the account service.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext

from app.core.config import settings

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class Principal:
    """
    Identity and granted roles of the caller of a request.

    The name is the login email. Anonymous principals carry no name and
    no roles.
    """

    name: Optional[str] = None
    roles: frozenset[str] = field(default_factory=frozenset)
    is_anonymous: bool = True

    def __post_init__(self):
        if self.is_anonymous and (self.name is not None or self.roles):
            raise ValueError("Anonymous principal cannot carry a name or roles")
        if not self.is_anonymous and not self.name:
            raise ValueError("Authenticated principal requires a name")

    @classmethod
    def anonymous(cls) -> "Principal":
        return cls()

    @classmethod
    def authenticated(cls, name: str, roles: Iterable[str] = ()) -> "Principal":
        return cls(name=name, roles=frozenset(roles), is_anonymous=False)

    def has_role(self, role: str) -> bool:
        return role in self.roles


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: The plain text password to hash

    Returns:
        The hashed password string
    """
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: The data to encode in the token (typically {"sub": email, "roles": [...]})
        expires_delta: Optional custom expiration time

    Returns:
        The encoded JWT token string
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str) -> Optional[dict]:
    """
    Decode and validate a JWT access token.

    Returns:
        The decoded token payload, or None if invalid
    """
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except InvalidTokenError:
        return None


def get_token_principal(token: str) -> Optional[Principal]:
    """
    Build an authenticated Principal from a JWT token.

    Returns None when the token is invalid or carries no subject.
    """
    payload = decode_access_token(token)
    if payload is None or not payload.get("sub"):
        return None
    return Principal.authenticated(payload["sub"], payload.get("roles") or ())
