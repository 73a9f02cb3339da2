# geohub/core/security.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from passlib.context import CryptContext
from jose import jwt, JWTError

from geohub.core.config import settings

ALGORITHM = "HS256"

# argon2 only for new hashes
pwd_context = CryptContext(
    schemes=["argon2"],
    default="argon2",
    deprecated="auto",
)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity claim carried by an access token."""

    user_id: int
    username: str


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def create_access_token(
    user_id: int,
    username: str,
    *,
    secret: str | None = None,
    expires_minutes: int | None = None,
) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MIN
    )
    payload = {
        "sub": str(user_id),
        "userId": user_id,
        "username": username,
        "exp": expire,
    }
    return jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_access_token(token: str, *, secret: str | None = None) -> TokenIdentity:
    """
    Verifies signature and expiry and returns the embedded identity.
    Raises JWTError on any problem, including missing claims.
    """
    payload = jwt.decode(token, secret or settings.JWT_SECRET, algorithms=[ALGORITHM])
    user_id = payload.get("userId")
    username = payload.get("username")
    if not isinstance(user_id, int) or not username:
        raise JWTError("missing identity claims")
    return TokenIdentity(user_id=user_id, username=username)
