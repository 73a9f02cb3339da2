# geohub/core/auth.py
import logging

from fastapi import Depends, Header, HTTPException, status
from jose import JWTError

from geohub.core.config import settings
from geohub.core.permissions import Capability, has_permission
from geohub.core.security import TokenIdentity, decode_access_token

log = logging.getLogger("uvicorn")


def _extract_token(authorization: str | None) -> str | None:
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        return token or None
    return None


class TokenGuard:
    """
    FastAPI dependency that resolves the caller from `Authorization: Bearer ...`.

    - no token          -> 401 "Access token required"
    - bad/expired token -> 403 "Invalid token"

    Stateless: nothing is looked up in the database here.
    """

    def __init__(self, secret: str):
        self.secret = secret

    async def __call__(
        self,
        authorization: str | None = Header(None),
    ) -> TokenIdentity:
        token = _extract_token(authorization)
        if not token:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Access token required",
            )
        try:
            return decode_access_token(token, secret=self.secret)
        except JWTError as e:
            log.warning("rejected token: %s", e)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid token",
            )


get_current_identity = TokenGuard(settings.JWT_SECRET)


def require_capability(capability: Capability):
    """Guard + capability check in one dependency."""

    async def dependency(
        identity: TokenIdentity = Depends(get_current_identity),
    ) -> TokenIdentity:
        if not has_permission(identity, capability):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not allowed",
            )
        return identity

    return dependency
