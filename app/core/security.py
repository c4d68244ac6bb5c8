"""
Bearer-token verification.

Identity is delegated to an external provider that signs access tokens
with the shared ``settings.SECRET_KEY``.  This service only verifies them
and extracts the caller's identity: a stable opaque user id (``sub``)
plus optional ``email`` and ``name`` claims.
"""

from typing import Optional

import jwt
from fastapi.security import HTTPBearer
from pydantic import BaseModel

from app.core.config import settings

bearer_scheme = HTTPBearer(auto_error=False)


class Identity(BaseModel):
    """Caller identity extracted from a verified token."""

    user_id: str
    email: Optional[str] = None
    name: Optional[str] = None


def decode_access_token(token: str) -> Optional[Identity]:
    """Verify *token* and return the caller identity.

    Returns ``None`` if the signature, expiry or ``sub`` claim is invalid.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM],
                             options={"require": ["sub", "exp"]}, )
    except jwt.InvalidTokenError:
        return None

    sub = payload.get("sub")
    if not sub:
        return None
    return Identity(user_id=str(sub), email=payload.get("email"), name=payload.get("name"))
