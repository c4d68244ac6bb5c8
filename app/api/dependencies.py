"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.security import bearer_scheme, decode_access_token
from app.db.session import get_db
from app.models.hunter import Hunter
from app.services.hunter_service import HunterService


def get_current_hunter(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
                       db: Session = Depends(get_db), ) -> Hunter:
    """Verify the bearer token and return the caller's hunter.

    The hunter is created with default progression on first contact.
    """
    identity = decode_access_token(credentials.credentials) if credentials else None
    if not identity:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return HunterService(db).ensure_hunter(identity)
