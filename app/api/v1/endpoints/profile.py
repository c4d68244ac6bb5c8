"""
Profile endpoints.

Current hunter's progression, stats and role.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_hunter
from app.db.session import get_db
from app.models.hunter import Hunter
from app.schemas.hunter import ProfileResponse, RoleUpdate
from app.services.hunter_service import HunterService

router = APIRouter()


@router.get("", summary="Get the current hunter's profile.", response_model=ProfileResponse)
def get_profile(db: Session = Depends(get_db), hunter: Hunter = Depends(get_current_hunter), ):
    service = HunterService(db)
    return service.get_profile(hunter.id)


@router.put("/role", summary="Change the hunter's role.", response_model=ProfileResponse)
def change_role(data: RoleUpdate, db: Session = Depends(get_db), hunter: Hunter = Depends(get_current_hunter), ):
    service = HunterService(db)
    return service.change_role(hunter.id, data.role)
