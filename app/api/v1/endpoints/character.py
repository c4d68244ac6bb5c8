"""
Character sheet endpoint.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_hunter
from app.db.session import get_db
from app.models.hunter import Hunter
from app.schemas.character import CharacterSheet
from app.services.hunter_service import HunterService

router = APIRouter()


@router.get("", summary="Get the character sheet (attributes, achievements).", response_model=CharacterSheet)
def get_character_sheet(db: Session = Depends(get_db), hunter: Hunter = Depends(get_current_hunter), ):
    service = HunterService(db)
    return service.get_character_sheet(hunter.id)
