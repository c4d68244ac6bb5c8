"""
Skill tree endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_hunter
from app.db.session import get_db
from app.models.hunter import Hunter
from app.schemas.skill import SkillTreeResponse, SkillUnlockResponse
from app.services.skill_service import SkillService

router = APIRouter()


@router.get("", summary="Get the skill tree with per-skill state.", response_model=SkillTreeResponse)
def get_skill_tree(db: Session = Depends(get_db), hunter: Hunter = Depends(get_current_hunter), ):
    service = SkillService(db)
    return service.get_tree(hunter.id)


@router.post("/{skill_id}/unlock", summary="Spend one skill point to unlock a skill.",
             response_model=SkillUnlockResponse, )
def unlock_skill(skill_id: str, db: Session = Depends(get_db), hunter: Hunter = Depends(get_current_hunter), ):
    service = SkillService(db)
    return service.unlock(hunter.id, skill_id)
