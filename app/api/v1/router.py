"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import character, profile, skills, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    profile.router, prefix="/profile", tags=["Profile"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workouts"]
)
api_router.include_router(
    skills.router, prefix="/skills", tags=["Skills"]
)
api_router.include_router(
    character.router, prefix="/character", tags=["Character"]
)
