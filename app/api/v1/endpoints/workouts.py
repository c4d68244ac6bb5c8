"""
Workout endpoints.

Completing a workout runs the full progression pipeline.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_hunter
from app.db.session import get_db
from app.models.hunter import Hunter
from app.schemas.progression import SessionXPPreview
from app.schemas.workout import (WorkoutCompletionResponse, WorkoutCreate, WorkoutLogResponse,
                                 WorkoutPreviewRequest, )
from app.services.workout_service import WorkoutService

router = APIRouter()


@router.post("", summary="Complete a workout and collect XP.", response_model=WorkoutCompletionResponse,
             status_code=status.HTTP_201_CREATED, )
def complete_workout(data: WorkoutCreate, db: Session = Depends(get_db),
                     hunter: Hunter = Depends(get_current_hunter), ):
    service = WorkoutService(db)
    return service.complete(hunter.id, data)


@router.post("/preview", summary="Preview the XP of a workout without saving it.", response_model=SessionXPPreview)
def preview_workout(data: WorkoutPreviewRequest, db: Session = Depends(get_db),
                    hunter: Hunter = Depends(get_current_hunter), ):
    service = WorkoutService(db)
    return service.preview(data)


@router.get("", summary="List workouts, most recent first, or within a date range.",
            response_model=list[WorkoutLogResponse], )
def list_workouts(limit: Optional[int] = Query(None, ge=1, le=100, description="Number of recent workouts"),
                  start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), hunter: Hunter = Depends(get_current_hunter), ):
    service = WorkoutService(db)
    if start and end:
        return service.get_range(hunter.id, start, end)
    return service.list_recent(hunter.id, limit)
