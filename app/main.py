"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import setup_logging
from app.progression.errors import (ConcurrentUpdateConflict, InsufficientSkillPointsError, InvalidInputError,
                                    NotEligibleError, ProgressionError, UnknownSkillError, )

setup_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Resistance-training progression: XP, levels, streaks and skills.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")

# Checked in order: subclasses before their bases
_ERROR_STATUS: list[tuple[type[ProgressionError], int]] = [
    (UnknownSkillError, status.HTTP_404_NOT_FOUND),
    (InvalidInputError, status.HTTP_422_UNPROCESSABLE_CONTENT),
    (InsufficientSkillPointsError, status.HTTP_409_CONFLICT),
    (NotEligibleError, status.HTTP_409_CONFLICT),
    (ConcurrentUpdateConflict, status.HTTP_409_CONFLICT),
]


@app.exception_handler(ProgressionError)
async def progression_error_handler(request: Request, exc: ProgressionError):
    """Translate engine errors into JSON responses."""
    status_code = next((code for error_type, code in _ERROR_STATUS if isinstance(exc, error_type)),
                       status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": exc.to_dict()})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "HunterAscend API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "hunter-ascend-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "authors emails": settings.AUTHORS_EMAILS,
        "project url": settings.PROJECT_URL
    }
