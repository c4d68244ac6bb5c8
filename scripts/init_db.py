"""
Create the HunterAscend tables directly from the SQLModel metadata.

Handy for local development; deployed databases are managed with
``alembic upgrade head``.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.init_db import init_db

logger = logging.getLogger("scripts.init_db")

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)
    try:
        init_db()
    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)
    logger.info("Database initialized")
