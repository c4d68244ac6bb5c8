"""
Weekly rollover job.

Resets ``sessions_this_week`` for every hunter.  Meant to be run by an
external scheduler (cron, systemd timer, ...) at the start of each week.

Usage:
    python scripts/weekly_rollover.py
"""

import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

from sqlmodel import Session

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine
from app.services.hunter_service import HunterService

logger = logging.getLogger("scripts.weekly_rollover")


def main() -> int:
    setup_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)
    with Session(engine) as session:
        count = HunterService(session).rollover_week()
    logger.info(f"Rollover complete: {count} hunters reset")
    return 0


if __name__ == "__main__":
    sys.exit(main())
