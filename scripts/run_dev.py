"""
Development server launcher.

Loads the .env file, configures logging the same way the app does and
serves ``app.main:app`` with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000]
"""

import argparse
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the HunterAscend API with auto-reload")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    from app.core.config import settings

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} Development Server  v{settings.VERSION}")
    print("=" * 60)
    print(f"API:  http://{args.host}:{args.port}/api/v1")
    print(f"Docs: http://{args.host}:{args.port}/docs")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level=settings.LOG_LEVEL)


if __name__ == "__main__":
    main()
