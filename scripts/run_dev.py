"""
Development server launcher.

Loads the .env file and serves the API with uvicorn in reload mode, on a
host and port taken from the command line.

Usage:
    python scripts/run_dev.py [--host 127.0.0.1] [--port 8000]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env before the settings are imported
from dotenv import load_dotenv

load_dotenv(project_root / ".env")

import uvicorn

from app.core.config import settings


def main():
    parser = argparse.ArgumentParser(description="Run the Tennis Precision Test API with auto-reload")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} {settings.VERSION} (development)")
    print("=" * 60)
    print(f"Database: {settings.DATABASE_URL}")
    print(f"Defaults: std dev {settings.STD_DEV_MODE}, precision-time strategy {settings.PRECISION_TIME_STRATEGY}")
    print(f"Tokens:   {len(settings.ACCESS_TOKENS)} configured")
    print(f"Docs:     http://{args.host}:{args.port}/docs")
    print("=" * 60)

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
