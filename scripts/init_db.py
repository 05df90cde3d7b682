"""
Database initialization script.

Creates the players and test_sessions tables on ``DATABASE_URL``.  For
schema changes on an existing database use ``alembic upgrade head``.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv(project_root / ".env")

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    try:
        init_db()
    except SQLAlchemyError as e:
        print(f"ERROR: could not create tables on {settings.DATABASE_URL}: {e}")
        sys.exit(1)
    print("Database ready.")
