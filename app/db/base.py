"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.player import Player  # noqa: F401
from app.models.test_session import TestSessionRecord  # noqa: F401
