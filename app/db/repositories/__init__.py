"""Database repositories."""

from app.db.repositories.player import PlayerRepository
from app.db.repositories.test_session import TestSessionRepository

__all__ = [
    "PlayerRepository",
    "TestSessionRepository",
]
