"""SQLModel database models."""

from app.models.player import Player
from app.models.test_session import TestSessionRecord

__all__ = [
    "Player",
    "TestSessionRecord",
]
