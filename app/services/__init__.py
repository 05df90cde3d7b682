"""Business logic services."""

from app.services.player_service import PlayerService
from app.services.test_session_service import TestSessionService
from app.services.challenge_service import ChallengeService

__all__ = [
    "PlayerService",
    "TestSessionService",
    "ChallengeService",
]
