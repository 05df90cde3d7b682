"""
Player service.

Business logic for the player registry.
"""

import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.clock import utc_now
from app.db.repositories.player import PlayerRepository
from app.db.repositories.test_session import TestSessionRepository
from app.models.player import Player
from app.schemas.player import PlayerCreate, PlayerResponse, PlayerUpdate

logger = logging.getLogger(__name__)


class PlayerService:
    """Service for player-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = PlayerRepository(session)
        self.sessions = TestSessionRepository(session)

    def create(self, data: PlayerCreate) -> PlayerResponse:
        player = Player(**data.model_dump(exclude={"initial_assessment"}), initial_assessment=self._assessment(data))
        player = self.repository.create(player)
        logger.info("Registered player %s (%s)", player.id, player.full_name)
        return self._to_response(player)

    def get(self, player_id: str) -> PlayerResponse:
        return self._to_response(self.get_model(player_id))

    def get_model(self, player_id: str) -> Player:
        """
        Get a player or fail.

        Raises:
            HTTPException 404: If the player does not exist
        """
        player = self.repository.get_by_id(player_id)
        if not player:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
        return player

    def list_all(self, skip: int = 0, limit: int = 100) -> list[PlayerResponse]:
        return [self._to_response(p) for p in self.repository.get_all(skip, limit)]

    def update(self, player_id: str, data: PlayerUpdate) -> PlayerResponse:
        player = self.get_model(player_id)
        changes = data.model_dump(exclude_unset=True, exclude={"initial_assessment"})
        for field, value in changes.items():
            setattr(player, field, value)
        if "initial_assessment" in data.model_fields_set:
            player.initial_assessment = self._assessment(data)
        player.updated_at = utc_now()
        return self._to_response(self.repository.update(player))

    def delete(self, player_id: str) -> None:
        """Delete a player together with all of their sessions."""
        self.get_model(player_id)
        removed = self.sessions.delete_by_player(player_id)
        self.repository.delete(player_id)
        logger.info("Deleted player %s and %d session(s)", player_id, removed)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _assessment(data: PlayerCreate | PlayerUpdate) -> dict | None:
        if data.initial_assessment is None:
            return None
        return data.initial_assessment.model_dump(mode="json", by_alias=True, exclude_none=True)

    @staticmethod
    def _to_response(player: Player) -> PlayerResponse:
        return PlayerResponse(id=player.id, full_name=player.full_name, first_name=player.first_name,
                              last_name=player.last_name, date_of_birth=player.date_of_birth, phone=player.phone,
                              email=player.email, parent_name=player.parent_name, club=player.club,
                              fit_ranking=player.fit_ranking, coach_name=player.coach_name, notes=player.notes,
                              initial_assessment=player.initial_assessment, auto_created=player.auto_created,
                              created_at=player.created_at, updated_at=player.updated_at, )
