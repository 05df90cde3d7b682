"""
Player repository.

Handles database operations for the Player model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.player import Player


class PlayerRepository:
    """Repository for Player database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, player: Player) -> Player:
        """
        Create a new player in the database.

        Args:
            player: Player instance to create

        Returns:
            Created player with generated id
        """
        self.session.add(player)
        self.session.commit()
        self.session.refresh(player)
        return player

    def get_by_id(self, player_id: str) -> Optional[Player]:
        return self.session.get(Player, player_id)

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Player]:
        """
        Get all players ordered by last and first name, with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of players
        """
        statement = select(Player).order_by(Player.last_name, Player.first_name).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def update(self, player: Player) -> Player:
        self.session.add(player)
        self.session.commit()
        self.session.refresh(player)
        return player

    def delete(self, player_id: str) -> bool:
        """
        Delete a player by ID.

        Args:
            player_id: Player ID to delete

        Returns:
            True if deleted, False if not found
        """
        player = self.get_by_id(player_id)
        if player:
            self.session.delete(player)
            self.session.commit()
            return True
        return False
