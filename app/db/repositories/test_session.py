"""
Test session repository.

Handles database operations for :class:`TestSessionRecord`.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.test_session import TestSessionRecord


class TestSessionRepository:
    """Repository for TestSessionRecord database operations."""

    __test__ = False

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TestSessionRecord) -> TestSessionRecord:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: str) -> Optional[TestSessionRecord]:
        return self.session.get(TestSessionRecord, entry_id)

    def get_many(self, entry_ids: list[str]) -> list[TestSessionRecord]:
        """Fetch several sessions, returned in the order of *entry_ids*.  Unknown ids are skipped."""
        statement = select(TestSessionRecord).where(TestSessionRecord.id.in_(entry_ids))
        found = {entry.id: entry for entry in self.session.exec(statement).all()}
        return [found[entry_id] for entry_id in entry_ids if entry_id in found]

    def get_all(self, player_id: Optional[str] = None, category: Optional[str] = None,
                completed_only: bool = False, ) -> list[TestSessionRecord]:
        statement = select(TestSessionRecord)
        if player_id is not None:
            statement = statement.where(TestSessionRecord.player_id == player_id)
        if category is not None:
            statement = statement.where(TestSessionRecord.category == category)
        if completed_only:
            statement = statement.where(TestSessionRecord.completed == True)  # noqa: E712
        statement = statement.order_by(TestSessionRecord.date, TestSessionRecord.created_at)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: TestSessionRecord) -> TestSessionRecord:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: str) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    def delete_by_player(self, player_id: str) -> int:
        """Delete every session of a player.  Returns how many were removed."""
        entries = self.get_all(player_id=player_id)
        for entry in entries:
            self.session.delete(entry)
        self.session.commit()
        return len(entries)
