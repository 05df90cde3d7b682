"""
Challenge and ranking service.

Loads sessions, computes their results with explicit analysis flags and
hands them to the comparison engine.  Engine errors surface as 422.
"""

import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.precision.comparison import (
    MAX_ROUND_ROBIN,
    ComparisonError,
    category_leaderboard,
    general_leaderboard,
    head_to_head,
    round_robin,
    team_match,
)
from app.schemas.comparison import GeneralLeaderboardEntry, LeaderboardEntry, MatchResult, RoundRobinResult
from app.schemas.protocol import Category
from app.schemas.results import AnalysisOptions, SessionResults
from app.services.test_session_service import TestSessionService

logger = logging.getLogger(__name__)


class ChallengeService:
    """Service for 1v1, 2v2, free-for-all challenges and leaderboards."""

    def __init__(self, session: Session):
        self.sessions = TestSessionService(session)

    def one_vs_one(self, session_ids: list[str], options: AnalysisOptions) -> MatchResult:
        if len(session_ids) != 2:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"A 1v1 challenge needs exactly 2 sessions, got {len(session_ids)}", )
        first, second = self._results(session_ids, options)
        match = head_to_head(first, second)
        logger.info("1v1 %s vs %s: %d-%d", match.name_1, match.name_2, match.strokes_1, match.strokes_2)
        return match

    def two_vs_two(self, session_ids: list[str], options: AnalysisOptions) -> MatchResult:
        """Sessions 1-2 form team 1, sessions 3-4 team 2."""
        if len(session_ids) != 4:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"A 2v2 challenge needs exactly 4 sessions, got {len(session_ids)}", )
        results = self._results(session_ids, options)
        try:
            match = team_match(results[:2], results[2:])
        except ComparisonError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
        logger.info("2v2 %s vs %s: %d-%d", match.name_1, match.name_2, match.strokes_1, match.strokes_2)
        return match

    def free_for_all(self, session_ids: list[str], options: AnalysisOptions) -> RoundRobinResult:
        if len(session_ids) > MAX_ROUND_ROBIN:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"A free-for-all takes at most {MAX_ROUND_ROBIN} sessions, "
                                       f"got {len(session_ids)}", )
        try:
            result = round_robin(self._results(session_ids, options))
        except ComparisonError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
        logger.info("Round robin over %d sessions, %d matches", len(session_ids), len(result.matches))
        return result

    def compare(self, first_id: str, second_id: str, options: AnalysisOptions) -> MatchResult:
        """Side-by-side comparison of any two sessions (same player or not)."""
        first, second = self._results([first_id, second_id], options)
        return head_to_head(first, second)

    # ------------------------------------------------------------------
    # Leaderboards
    # ------------------------------------------------------------------

    def category_ranking(self, category: Category, options: AnalysisOptions) -> list[LeaderboardEntry]:
        snapshots = self.sessions.all_snapshots(category=category.value, completed_only=True)
        return category_leaderboard([self.sessions.compute(s, options) for s in snapshots], category)

    def general_ranking(self, options: AnalysisOptions, by_name: bool = False) -> list[GeneralLeaderboardEntry]:
        snapshots = self.sessions.all_snapshots(completed_only=True)
        results = [self.sessions.compute(s, options) for s in snapshots]
        return general_leaderboard(results, key="name" if by_name else "player_id")

    def _results(self, session_ids: list[str], options: AnalysisOptions) -> list[SessionResults]:
        if len(set(session_ids)) != len(session_ids):
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail="The same session cannot take part twice in a challenge", )
        snapshots = self.sessions.snapshots(session_ids)
        drafts = [s.id for s in snapshots if not s.completed]
        if drafts:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"Incomplete session(s) cannot take part in a challenge: "
                                       f"{', '.join(drafts)}", )
        return [self.sessions.compute(s, options) for s in snapshots]
