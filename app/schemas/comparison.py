"""
Challenge and ranking schemas.

``winner`` fields use ``1`` for the first side, ``2`` for the second
side and ``0`` for a tie.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.protocol import Category, StrokeName

Winner = Literal[0, 1, 2]


class StrokeComparison(BaseModel):
    stroke: StrokeName
    label: str
    value_1: float
    value_2: float
    winner: Winner


class MatchResult(BaseModel):
    """Stroke-by-stroke comparison of two sides (players or teams)."""

    name_1: str
    name_2: str
    strokes: list[StrokeComparison]
    strokes_1: int = Field(..., description="Strokes won by side 1")
    strokes_2: int = Field(..., description="Strokes won by side 2")
    winner: Winner
    percent_of_ideal_1: float
    percent_of_ideal_2: float
    session_ids: list[str] = Field(default_factory=list)


class RoundRobinMatch(BaseModel):
    session_id_a: str
    session_id_b: str
    name_a: str
    name_b: str
    strokes_a: int
    strokes_b: int
    winner: Winner


class Standing(BaseModel):
    rank: int = Field(..., description="0-based position")
    marker: str = Field(..., description="Medal for the podium, 1-based number otherwise")
    session_id: str
    player_id: str
    player_name: str
    points: int
    wins: int
    draws: int
    losses: int
    percent_of_ideal: float


class RoundRobinResult(BaseModel):
    matches: list[RoundRobinMatch]
    standings: list[Standing]


class LeaderboardEntry(BaseModel):
    rank: int
    marker: str
    session_id: str
    player_id: str
    player_name: str
    date: datetime.date
    category: Category
    percent_of_ideal: float


class GeneralLeaderboardEntry(BaseModel):
    rank: int
    marker: str
    player_id: Optional[str] = None
    player_name: str
    best_by_category: dict[Category, float]
    best: float


class ChallengeRequest(BaseModel):
    session_ids: list[str] = Field(..., min_length=2)
