"""
Derived session results.

Nothing here is persisted: results are recomputed from a
:class:`~app.schemas.session.TestSession` and the two analysis flags on
every read.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.protocol import Category, PrecisionTimeStrategy, StdDevMode, StrokeName
from app.schemas.session import TestSession


class StrokeStats(BaseModel):
    """Mean and deviation of one radar stroke."""

    stroke: StrokeName
    label: str
    scores: list[float] = Field(default_factory=list, description="Scores sorted by series index")
    ave: float
    dev: float


class PrecisionTimePoint(BaseModel):
    """One synthetic time-ordered point (1-based ``index``)."""

    index: int
    fh: float
    bh: float
    combined: float
    mean: float


class SessionResults(BaseModel):
    session: TestSession
    stats: list[StrokeStats] = Field(..., description="Six strokes in radar order")
    radar_values: list[float]
    radar_area: float
    percent_of_ideal: float
    precision_time: list[PrecisionTimePoint]


class AnalysisOptions(BaseModel):
    """The two flags every aggregation call receives explicitly."""

    std_dev_mode: StdDevMode = StdDevMode.SAMPLE
    precision_time_strategy: PrecisionTimeStrategy = PrecisionTimeStrategy.A


class SessionResultsResponse(SessionResults):
    """Session results plus the star rating shown next to them."""

    stars: int = Field(..., ge=1, le=5)
    stars_label: str
    options: AnalysisOptions


class HistoryPoint(BaseModel):
    session_id: str
    date: datetime.date
    category: Category
    percent_of_ideal: float
    radar_area: float


class PlayerHistory(BaseModel):
    """Trend of one player's completed sessions, oldest first."""

    player_id: str
    points: list[HistoryPoint]
    best_session_id: Optional[str] = None
    best_percent_of_ideal: Optional[float] = None
    best_stars: Optional[int] = None
