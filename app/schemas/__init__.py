"""Pydantic schemas for request/response validation."""

from app.schemas.protocol import (
    Category,
    Direction,
    PrecisionTimeStrategy,
    ProtocolResponse,
    SeriesSpec,
    ServeType,
    Side,
    StdDevMode,
    StrokeName,
    TargetStrip,
    TestType,
)
from app.schemas.series import (
    CombinedSeries,
    GroundstrokeSeries,
    ReturnSeries,
    SeriesResult,
    ServeSeries,
    VolleySeries,
)
from app.schemas.session import TestSession, TestSessionCreate, TestSessionResponse
from app.schemas.results import (
    AnalysisOptions,
    PlayerHistory,
    PrecisionTimePoint,
    SessionResults,
    SessionResultsResponse,
    StrokeStats,
)
from app.schemas.comparison import (
    ChallengeRequest,
    GeneralLeaderboardEntry,
    LeaderboardEntry,
    MatchResult,
    RoundRobinResult,
    Standing,
)
from app.schemas.player import PlayerCreate, PlayerResponse, PlayerUpdate

__all__ = [
    "Category",
    "Direction",
    "PrecisionTimeStrategy",
    "ProtocolResponse",
    "SeriesSpec",
    "ServeType",
    "Side",
    "StdDevMode",
    "StrokeName",
    "TargetStrip",
    "TestType",
    "CombinedSeries",
    "GroundstrokeSeries",
    "ReturnSeries",
    "SeriesResult",
    "ServeSeries",
    "VolleySeries",
    "TestSession",
    "TestSessionCreate",
    "TestSessionResponse",
    "AnalysisOptions",
    "PlayerHistory",
    "PrecisionTimePoint",
    "SessionResults",
    "SessionResultsResponse",
    "StrokeStats",
    "ChallengeRequest",
    "GeneralLeaderboardEntry",
    "LeaderboardEntry",
    "MatchResult",
    "RoundRobinResult",
    "Standing",
    "PlayerCreate",
    "PlayerResponse",
    "PlayerUpdate",
]
