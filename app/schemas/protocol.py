"""
Protocol vocabulary.

Enumerations shared by the protocol catalog, the series variants and
the statistics engine.  Member values are the wire values stored in the
database and exchanged over the API.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TestType(str, Enum):
    """The five sub-tests of a precision session."""

    __test__ = False  # not a pytest class

    GROUNDSTROKES = "groundstrokes"
    COMBINED = "combined"
    RETURN = "return"
    SERVE = "serve"
    VOLLEY = "volley"


class Direction(str, Enum):
    FH_CROSS = "fh_cross"
    BH_CROSS = "bh_cross"
    LUNGOLINEA = "lungolinea"
    DIAGONALE = "diagonale"
    RIGHT = "right"
    LEFT = "left"
    FH_VOLLEY = "fh_volley"
    BH_VOLLEY = "bh_volley"


class ServeType(str, Enum):
    PRIMA = "prima"
    SECONDA = "seconda"


class Side(str, Enum):
    RIGHT = "right"
    LEFT = "left"


class TargetStrip(str, Enum):
    T = "T"
    BODY = "body"
    WIDE = "wide"


class Category(str, Enum):
    U10_U12 = "u10_u12"
    TERZA = "terza"
    SECONDA = "seconda"
    PRIMA = "prima"


class StrokeName(str, Enum):
    """Radar axes.  Declaration order is the radar order."""

    SERVE = "serve"
    FOREHAND = "forehand"
    COMBINED = "combined"
    RETURN = "return"
    BACKHAND = "backhand"
    VOLLEY = "volley"


class StdDevMode(str, Enum):
    SAMPLE = "sample"
    POPULATION = "population"


class PrecisionTimeStrategy(str, Enum):
    A = "A"
    B = "B"


class SeriesSpec(BaseModel):
    """One required series of the protocol."""

    model_config = ConfigDict(frozen=True)

    test_type: TestType
    series_index: int = Field(..., ge=0, description="Position within the sub-test")
    direction: Optional[Direction] = None
    serve_type: Optional[ServeType] = None
    side: Optional[Side] = None
    label: str


class CategoryTarget(BaseModel):
    """Target-zone sizes used for a category."""

    model_config = ConfigDict(frozen=True)

    label: str
    groundstroke: str
    volley: str
    serve: str
    description: str


class WizardStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    title: str


class ProtocolResponse(BaseModel):
    """Full protocol catalog returned by the API."""

    series: dict[TestType, list[SeriesSpec]]
    strips: list[TargetStrip]
    category_targets: dict[Category, CategoryTarget]
    category_labels: dict[Category, str]
    wizard_steps: list[WizardStep]
    total_series: int
    total_shots: int


class StripCheckRequest(BaseModel):
    previous: list[TargetStrip] = Field(default_factory=list,
                                        description="Strips chosen so far, in this player's serve order")
    proposed: TargetStrip


class StripCheckResponse(BaseModel):
    allowed: bool
    allowed_strips: list[TargetStrip]
