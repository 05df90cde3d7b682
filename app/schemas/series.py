"""
Recorded series schemas.

A series is ten shots aimed at one target; ``score`` counts the hits.
Each sub-test has its own variant carrying only the fields that make
sense for it, discriminated by ``test_type``::

    groundstrokes  direction fh_cross | bh_cross
    combined       direction lungolinea | diagonale
    return         direction right | left
    serve          serve_type, side, target_strip
    volley         direction fh_volley | bh_volley

Series are immutable once written; a correction replaces the series.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from app.schemas.protocol import ServeType, Side, TargetStrip

SHOTS_PER_SERIES = 10


class _SeriesBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    series_index: int = Field(..., ge=0, description="Position within the sub-test (0-based)")
    score: int = Field(..., ge=0, le=SHOTS_PER_SERIES, description="Successful shots out of 10")


class GroundstrokeSeries(_SeriesBase):
    test_type: Literal["groundstrokes"] = "groundstrokes"
    direction: Literal["fh_cross", "bh_cross"]


class CombinedSeries(_SeriesBase):
    test_type: Literal["combined"] = "combined"
    direction: Literal["lungolinea", "diagonale"]


class ReturnSeries(_SeriesBase):
    test_type: Literal["return"] = "return"
    direction: Literal["right", "left"]


class ServeSeries(_SeriesBase):
    test_type: Literal["serve"] = "serve"
    serve_type: ServeType
    side: Side
    target_strip: TargetStrip


class VolleySeries(_SeriesBase):
    test_type: Literal["volley"] = "volley"
    direction: Literal["fh_volley", "bh_volley"]


SeriesResult = Annotated[
    Union[GroundstrokeSeries, CombinedSeries, ReturnSeries, ServeSeries, VolleySeries],
    Field(discriminator="test_type"),
]

_SERIES_LIST_ADAPTER = TypeAdapter(list[SeriesResult])


def parse_series(raw: list[dict]) -> list[SeriesResult]:
    """Validate a list of plain dicts (e.g. a JSON column) into series variants."""
    return _SERIES_LIST_ADAPTER.validate_python(raw)


def dump_series(series: list[SeriesResult]) -> list[dict]:
    """Serialise series variants to JSON-compatible dicts."""
    return _SERIES_LIST_ADAPTER.dump_python(series, mode="json")
