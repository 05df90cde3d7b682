"""Shared fixtures: synthetic sessions built from the protocol catalog."""

import datetime

import pytest

from app.precision.protocol import PROTOCOL
from app.schemas.protocol import Direction, TargetStrip, TestType
from app.schemas.series import parse_series
from app.schemas.session import TestSession

# Default strips never repeat three times in a row
SERVE_STRIPS = ["T", "body", "wide", "T", "body", "wide"]

# Radar stroke -> (test type, direction filter)
_STROKES = {
    "serve": (TestType.SERVE, None),
    "forehand": (TestType.GROUNDSTROKES, Direction.FH_CROSS),
    "combined": (TestType.COMBINED, None),
    "return": (TestType.RETURN, None),
    "backhand": (TestType.GROUNDSTROKES, Direction.BH_CROSS),
    "volley": (TestType.VOLLEY, None),
}


def _stroke_of(spec) -> str:
    for stroke, (test_type, direction) in _STROKES.items():
        if spec.test_type == test_type and (direction is None or spec.direction == direction):
            return stroke
    raise AssertionError(f"no stroke for {spec}")


def build_series(scores: dict | None = None, default: int = 5, strips: list | None = None,
                 skip: tuple = ()) -> list[dict]:
    """Every protocol series as plain dicts, scored per radar stroke.

    Args:
        scores: Fixed score per stroke name; strokes not given use *default*.
        strips: Serve strips in serve order.
        skip: Sub-tests to leave out entirely.
    """
    scores = scores or {}
    strips = strips or SERVE_STRIPS
    series = []
    for test_type, specs in PROTOCOL.items():
        if test_type in skip:
            continue
        for spec in specs:
            entry = {"test_type": test_type.value, "series_index": spec.series_index,
                     "score": scores.get(_stroke_of(spec), default)}
            if test_type == TestType.SERVE:
                entry.update(serve_type=spec.serve_type.value, side=spec.side.value,
                             target_strip=TargetStrip(strips[spec.series_index]).value)
            else:
                entry["direction"] = spec.direction.value
            series.append(entry)
    return series


@pytest.fixture
def make_session():
    """Factory for :class:`TestSession` snapshots."""

    def factory(session_id: str = "s1", player_id: str = "p1", player_name: str = "Mario Rossi",
                category: str = "terza", date: datetime.date = datetime.date(2026, 5, 10), completed: bool = True,
                series: list | None = None, **kwargs) -> TestSession:
        if series is None:
            series = build_series(**kwargs)
        return TestSession(id=session_id, player_id=player_id, player_name=player_name, date=date, category=category,
                           coach="Coach", completed=completed, series=parse_series(series), )

    return factory


@pytest.fixture
def make_series():
    """Factory for raw series payloads, see :func:`build_series`."""
    return build_series
