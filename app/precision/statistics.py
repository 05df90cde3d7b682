"""
Statistics engine: pure numeric transforms over recorded series.

Radar area
----------
The six stroke means are plotted as radii on six equally spaced axes in
the fixed order ``serve, forehand, combined, return, backhand, volley``.
The polygon area is the sum of the triangles between neighbouring
axes::

    A = 0.5 × Σ r_i × r_{(i+1) mod n} × sin(2π / n)

The shape is a regular hexagon only when all radii are equal, so axis
order matters.  A perfect session (all tens) gives ``150√3 ≈ 259.81``.

Because the area is quadratic in the radii, ``percent_of_ideal`` is not
linear in the average score: a session averaging 5/10 everywhere scores
25 %, not 50 %.

Precision over time
-------------------
Up to ten synthetic points pair the i-th forehand, i-th backhand and
i-th combined series:

- **Strategy A** (default): direct indexing.
- **Strategy B**: for ``i < floor(fh_count / 2)`` the forehand and
  backhand values are the mean of groundstroke series ``2i`` and
  ``2i + 1``; later points fall back to strategy A.

Missing inputs count as 0.  Every function returns 0 rather than
raising on empty input.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from app.schemas.protocol import Direction, PrecisionTimeStrategy, StdDevMode, StrokeName, TestType
from app.schemas.results import PrecisionTimePoint, StrokeStats
from app.schemas.session import TestSession

# ======================================================================
# Primitives
# ======================================================================


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty input."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def std_dev(values: Sequence[float], mode: StdDevMode | str = StdDevMode.SAMPLE) -> float:
    """Standard deviation; 0 for fewer than two values.

    ``sample`` divides by ``n - 1``, ``population`` by ``n``.
    """
    n = len(values)
    if n < 2:
        return 0.0
    avg = mean(values)
    squared = sum((v - avg) ** 2 for v in values)
    divisor = n - 1 if StdDevMode(mode) == StdDevMode.SAMPLE else n
    return math.sqrt(squared / divisor)


# ======================================================================
# Radar area
# ======================================================================


def radar_area(values: Sequence[float]) -> float:
    """Area of the polygon with radii *values* on equally spaced axes."""
    n = len(values)
    if n == 0:
        return 0.0
    sin_angle = math.sin(2 * math.pi / n)
    total = 0.0
    for i in range(n):
        total += values[i] * values[(i + 1) % n] * sin_angle
    return 0.5 * total


RADAR_N = 6
IDEAL_RADAR_VALUES: list[float] = [10.0] * RADAR_N
IDEAL_AREA: float = radar_area(IDEAL_RADAR_VALUES)


def percent_of_ideal(values: Sequence[float]) -> float:
    """Radar area as a percentage of the perfect session's area."""
    if IDEAL_AREA == 0:
        return 0.0
    return radar_area(values) / IDEAL_AREA * 100


# ======================================================================
# Stroke statistics
# ======================================================================

STROKE_LABELS: dict[StrokeName, str] = {
    StrokeName.SERVE: "Servizio",
    StrokeName.FOREHAND: "Forehand",
    StrokeName.COMBINED: "Combined",
    StrokeName.RETURN: "Return",
    StrokeName.BACKHAND: "Backhand",
    StrokeName.VOLLEY: "Volley",
}

# (test type, direction filter) per radar stroke, in radar order.
# Serve and combined match on test type alone.
STROKE_FILTERS: list[tuple[StrokeName, TestType, Optional[Direction]]] = [
    (StrokeName.SERVE, TestType.SERVE, None),
    (StrokeName.FOREHAND, TestType.GROUNDSTROKES, Direction.FH_CROSS),
    (StrokeName.COMBINED, TestType.COMBINED, None),
    (StrokeName.RETURN, TestType.RETURN, None),
    (StrokeName.BACKHAND, TestType.GROUNDSTROKES, Direction.BH_CROSS),
    (StrokeName.VOLLEY, TestType.VOLLEY, None),
]


def _select(series: Sequence, test_type: TestType, direction: Optional[Direction] = None) -> list:
    """Series of *test_type* (and *direction*, if given) sorted by index."""
    selected = [s for s in series if
                s.test_type == test_type and (direction is None or getattr(s, "direction", None) == direction)]
    return sorted(selected, key=lambda s: s.series_index)


def compute_stroke_stats(session: TestSession,
                         mode: StdDevMode | str = StdDevMode.SAMPLE, ) -> list[StrokeStats]:
    """Mean and deviation for each of the six strokes, in radar order."""
    stats: list[StrokeStats] = []
    for stroke, test_type, direction in STROKE_FILTERS:
        scores = [float(s.score) for s in _select(session.series, test_type, direction)]
        stats.append(StrokeStats(stroke=stroke, label=STROKE_LABELS[stroke], scores=scores, ave=mean(scores),
                                 dev=std_dev(scores, mode), ))
    return stats


# ======================================================================
# Precision over time
# ======================================================================

MAX_PRECISION_POINTS = 10


def _score_at(series: Sequence, index: int) -> float:
    if 0 <= index < len(series):
        return float(series[index].score)
    return 0.0


def compute_precision_time(session: TestSession,
                           strategy: PrecisionTimeStrategy | str = PrecisionTimeStrategy.A, ) -> list[
    PrecisionTimePoint]:
    """Build up to ten forehand / backhand / combined points."""
    strategy = PrecisionTimeStrategy(strategy)
    fh_series = _select(session.series, TestType.GROUNDSTROKES, Direction.FH_CROSS)
    bh_series = _select(session.series, TestType.GROUNDSTROKES, Direction.BH_CROSS)
    combined_series = _select(session.series, TestType.COMBINED)

    length = min(len(fh_series), len(bh_series), len(combined_series), MAX_PRECISION_POINTS)
    paired_points = len(fh_series) // 2

    points: list[PrecisionTimePoint] = []
    for i in range(length):
        if strategy == PrecisionTimeStrategy.B and i < paired_points:
            fh = mean([_score_at(fh_series, 2 * i), _score_at(fh_series, 2 * i + 1)])
            bh = mean([_score_at(bh_series, 2 * i), _score_at(bh_series, 2 * i + 1)])
        else:
            fh = _score_at(fh_series, i)
            bh = _score_at(bh_series, i)
        combined = _score_at(combined_series, i)
        points.append(PrecisionTimePoint(index=i + 1, fh=fh, bh=bh, combined=combined, mean=mean([fh, bh, combined]), ))
    return points
