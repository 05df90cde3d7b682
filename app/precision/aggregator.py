"""
Session aggregator.

Combines a session's raw series with the statistics engine into a full
:class:`~app.schemas.results.SessionResults`.  Results are not cached:
computing them is cheap, so callers recompute on every read and never
share the returned objects.

Validation
----------
The numeric functions never reject input.  :func:`validate_session` is
the boundary check the service layer runs before storing a session:
it reports series outside the protocol, duplicated series, variant
fields that disagree with the catalog and serve strips that break the
rotation rule.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence

from app.precision.protocol import PROTOCOL, get_series_spec, is_strip_allowed, serve_strip_history
from app.precision.stars import percent_to_stars
from app.precision.statistics import compute_precision_time, compute_stroke_stats, percent_of_ideal, radar_area
from app.schemas.protocol import PrecisionTimeStrategy, StdDevMode, TestType
from app.schemas.results import HistoryPoint, PlayerHistory, SessionResults
from app.schemas.session import TestSession

# ======================================================================
# Results
# ======================================================================


def compute_session_results(session: TestSession, std_dev_mode: StdDevMode | str = StdDevMode.SAMPLE,
                            precision_time_strategy: PrecisionTimeStrategy | str = PrecisionTimeStrategy.A, ) -> \
        SessionResults:
    """Compute stroke stats, radar figures and the precision-time series.

    Args:
        session: Session snapshot.
        std_dev_mode: ``sample`` or ``population``.
        precision_time_strategy: ``A`` or ``B``.

    Returns:
        A freshly built :class:`SessionResults`.
    """
    stats = compute_stroke_stats(session, std_dev_mode)
    values = [s.ave for s in stats]
    return SessionResults(session=session, stats=stats, radar_values=values, radar_area=radar_area(values),
                          percent_of_ideal=percent_of_ideal(values),
                          precision_time=compute_precision_time(session, precision_time_strategy), )


def compute_player_history(player_id: str, sessions: Iterable[TestSession],
                           std_dev_mode: StdDevMode | str = StdDevMode.SAMPLE,
                           precision_time_strategy: PrecisionTimeStrategy | str = PrecisionTimeStrategy.A, ) -> \
        PlayerHistory:
    """Trend of a player's completed sessions, oldest first, plus the best one."""
    owned = sorted((s for s in sessions if s.player_id == player_id and s.completed), key=lambda s: s.date)

    points: list[HistoryPoint] = []
    best: Optional[HistoryPoint] = None
    for session in owned:
        results = compute_session_results(session, std_dev_mode, precision_time_strategy)
        point = HistoryPoint(session_id=session.id, date=session.date, category=session.category,
                             percent_of_ideal=results.percent_of_ideal, radar_area=results.radar_area, )
        points.append(point)
        if best is None or point.percent_of_ideal > best.percent_of_ideal:
            best = point

    if best is None:
        return PlayerHistory(player_id=player_id, points=points)
    return PlayerHistory(player_id=player_id, points=points, best_session_id=best.session_id,
                         best_percent_of_ideal=best.percent_of_ideal,
                         best_stars=percent_to_stars(best.percent_of_ideal), )


# ======================================================================
# Boundary validation
# ======================================================================


def validate_session(series: Sequence, require_complete: bool = False) -> list[str]:
    """Check recorded series against the protocol.

    Args:
        series: Series variants of one session.
        require_complete: Also report protocol series that are missing.

    Returns:
        Human-readable problems; empty when the series are consistent.
    """
    problems: list[str] = []

    counts = Counter((TestType(s.test_type), s.series_index) for s in series)
    for (test_type, index), count in sorted(counts.items(), key=lambda item: (item[0][0].value, item[0][1])):
        if count > 1:
            problems.append(f"{test_type.value} series {index + 1} recorded {count} times")

    for s in series:
        spec = get_series_spec(s.test_type, s.series_index)
        if spec is None:
            problems.append(f"{TestType(s.test_type).value} series {s.series_index + 1} is outside the protocol "
                            f"({len(PROTOCOL[TestType(s.test_type)])} series)")
            continue
        if spec.direction is not None and getattr(s, "direction", None) != spec.direction:
            problems.append(f"{spec.test_type.value} series {s.series_index + 1} must be "
                            f"'{spec.direction.value}', got '{s.direction}'")
        if spec.serve_type is not None and (s.serve_type != spec.serve_type or s.side != spec.side):
            problems.append(f"serve series {s.series_index + 1} must be '{spec.serve_type.value}' from "
                            f"'{spec.side.value}'")

    strips = serve_strip_history(series)
    for i in range(2, len(strips)):
        if not is_strip_allowed(strips[:i], strips[i]):
            problems.append(f"serve strip '{strips[i].value}' chosen three times in a row at serve {i + 1}")

    if require_complete:
        for test_type, specs in PROTOCOL.items():
            missing = [spec.series_index + 1 for spec in specs if (test_type, spec.series_index) not in counts]
            if missing:
                problems.append(f"{test_type.value}: missing series {', '.join(str(m) for m in missing)}")

    return problems
