"""
Challenges and rankings built on precomputed session results.

Nothing here touches raw series: every function works on
:class:`~app.schemas.results.SessionResults`.

Stroke wins
-----------
Two sides are compared stroke by stroke on their averages.  A strictly
greater average wins the stroke, equal averages award nobody.  The side
with more stroke wins takes the match; equal counts are a draw.
Percent of ideal is reported for both sides but never decides a match.

Modes
-----
- **1v1**: two sessions.
- **2v2**: exactly two sessions per team; a team's value for a stroke
  is the mean of the teammates' averages for that stroke.
- **Round robin**: every pair of two to four sessions plays a 1v1.  Win 2
  points, draw 1, loss 0.  Standings sort by points, then by the
  session's own percent of ideal.

Leaderboards
------------
A category leaderboard sorts completed sessions by percent of ideal.
The general leaderboard keeps, per player and per category, the best
percent of ideal, then ranks players by their single best value.
Players are keyed by ``player_id``; keying by trimmed, case-insensitive
name is available for legacy data where ids are not reliable.
"""

from __future__ import annotations

from itertools import combinations
from typing import Literal, Sequence

from app.precision.statistics import mean
from app.schemas.comparison import (
    GeneralLeaderboardEntry,
    LeaderboardEntry,
    MatchResult,
    RoundRobinMatch,
    RoundRobinResult,
    Standing,
    StrokeComparison,
    Winner,
)
from app.schemas.protocol import Category
from app.schemas.results import SessionResults

MEDALS = ["🥇", "🥈", "🥉"]

POINTS_WIN = 2
POINTS_DRAW = 1
POINTS_LOSS = 0

TEAM_SIZE = 2

# Free-for-all is played by 2 to 4 sessions, at most C(4, 2) = 6 matches
MAX_ROUND_ROBIN = 4


class ComparisonError(ValueError):
    """Raised when the supplied sessions cannot form the requested challenge."""


def rank_marker(rank: int) -> str:
    """Medal for the podium (0-based *rank* 0..2), 1-based number after."""
    if 0 <= rank < len(MEDALS):
        return MEDALS[rank]
    return str(rank + 1)


def _winner(value_1: float, value_2: float) -> Winner:
    if value_1 > value_2:
        return 1
    if value_2 > value_1:
        return 2
    return 0


# ======================================================================
# Stroke-by-stroke comparison
# ======================================================================


def compare_strokes(values_1: Sequence[float], values_2: Sequence[float],
                    template: SessionResults, ) -> tuple[list[StrokeComparison], int, int, Winner]:
    """Compare two radar vectors.

    Args:
        values_1: Six averages of side 1, radar order.
        values_2: Six averages of side 2, radar order.
        template: Results whose ``stats`` provide stroke names and labels.

    Returns:
        ``(rows, strokes_1, strokes_2, winner)``
    """
    rows = [StrokeComparison(stroke=stat.stroke, label=stat.label, value_1=v1, value_2=v2, winner=_winner(v1, v2), )
            for stat, v1, v2 in zip(template.stats, values_1, values_2)]
    strokes_1 = sum(1 for row in rows if row.winner == 1)
    strokes_2 = sum(1 for row in rows if row.winner == 2)
    return rows, strokes_1, strokes_2, _winner(strokes_1, strokes_2)


def head_to_head(result_1: SessionResults, result_2: SessionResults) -> MatchResult:
    """1v1 challenge between two sessions."""
    rows, strokes_1, strokes_2, winner = compare_strokes(result_1.radar_values, result_2.radar_values, result_1)
    return MatchResult(name_1=result_1.session.player_name, name_2=result_2.session.player_name, strokes=rows,
                       strokes_1=strokes_1, strokes_2=strokes_2, winner=winner,
                       percent_of_ideal_1=result_1.percent_of_ideal, percent_of_ideal_2=result_2.percent_of_ideal,
                       session_ids=[result_1.session.id, result_2.session.id], )


def _team_values(team: Sequence[SessionResults]) -> list[float]:
    return [mean([member.radar_values[i] for member in team]) for i in range(len(team[0].radar_values))]


def _team_name(team: Sequence[SessionResults]) -> str:
    return " & ".join(member.session.player_name for member in team)


def team_match(team_1: Sequence[SessionResults], team_2: Sequence[SessionResults]) -> MatchResult:
    """2v2 challenge on per-stroke team averages.

    Raises:
        ComparisonError: if either team does not have exactly two sessions.
    """
    for number, team in ((1, team_1), (2, team_2)):
        if len(team) != TEAM_SIZE:
            raise ComparisonError(f"Team {number} needs exactly {TEAM_SIZE} sessions, got {len(team)}")

    values_1 = _team_values(team_1)
    values_2 = _team_values(team_2)
    rows, strokes_1, strokes_2, winner = compare_strokes(values_1, values_2, team_1[0])
    return MatchResult(name_1=_team_name(team_1), name_2=_team_name(team_2), strokes=rows, strokes_1=strokes_1,
                       strokes_2=strokes_2, winner=winner,
                       percent_of_ideal_1=mean([m.percent_of_ideal for m in team_1]),
                       percent_of_ideal_2=mean([m.percent_of_ideal for m in team_2]),
                       session_ids=[m.session.id for m in (*team_1, *team_2)], )


# ======================================================================
# Round robin
# ======================================================================


def round_robin(results: Sequence[SessionResults]) -> RoundRobinResult:
    """Free-for-all: every pair plays a 1v1, standings by points.

    Raises:
        ComparisonError: with fewer than two or more than four sessions.
    """
    if not 2 <= len(results) <= MAX_ROUND_ROBIN:
        raise ComparisonError(f"A round robin needs 2 to {MAX_ROUND_ROBIN} sessions, got {len(results)}")

    points = [0] * len(results)
    wins = [0] * len(results)
    draws = [0] * len(results)
    losses = [0] * len(results)
    matches: list[RoundRobinMatch] = []

    for a, b in combinations(range(len(results)), 2):
        match = head_to_head(results[a], results[b])
        matches.append(RoundRobinMatch(session_id_a=results[a].session.id, session_id_b=results[b].session.id,
                                       name_a=match.name_1, name_b=match.name_2, strokes_a=match.strokes_1,
                                       strokes_b=match.strokes_2, winner=match.winner, ))
        if match.winner == 1:
            points[a] += POINTS_WIN
            points[b] += POINTS_LOSS
            wins[a] += 1
            losses[b] += 1
        elif match.winner == 2:
            points[b] += POINTS_WIN
            points[a] += POINTS_LOSS
            wins[b] += 1
            losses[a] += 1
        else:
            points[a] += POINTS_DRAW
            points[b] += POINTS_DRAW
            draws[a] += 1
            draws[b] += 1

    # Stable: full ties keep input order
    order = sorted(range(len(results)), key=lambda i: (-points[i], -results[i].percent_of_ideal))
    standings = [Standing(rank=rank, marker=rank_marker(rank), session_id=results[i].session.id,
                          player_id=results[i].session.player_id, player_name=results[i].session.player_name,
                          points=points[i], wins=wins[i], draws=draws[i], losses=losses[i],
                          percent_of_ideal=results[i].percent_of_ideal, ) for rank, i in enumerate(order)]
    return RoundRobinResult(matches=matches, standings=standings)


# ======================================================================
# Leaderboards
# ======================================================================


def category_leaderboard(results: Sequence[SessionResults], category: Category | str) -> list[LeaderboardEntry]:
    """Completed sessions of *category* sorted by percent of ideal."""
    category = Category(category)
    rows = [r for r in results if r.session.completed and r.session.category == category]
    rows.sort(key=lambda r: -r.percent_of_ideal)
    return [LeaderboardEntry(rank=rank, marker=rank_marker(rank), session_id=r.session.id,
                             player_id=r.session.player_id, player_name=r.session.player_name, date=r.session.date,
                             category=r.session.category, percent_of_ideal=r.percent_of_ideal, ) for rank, r in
            enumerate(rows)]


def _player_key(result: SessionResults, key: str) -> str:
    if key == "name":
        return result.session.player_name.strip().lower()
    return result.session.player_id


def general_leaderboard(results: Sequence[SessionResults],
                        key: Literal["player_id", "name"] = "player_id", ) -> list[GeneralLeaderboardEntry]:
    """Best percent of ideal per player and category, players ranked by their overall best."""
    by_player: dict[str, dict] = {}
    for r in results:
        if not r.session.completed:
            continue
        row = by_player.setdefault(_player_key(r, key), {"player_id": r.session.player_id if key == "player_id"
                                                         else None, "player_name": r.session.player_name,
                                                         "best_by_category": {}, })
        category = Category(r.session.category)
        previous = row["best_by_category"].get(category)
        if previous is None or r.percent_of_ideal > previous:
            row["best_by_category"][category] = r.percent_of_ideal

    rows = [dict(row, best=max(row["best_by_category"].values())) for row in by_player.values()]
    rows.sort(key=lambda row: -row["best"])
    return [GeneralLeaderboardEntry(rank=rank, marker=rank_marker(rank), **row) for rank, row in enumerate(rows)]
