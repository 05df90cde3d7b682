"""What does a club afternoon of precision tests look like?

Builds four synthetic complete sessions, prints each player's radar
figures and plays 1v1, 2v2 and a round robin between them.  Nothing is
written to the database.

Usage:
    python scripts/simulate_challenge.py [seed]
"""

import datetime
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.precision import compute_session_results, head_to_head, round_robin, team_match
from app.precision.protocol import PROTOCOL, allowed_strips
from app.precision.stars import STAR_LABELS, percent_to_stars, render_stars
from app.schemas.protocol import Category, TestType
from app.schemas.series import parse_series
from app.schemas.session import TestSession

TODAY = datetime.date(2026, 10, 17)

# (player, category, mean hits per series)
PLAYERS = [
    ("Giulia Bianchi", Category.SECONDA, 7.5),
    ("Marco Rossi", Category.SECONDA, 6.0),
    ("Luca Verdi", Category.TERZA, 5.0),
    ("Sara Neri", Category.TERZA, 4.0),
]


def build_session(rng, index, name, category, level):
    """Fill every protocol series with a score drawn around *level*."""
    series = []
    strips = []
    for test_type, specs in PROTOCOL.items():
        for spec in specs:
            score = max(0, min(10, round(rng.gauss(level, 1.5))))
            entry = {"test_type": test_type.value, "series_index": spec.series_index, "score": score}
            if test_type == TestType.SERVE:
                strip = rng.choice(allowed_strips(strips))
                strips.append(strip)
                entry.update(serve_type=spec.serve_type.value, side=spec.side.value, target_strip=strip.value)
            else:
                entry["direction"] = spec.direction.value
            series.append(entry)
    return TestSession(id=f"demo-{index}", player_id=f"player-{index}", player_name=name, date=TODAY,
                       category=category, coach="Demo", series=parse_series(series), )


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 7
    rng = random.Random(seed)

    results = [compute_session_results(build_session(rng, i, name, category, level))
               for i, (name, category, level) in enumerate(PLAYERS)]

    print()
    print("=" * 65)
    print(f"  Tennis Precision Test — {TODAY.strftime('%A %d %B %Y')}")
    print("=" * 65)
    print()

    print(f"  {'Giocatore':<18} {'Serv':>5} {'FH':>5} {'Comb':>5} {'Ret':>5} {'BH':>5} {'Vol':>5} {'%':>7}")
    print("  " + "-" * 63)
    for r in results:
        values = " ".join(f"{v:>5.2f}" for v in r.radar_values)
        print(f"  {r.session.player_name:<18} {values} {r.percent_of_ideal:>6.1f}%")
    print()

    for r in results:
        stars = percent_to_stars(r.percent_of_ideal)
        print(f"  {r.session.player_name:<18} {render_stars(stars)}  {STAR_LABELS[stars]}")
    print()

    # ── 1v1 ─────────────────────────────────────────────────────────
    match = head_to_head(results[0], results[1])
    print("  1v1:", f"{match.name_1} {match.strokes_1} - {match.strokes_2} {match.name_2}")

    # ── 2v2 ─────────────────────────────────────────────────────────
    match = team_match(results[:2], results[2:])
    print("  2v2:", f"{match.name_1} {match.strokes_1} - {match.strokes_2} {match.name_2}")
    print()

    # ── Round robin ─────────────────────────────────────────────────
    table = round_robin(results)
    print("  Round robin:")
    print(f"  {'':<4} {'Giocatore':<18} {'Pt':>3} {'V':>3} {'P':>3} {'S':>3} {'%':>7}")
    print("  " + "-" * 45)
    for row in table.standings:
        print(f"  {row.marker:<4} {row.player_name:<18} {row.points:>3} {row.wins:>3} {row.draws:>3} "
              f"{row.losses:>3} {row.percent_of_ideal:>6.1f}%")
    print()


if __name__ == "__main__":
    main()
