"""Star rating derived from the percent of the ideal radar area."""

# (minimum percent, stars), best first
_STAR_THRESHOLDS: list[tuple[float, int]] = [(80.0, 5), (65.0, 4), (50.0, 3), (35.0, 2)]

STAR_LABELS: dict[int, str] = {
    1: "Iniziale",
    2: "Base",
    3: "Intermedio",
    4: "Avanzato",
    5: "Eccellente",
}


def percent_to_stars(pct: float) -> int:
    """Map a 0-100 percent of ideal to 1-5 stars."""
    for threshold, stars in _STAR_THRESHOLDS:
        if pct >= threshold:
            return stars
    return 1


def render_stars(n: int, max_stars: int = 5) -> str:
    return "★" * n + "☆" * (max_stars - n)
