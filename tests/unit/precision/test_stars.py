"""Tests for the star rating."""

import pytest

from app.precision.stars import STAR_LABELS, percent_to_stars, render_stars


@pytest.mark.parametrize("pct, stars", [
    (100.0, 5),
    (80.0, 5),
    (79.99, 4),
    (65.0, 4),
    (50.0, 3),
    (35.0, 2),
    (34.9, 1),
    (0.0, 1),
])
def test_percent_to_stars(pct, stars):
    assert percent_to_stars(pct) == stars


def test_render_stars():
    assert render_stars(3) == "★★★☆☆"
    assert render_stars(5) == "★★★★★"


def test_every_rating_has_a_label():
    assert [STAR_LABELS[n] for n in range(1, 6)] == ["Iniziale", "Base", "Intermedio", "Avanzato", "Eccellente"]
