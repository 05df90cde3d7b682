"""Tests for the statistics engine.

Pure numeric functions, no database.  Sessions come from the
``make_session`` fixture.
"""

import math

import pytest

from app.precision.statistics import (
    IDEAL_AREA,
    compute_precision_time,
    compute_stroke_stats,
    mean,
    percent_of_ideal,
    radar_area,
    std_dev,
)
from app.schemas.protocol import StrokeName, TestType

FIXED_SCORES = {"serve": 8, "forehand": 7, "combined": 5, "return": 4, "backhand": 6, "volley": 9}


# ======================================================================
# mean / std_dev
# ======================================================================


class TestMean:
    @pytest.mark.parametrize("values, expected", [([], 0.0), ([7], 7.0), ([2, 4, 6], 4.0)])
    def test_values(self, values, expected):
        assert mean(values) == expected


class TestStdDev:
    @pytest.mark.parametrize("values", [[], [3]])
    def test_fewer_than_two_values_is_zero(self, values):
        assert std_dev(values, "sample") == 0.0
        assert std_dev(values, "population") == 0.0

    def test_sample(self):
        assert std_dev([2, 4, 4, 4, 5, 5, 7, 9], "sample") == pytest.approx(2.138, abs=1e-3)

    def test_population(self):
        assert std_dev([2, 4, 4, 4, 5, 5, 7, 9], "population") == pytest.approx(2.0)

    def test_default_mode_is_sample(self):
        assert std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == std_dev([2, 4, 4, 4, 5, 5, 7, 9], "sample")

    def test_identical_values(self):
        assert std_dev([6, 6, 6, 6]) == 0.0


# ======================================================================
# Radar area
# ======================================================================


class TestRadarArea:
    def test_zero(self):
        assert radar_area([0] * 6) == 0.0

    def test_perfect_session(self):
        assert radar_area([10] * 6) == pytest.approx(150 * math.sqrt(3))
        assert IDEAL_AREA == pytest.approx(259.807, abs=1e-3)

    def test_quadratic_scaling(self):
        assert radar_area([4] * 6) == pytest.approx(radar_area([8] * 6) / 4)

    def test_order_matters(self):
        assert radar_area([10, 10, 0, 0, 10, 10]) != pytest.approx(radar_area([10, 0, 10, 0, 10, 10]))

    def test_empty(self):
        assert radar_area([]) == 0.0


class TestPercentOfIdeal:
    @pytest.mark.parametrize("value, expected", [(10, 100.0), (0, 0.0), (5, 25.0)])
    def test_uniform_values(self, value, expected):
        assert percent_of_ideal([value] * 6) == pytest.approx(expected)


# ======================================================================
# Stroke statistics
# ======================================================================


class TestStrokeStats:
    def test_fixed_scores(self, make_session):
        stats = compute_stroke_stats(make_session(scores=FIXED_SCORES))

        assert [s.stroke for s in stats] == list(StrokeName)
        assert {s.stroke.value: s.ave for s in stats} == FIXED_SCORES
        assert all(s.dev == 0 for s in stats)

    def test_series_counts(self, make_session):
        stats = {s.stroke: s for s in compute_stroke_stats(make_session())}

        assert len(stats[StrokeName.SERVE].scores) == 6
        assert len(stats[StrokeName.FOREHAND].scores) == 10
        assert len(stats[StrokeName.BACKHAND].scores) == 10
        assert len(stats[StrokeName.COMBINED].scores) == 10

    def test_labels(self, make_session):
        stats = compute_stroke_stats(make_session())
        assert stats[0].label == "Servizio"

    def test_missing_sub_test_degrades_to_zero(self, make_session):
        stats = {s.stroke: s for s in compute_stroke_stats(make_session(skip=(TestType.VOLLEY,)))}

        assert stats[StrokeName.VOLLEY].scores == []
        assert stats[StrokeName.VOLLEY].ave == 0.0
        assert stats[StrokeName.VOLLEY].dev == 0.0

    def test_scores_sorted_by_series_index(self, make_session, make_series):
        series = list(reversed(make_series()))
        for entry in series:
            if entry["test_type"] == "volley":
                entry["score"] = entry["series_index"]
        stats = {s.stroke: s for s in compute_stroke_stats(make_session(series=series))}

        assert stats[StrokeName.VOLLEY].scores == [float(i) for i in range(10)]

    def test_population_mode(self, make_session, make_series):
        series = make_series()
        for entry in series:
            if entry["test_type"] == "serve":
                entry["score"] = [2, 4, 4, 4, 5, 7][entry["series_index"]]
        session = make_session(series=series)

        sample = compute_stroke_stats(session, "sample")[0]
        population = compute_stroke_stats(session, "population")[0]
        assert sample.dev > population.dev > 0


# ======================================================================
# Precision over time
# ======================================================================


class TestPrecisionTime:
    def test_strategy_a_fixed_scores(self, make_session):
        points = compute_precision_time(make_session(scores=FIXED_SCORES), "A")

        assert len(points) == 10
        for i, point in enumerate(points):
            assert point.index == i + 1
            assert (point.fh, point.bh, point.combined, point.mean) == (7, 6, 5, 6)

    def test_length_limited_by_shortest_series(self, make_session):
        assert compute_precision_time(make_session(skip=(TestType.COMBINED,))) == []

    def test_strategy_b_pairs_then_falls_back(self, make_session, make_series):
        series = make_series()
        for entry in series:
            if entry["test_type"] == "groundstrokes":
                # fh series scores 0..9, bh series 10..1
                position = entry["series_index"] // 2
                entry["score"] = position if entry["direction"] == "fh_cross" else 10 - position
        session = make_session(series=series)

        points = compute_precision_time(session, "B")

        assert len(points) == 10
        # i < 5: mean of fh[2i], fh[2i+1]
        assert points[0].fh == pytest.approx(0.5)
        assert points[0].bh == pytest.approx(9.5)
        assert points[4].fh == pytest.approx(8.5)
        # i >= 5: direct indexing
        assert points[5].fh == 5
        assert points[5].bh == 5
        assert points[9].fh == 9

    @pytest.mark.parametrize("strategy", ["A", "B"])
    def test_mean_is_mean_of_components(self, make_session, strategy):
        points = compute_precision_time(make_session(default=3, scores={"forehand": 9}), strategy)
        for point in points:
            assert point.mean == pytest.approx((point.fh + point.bh + point.combined) / 3)
