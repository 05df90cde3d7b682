"""Tests for the protocol catalog and the serve strip rule."""

import pytest

from app.precision.protocol import (
    CATEGORY_TARGETS,
    PROTOCOL,
    TOTAL_SERIES,
    TOTAL_SHOTS,
    WIZARD_STEPS,
    allowed_strips,
    get_series_spec,
    is_strip_allowed,
    serve_strip_history,
)
from app.schemas.protocol import Category, Direction, ServeType, Side, TargetStrip, TestType
from app.schemas.series import parse_series


class TestCatalog:
    @pytest.mark.parametrize("test_type, size", [
        (TestType.GROUNDSTROKES, 20),
        (TestType.COMBINED, 10),
        (TestType.RETURN, 10),
        (TestType.SERVE, 6),
        (TestType.VOLLEY, 10),
    ])
    def test_sizes(self, test_type, size):
        assert len(PROTOCOL[test_type]) == size

    def test_totals(self):
        assert TOTAL_SERIES == 56
        assert TOTAL_SHOTS == 560

    @pytest.mark.parametrize("test_type, even, odd", [
        (TestType.GROUNDSTROKES, Direction.FH_CROSS, Direction.BH_CROSS),
        (TestType.COMBINED, Direction.LUNGOLINEA, Direction.DIAGONALE),
        (TestType.RETURN, Direction.RIGHT, Direction.LEFT),
        (TestType.VOLLEY, Direction.FH_VOLLEY, Direction.BH_VOLLEY),
    ])
    def test_alternation(self, test_type, even, odd):
        for spec in PROTOCOL[test_type]:
            assert spec.direction == (even if spec.series_index % 2 == 0 else odd)

    def test_serve_alternation(self):
        for spec in PROTOCOL[TestType.SERVE]:
            if spec.series_index % 2 == 0:
                assert (spec.serve_type, spec.side) == (ServeType.PRIMA, Side.RIGHT)
            else:
                assert (spec.serve_type, spec.side) == (ServeType.SECONDA, Side.LEFT)
            assert spec.direction is None

    def test_series_index_is_position(self):
        for specs in PROTOCOL.values():
            assert [s.series_index for s in specs] == list(range(len(specs)))

    def test_wizard_order(self):
        assert list(PROTOCOL) == [TestType.GROUNDSTROKES, TestType.COMBINED, TestType.RETURN, TestType.SERVE,
                                  TestType.VOLLEY]
        assert [step.id for step in WIZARD_STEPS] == ["meta", "groundstrokes", "combined", "return", "serve",
                                                       "volley", "review"]

    def test_get_series_spec(self):
        assert get_series_spec("groundstrokes", 3).direction == Direction.BH_CROSS
        assert get_series_spec(TestType.SERVE, 6) is None
        assert get_series_spec(TestType.VOLLEY, -1) is None

    def test_category_targets(self):
        assert set(CATEGORY_TARGETS) == {Category.TERZA, Category.SECONDA, Category.PRIMA}


class TestStripRule:
    @pytest.mark.parametrize("previous, proposed, expected", [
        (["T", "T"], "T", False),
        (["T", "T"], "body", True),
        (["T", "body"], "T", True),
        (["T", "T", "body", "T", "T"], "T", False),
        (["T", "T", "body", "T", "body"], "T", True),
        ([], "wide", True),
        (["wide"], "wide", True),
    ])
    def test_is_strip_allowed(self, previous, proposed, expected):
        assert is_strip_allowed(previous, proposed) is expected

    def test_allowed_strips(self):
        assert allowed_strips(["body", "body"]) == [TargetStrip.T, TargetStrip.WIDE]
        assert allowed_strips(["T"]) == [TargetStrip.T, TargetStrip.BODY, TargetStrip.WIDE]

    def test_serve_strip_history(self, make_series):
        series = parse_series(list(reversed(make_series(strips=["wide", "T", "T", "body", "wide", "wide"]))))

        assert serve_strip_history(series) == [TargetStrip.WIDE, TargetStrip.T, TargetStrip.T, TargetStrip.BODY,
                                               TargetStrip.WIDE, TargetStrip.WIDE]
        assert serve_strip_history(series, before_index=3) == [TargetStrip.WIDE, TargetStrip.T, TargetStrip.T]
