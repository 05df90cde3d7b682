"""Tests for the tagged series variants."""

import pytest
from pydantic import ValidationError

from app.schemas.series import GroundstrokeSeries, ServeSeries, VolleySeries, dump_series, parse_series


class TestParseSeries:
    def test_discriminated_by_test_type(self):
        series = parse_series([
            {"test_type": "groundstrokes", "series_index": 0, "score": 7, "direction": "fh_cross"},
            {"test_type": "serve", "series_index": 1, "score": 4, "serve_type": "seconda", "side": "left",
             "target_strip": "wide"},
            {"test_type": "volley", "series_index": 3, "score": 10, "direction": "bh_volley"},
        ])

        assert [type(s) for s in series] == [GroundstrokeSeries, ServeSeries, VolleySeries]
        assert series[1].target_strip.value == "wide"

    def test_variant_fields_only(self):
        serve = parse_series([{"test_type": "serve", "series_index": 0, "score": 5, "serve_type": "prima",
                               "side": "right", "target_strip": "T"}])[0]
        assert not hasattr(serve, "direction")

    @pytest.mark.parametrize("entry", [
        {"test_type": "groundstrokes", "series_index": 0, "score": 11, "direction": "fh_cross"},
        {"test_type": "groundstrokes", "series_index": 0, "score": -1, "direction": "fh_cross"},
        {"test_type": "groundstrokes", "series_index": -1, "score": 3, "direction": "fh_cross"},
        {"test_type": "groundstrokes", "series_index": 0, "score": 3, "direction": "lungolinea"},
        {"test_type": "serve", "series_index": 0, "score": 3, "serve_type": "prima", "side": "right"},
        {"test_type": "smash", "series_index": 0, "score": 3},
    ])
    def test_rejects_invalid(self, entry):
        with pytest.raises(ValidationError):
            parse_series([entry])

    def test_frozen(self):
        series = GroundstrokeSeries(series_index=0, score=5, direction="fh_cross")
        with pytest.raises(ValidationError):
            series.score = 6


def test_dump_is_json_compatible():
    raw = [{"test_type": "serve", "series_index": 0, "score": 5, "serve_type": "prima", "side": "right",
            "target_strip": "body"}]

    assert dump_series(parse_series(raw)) == raw
