"""
Tests for ISO 8601 duration parsing and prep/cook/total reconciliation
"""

import pytest

from recipe_parser.parsers.duration_parser import parse_duration, reconcile_times


class TestParseDuration:
    """Duration strings to whole minutes"""

    @pytest.mark.parametrize("duration,expected", [
        ("PT15M", 15),
        ("PT1H30M", 90),
        ("PT2H", 120),
        ("P1DT2H30M", 1590),
        ("P1D", 1440),
        ("pt20m", 20),
        ("  PT10M  ", 10),
    ])
    def test_parses_components(self, duration, expected):
        assert parse_duration(duration) == expected

    def test_seconds_round_up(self):
        assert parse_duration("PT45S") == 1
        assert parse_duration("PT1M30S") == 2
        assert parse_duration("PT60S") == 1

    @pytest.mark.parametrize("duration", [None, "", "PT0M", "P0D", "soon", 15, ["PT5M"]])
    def test_missing_zero_or_unrecognized_is_none(self, duration):
        assert parse_duration(duration) is None


class TestReconcileTimes:
    """Deriving the missing sub-time from the total"""

    def test_both_known_ignores_total(self):
        assert reconcile_times("PT10M", "PT20M", "PT2H") == {"prep_minutes": 10, "cook_minutes": 20}

    def test_missing_cook_derived_from_total(self):
        assert reconcile_times("PT15M", None, "PT45M") == {"prep_minutes": 15, "cook_minutes": 30}

    def test_missing_prep_derived_from_total(self):
        assert reconcile_times(None, "PT1H", "PT1H20M") == {"prep_minutes": 20, "cook_minutes": 60}

    def test_total_alone_gives_nothing(self):
        assert reconcile_times(None, None, "PT45M") == {"prep_minutes": None, "cook_minutes": None}

    def test_no_total_keeps_what_is_known(self):
        assert reconcile_times("PT5M", None, None) == {"prep_minutes": 5, "cook_minutes": None}

    def test_sub_time_larger_than_total_goes_negative(self):
        result = reconcile_times("PT60M", None, "PT45M")
        assert result == {"prep_minutes": 60, "cook_minutes": -15}
