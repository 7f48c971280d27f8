"""Tests for the prize threshold filter"""

import math

import pytest
from reality_stats.errors import InvalidArgumentError
from reality_stats.reports.threshold import (
    build_threshold_report,
    filter_label,
    parse_threshold,
    percent_above,
)


class TestParseThreshold:
    """Test threshold validation"""

    @pytest.mark.parametrize("value, expected", [
        (0, 0.0),
        (50000, 50000.0),
        (12.5, 12.5),
        ("100000", 100000.0),
        (" 2500.5 ", 2500.5),
    ])
    def test_valid_thresholds(self, value, expected):
        """Test numbers and numeric strings are accepted"""
        assert parse_threshold(value) == expected

    @pytest.mark.parametrize("value", [
        -1, "-0.5", "abc", "", None, True, float("nan"), float("inf"), "inf", [10],
    ])
    def test_invalid_thresholds(self, value):
        """Test non-numeric, negative and non-finite thresholds are rejected"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_threshold(value)

        assert exc_info.value.argument == "threshold"


class TestPercentAbove:
    """Test percentage above threshold"""

    def test_percentage(self):
        assert percent_above(150, 100) == "50.00%"

    def test_equal_to_threshold(self):
        assert percent_above(100, 100) == "0.00%"

    def test_zero_threshold_is_undefined(self):
        """Test a zero threshold gives None instead of dividing by zero"""
        assert percent_above(500, 0) is None


class TestFilterLabel:

    def test_whole_number(self):
        assert filter_label(50000.0) == "prizes >= 50,000"

    def test_fraction(self):
        assert filter_label(1234.5) == "prizes >= 1,234.5"


class TestBuildThresholdReport:
    """Test the threshold report"""

    def test_matches_sorted_by_value(self, shows):
        """Test matches are ordered highest first, ties in encounter order"""
        report = build_threshold_report(shows, 100000)

        assert [(m.participant, m.value) for m in report.matches] == [
            ("Juliette", 1500000),
            ("Jojo", 1500000),
            ("Nadja", 500000),
        ]

    def test_match_annotations(self, shows):
        """Test each match carries where it was won"""
        match = build_threshold_report(shows, 100000).matches[2]

        assert match.broadcaster == "Record"
        assert match.show == "Ilha Record"
        assert match.participant_age == 36
        assert match.description == "Premio final"
        assert match.date_received == "2021-09-23"
        assert match.percent_above_threshold == "400.00%"

    def test_value_equal_to_threshold_matches(self, shows):
        """Test the threshold itself is included"""
        report = build_threshold_report(shows, 500000)

        assert report.matches[-1].value == 500000
        assert report.matches[-1].percent_above_threshold == "0.00%"

    def test_summary(self, shows):
        """Test summary statistics over the matches"""
        summary = build_threshold_report(shows, 100000).summary

        assert summary.count == 3
        assert summary.threshold == 100000.0
        assert summary.max_value == 1500000
        assert summary.min_value == 500000
        assert summary.total_value == 3500000
        assert summary.mean_value == 1166666.67
        assert summary.broadcasters == ("Globo", "Record")
        assert summary.shows == ("Big Brother Brasil", "A Fazenda", "Ilha Record")

    def test_zero_threshold_returns_every_prize(self, shows):
        """Test threshold 0 selects all prizes, highest first"""
        report = build_threshold_report(shows, 0)

        values = [m.value for m in report.matches]
        assert len(values) == 5
        assert values == sorted(values, reverse=True)
        assert all(m.percent_above_threshold is None for m in report.matches)

    def test_no_matches(self, shows):
        """Test an unmatched threshold gives an empty report, not an error"""
        report = build_threshold_report(shows, 10_000_000)

        assert report.matches == ()
        assert report.summary.count == 0
        assert report.summary.mean_value == 0.0
        assert report.summary.broadcasters == ()

    def test_string_threshold(self, shows):
        """Test a numeric string threshold"""
        report = build_threshold_report(shows, "1500000")

        assert report.summary.count == 2
        assert report.filter_label == "prizes >= 1,500,000"

    def test_invalid_threshold(self, shows):
        with pytest.raises(InvalidArgumentError):
            build_threshold_report(shows, -10)

    def test_no_infinite_values_in_output(self, shows):
        """Test the plain record never carries NaN or infinity"""
        record = build_threshold_report(shows, 0).to_dict()

        for match in record["matches"]:
            assert match["percent_above_threshold"] is None
        assert not math.isinf(record["summary"]["mean_value"])


class TestTinyThreshold:
    """Test percentages that overflow the default decimal precision"""

    def test_tiny_threshold(self, make_show):
        show = make_show(participants=[("A", 22, [1e9])])
        report = build_threshold_report([show], 1e-20)

        assert report.summary.count == 1
        percent = report.matches[0].percent_above_threshold
        assert percent.endswith("%")
        assert float(percent.rstrip("%")) == pytest.approx(1e31)
