#!/usr/bin/env python3
"""Tests for calculation helper functions."""
from datetime import date, datetime

import pytest

from motorlog import TrendDirection
from motorlog.calculations import (
    as_number,
    classify_trend,
    mean,
    month_key,
    percent_change,
    safe_divide,
    to_date,
)


class TestToDate:
    """Tests for to_date normalization."""

    def test_date_passes_through(self):
        assert to_date(date(2024, 3, 1)) == date(2024, 3, 1)

    def test_datetime_drops_time(self):
        assert to_date(datetime(2024, 3, 1, 18, 30)) == date(2024, 3, 1)

    def test_iso_strings(self):
        assert to_date("2024-03-01") == date(2024, 3, 1)
        assert to_date("2024-03-01T10:15:00") == date(2024, 3, 1)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_date(20240301)


class TestMonthKey:
    def test_zero_padded(self):
        assert month_key(date(2024, 3, 9)) == "2024-03"
        assert month_key(date(2024, 11, 30)) == "2024-11"


class TestAsNumber:
    """Tests for as_number coercion."""

    def test_numbers(self):
        assert as_number(12) == 12.0
        assert as_number(1.5) == 1.5

    def test_non_numeric_is_zero(self):
        assert as_number(None) == 0
        assert as_number("150") == 0
        assert as_number(True) == 0

    def test_non_finite_is_zero(self):
        assert as_number(float("nan")) == 0
        assert as_number(float("inf")) == 0


class TestSafeDivide:
    def test_divides(self):
        assert safe_divide(400, 32) == 12.5

    def test_zero_or_negative_denominator(self):
        assert safe_divide(400, 0) == 0
        assert safe_divide(400, -5) == 0
        assert safe_divide(400, None) == 0


class TestMean:
    def test_mean(self):
        assert mean([1, 2, 3]) == 2

    def test_empty(self):
        assert mean([]) == 0


class TestPercentChange:
    def test_increase(self):
        assert percent_change(100, 110) == pytest.approx(10)

    def test_decrease(self):
        assert percent_change(200, 150) == pytest.approx(-25)

    def test_zero_previous(self):
        assert percent_change(0, 150) == 0


class TestClassifyTrend:
    """Tests for classify_trend."""

    def test_flat_below_threshold(self):
        assert classify_trend(0.99) == TrendDirection.FLAT
        assert classify_trend(-0.5) == TrendDirection.FLAT
        assert classify_trend(None) == TrendDirection.FLAT

    def test_rising_and_falling(self):
        assert classify_trend(1.0) == TrendDirection.RISING
        assert classify_trend(-3.2) == TrendDirection.FALLING

    def test_custom_threshold(self):
        assert classify_trend(4.0, threshold=5.0) == TrendDirection.FLAT
        assert classify_trend(6.0, threshold=5.0) == TrendDirection.RISING
