#!/usr/bin/env python3
"""Tests for trip totals and averages."""
from datetime import date

import pytest

from motorlog import DateRange, Trip, compute_trip_stats


class TestComputeTripStats:
    """Tests for compute_trip_stats."""

    def test_no_trips(self):
        stats = compute_trip_stats([])
        assert stats.total_trips == 0
        assert stats.total_distance == 0
        assert stats.total_cost == 0
        assert stats.average_distance == 0
        assert stats.insufficient_data is True

    def test_totals_and_averages(self):
        stats = compute_trip_stats(
            [
                Trip("swift", "Pune", "Mumbai", "2024-02-10", 150, 640),
                Trip("nexon", "Pune", "Nashik", "2024-03-01", 212, 420),
            ]
        )
        assert stats.total_trips == 2
        assert stats.total_distance == 362
        assert stats.total_cost == 1060
        assert stats.average_distance == pytest.approx(181)
        assert stats.average_cost == pytest.approx(530)
        assert stats.earliest_date == date(2024, 2, 10)
        assert stats.latest_date == date(2024, 3, 1)
        assert stats.insufficient_data is False

    def test_malformed_fields_contribute_zero(self):
        stats = compute_trip_stats(
            [
                Trip("swift", "Pune", "Mumbai", "2024-02-10", "150km", 640),
                Trip("swift", "Mumbai", "Pune", "2024-02-12", 150, "free"),
            ]
        )
        assert stats.total_trips == 2
        assert stats.total_distance == 150
        assert stats.total_cost == 640
        assert stats.average_distance == pytest.approx(75)

    def test_date_range(self):
        trips = [
            Trip("swift", "Pune", "Mumbai", "2024-02-10", 150, 640),
            Trip("swift", "Pune", "Goa", "2024-05-01", 450, 2100),
        ]
        stats = compute_trip_stats(trips, DateRange("2024-01-01", "2024-03-31"))
        assert stats.total_trips == 1
        assert stats.total_distance == 150

    def test_accepts_generator(self):
        trips = (Trip("swift", "A", "B", "2024-01-01", 10, 5) for _ in range(3))
        assert compute_trip_stats(trips).total_trips == 3
