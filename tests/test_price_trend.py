#!/usr/bin/env python3
"""Tests for fuel price trends."""
import pytest

from motorlog import (
    DateRange,
    FuelExpense,
    ServiceExpense,
    TrendDirection,
    analyze_fuel_prices,
    price_points,
    price_trend,
)

H1 = DateRange("2024-01-01", "2024-07-31")


def fill(day, price, fuel=10, vehicle_id="swift"):
    return FuelExpense(vehicle_id, day, price * fuel, 0, fuel_added=fuel)


@pytest.fixture
def rising():
    """One fill a month, price going up by 1 each month."""
    return [fill(f"2024-{m:02d}-10", 100 + m - 1) for m in range(1, 7)]


class TestPricePoints:
    """Tests for per-fill price derivation."""

    def test_price_per_liter(self):
        points = price_points([FuelExpense("swift", "2024-02-04", 3264, 10400, fuel_added=32)])
        assert points[0].price_per_liter == pytest.approx(102)
        assert points[0].total_cost == 3264
        assert points[0].fuel_added == 32

    def test_zero_fuel_excluded(self):
        points = price_points(
            [fill("2024-01-10", 100), FuelExpense("swift", "2024-01-11", 500, 0, fuel_added=0)]
        )
        assert len(points) == 1

    def test_non_fuel_excluded(self):
        points = price_points(
            [ServiceExpense("swift", "2024-01-11", 500, 0, service_type="Repair")]
        )
        assert points == []

    def test_ordered_by_date(self):
        points = price_points([fill("2024-03-01", 103), fill("2024-01-01", 101)])
        assert [p.price_per_liter for p in points] == [101, 103]


class TestPriceTrend:
    """Tests for the first-third vs last-third heuristic."""

    def test_rising_series(self, rising):
        report = analyze_fuel_prices(rising, H1)
        first_third = (100 + 101) / 2
        last_third = (104 + 105) / 2
        assert report.trend.direction == TrendDirection.RISING
        assert report.trend.change_percent == pytest.approx(
            (last_third - first_third) / first_third * 100
        )
        assert report.trend.insufficient_data is False

    def test_falling_series(self):
        trend = price_trend([110, 108, 104, 100, 96, 90])
        assert trend.direction == TrendDirection.FALLING
        assert trend.change_percent == pytest.approx((93 - 109) / 109 * 100)

    def test_change_under_one_percent_is_flat(self):
        trend = price_trend([100, 100.5])
        assert trend.direction == TrendDirection.FLAT
        assert trend.change_percent == pytest.approx(0.5)

    def test_two_points_compare_first_and_last(self):
        trend = price_trend([100, 110])
        assert trend.direction == TrendDirection.RISING
        assert trend.change_percent == pytest.approx(10)

    def test_fewer_than_two_points(self):
        assert price_trend([]).insufficient_data is True
        trend = price_trend([100])
        assert trend.direction == TrendDirection.FLAT
        assert trend.change_percent == 0


class TestMonthlyTrends:
    """Tests for monthly price statistics."""

    def test_gap_filled_over_range(self, rising):
        report = analyze_fuel_prices(rising, H1)
        assert len(report.monthly_trends) == 7
        july = report.monthly_trends[-1]
        assert july.month_key == "2024-07"
        assert july.data_points == 0
        assert july.avg_price == 0

    def test_min_max_within_month(self):
        report = analyze_fuel_prices(
            [fill("2024-01-03", 100), fill("2024-01-20", 104), fill("2024-01-28", 102)],
            DateRange("2024-01-01", "2024-01-31"),
        )
        jan = report.monthly_trends[0]
        assert jan.avg_price == pytest.approx(102)
        assert jan.min_price == pytest.approx(100)
        assert jan.max_price == pytest.approx(104)
        assert jan.data_points == 3

    def test_overall_statistics(self, rising):
        report = analyze_fuel_prices(rising, H1)
        assert report.average_price == pytest.approx(102.5)
        assert report.min_price == pytest.approx(100)
        assert report.max_price == pytest.approx(105)

    def test_vehicle_filter(self, rising):
        expenses = rising + [fill("2024-02-01", 500, vehicle_id="nexon")]
        report = analyze_fuel_prices(expenses, H1, vehicle_id="nexon")
        assert len(report.points) == 1
        assert report.trend.insufficient_data is True

    def test_no_fills(self):
        report = analyze_fuel_prices([], H1)
        assert report.points == []
        assert report.average_price == 0
        assert report.trend.direction == TrendDirection.FLAT
