#!/usr/bin/env python3
"""Tests for cross-vehicle rankings."""
import pytest

from motorlog import (
    DateRange,
    FuelExpense,
    MileageSummary,
    OtherExpense,
    Vehicle,
    analyze_mileage,
    rank_vehicles,
    summarize_expenses,
)

Q1 = DateRange("2024-01-01", "2024-03-31")


def vehicle(vehicle_id):
    return Vehicle(vehicle_id, vehicle_id.title(), "Make", "Model")


def fills(vehicle_id, readings):
    """Fuel fills from (day, odometer, fuel, amount) tuples."""
    return [
        FuelExpense(vehicle_id, day, amount, odometer, fuel_added=fuel)
        for day, odometer, fuel, amount in readings
    ]


def rank(vehicles, expenses):
    mileage = {
        v.id: analyze_mileage([e for e in expenses if e.vehicle_id == v.id], Q1)
        for v in vehicles
    }
    return rank_vehicles(vehicles, summarize_expenses(expenses, Q1), mileage)


class TestRankVehicles:
    """Tests for rank_vehicles."""

    @pytest.fixture
    def vehicles(self):
        return [vehicle("swift"), vehicle("nexon"), vehicle("city")]

    @pytest.fixture
    def expenses(self):
        return fills(
            "swift",
            [
                ("2024-01-05", 10000, 30, 3000),
                ("2024-02-04", 10400, 32, 3200),
                ("2024-03-03", 10800, 30, 3000),
            ],
        ) + fills(
            "nexon",
            [
                ("2024-01-12", 29500, 40, 4000),
                ("2024-02-15", 30100, 40, 3600),
                ("2024-03-20", 30880, 42, 3900),
            ],
        ) + [OtherExpense("nexon", "2024-02-16", 12500, other_type="Insurance")]

    def test_leaders(self, vehicles, expenses):
        ranking = rank(vehicles, expenses)
        assert ranking.most_expensive.vehicle_id == "nexon"
        assert ranking.best_mileage.vehicle_id == "nexon"
        assert ranking.most_used.vehicle_id == "nexon"

    def test_vehicle_without_expenses_in_table_with_zeros(self, vehicles, expenses):
        ranking = rank(vehicles, expenses)
        assert [r.vehicle_id for r in ranking.table] == ["city", "nexon", "swift"]
        city = ranking.table[0]
        assert city.total_expense == 0
        assert city.transaction_count == 0
        assert city.average_mileage == 0
        assert city.has_mileage is False

    def test_vehicle_without_mileage_excluded_from_mileage_ranking(self, vehicles, expenses):
        ranking = rank(vehicles, expenses)
        assert [r.vehicle_id for r in ranking.by_mileage] == ["nexon", "swift"]
        assert ranking.least_expensive.vehicle_id == "city"

    def test_table_values(self, vehicles, expenses):
        swift = [r for r in rank(vehicles, expenses).table if r.vehicle_id == "swift"][0]
        assert swift.total_expense == 9200
        assert swift.fuel_cost == 9200
        assert swift.total_distance == 800
        assert swift.average_mileage == pytest.approx((12.5 + 400 / 30) / 2)
        assert swift.cost_per_km == pytest.approx(9200 / 800)


class TestTieBreaks:
    """Ties go to the lexicographically smaller vehicle id."""

    def test_equal_spend(self):
        vehicles = [vehicle("b-car"), vehicle("a-car")]
        expenses = [
            OtherExpense("b-car", "2024-01-10", 500, other_type="Toll"),
            OtherExpense("a-car", "2024-01-11", 500, other_type="Toll"),
        ]
        ranking = rank(vehicles, expenses)
        assert ranking.most_expensive.vehicle_id == "a-car"
        assert ranking.least_expensive.vehicle_id == "a-car"

    def test_equal_mileage_and_distance(self):
        vehicles = [vehicle("zeta"), vehicle("alpha")]
        expenses = fills(
            "zeta", [("2024-01-01", 1000, 20, 2000), ("2024-02-01", 1400, 20, 2000)]
        ) + fills(
            "alpha", [("2024-01-01", 5000, 20, 2000), ("2024-02-01", 5400, 20, 2000)]
        )
        ranking = rank(vehicles, expenses)
        assert ranking.best_mileage.vehicle_id == "alpha"
        assert ranking.most_used.vehicle_id == "alpha"


class TestMileageMetric:
    """Best mileage compares the mean of interval readings."""

    def test_ranked_by_average_not_overall_efficiency(self):
        vehicles = [vehicle("steady"), vehicle("spiky")]
        # spiky: 100 km/l then 900/99 km/l, mean ~54.5 but 1000 km on 100 l overall
        expenses = fills(
            "spiky",
            [
                ("2024-01-01", 1000, 10, 1000),
                ("2024-01-15", 1100, 1, 100),
                ("2024-02-01", 2000, 99, 9900),
            ],
        ) + fills(
            "steady",
            [
                ("2024-01-01", 5000, 20, 2000),
                ("2024-01-15", 5400, 20, 2000),
                ("2024-02-01", 5800, 20, 2000),
            ],
        )
        ranking = rank(vehicles, expenses)
        spiky = [r for r in ranking.table if r.vehicle_id == "spiky"][0]
        assert spiky.average_mileage == pytest.approx((100 + 900 / 99) / 2)
        assert ranking.best_mileage.vehicle_id == "spiky"
        assert [r.vehicle_id for r in ranking.by_mileage] == ["spiky", "steady"]


class TestEmptyRankings:
    """Slots stay empty when no vehicle qualifies."""

    def test_no_vehicles(self):
        ranking = rank_vehicles([], summarize_expenses([], Q1), {})
        assert ranking.most_expensive is None
        assert ranking.least_expensive is None
        assert ranking.best_mileage is None
        assert ranking.most_used is None
        assert ranking.table == []

    def test_no_mileage_no_best_mileage(self):
        ranking = rank_vehicles([vehicle("swift")], summarize_expenses([], Q1), {})
        assert ranking.best_mileage is None
        assert ranking.most_expensive.vehicle_id == "swift"
        assert len(ranking.table) == 1

    def test_zero_spend_tie_goes_to_smaller_id(self):
        ranking = rank_vehicles(
            [vehicle("b-car"), vehicle("a-car")], summarize_expenses([], Q1), {}
        )
        assert ranking.most_expensive.vehicle_id == "a-car"
        assert ranking.least_expensive.vehicle_id == "a-car"
        assert ranking.most_used.vehicle_id == "a-car"

    def test_missing_mileage_entry_treated_as_none(self):
        ranking = rank_vehicles(
            [vehicle("swift")],
            summarize_expenses([], Q1),
            {"other": MileageSummary(average_mileage=20, insufficient_data=False)},
        )
        assert ranking.by_mileage == []
