"""
Tests for availability calculator.
"""

import pytest

from tablefinder.domain.availability_calculator import AvailabilityCalculator
from tablefinder.domain.exceptions import DataStoreError
from tablefinder.domain.models import Availability, Restaurant, SearchTimeWithTables, Table


def _candidate(time, *seats):
    return SearchTimeWithTables(
        time=time,
        tables=[Table(id=index, seats=count) for index, count in enumerate(seats, 1)],
    )


class TestAvailabilityCalculator:
    """Tests for AvailabilityCalculator."""

    def test_party_fits_combined_tables(self, restaurant):
        """Test that seats of all free tables are summed."""
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[_candidate("15:00:00", 2, 4, 6)],
            party_size=8,
            restaurant=restaurant,
        )

        assert result == [Availability(time="15:00:00", available=True)]

    def test_party_too_large(self, restaurant):
        """Test that a party larger than the free seats is unavailable."""
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[_candidate("15:00:00", 2, 4, 6)],
            party_size=15,
            restaurant=restaurant,
        )

        assert result == [Availability(time="15:00:00", available=False)]

    def test_exact_capacity_is_available(self, restaurant):
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[_candidate("15:00:00", 2, 4, 6)],
            party_size=12,
            restaurant=restaurant,
        )

        assert result[0].available

    def test_candidate_without_tables_is_unavailable(self, restaurant):
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[_candidate("15:00:00")],
            party_size=1,
            restaurant=restaurant,
        )

        assert result == [Availability(time="15:00:00", available=False)]

    def test_times_after_closing_are_excluded(self, restaurant):
        """Test that candidates after closing hour are dropped regardless of capacity."""
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[_candidate("21:30:00", 6), _candidate("23:00:00", 6, 6)],
            party_size=2,
            restaurant=restaurant,
        )

        assert [a.time for a in result] == ["21:30:00"]

    def test_operating_hours_are_inclusive(self, restaurant):
        """Test that opening and closing times themselves are kept."""
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[
                _candidate("08:30:00", 2),
                _candidate("09:00:00", 2),
                _candidate("22:00:00", 2),
                _candidate("22:30:00", 2),
            ],
            party_size=2,
            restaurant=restaurant,
        )

        assert [a.time for a in result] == ["09:00:00", "22:00:00"]

    def test_candidate_order_is_preserved(self, restaurant):
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[_candidate("16:00:00", 2), _candidate("14:00:00", 8), _candidate("15:00:00", 4)],
            party_size=4,
            restaurant=restaurant,
        )

        assert result == [
            Availability(time="16:00:00", available=False),
            Availability(time="14:00:00", available=True),
            Availability(time="15:00:00", available=True),
        ]

    def test_unparseable_candidate_time_is_skipped(self, restaurant):
        calculator = AvailabilityCalculator()

        result = calculator.calculate(
            day="2023-02-03",
            candidates=[_candidate("not-a-time", 8), _candidate("10:00:00", 8)],
            party_size=2,
            restaurant=restaurant,
        )

        assert [a.time for a in result] == ["10:00:00"]

    def test_invalid_operating_hours_raise(self):
        calculator = AvailabilityCalculator()
        broken = Restaurant(slug="broken", open_time="nine", close_time="22:00:00")

        with pytest.raises(DataStoreError, match="invalid operating hours"):
            calculator.calculate(
                day="2023-02-03",
                candidates=[_candidate("10:00:00", 2)],
                party_size=2,
                restaurant=broken,
            )

    def test_evaluate_capacity(self):
        availability = AvailabilityCalculator.evaluate_capacity(_candidate("12:00:00", 2, 2), 5)

        assert availability == Availability(time="12:00:00", available=False)
