"""
Core business logic for turning candidate times into availabilities.

Pure domain logic: no store access, no I/O.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from pendulum import DateTime

from .exceptions import DataStoreError
from .models import Availability, Restaurant, SearchTimeWithTables
from .parsing import combine_day_and_time

logger = logging.getLogger(__name__)


class AvailabilityCalculator:
    """
    Evaluates candidate times against party size and operating hours.

    Algorithm:
    1. For each candidate, sum the seats of its free tables
    2. Mark it available when the sum covers the party
    3. Drop candidates outside [open_time, close_time] of the requested day
    4. Keep the order the candidates came in
    """

    def __init__(self, timezone: str = "UTC"):
        self.timezone = timezone

    def calculate(
        self,
        *,
        day: str,
        candidates: Sequence[SearchTimeWithTables],
        party_size: int,
        restaurant: Restaurant,
    ) -> List[Availability]:
        """
        Build the availability list for a restaurant on a given day.

        Args:
            day: Requested date as ``YYYY-MM-DD``
            candidates: Candidate times with their free tables
            party_size: Number of guests, already validated as positive
            restaurant: Restaurant supplying the operating hours

        Returns:
            Availabilities within operating hours, in candidate order

        Raises:
            DataStoreError: If the restaurant's hours are not valid times
        """
        opening, closing = self._operating_window(day, restaurant)

        availabilities = [
            self.evaluate_capacity(candidate, party_size)
            for candidate in candidates
        ]

        return [
            availability for availability in availabilities
            if self._within_window(day, availability.time, opening, closing)
        ]

    @staticmethod
    def evaluate_capacity(candidate: SearchTimeWithTables, party_size: int) -> Availability:
        """A candidate is available when its free seats cover the party."""
        return Availability(
            time=candidate.time,
            available=candidate.seat_count() >= party_size,
        )

    def _operating_window(self, day: str, restaurant: Restaurant) -> tuple[DateTime, DateTime]:
        opening = combine_day_and_time(day, restaurant.open_time, self.timezone)
        closing = combine_day_and_time(day, restaurant.close_time, self.timezone)

        if opening is None or closing is None:
            raise DataStoreError(
                f"Restaurant '{restaurant.slug}' has invalid operating hours "
                f"{restaurant.open_time!r} - {restaurant.close_time!r}"
            )

        return opening, closing

    def _within_window(self, day: str, time: str, opening: DateTime, closing: DateTime) -> bool:
        moment = combine_day_and_time(day, time, self.timezone)
        if moment is None:
            logger.warning("Skipping candidate with unparseable time %r", time)
            return False

        # Both ends inclusive
        return opening <= moment <= closing
