"""
Default table search: enumerates candidate times around the requested time
and lists the tables that are not booked at each of them.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, Set

from pendulum import DateTime

from ..domain.exceptions import DataStoreError, FindAvailableTablesError
from ..domain.models import Booking, Restaurant, SearchTimeWithTables
from ..domain.parsing import combine_day_and_time

logger = logging.getLogger(__name__)

TIME_FORMAT = "HH:mm:ss"
MINUTES_PER_DAY = 24 * 60


class BookingSourceProtocol(Protocol):
    """Protocol describing the booking lookup needed by the search."""

    async def find_bookings_between(
        self,
        slug: str,
        start: DateTime,
        end: DateTime,
    ) -> List[Booking]:
        """Return bookings of a restaurant with start <= booking_time <= end."""


class TableSearch:
    """
    Finds candidate times and their free tables.

    Candidates span ``window_minutes`` before and after the requested time in
    ``interval_minutes`` steps, limited to the requested day. A requested time
    off the step grid has no candidates.
    """

    def __init__(
        self,
        booking_source: BookingSourceProtocol,
        *,
        timezone: str = "UTC",
        window_minutes: int = 60,
        interval_minutes: int = 30,
    ) -> None:
        self._booking_source = booking_source
        self.timezone = timezone
        self.window_minutes = window_minutes
        self.interval_minutes = interval_minutes

    async def find_available_tables(
        self,
        day: str,
        time: str,
        restaurant: Restaurant,
    ) -> Optional[List[SearchTimeWithTables]]:
        """
        Return the candidate times with their free tables, in time order.

        Returns None if no candidate times exist for the request.

        Raises:
            FindAvailableTablesError: If bookings cannot be retrieved
        """
        search_times = self.search_times(day, time)
        if not search_times:
            return None

        try:
            bookings = await self._booking_source.find_bookings_between(
                restaurant.slug,
                search_times[0],
                search_times[-1],
            )
        except DataStoreError as exc:
            raise FindAvailableTablesError(
                f"Could not load bookings for {restaurant.display_name()}"
            ) from exc

        booked_tables = self._booked_tables_by_time(bookings)

        return [
            SearchTimeWithTables(
                time=search_time.format(TIME_FORMAT),
                tables=[
                    table for table in restaurant.tables
                    if table.id not in booked_tables.get(search_time, set())
                ],
            )
            for search_time in search_times
        ]

    def search_times(self, day: str, time: str) -> List[DateTime]:
        """
        Enumerate candidate timestamps around the requested time.

        Example (window 60, interval 30):
        Requested: 15:00
        Result: [14:00, 14:30, 15:00, 15:30, 16:00]
        """
        requested = combine_day_and_time(day, time, self.timezone)
        if requested is None:
            return []

        requested = requested.in_timezone(self.timezone)

        # An offset can move the requested moment onto another date
        if requested.to_date_string() != day.strip():
            logger.debug("Requested time %s does not fall on %s", requested, day)
            return []

        if not self._on_grid(requested):
            logger.debug("Requested time %s is not on the %d-minute grid", requested, self.interval_minutes)
            return []

        day_start = requested.start_of("day")
        day_end = requested.end_of("day")
        minute_of_day = requested.hour * 60 + requested.minute

        candidates: List[DateTime] = []
        for offset in range(-self.window_minutes, self.window_minutes + 1, self.interval_minutes):
            # Skip offsets leaving the day before doing date arithmetic
            if not 0 <= minute_of_day + offset < MINUTES_PER_DAY:
                continue
            candidate = requested.add(minutes=offset)
            if day_start <= candidate <= day_end:
                candidates.append(candidate)

        return candidates

    def _on_grid(self, moment: DateTime) -> bool:
        minutes = moment.hour * 60 + moment.minute
        return (
            moment.second == 0
            and moment.microsecond == 0
            and minutes % self.interval_minutes == 0
        )

    @staticmethod
    def _booked_tables_by_time(bookings: List[Booking]) -> Dict[DateTime, Set[int]]:
        """Map each booked timestamp to the ids of the tables it occupies."""
        booked: Dict[DateTime, Set[int]] = {}

        for booking in bookings:
            booked.setdefault(booking.booking_time, set()).update(booking.table_ids)

        return booked
