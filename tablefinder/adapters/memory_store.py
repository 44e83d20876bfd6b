"""
In-memory restaurant store backed by a JSON data file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pendulum
from pendulum import DateTime

from ..domain.exceptions import DataStoreError
from ..domain.models import Booking, Restaurant, Table

logger = logging.getLogger(__name__)

SAMPLE_DATA_FILE = Path(__file__).parent / "sample_restaurants.json"


class InMemoryRestaurantStore:
    """
    Read-only store holding restaurants, their tables and existing bookings.

    The store is filled once, either directly or from a JSON file with the
    following layout:

    {
        "restaurants": [
            {
                "slug": "vivaan-fine-indian-cuisine-ottawa",
                "name": "Vivaan - fine Indian",
                "open_time": "09:00:00",
                "close_time": "22:00:00",
                "tables": [{"id": 1, "seats": 4}],
                "bookings": [
                    {"booking_time": "2023-02-03T15:00:00", "table_ids": [1]}
                ]
            }
        ]
    }
    """

    def __init__(
        self,
        restaurants: Iterable[Restaurant] = (),
        bookings: Optional[Mapping[str, List[Booking]]] = None,
    ):
        self._restaurants: Dict[str, Restaurant] = {}
        for restaurant in restaurants:
            if restaurant.slug in self._restaurants:
                raise DataStoreError(f"Duplicate restaurant slug: {restaurant.slug}")
            self._restaurants[restaurant.slug] = restaurant

        self._bookings: Dict[str, List[Booking]] = {
            slug: sorted(entries, key=lambda b: b.booking_time)
            for slug, entries in (bookings or {}).items()
        }

    @classmethod
    def from_json_file(cls, data_file: Path | None = None, timezone: str = "UTC") -> "InMemoryRestaurantStore":
        """
        Load the store from a JSON data file.

        Args:
            data_file: Path to the JSON file, defaults to the bundled sample data
            timezone: Timezone for booking times without an explicit offset

        Raises:
            DataStoreError: If the file is missing or contains invalid records
        """
        path = data_file or SAMPLE_DATA_FILE

        if not path.exists():
            raise DataStoreError(f"Restaurant data file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise DataStoreError(f"Invalid JSON in {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise DataStoreError("Restaurant data file must contain a mapping at the root level.")

        restaurants: List[Restaurant] = []
        bookings: Dict[str, List[Booking]] = {}

        for record in data.get("restaurants", []):
            restaurant = cls._parse_restaurant(record)
            restaurants.append(restaurant)
            bookings[restaurant.slug] = [
                cls._parse_booking(entry, timezone)
                for entry in record.get("bookings", [])
            ]

        logger.info("Loaded %d restaurant(s) from %s", len(restaurants), path)
        return cls(restaurants, bookings)

    async def find_restaurant_by_slug(self, slug: str) -> Optional[Restaurant]:
        return self._restaurants.get(slug)

    async def find_bookings_between(self, slug: str, start: DateTime, end: DateTime) -> List[Booking]:
        return [
            booking for booking in self._bookings.get(slug, [])
            if start <= booking.booking_time <= end
        ]

    async def list_restaurants(self) -> List[Restaurant]:
        return sorted(self._restaurants.values(), key=lambda r: r.slug)

    @staticmethod
    def _parse_restaurant(record: Mapping[str, Any]) -> Restaurant:
        try:
            return Restaurant(
                slug=str(record["slug"]),
                name=str(record.get("name", "")),
                open_time=str(record["open_time"]),
                close_time=str(record["close_time"]),
                tables=[
                    Table(id=int(table["id"]), seats=int(table["seats"]))
                    for table in record.get("tables", [])
                ],
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise DataStoreError(f"Invalid restaurant record {record.get('slug', '?')!r}: {exc}") from exc

    @staticmethod
    def _parse_booking(entry: Mapping[str, Any], timezone: str) -> Booking:
        try:
            booking_time = pendulum.parse(str(entry["booking_time"]), tz=timezone)
            if not isinstance(booking_time, DateTime):
                raise ValueError(f"Not a timestamp: {entry['booking_time']}")

            return Booking(
                booking_time=booking_time,
                table_ids=tuple(int(table_id) for table_id in entry.get("table_ids", [])),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise DataStoreError(f"Invalid booking record {dict(entry)!r}: {exc}") from exc
