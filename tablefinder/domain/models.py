"""
Domain models for restaurants, tables and availability results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from pendulum import Date, DateTime

from .exceptions import ErrorKind


@dataclass(frozen=True)
class Table:
    """
    A bookable table.

    Invariant: a table seats at least one guest.
    """
    id: int
    seats: int

    def __post_init__(self):
        if self.seats < 1:
            raise ValueError(f"Table {self.id} must seat at least one guest, got {self.seats}")


@dataclass
class Restaurant:
    """
    Restaurant record as needed for availability lookups.

    ``open_time`` and ``close_time`` are time-of-day strings, e.g. ``"09:00:00"``.
    """
    slug: str
    open_time: str
    close_time: str
    tables: List[Table] = field(default_factory=list)
    name: str = ""

    def total_seats(self) -> int:
        """Return the seating capacity across all tables."""
        return sum(table.seats for table in self.tables)

    def display_name(self) -> str:
        """Get display name."""
        return self.name or self.slug


@dataclass(frozen=True)
class Booking:
    """An existing reservation occupying one or more tables at a point in time."""
    booking_time: DateTime
    table_ids: Sequence[int] = ()


@dataclass
class SearchTimeWithTables:
    """A candidate time slot and the tables that are still free at that time."""
    time: str
    tables: List[Table] = field(default_factory=list)

    def seat_count(self) -> int:
        """Sum of seats over the free tables."""
        return sum(table.seats for table in self.tables)


@dataclass(frozen=True)
class Availability:
    """Whether a party fits at the given time."""
    time: str
    available: bool

    def to_dict(self) -> dict:
        return {"time": self.time, "available": self.available}


@dataclass(frozen=True)
class AvailabilityQuery:
    """Parsed and validated request parameters."""
    slug: str
    day: Date
    time: str
    party_size: int

    @property
    def day_string(self) -> str:
        return self.day.to_date_string()


@dataclass(frozen=True)
class AvailabilityOutcome:
    """
    Result of an availability query.

    Exactly one of ``availabilities`` and ``error_kind`` is set; use
    ``success`` and ``failure`` to build instances.
    """
    availabilities: Optional[List[Availability]] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, availabilities: List[Availability]) -> "AvailabilityOutcome":
        return cls(availabilities=list(availabilities))

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "AvailabilityOutcome":
        return cls(error_kind=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.error_kind is None
