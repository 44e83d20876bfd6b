"""
Domain layer - Pure business logic without external dependencies.
"""

from .availability_calculator import AvailabilityCalculator
from .exceptions import DataStoreError, ErrorKind, FindAvailableTablesError, TablefinderError
from .models import (
    Availability,
    AvailabilityOutcome,
    AvailabilityQuery,
    Booking,
    Restaurant,
    SearchTimeWithTables,
    Table,
)

__all__ = [
    "Availability",
    "AvailabilityCalculator",
    "AvailabilityOutcome",
    "AvailabilityQuery",
    "Booking",
    "DataStoreError",
    "ErrorKind",
    "FindAvailableTablesError",
    "Restaurant",
    "SearchTimeWithTables",
    "Table",
    "TablefinderError",
]
