"""
Application service answering table availability queries.

The handler coordinates the restaurant lookup through an injected store and
the candidate search through an injected table search, then delegates the
capacity and opening-hours evaluation to the domain-level
``AvailabilityCalculator``. Both dependencies are described by simple
protocols so they can be replaced by stubs in tests.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from ..domain.availability_calculator import AvailabilityCalculator
from ..domain.exceptions import ErrorKind, FindAvailableTablesError
from ..domain.models import AvailabilityOutcome, Restaurant, SearchTimeWithTables
from ..domain.parsing import parse_availability_query

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "Invalid data provided"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class RestaurantStoreProtocol(Protocol):
    """Protocol describing the restaurant lookup needed by the handler."""

    async def find_restaurant_by_slug(self, slug: str) -> Optional[Restaurant]:
        """Return the restaurant with its tables and hours, or None."""


class TableSearchProtocol(Protocol):
    """Protocol describing the candidate-time search."""

    async def find_available_tables(
        self,
        day: str,
        time: str,
        restaurant: Restaurant,
    ) -> Optional[List[SearchTimeWithTables]]:
        """Return candidate times with free tables, or None if there are none."""


class AvailabilityQueryHandler:
    """
    Answers "which times around T can seat a party of N at restaurant S on day D".

    Every failure is returned as a tagged ``AvailabilityOutcome``; nothing
    raised below this boundary escapes ``handle``.
    """

    def __init__(
        self,
        store: RestaurantStoreProtocol,
        table_search: TableSearchProtocol,
        calculator: AvailabilityCalculator,
    ) -> None:
        self._store = store
        self._table_search = table_search
        self._calculator = calculator

    async def handle(
        self,
        *,
        slug: Optional[str],
        day: Optional[str],
        time: Optional[str],
        party_size: Optional[str],
    ) -> AvailabilityOutcome:
        """Validate the raw parameters and compute availabilities."""
        query = parse_availability_query(
            slug,
            day,
            time,
            party_size,
            timezone=self._calculator.timezone,
        )
        if query is None:
            return AvailabilityOutcome.failure(ErrorKind.INVALID_INPUT, INVALID_DATA_MESSAGE)

        try:
            restaurant = await self._store.find_restaurant_by_slug(query.slug)
            if restaurant is None:
                logger.info("Unknown restaurant slug %r", query.slug)
                return AvailabilityOutcome.failure(ErrorKind.INVALID_INPUT, INVALID_DATA_MESSAGE)

            candidates = await self._table_search.find_available_tables(
                query.day_string,
                query.time,
                restaurant,
            )
            if not candidates:
                return AvailabilityOutcome.failure(ErrorKind.INVALID_INPUT, INVALID_DATA_MESSAGE)

            availabilities = self._calculator.calculate(
                day=query.day_string,
                candidates=candidates,
                party_size=query.party_size,
                restaurant=restaurant,
            )

        except FindAvailableTablesError as exc:
            logger.info("Couldn't find available tables for %s: %s", query.slug, exc)
            return AvailabilityOutcome.failure(ErrorKind.SEARCH_FAILURE, str(exc))

        except Exception:
            logger.exception("Availability query for %s failed", query.slug)
            return AvailabilityOutcome.failure(ErrorKind.UNEXPECTED, INTERNAL_ERROR_MESSAGE)

        return AvailabilityOutcome.success(availabilities)
