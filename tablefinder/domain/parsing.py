"""
Parsing of raw query-string parameters.

Every parser is total: malformed input yields ``None`` instead of an
exception or a silently invalid value.
"""

from __future__ import annotations

import logging
from typing import Optional

import pendulum
from pendulum import Date, DateTime

from .models import AvailabilityQuery

logger = logging.getLogger(__name__)

DAY_FORMAT = "YYYY-MM-DD"


def parse_day(value: Optional[str], timezone: str = "UTC") -> Optional[Date]:
    """Parse a ``YYYY-MM-DD`` calendar date."""
    if not value or not value.strip():
        return None
    try:
        return pendulum.from_format(value.strip(), DAY_FORMAT, tz=timezone).date()
    except ValueError:
        return None


def combine_day_and_time(day: str, time: str, timezone: str = "UTC") -> Optional[DateTime]:
    """
    Combine a calendar date and a time-of-day string into a timestamp.

    Times without an explicit offset are interpreted in ``timezone``; times
    such as ``15:00:00.000Z`` keep their own offset.
    """
    if not day or not time:
        return None
    try:
        parsed = pendulum.parse(f"{day.strip()}T{time.strip()}", tz=timezone)
    except ValueError:
        return None

    if isinstance(parsed, DateTime):
        return parsed
    return None


def parse_party_size(value: Optional[str]) -> Optional[int]:
    """Parse a strictly positive, base-10 party size."""
    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned.isdigit():
        return None
    size = int(cleaned)
    return size if size > 0 else None


def parse_availability_query(
    slug: Optional[str],
    day: Optional[str],
    time: Optional[str],
    party_size: Optional[str],
    timezone: str = "UTC",
) -> Optional[AvailabilityQuery]:
    """
    Validate the raw request parameters and build an ``AvailabilityQuery``.

    Returns None when any parameter is missing or malformed.
    """
    if not slug or not day or not time or not party_size:
        logger.debug("Missing query parameter(s): day=%r time=%r partySize=%r", day, time, party_size)
        return None

    parsed_day = parse_day(day, timezone)
    if parsed_day is None:
        logger.debug("Unparseable day %r", day)
        return None

    if combine_day_and_time(day, time, timezone) is None:
        logger.debug("Day %r and time %r do not form a valid timestamp", day, time)
        return None

    size = parse_party_size(party_size)
    if size is None:
        logger.debug("Invalid party size %r", party_size)
        return None

    return AvailabilityQuery(
        slug=slug,
        day=parsed_day,
        time=time.strip(),
        party_size=size,
    )
