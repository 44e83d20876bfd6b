"""
Shared fixtures.
"""

import pendulum
import pytest

from tablefinder.adapters.memory_store import InMemoryRestaurantStore
from tablefinder.config import AppConfig
from tablefinder.domain.models import Booking, Restaurant, Table


@pytest.fixture
def restaurant() -> Restaurant:
    """Restaurant open 09:00-22:00 with tables of 2, 4 and 6 seats."""
    return Restaurant(
        slug="vivaan-fine-indian-cuisine-ottawa",
        name="Vivaan - fine Indian",
        open_time="09:00:00",
        close_time="22:00:00",
        tables=[Table(id=1, seats=2), Table(id=2, seats=4), Table(id=3, seats=6)],
    )


@pytest.fixture
def store(restaurant: Restaurant) -> InMemoryRestaurantStore:
    """Store with table 3 booked at 15:30 and tables 1 and 2 booked at 16:00."""
    bookings = [
        Booking(
            booking_time=pendulum.parse("2023-02-03T15:30:00", tz="UTC"),
            table_ids=(3,),
        ),
        Booking(
            booking_time=pendulum.parse("2023-02-03T16:00:00", tz="UTC"),
            table_ids=(1, 2),
        ),
    ]
    return InMemoryRestaurantStore([restaurant], {restaurant.slug: bookings})


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()
