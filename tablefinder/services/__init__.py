"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .availability import AvailabilityQueryHandler, RestaurantStoreProtocol, TableSearchProtocol
from .table_search import BookingSourceProtocol, TableSearch

__all__ = [
    "AvailabilityQueryHandler",
    "BookingSourceProtocol",
    "RestaurantStoreProtocol",
    "TableSearch",
    "TableSearchProtocol",
]
