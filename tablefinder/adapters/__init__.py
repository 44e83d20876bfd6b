"""
Adapters layer - Restaurant data sources.
"""

from .memory_store import InMemoryRestaurantStore

__all__ = ["InMemoryRestaurantStore"]
