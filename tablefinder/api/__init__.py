"""
HTTP layer - FastAPI application exposing availability queries.
"""

from .app import build_query_handler, create_app

__all__ = ["build_query_handler", "create_app"]
