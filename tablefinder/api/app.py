"""
FastAPI application factory and routes.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request

from .. import __version__
from ..adapters.memory_store import InMemoryRestaurantStore
from ..config import AppConfig
from ..domain.availability_calculator import AvailabilityCalculator
from ..services.availability import AvailabilityQueryHandler
from ..services.table_search import TableSearch
from .errors import outcome_error_response, register_error_handlers
from .schemas import AvailabilityResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def build_query_handler(config: AppConfig, store: InMemoryRestaurantStore) -> AvailabilityQueryHandler:
    """Wire the query handler from configuration and a restaurant store."""
    table_search = TableSearch(
        store,
        timezone=config.timezone,
        window_minutes=config.search.window_minutes,
        interval_minutes=config.search.interval_minutes,
    )
    calculator = AvailabilityCalculator(timezone=config.timezone)
    return AvailabilityQueryHandler(store=store, table_search=table_search, calculator=calculator)


def get_query_handler(request: Request) -> AvailabilityQueryHandler:
    return request.app.state.query_handler


@router.get(
    "/api/restaurant/{slug}/availability",
    response_model=List[AvailabilityResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_availability(
    slug: str,
    day: Optional[str] = Query(None, description="Date to check (YYYY-MM-DD)"),
    time: Optional[str] = Query(None, description="Requested time of day (HH:MM:SS)"),
    party_size: Optional[str] = Query(None, alias="partySize", description="Number of guests"),
    handler: AvailabilityQueryHandler = Depends(get_query_handler),
):
    """
    Get table availability around a requested time.

    Returns the candidate times within the restaurant's opening hours, each
    flagged with whether the free tables can seat the whole party.
    """
    outcome = await handler.handle(slug=slug, day=day, time=time, party_size=party_size)

    if not outcome.ok:
        return outcome_error_response(outcome)

    return [
        AvailabilityResponse(time=availability.time, available=availability.available)
        for availability in outcome.availabilities or []
    ]


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


def create_app(
    config: Optional[AppConfig] = None,
    store: Optional[InMemoryRestaurantStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Application configuration, defaults to built-in settings
        store: Restaurant store, defaults to one loaded from ``config.data_file``
    """
    config = config or AppConfig()
    if store is None:
        store = InMemoryRestaurantStore.from_json_file(config.data_file, timezone=config.timezone)

    app = FastAPI(title="tablefinder", version=__version__)
    app.state.config = config
    app.state.query_handler = build_query_handler(config, store)

    register_error_handlers(app)
    app.include_router(router)

    logger.debug("Application created (timezone=%s)", config.timezone)
    return app
