"""
Error responses for the HTTP API.

Every error body has the shape ``{"errorMessage": "..."}``.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..domain.exceptions import ErrorKind
from ..domain.models import AvailabilityOutcome
from ..services.availability import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.SEARCH_FAILURE: 400,
    ErrorKind.UNEXPECTED: 500,
}


def error_response(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse({"errorMessage": message}, status_code=status_code, headers=headers)


def outcome_error_response(outcome: AvailabilityOutcome) -> JSONResponse:
    """Translate a failed outcome into its HTTP response."""
    if outcome.error_kind is None:
        raise ValueError("Cannot build an error response from a successful outcome")
    return error_response(STATUS_BY_KIND[outcome.error_kind], outcome.message)


def _detail_text(detail: Any, status_code: int) -> str:
    if isinstance(detail, str) and detail:
        return detail
    if detail is None:
        return str(status_code)
    return str(detail)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(
            exc.status_code,
            _detail_text(exc.detail, exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return error_response(500, INTERNAL_ERROR_MESSAGE)
