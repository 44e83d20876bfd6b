"""
Response schemas for the HTTP API.
"""

from pydantic import BaseModel, Field


class AvailabilityResponse(BaseModel):
    time: str = Field(..., description="Candidate time of day, e.g. 15:00:00")
    available: bool = Field(..., description="Whether the free tables seat the whole party")


class ErrorResponse(BaseModel):
    errorMessage: str = Field(..., description="Human-readable error message")
