"""Pydantic models for the HTTP API."""

from swapsim.models.request import QuoteRequest, SimulateRequest
from swapsim.models.response import ErrorResponse, QuoteResponse, SimulateResponse

__all__ = [
    "QuoteRequest",
    "SimulateRequest",
    "QuoteResponse",
    "SimulateResponse",
    "ErrorResponse",
]
