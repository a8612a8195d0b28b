"""API endpoints for the swap simulator."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from swapsim.amm.constant_product import quote
from swapsim.amm.result import SwapError
from swapsim.models import (
    ErrorResponse,
    QuoteRequest,
    QuoteResponse,
    SimulateRequest,
    SimulateResponse,
)
from swapsim.simulator import simulate

router = APIRouter()


def _error_response(error: SwapError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=ErrorResponse.from_error(error).model_dump(),
    )


@router.post(
    "/quote",
    response_model=QuoteResponse,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
async def post_quote(request: QuoteRequest) -> QuoteResponse | JSONResponse:
    """Quote the output of an exact-input swap.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Out-of-range input: Returns 422 with an ErrorResponse body
    """
    result = quote(request.amount_in, request.reserve_in, request.reserve_out, request.fee)
    if result.error is not None:
        return _error_response(result.error)

    return QuoteResponse(amount_out=result.unwrap())


@router.post(
    "/simulate",
    response_model=SimulateResponse,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
async def post_simulate(request: SimulateRequest) -> SimulateResponse | JSONResponse:
    """Simulate a single swap and report reserves, prices and slippage.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Rejected trade (invalid input or drained pool): Returns 422 with
          an ErrorResponse body
    """
    result = simulate(
        request.reserve_a,
        request.reserve_b,
        request.fee,
        request.direction,
        request.amount_in,
    )
    if result.error is not None:
        return _error_response(result.error)

    return SimulateResponse.from_swap(result.unwrap())
