"""Response bodies for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from swapsim.amm.base import SwapResult
from swapsim.amm.result import SwapError


class QuoteResponse(BaseModel):
    amount_out: float = Field(alias="amountOut")

    model_config = {"populate_by_name": True}


class SimulateResponse(BaseModel):
    """Outcome of a simulated swap, prices in out token per in token."""

    direction: str
    amount_in: float = Field(alias="amountIn")
    amount_out: float = Field(alias="amountOut")
    new_reserve_a: float = Field(alias="newReserveA")
    new_reserve_b: float = Field(alias="newReserveB")
    spot_price: float = Field(alias="spotPrice")
    effective_price: float = Field(alias="effectivePrice")
    slippage_percent: float = Field(alias="slippagePercent")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_swap(cls, swap: SwapResult) -> SimulateResponse:
        return cls(
            direction=swap.direction.value,
            amount_in=swap.amount_in,
            amount_out=swap.amount_out,
            new_reserve_a=swap.new_reserve_a,
            new_reserve_b=swap.new_reserve_b,
            spot_price=swap.spot_price,
            effective_price=swap.effective_price,
            slippage_percent=swap.slippage_percent,
        )


class ErrorResponse(BaseModel):
    """A rejected quote or simulation."""

    error: str = Field(description="Error kind: invalid_input or pool_drained.")
    parameter: str = Field(description="Name of the offending input.")
    detail: str = Field(description="Rule that was violated.")

    @classmethod
    def from_error(cls, error: SwapError) -> ErrorResponse:
        return cls(error=error.kind.value, parameter=error.parameter, detail=error.reason)
