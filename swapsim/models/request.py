"""Request bodies for the HTTP API.

Range rules (positive reserves, fee in [0, 1), known direction) are left to
the simulator so HTTP callers get the same error wording as library callers.
"""

from pydantic import BaseModel, Field


class QuoteRequest(BaseModel):
    """Exact-input quote against one pair of reserves."""

    amount_in: float = Field(alias="amountIn", description="Amount of the input token.")
    reserve_in: float = Field(alias="reserveIn", description="Pool reserve of the input token.")
    reserve_out: float = Field(alias="reserveOut", description="Pool reserve of the output token.")
    fee: float = Field(default=0.003, description="Fee fraction in [0, 1).")

    model_config = {"populate_by_name": True}


class SimulateRequest(BaseModel):
    """Single swap against a two-asset pool."""

    reserve_a: float = Field(alias="reserveA", description="Pool reserve of token A.")
    reserve_b: float = Field(alias="reserveB", description="Pool reserve of token B.")
    fee: float = Field(default=0.003, description="Fee fraction in [0, 1).")
    direction: str = Field(description="A2B or B2A (case-insensitive).")
    amount_in: float = Field(alias="amountIn", description="Amount of the input token.")

    model_config = {"populate_by_name": True}
