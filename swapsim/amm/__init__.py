"""Constant-product AMM math, types and errors."""

from swapsim.amm.base import Direction, SwapResult
from swapsim.amm.constant_product import quote, quote_amount_in
from swapsim.amm.errors import InvalidInputError, PoolDrainedError, SwapSimulationError
from swapsim.amm.result import QuoteResult, SimulationResult, SwapError, SwapErrorKind

__all__ = [
    # Types
    "Direction",
    "SwapResult",
    # Math
    "quote",
    "quote_amount_in",
    # Results
    "QuoteResult",
    "SimulationResult",
    "SwapError",
    "SwapErrorKind",
    # Exceptions
    "SwapSimulationError",
    "InvalidInputError",
    "PoolDrainedError",
]
