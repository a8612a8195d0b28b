"""Constant-product swap simulator.

Usage:
    from swapsim import simulate

    result = simulate(10_000.0, 10_000.0, 0.003, "A2B", 100.0)
    if result.is_valid:
        print(result.swap.amount_out, result.swap.slippage_percent)
    else:
        print(result.error.message)
"""

from swapsim.amm import (
    Direction,
    InvalidInputError,
    PoolDrainedError,
    QuoteResult,
    SimulationResult,
    SwapError,
    SwapErrorKind,
    SwapResult,
    SwapSimulationError,
    quote,
    quote_amount_in,
)
from swapsim.simulator import simulate

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "InvalidInputError",
    "PoolDrainedError",
    "QuoteResult",
    "SimulationResult",
    "SwapError",
    "SwapErrorKind",
    "SwapResult",
    "SwapSimulationError",
    "quote",
    "quote_amount_in",
    "simulate",
]
