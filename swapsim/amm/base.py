"""Base types for constant-product swap simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Which reserve the trader pays into and which one they are paid from."""

    A_TO_B = "A2B"  # sell token A, receive token B
    B_TO_A = "B2A"  # sell token B, receive token A

    @classmethod
    def parse(cls, raw: Direction | str) -> Direction | None:
        """Parse a direction token case-insensitively.

        Returns:
            The matching Direction, or None if the token is not recognized
        """
        if isinstance(raw, Direction):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """Price unit of this direction (out token per in token)."""
        return "B per A" if self is Direction.A_TO_B else "A per B"


@dataclass(frozen=True)
class SwapResult:
    """Result of simulating an exact-input swap against a pool."""

    direction: Direction
    amount_in: float
    amount_out: float
    new_reserve_a: float
    new_reserve_b: float
    # Pre-trade marginal price, out token per in token
    spot_price: float
    # amount_out / amount_in, same units as spot_price
    effective_price: float
    # Positive when the trade executed worse than spot
    slippage_percent: float
