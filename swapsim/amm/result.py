"""Swap calculation result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from swapsim.amm.errors import InvalidInputError, PoolDrainedError, SwapSimulationError

if TYPE_CHECKING:
    from swapsim.amm.base import SwapResult


class SwapErrorKind(Enum):
    """Types of swap calculation errors."""

    INVALID_INPUT = "invalid_input"
    POOL_DRAINED = "pool_drained"


@dataclass(frozen=True)
class SwapError:
    """A rejected quote or simulation.

    Attributes:
        kind: Which rule family was violated.
        parameter: Name of the offending input (e.g. "reserve_a", "direction").
        reason: Human-readable description of the rule.
    """

    kind: SwapErrorKind
    parameter: str
    reason: str

    @classmethod
    def invalid_input(cls, parameter: str, reason: str) -> SwapError:
        return cls(kind=SwapErrorKind.INVALID_INPUT, parameter=parameter, reason=reason)

    @classmethod
    def pool_drained(cls, parameter: str, reason: str) -> SwapError:
        return cls(kind=SwapErrorKind.POOL_DRAINED, parameter=parameter, reason=reason)

    @property
    def message(self) -> str:
        return f"{self.parameter}: {self.reason}"

    def to_exception(self) -> SwapSimulationError:
        """Build the exception matching this error's kind."""
        if self.kind is SwapErrorKind.POOL_DRAINED:
            return PoolDrainedError(self.parameter, self.reason)
        return InvalidInputError(self.parameter, self.reason)


@dataclass(frozen=True)
class QuoteResult:
    """Result of a quote.

    Holds either an amount (output for `quote`, required input for
    `quote_amount_in`) or the error that rejected the request.

    Examples:
        result = quote(100.0, 10_000.0, 10_000.0, 0.003)
        if result.is_valid:
            amount_out = result.amount
        else:
            report(result.error.message)
    """

    amount: float | None
    error: SwapError | None = None

    @property
    def is_valid(self) -> bool:
        """True if the quote succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the quote was rejected."""
        return self.error is not None

    @classmethod
    def ok(cls, amount: float) -> QuoteResult:
        return cls(amount=amount)

    @classmethod
    def fail(cls, error: SwapError) -> QuoteResult:
        return cls(amount=None, error=error)

    def unwrap(self) -> float:
        """Return the amount, or raise the typed exception for the error."""
        if self.error is not None:
            raise self.error.to_exception()
        assert self.amount is not None
        return self.amount


@dataclass(frozen=True)
class SimulationResult:
    """Result of a swap simulation: a SwapResult or the error that rejected it."""

    swap: SwapResult | None
    error: SwapError | None = None

    @property
    def is_valid(self) -> bool:
        """True if the simulation succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the simulation was rejected."""
        return self.error is not None

    @classmethod
    def ok(cls, swap: SwapResult) -> SimulationResult:
        return cls(swap=swap)

    @classmethod
    def fail(cls, error: SwapError) -> SimulationResult:
        return cls(swap=None, error=error)

    def unwrap(self) -> SwapResult:
        """Return the SwapResult, or raise the typed exception for the error."""
        if self.error is not None:
            raise self.error.to_exception()
        assert self.swap is not None
        return self.swap
