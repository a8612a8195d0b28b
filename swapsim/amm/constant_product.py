"""Constant-product AMM math.

The pool prices trades so that x * y = k, with a proportional fee taken
from the input before pricing:

    amount_in_with_fee = amount_in * (1 - fee)
    amount_out = amount_in_with_fee * reserve_out / (reserve_in + amount_in_with_fee)

The fee is a pricing-only haircut; it is not booked separately.
"""

from __future__ import annotations

import math

import structlog

from swapsim.amm.result import QuoteResult, SwapError

logger = structlog.get_logger()


def _as_float(parameter: str, value: float) -> float | SwapError:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return SwapError.invalid_input(parameter, f"must be a number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        return SwapError.invalid_input(parameter, "must be finite, got an int beyond float range")


def check_positive(parameter: str, value: float) -> SwapError | None:
    """Return an error unless value is a finite number greater than zero."""
    converted = _as_float(parameter, value)
    if isinstance(converted, SwapError):
        return converted
    if math.isnan(converted) or math.isinf(converted):
        return SwapError.invalid_input(parameter, f"must be finite, got {value}")
    if converted <= 0:
        return SwapError.invalid_input(parameter, f"must be > 0, got {value}")
    return None


def check_fee(fee: float) -> SwapError | None:
    """Return an error unless fee is in [0, 1)."""
    converted = _as_float("fee", fee)
    if isinstance(converted, SwapError):
        return converted
    if not 0.0 <= converted < 1.0:
        return SwapError.invalid_input("fee", f"must be in [0, 1), got {fee}")
    return None


def _first_error(*errors: SwapError | None) -> SwapError | None:
    for error in errors:
        if error is not None:
            return error
    return None


def compute_amount_out(
    amount_in: float,
    reserve_in: float,
    reserve_out: float,
    fee: float,
) -> QuoteResult:
    """Validate and price an exact-input swap without logging.

    Shared by `quote` and the simulator, which each report rejections once.
    """
    error = _first_error(
        check_positive("amount_in", amount_in),
        check_positive("reserve_in", reserve_in),
        check_positive("reserve_out", reserve_out),
        check_fee(fee),
    )
    if error is not None:
        return QuoteResult.fail(error)

    amount_in_with_fee = amount_in * (1.0 - fee)
    amount_out = (amount_in_with_fee * reserve_out) / (reserve_in + amount_in_with_fee)

    if not math.isfinite(amount_out):
        # Only reachable when amount_in * reserve_out overflows a float
        return QuoteResult.fail(
            SwapError.invalid_input("amount_in", "output is not representable as a float")
        )
    if amount_out <= 0:
        # Only reachable when the product underflows to zero
        return QuoteResult.fail(
            SwapError.invalid_input("amount_in", "output underflows to zero")
        )

    return QuoteResult.ok(amount_out)


def quote(
    amount_in: float,
    reserve_in: float,
    reserve_out: float,
    fee: float,
) -> QuoteResult:
    """Calculate the output of an exact-input swap.

    Args:
        amount_in: Amount of the input token offered
        reserve_in: Pool reserve of the input token
        reserve_out: Pool reserve of the output token
        fee: Fraction of amount_in retained by the pool (0.003 = 0.3%)

    Returns:
        QuoteResult holding amount_out, with 0 < amount_out < reserve_out for
        any valid input, or an InvalidInput error naming the parameter
    """
    result = compute_amount_out(amount_in, reserve_in, reserve_out, fee)
    if result.error is not None:
        logger.debug(
            "quote_rejected", parameter=result.error.parameter, reason=result.error.reason
        )
    return result


def quote_amount_in(
    amount_out: float,
    reserve_in: float,
    reserve_out: float,
    fee: float,
) -> QuoteResult:
    """Calculate the input required to receive an exact output.

    Formula: amount_in = reserve_in * amount_out / ((reserve_out - amount_out) * (1 - fee))

    Args:
        amount_out: Desired amount of the output token
        reserve_in: Pool reserve of the input token
        reserve_out: Pool reserve of the output token
        fee: Fraction of the input retained by the pool

    Returns:
        QuoteResult holding the required amount_in, an InvalidInput error, or
        a PoolDrained error if amount_out >= reserve_out
    """
    error = _first_error(
        check_positive("amount_out", amount_out),
        check_positive("reserve_in", reserve_in),
        check_positive("reserve_out", reserve_out),
        check_fee(fee),
    )
    if error is None and amount_out >= reserve_out:
        error = SwapError.pool_drained(
            "amount_out", f"must be < reserve_out ({reserve_out}), got {amount_out}"
        )

    if error is None:
        amount_in = (reserve_in * amount_out) / ((reserve_out - amount_out) * (1.0 - fee))
        if not math.isfinite(amount_in):
            error = SwapError.invalid_input(
                "amount_out", "required input is not representable as a float"
            )
        elif amount_in <= 0:
            error = SwapError.invalid_input("amount_out", "required input underflows to zero")

    if error is not None:
        logger.debug("quote_amount_in_rejected", parameter=error.parameter, reason=error.reason)
        return QuoteResult.fail(error)

    return QuoteResult.ok(amount_in)


__all__ = [
    "check_fee",
    "check_positive",
    "compute_amount_out",
    "quote",
    "quote_amount_in",
]
