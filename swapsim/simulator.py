"""Single-trade simulation against a two-asset constant-product pool."""

from __future__ import annotations

import structlog

from swapsim.amm.base import Direction, SwapResult
from swapsim.amm.constant_product import check_positive, compute_amount_out
from swapsim.amm.result import SimulationResult, SwapError

logger = structlog.get_logger()


def simulate(
    reserve_a: float,
    reserve_b: float,
    fee: float,
    direction: Direction | str,
    amount_in: float,
) -> SimulationResult:
    """Simulate an exact-input swap and report its price impact.

    Reserves are validated first, then the direction, then the quote inputs
    (amount_in, fee). The pool is never mutated; new reserves are returned.

    Args:
        reserve_a: Pool reserve of token A
        reserve_b: Pool reserve of token B
        fee: Fraction of amount_in retained by the pool
        direction: Direction or a case-insensitive "A2B" / "B2A" token
        amount_in: Amount of the input token offered

    Returns:
        SimulationResult holding the SwapResult, or the InvalidInput /
        PoolDrained error that rejected the trade
    """
    for parameter, value in (("reserve_a", reserve_a), ("reserve_b", reserve_b)):
        error = check_positive(parameter, value)
        if error is not None:
            return _reject(error)

    parsed = Direction.parse(direction)
    if parsed is None:
        return _reject(SwapError.invalid_input("direction", f"must be A2B or B2A, got {direction!r}"))

    if parsed is Direction.A_TO_B:
        reserve_in, reserve_out = reserve_a, reserve_b
    else:
        reserve_in, reserve_out = reserve_b, reserve_a

    spot_price = reserve_out / reserve_in

    quoted = compute_amount_out(amount_in, reserve_in, reserve_out, fee)
    if quoted.error is not None:
        return _reject(quoted.error)
    amount_out = quoted.unwrap()

    # quote() guarantees this; float rounding on extreme inputs is the only way in
    if not amount_out < reserve_out:
        return _reject(
            SwapError.pool_drained(
                "amount_in",
                f"amount_out {amount_out} would drain the out reserve {reserve_out}",
            )
        )

    if parsed is Direction.A_TO_B:
        new_reserve_a, new_reserve_b = reserve_a + amount_in, reserve_b - amount_out
    else:
        new_reserve_a, new_reserve_b = reserve_a - amount_out, reserve_b + amount_in

    effective_price = amount_out / amount_in
    # (spot - effective) / spot reduces to this; every term is non-negative
    amount_in_with_fee = amount_in * (1.0 - fee)
    slippage_percent = (
        (amount_in_with_fee + fee * reserve_in) / (reserve_in + amount_in_with_fee) * 100.0
    )

    swap = SwapResult(
        direction=parsed,
        amount_in=amount_in,
        amount_out=amount_out,
        new_reserve_a=new_reserve_a,
        new_reserve_b=new_reserve_b,
        spot_price=spot_price,
        effective_price=effective_price,
        slippage_percent=slippage_percent,
    )
    logger.debug(
        "swap_simulated",
        direction=parsed.value,
        amount_in=amount_in,
        amount_out=amount_out,
        slippage_percent=slippage_percent,
    )
    return SimulationResult.ok(swap)


def _reject(error: SwapError) -> SimulationResult:
    logger.debug(
        "swap_rejected",
        kind=error.kind.value,
        parameter=error.parameter,
        reason=error.reason,
    )
    return SimulationResult.fail(error)


__all__ = ["simulate"]
