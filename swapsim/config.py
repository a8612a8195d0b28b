"""Demo configuration."""

from dataclasses import dataclass, field

from swapsim.amm.base import Direction
from swapsim.constants import (
    DEFAULT_FEE,
    DEMO_RESERVE_A,
    DEMO_RESERVE_B,
    LARGE_TRADE_FRACTION,
    MEDIUM_TRADE_FRACTION,
    SMALL_TRADE_FRACTION,
)


@dataclass(frozen=True)
class DemoConfig:
    """Pool and scenarios for the demo run.

    Attributes:
        reserve_a: Reserve of token A (default: 10,000)
        reserve_b: Reserve of token B (default: 10,000)
        fee: Pool fee fraction (default: 0.003)
        direction: Trade direction for every scenario (default: A2B)
        scenarios: (name, fraction of reserve_a) pairs, run in order
    """

    reserve_a: float = DEMO_RESERVE_A
    reserve_b: float = DEMO_RESERVE_B
    fee: float = DEFAULT_FEE
    direction: Direction = Direction.A_TO_B
    scenarios: tuple[tuple[str, float], ...] = field(
        default=(
            ("small", SMALL_TRADE_FRACTION),
            ("medium", MEDIUM_TRADE_FRACTION),
            ("large", LARGE_TRADE_FRACTION),
        )
    )


# Default configuration instance
DEFAULT_DEMO_CONFIG = DemoConfig()
