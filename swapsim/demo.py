"""Demo scenarios: the same pool hit with trades of growing size."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from swapsim.amm.base import Direction, SwapResult
from swapsim.config import DEFAULT_DEMO_CONFIG, DemoConfig
from swapsim.simulator import simulate

logger = structlog.get_logger()

SEPARATOR_WIDTH = 100

CONCLUSIONS = (
    "Slippage grows non-linearly with trade size (big trades move reserves a lot).",
    "Effective price is always worse than spot because of fee + price impact.",
    "Larger pools (more liquidity) mean smaller slippage for the same amountIn.",
)


@dataclass(frozen=True)
class Scenario:
    """A named trade against the demo pool."""

    name: str
    direction: Direction
    amount_in: float


@dataclass(frozen=True)
class ScenarioOutcome:
    scenario: Scenario
    result: SwapResult


def build_scenarios(config: DemoConfig = DEFAULT_DEMO_CONFIG) -> list[Scenario]:
    """Size each scenario as a fraction of reserve A."""
    return [
        Scenario(name=name, direction=config.direction, amount_in=config.reserve_a * fraction)
        for name, fraction in config.scenarios
    ]


def run_demo(config: DemoConfig = DEFAULT_DEMO_CONFIG) -> list[ScenarioOutcome]:
    """Simulate every scenario against the configured pool.

    Raises:
        SwapSimulationError: If the config produces an invalid trade
    """
    outcomes = []
    for scenario in build_scenarios(config):
        result = simulate(
            config.reserve_a,
            config.reserve_b,
            config.fee,
            scenario.direction,
            scenario.amount_in,
        ).unwrap()
        outcomes.append(ScenarioOutcome(scenario=scenario, result=result))

    logger.debug("demo_completed", scenario_count=len(outcomes))
    return outcomes


def format_header() -> str:
    columns = (
        f"{'Scenario':<10}{'Dir':<6}"
        f"{'amountIn':>12}{'amountOut':>14}{'newResA':>14}{'newResB':>14}"
        f"{'effPrice':>16}{'slip(%)':>14}"
    )
    return columns + "\n" + "-" * SEPARATOR_WIDTH


def format_row(outcome: ScenarioOutcome) -> str:
    scenario, result = outcome.scenario, outcome.result
    return (
        f"{scenario.name:<10}{scenario.direction.value:<6}"
        f"{scenario.amount_in:>12.6f}"
        f"{result.amount_out:>14.6f}"
        f"{result.new_reserve_a:>14.6f}"
        f"{result.new_reserve_b:>14.6f}"
        f"{result.effective_price:>16.8f}"
        f"{result.slippage_percent:>14.6f}"
    )


def render_demo(outcomes: list[ScenarioOutcome], config: DemoConfig = DEFAULT_DEMO_CONFIG) -> str:
    """Render the pool summary, the scenario table and the conclusions."""
    lines = [
        f"Demo: reserveA={config.reserve_a:g}, reserveB={config.reserve_b:g}, "
        f"fee={config.fee:g}, direction={config.direction.value}",
        "",
        format_header(),
    ]
    lines.extend(format_row(outcome) for outcome in outcomes)
    lines.append("")
    lines.append("Conclusions:")
    lines.extend(f"- {line}" for line in CONCLUSIONS)
    return "\n".join(lines) + "\n"
