"""Command-line entry point.

Runs the demo scenarios, or a single swap described by flags.
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from swapsim.amm.base import SwapResult
from swapsim.amm.errors import SwapSimulationError
from swapsim.config import DEFAULT_DEMO_CONFIG
from swapsim.demo import render_demo, run_demo
from swapsim.simulator import simulate

logger = structlog.get_logger()

EPILOG = """
Note:
  If you run without arguments, the demo runs by default.

Examples:
  swapsim --demo
  swapsim --reserveA 10000 --reserveB 10000 --fee 0.003 --direction A2B --amountIn 100
"""


class UsageError(Exception):
    """A flag is missing or its value cannot be parsed."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swapsim",
        description="Simulate a swap against a constant-product (x * y = k) pool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("--demo", action="store_true", help="Run the demo scenarios")
    # nargs="?" lets a flag given without a value reach the "Missing value" error
    for flag, dest, help_text in (
        ("--reserveA", "reserve_a", "Pool reserve of token A"),
        ("--reserveB", "reserve_b", "Pool reserve of token B"),
        ("--fee", "fee", "Fee fraction in [0, 1), e.g. 0.003"),
        ("--direction", "direction", "A2B or B2A (case-insensitive)"),
        ("--amountIn", "amount_in", "Amount of the input token"),
    ):
        parser.add_argument(flag, nargs="?", const="", dest=dest, help=help_text)
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Send structlog output to stderr so stdout carries only results."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def parse_number(value: str | None, flag: str) -> float:
    """Parse a flag value, rejecting missing values and trailing junk."""
    if value is None or value == "":
        raise UsageError(f"Missing value for {flag}")
    try:
        return float(value)
    except ValueError as err:
        raise UsageError(f"Invalid number for {flag}: {value}") from err


def format_single_run(swap: SwapResult) -> str:
    return (
        f"amountOut       = {swap.amount_out:.10f}\n"
        f"new reserveA    = {swap.new_reserve_a:.10f}\n"
        f"new reserveB    = {swap.new_reserve_b:.10f}\n"
        f"effective price = {swap.effective_price:.10f}\n"
        f"slippage (%)    = {swap.slippage_percent:.6f}\n"
    )


def run_single(args: argparse.Namespace) -> str:
    """Simulate the swap described by the flags.

    Raises:
        UsageError: If a flag is missing or not a number
        SwapSimulationError: If the simulation rejects the trade
    """
    reserve_a = parse_number(args.reserve_a, "--reserveA")
    reserve_b = parse_number(args.reserve_b, "--reserveB")
    fee = parse_number(args.fee, "--fee")
    if not args.direction:
        raise UsageError("Missing value for --direction")
    amount_in = parse_number(args.amount_in, "--amountIn")

    swap = simulate(reserve_a, reserve_b, fee, args.direction, amount_in).unwrap()
    return format_single_run(swap)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    single_run_flags = (args.reserve_a, args.reserve_b, args.fee, args.direction, args.amount_in)
    try:
        if args.demo or all(flag is None for flag in single_run_flags):
            config = DEFAULT_DEMO_CONFIG
            sys.stdout.write(render_demo(run_demo(config), config))
        else:
            sys.stdout.write(run_single(args))
    except (UsageError, SwapSimulationError) as err:
        logger.debug("cli_failed", error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        print("Run with --help for usage.", file=sys.stderr)
        return 1

    return 0
