"""Swap simulation error classes.

Every failure names the offending input and the rule it broke.
"""


class SwapSimulationError(Exception):
    """Base error for swap simulation."""

    def __init__(self, parameter: str, reason: str) -> None:
        super().__init__(f"{parameter}: {reason}")
        self.parameter = parameter
        self.reason = reason


class InvalidInputError(SwapSimulationError):
    """An input is out of range (reserves, amount, fee or direction)."""

    pass


class PoolDrainedError(SwapSimulationError):
    """Output would meet or exceed the reserve it is paid from."""

    pass
