"""Tests for swap result and error types."""

import pytest

from swapsim.amm.base import Direction
from swapsim.amm.errors import InvalidInputError, PoolDrainedError, SwapSimulationError
from swapsim.amm.result import QuoteResult, SimulationResult, SwapError, SwapErrorKind


class TestSwapError:
    """Tests for SwapError."""

    def test_invalid_input_constructor(self):
        error = SwapError.invalid_input("fee", "must be in [0, 1), got 2")

        assert error.kind is SwapErrorKind.INVALID_INPUT
        assert error.parameter == "fee"
        assert error.message == "fee: must be in [0, 1), got 2"

    def test_to_exception_maps_kind(self):
        """Each error kind maps to its own exception class."""
        invalid = SwapError.invalid_input("direction", "must be A2B or B2A").to_exception()
        drained = SwapError.pool_drained("amount_in", "would drain").to_exception()

        assert type(invalid) is InvalidInputError
        assert type(drained) is PoolDrainedError
        assert isinstance(drained, SwapSimulationError)
        assert str(invalid) == "direction: must be A2B or B2A"

    def test_is_immutable(self):
        error = SwapError.invalid_input("fee", "bad")
        with pytest.raises(AttributeError):
            error.parameter = "amount_in"  # type: ignore[misc]


class TestResults:
    """Tests for QuoteResult and SimulationResult."""

    def test_quote_ok(self):
        result = QuoteResult.ok(42.0)

        assert result.is_valid
        assert not result.is_error
        assert result.unwrap() == 42.0

    def test_quote_fail(self):
        result = QuoteResult.fail(SwapError.invalid_input("amount_in", "must be > 0, got 0"))

        assert result.is_error
        assert result.amount is None
        with pytest.raises(InvalidInputError, match="amount_in"):
            result.unwrap()

    def test_simulation_fail_raises_pool_drained(self):
        result = SimulationResult.fail(SwapError.pool_drained("amount_in", "would drain"))

        assert not result.is_valid
        assert result.swap is None
        with pytest.raises(PoolDrainedError):
            result.unwrap()


class TestDirection:
    """Tests for Direction parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("A2B", Direction.A_TO_B),
            ("a2b", Direction.A_TO_B),
            (" b2A ", Direction.B_TO_A),
            ("B2A", Direction.B_TO_A),
            (Direction.B_TO_A, Direction.B_TO_A),
        ],
    )
    def test_parse_known(self, raw, expected):
        assert Direction.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["XYZ", "", "A2A", "AtoB", None, 1])
    def test_parse_unknown(self, raw):
        assert Direction.parse(raw) is None

    def test_value_is_wire_token(self):
        """Direction values are the tokens callers type."""
        assert Direction.A_TO_B.value == "A2B"
        assert Direction.B_TO_A == "B2A"

    def test_price_units(self):
        assert Direction.A_TO_B.label == "B per A"
        assert Direction.B_TO_A.label == "A per B"
