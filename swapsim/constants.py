"""Default pool parameters used by the demo and the CLI."""

# 0.3%, the standard constant-product fee tier
DEFAULT_FEE = 0.003

# Demo pool (can represent any pair)
DEMO_RESERVE_A = 10_000.0
DEMO_RESERVE_B = 10_000.0

# Trade sizes for the demo, as fractions of reserve A
SMALL_TRADE_FRACTION = 0.01
MEDIUM_TRADE_FRACTION = 0.10
LARGE_TRADE_FRACTION = 0.40
