"""Pytest configuration and fixtures."""

from dataclasses import dataclass

import pytest
import structlog


@dataclass(frozen=True)
class Pool:
    """Reserves and fee for a test pool."""

    reserve_a: float
    reserve_b: float
    fee: float


@pytest.fixture
def balanced_pool() -> Pool:
    """The demo pool: 10,000 / 10,000 at 0.3%."""
    return Pool(reserve_a=10_000.0, reserve_b=10_000.0, fee=0.003)


@pytest.fixture
def skewed_pool() -> Pool:
    """A pool where one A is worth four B."""
    return Pool(reserve_a=5_000.0, reserve_b=20_000.0, fee=0.003)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() a test (e.g. the CLI) performed."""
    yield
    structlog.reset_defaults()
