"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta

import pytest

from bank_ledger.store import Ledger


class StepClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def ledger(clock: StepClock) -> Ledger:
    """Create a fresh, empty ledger for each test."""
    return Ledger(clock=clock)


@pytest.fixture
def sample_account_number() -> str:
    """Sample account number."""
    return "ACC100"
