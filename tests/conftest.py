"""Shared pytest fixtures for the test suite."""

from datetime import UTC, date, datetime

import pytest

from payment_initiation.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def now() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def today(now: datetime) -> date:
    return now.date()


@pytest.fixture
def time_provider(now: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(now)


@pytest.fixture
def debtor_iban() -> str:
    return "ES7921000813610123456789"


@pytest.fixture
def creditor_iban() -> str:
    return "ES1420805801101234567891"
