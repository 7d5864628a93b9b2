"""Shared test fixtures for pyCivilDate tests."""

from __future__ import annotations

from typing import Any

import pytest

from civildate import Date, FixedClock

# 2023-02-05T00:00:00, a Sunday
TEST_SUNDAY_MICROS = 1_675_555_200_000_000


@pytest.fixture
def sunday() -> Date:
    """Midnight of Sunday 2023-02-05."""
    return Date.from_ymd(2023, 2, 5)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at 2023-02-05T00:00:00."""
    return FixedClock(TEST_SUNDAY_MICROS)


@pytest.fixture
def epoch() -> Date:
    """1970-01-01T00:00:00."""
    return Date()


# Test markers for different test types
def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, fixed inputs)"
    )
    config.addinivalue_line(
        "markers", "property: mark test as a hypothesis property test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as sweeping a large input range"
    )
