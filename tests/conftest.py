from datetime import datetime
from pathlib import Path

import pytest

from shopkit.adapters import (
    DevEmailAdapter,
    FixedClock,
    FlatRateShippingAdapter,
    LoggingAnalyticsAdapter,
    PaymentStubAdapter,
    StaticExchangeRateAdapter,
)
from shopkit.rules import Rules, load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """Rules loaded from the project's rules.yaml."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen at a weekday afternoon, outside the holiday."""
    return FixedClock(datetime(2024, 1, 1, 12, 0))


@pytest.fixture
def mailer() -> DevEmailAdapter:
    return DevEmailAdapter()


@pytest.fixture
def payment() -> PaymentStubAdapter:
    return PaymentStubAdapter()


@pytest.fixture
def analytics() -> LoggingAnalyticsAdapter:
    return LoggingAnalyticsAdapter()


@pytest.fixture
def rates() -> StaticExchangeRateAdapter:
    return StaticExchangeRateAdapter()


@pytest.fixture
def shipping() -> FlatRateShippingAdapter:
    return FlatRateShippingAdapter()
