"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from prometheus_client import REGISTRY

from calc_hub.domain.models import LoanInput


@pytest.fixture
def fixed_now() -> datetime:
    """Reference 'now' so countdown and clock results are repeatable"""
    return datetime(2026, 10, 19, 12, 0, 0)


@pytest.fixture
def fixed_utc_now() -> datetime:
    return datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def mortgage() -> LoanInput:
    """30-year mortgage: 300,000,000 won at 4.5%"""
    return LoanInput(principal=Decimal(300_000_000), annual_rate_percent=Decimal("4.5"), term_months=360)


@pytest.fixture
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLI from replacing pytest's log handlers"""
    monkeypatch.setattr("calc_hub.cli.setup_logging", lambda *args, **kwargs: None)


@pytest.fixture
def sample_value():
    """Read a metric sample from the default registry (0 when never recorded)"""

    def _read(name: str, labels: dict) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0

    return _read
