"""
Pytest configuration and shared fixtures.

Provides the worked example setups used across the suite and a helper
for isolating configuration from the developer's environment.
"""

from pathlib import Path

import pytest

from src.calculator.form import CalculatorFormValues
from src.risk.position_sizer import PositionSizingInput


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def long_input():
    """100k account, 2% risk, entry 100, stop 95, 1:2 target."""
    return PositionSizingInput(
        account_balance=100000,
        risk_percent=2,
        entry_price=100,
        stop_loss_price=95,
        reward_multiple=2,
    )


@pytest.fixture
def short_input():
    """Same account and risk with the stop above entry."""
    return PositionSizingInput(
        account_balance=100000,
        risk_percent=2,
        entry_price=95,
        stop_loss_price=100,
        reward_multiple=2,
    )


@pytest.fixture
def default_form():
    """Form values as first shown to the user."""
    return CalculatorFormValues()


@pytest.fixture
def sample_csv():
    """Path to the batch sizing fixture."""
    return FIXTURES_DIR / "setups.csv"


@pytest.fixture
def clean_env(monkeypatch):
    """Remove calculator environment overrides for the duration of a test."""
    for name in ("RRCALC_LOG_LEVEL", "RRCALC_ACCOUNT_BALANCE", "RRCALC_RISK_PERCENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
