"""Shared pytest fixtures for opcalc tests."""

import pytest

from opcalc.valuation import OptionBuilder, OptionRecord

from opcalc.tests.helpers import BASE_TIME, SECONDS_PER_YEAR, build_option


# ---------------------------------------------------------------------------
# Scalar constants
# ---------------------------------------------------------------------------

CURRENT_TIME = BASE_TIME  # 2025-01-01 00:00:00 UTC
MATURITY_TIME = BASE_TIME + SECONDS_PER_YEAR  # 2026-01-01 00:00:00 UTC
SPOT = 100.0
STRIKE = 100.0
RATE = 0.05
VOL = 0.20


# ---------------------------------------------------------------------------
# Builders / options
# ---------------------------------------------------------------------------


@pytest.fixture()
def full_builder() -> OptionBuilder:
    """Builder with every required input set: ATM, one year, r=5%, sigma=20%."""
    return (
        OptionBuilder()
        .with_asset_price(SPOT)
        .with_strike(STRIKE)
        .with_volatility(VOL)
        .with_interest(RATE)
        .with_current_time(CURRENT_TIME)
        .with_maturity_time(MATURITY_TIME)
    )


@pytest.fixture()
def atm_option() -> OptionRecord:
    return build_option()


@pytest.fixture()
def scenario_option() -> OptionRecord:
    """S=100, K=105, sigma=23%, r=0.5%, 2020-12-01 → 2021-01-15 (45 days)."""
    return build_option(
        asset_price=100.0,
        strike=105.0,
        volatility=0.23,
        interest=0.005,
        current_time=1_606_780_800,
        maturity_time=1_610_668_800,
    )
