"""Helper functions for option valuation."""

from __future__ import annotations

from contextlib import contextmanager
from collections.abc import Iterator
import time
import numpy as np

from .enums import DayCountConvention
from .exceptions import ValidationError

__all__ = [
    "log_timing",
    "seconds_per_year",
    "calculate_year_fraction",
    "forward_price",
    "put_call_parity_rhs",
    "put_call_parity_gap",
]

SECONDS_IN_DAY = 86400

_DAYS_PER_YEAR = {
    DayCountConvention.ACT_360: 360.0,
    DayCountConvention.ACT_365F: 365.0,
    DayCountConvention.ACT_365_25: 365.25,
}


@contextmanager
def log_timing(logger, label: str, enabled: bool) -> Iterator[None]:
    """Log timing for a code block when enabled is True."""
    if not enabled:
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug("Timing %s: %.6fs", label, elapsed)


def seconds_per_year(
    day_count_convention: DayCountConvention = DayCountConvention.ACT_365F,
) -> float:
    """Number of seconds in one year under ``day_count_convention``."""
    try:
        return _DAYS_PER_YEAR[day_count_convention] * SECONDS_IN_DAY
    except KeyError:
        raise ValidationError(
            f"Unsupported day_count_convention: {day_count_convention}"
        ) from None


def calculate_year_fraction(
    start_time: int,
    end_time: int,
    day_count_convention: DayCountConvention = DayCountConvention.ACT_365F,
) -> float:
    """Calculate year fraction between two timestamps.

    Parameters
    ==========
    start_time: int
        starting timestamp, in seconds since the Unix epoch
    end_time: int
        ending timestamp, in seconds since the Unix epoch
    day_count_convention: DayCountConvention, default DayCountConvention.ACT_365F
        Day-count basis. Supported:
        - DayCountConvention.ACT_365F
        - DayCountConvention.ACT_360
        - DayCountConvention.ACT_365_25

    Returns
    =======
    year_fraction: float
        year fraction between start_time and end_time

    Examples
    ========
    >>> calculate_year_fraction(1_606_780_800, 1_610_668_800)  # doctest: +SKIP
    0.12328767...
    """
    return (end_time - start_time) / seconds_per_year(day_count_convention)


def forward_price(
    *,
    spot: float,
    time_to_maturity: float,
    short_rate: float,
    dividend_yield: float = 0.0,
) -> float:
    """Compute the no-arbitrage forward price $S e^{(r - q) T}$."""
    if time_to_maturity < 0:
        raise ValidationError("time_to_maturity must be >= 0")
    return float(spot * np.exp((short_rate - dividend_yield) * time_to_maturity))


def put_call_parity_rhs(
    *,
    spot: float,
    strike: float,
    time_to_maturity: float,
    short_rate: float,
    dividend_yield: float = 0.0,
) -> float:
    """Compute the RHS of put-call parity for European options.

    Returns C - P implied by no-arbitrage (i.e., PV(F - K)).
    """
    fwd = forward_price(
        spot=spot,
        time_to_maturity=time_to_maturity,
        short_rate=short_rate,
        dividend_yield=dividend_yield,
    )
    return float(np.exp(-short_rate * time_to_maturity) * (fwd - float(strike)))


def put_call_parity_gap(
    *,
    call_price: float,
    put_price: float,
    spot: float,
    strike: float,
    time_to_maturity: float,
    short_rate: float,
    dividend_yield: float = 0.0,
) -> float:
    """Return call-put parity residual: (C - P) - RHS."""
    rhs = put_call_parity_rhs(
        spot=spot,
        strike=strike,
        time_to_maturity=time_to_maturity,
        short_rate=short_rate,
        dividend_yield=dividend_yield,
    )
    return float(call_price - put_price - rhs)
