"""Quantities derived from the raw option parameters: T, d1, d2 and the regime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..enums import DayCountConvention, ValuationRegime
from ..exceptions import InvalidParameterError
from ..utils import calculate_year_fraction

if TYPE_CHECKING:
    from .core import OptionParameters

__all__ = ["DerivedQuantities", "compute_derived_quantities"]

_MIN_VOL_SQRT_T = 1e-300


@dataclass(frozen=True, slots=True)
class DerivedQuantities:
    """Pre-computed inputs shared across all Black-Scholes calculations.

    ``d1`` and ``d2`` are only populated in the ``STANDARD`` regime. In the
    degenerate regimes (``EXPIRED``: T = 0, ``ZERO_VOLATILITY``: sigma = 0 and
    T > 0) the closed-form terms divide by zero, so they are left as ``None``
    and the engine prices the option through an explicit branch instead.
    """

    time_to_maturity: float
    regime: ValuationRegime
    d1: float | None = None
    d2: float | None = None


def _calculate_d_values(
    spot: float,
    strike: float,
    time_to_maturity: float,
    volatility: float,
    interest: float,
    dividend_yield: float,
) -> tuple[float, float]:
    """Calculate d1 and d2 for the Black-Scholes model.

    Parameters
    ----------
    spot
        Current spot price.
    strike
        Strike price.
    time_to_maturity
        Time to maturity in years, strictly positive.
    volatility
        Volatility (annualized), strictly positive.
    interest
        Continuously-compounded risk-free rate.
    dividend_yield
        Continuous dividend (payout) yield.

    Returns
    -------
    tuple[float, float]
        Pair ``(d1, d2)``. Either may be infinite; neither is NaN once the
        inputs have passed :func:`_check_evaluable`.
    """
    vol_sqrt_t = volatility * np.sqrt(time_to_maturity)
    numerator = (
        np.log(spot)
        - np.log(strike)
        + (interest - dividend_yield + 0.5 * volatility * volatility) * time_to_maturity
    )
    with np.errstate(over="ignore"):
        d1 = numerator / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def _check_evaluable(
    parameters: OptionParameters,
    time_to_maturity: float,
    regime: ValuationRegime,
) -> None:
    """Reject finite inputs whose pricing terms overflow at this maturity.

    Every product the engines form is bounded by one of the terms checked
    here, so a record that passes returns finite values and Greeks.
    """
    T = time_to_maturity
    if regime is ValuationRegime.STANDARD and not np.isfinite(
        parameters.volatility * parameters.volatility * T
    ):
        raise InvalidParameterError("volatility", "is too large for the time to maturity")

    with np.errstate(over="ignore"):
        df_r = np.exp(-parameters.interest * T)
        df_q = np.exp(-parameters.dividend_yield * T)
        # K e^(-rT) scaled by T (rho) and r (theta); same for S e^(-qT).
        strike_leg = parameters.strike * df_r * max(T, abs(parameters.interest), 1.0)
        spot_leg = parameters.asset_price * df_q * max(T, abs(parameters.dividend_yield), 1.0)
        growth = parameters.asset_price * np.exp(
            (parameters.interest - parameters.dividend_yield) * T
        )

    if not np.isfinite(strike_leg):
        raise InvalidParameterError("interest", "is too large in magnitude for the time to maturity")
    if not np.isfinite(spot_leg):
        raise InvalidParameterError(
            "dividend_yield", "is too large in magnitude for the time to maturity"
        )
    if regime is ValuationRegime.ZERO_VOLATILITY and not np.isfinite(growth):
        raise InvalidParameterError("interest", "is too large in magnitude for the time to maturity")


def compute_derived_quantities(
    parameters: OptionParameters,
    day_count: DayCountConvention = DayCountConvention.ACT_365F,
) -> DerivedQuantities:
    """Compute time to maturity, d1/d2 and the valuation regime.

    T >= 0 holds because validation guarantees ``maturity_time >=
    current_time``. An expired option (T = 0) is tagged ``EXPIRED`` even when
    its volatility is also zero.

    Raises
    ------
    InvalidParameterError
        When an input is finite but too large to price over the option's
        life, e.g. sigma = 1e200 or r = -1000 over a year.
    """
    try:
        time_to_maturity = calculate_year_fraction(
            parameters.current_time,
            parameters.maturity_time,
            day_count_convention=day_count,
        )
    except OverflowError:
        raise InvalidParameterError(
            "maturity_time", "is too far from current_time to express in years"
        ) from None

    if time_to_maturity <= 0.0:
        return DerivedQuantities(time_to_maturity=0.0, regime=ValuationRegime.EXPIRED)

    # sigma * sqrt(T) underflowing to zero is priced as the deterministic limit.
    if parameters.volatility * np.sqrt(time_to_maturity) < _MIN_VOL_SQRT_T:
        regime = ValuationRegime.ZERO_VOLATILITY
    else:
        regime = ValuationRegime.STANDARD
    _check_evaluable(parameters, time_to_maturity, regime)

    if regime is ValuationRegime.ZERO_VOLATILITY:
        return DerivedQuantities(time_to_maturity=time_to_maturity, regime=regime)

    d1, d2 = _calculate_d_values(
        parameters.asset_price,
        parameters.strike,
        time_to_maturity,
        parameters.volatility,
        parameters.interest,
        parameters.dividend_yield,
    )
    return DerivedQuantities(
        time_to_maturity=time_to_maturity,
        regime=regime,
        d1=d1,
        d2=d2,
    )
