"""Black-Scholes European option valuation with continuous dividend yield.

One implementation class per :class:`~opcalc.enums.ValuationRegime`:

- ``_BSMEuropeanValuation``: sigma > 0 and T > 0, closed-form formulas.
- ``_BSMExpiredValuation``: T = 0, value collapses to intrinsic value.
- ``_BSMZeroVolValuation``: sigma = 0 and T > 0, deterministic forward.

All Greeks are raw (per unit of the bumped input): vega per 1.00 of
volatility, theta per year, rho per 1.00 of rate. Scaling to per-1% or
per-day figures is left to the caller.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
import numpy as np
from ..distributions import std_normal_cdf, std_normal_pdf
from ..enums import OptionType
from ..utils import forward_price

if TYPE_CHECKING:
    from .core import OptionParameters
    from .derived import DerivedQuantities


class _BSMValuationBase(ABC):
    """Base class for Black-Scholes option valuation.

    Subclasses implement every measure for one valuation regime.
    """

    def __init__(self, parameters: OptionParameters, derived: DerivedQuantities) -> None:
        self.parameters = parameters
        self.derived = derived

    @property
    def spot(self) -> float:
        return self.parameters.asset_price

    @property
    def strike(self) -> float:
        return self.parameters.strike

    @property
    def time_to_maturity(self) -> float:
        return self.derived.time_to_maturity

    @property
    def df_r(self) -> float:
        """Risk-free discount factor $e^{-rT}$."""
        return float(np.exp(-self.parameters.interest * self.time_to_maturity))

    @property
    def df_q(self) -> float:
        """Dividend discount factor $e^{-qT}$."""
        return float(np.exp(-self.parameters.dividend_yield * self.time_to_maturity))

    @abstractmethod
    def present_value(self, option_type: OptionType) -> float:
        """Option value for ``option_type``."""

    @abstractmethod
    def delta(self, option_type: OptionType) -> float:
        """Sensitivity of the value to the spot price."""

    @abstractmethod
    def gamma(self, option_type: OptionType) -> float:
        """Sensitivity of delta to the spot price."""

    @abstractmethod
    def vega(self, option_type: OptionType) -> float:
        """Sensitivity of the value to volatility."""

    @abstractmethod
    def theta(self, option_type: OptionType) -> float:
        """Sensitivity of the value to the passage of time, per year."""

    @abstractmethod
    def rho(self, option_type: OptionType) -> float:
        """Sensitivity of the value to the interest rate."""


class _BSMEuropeanValuation(_BSMValuationBase):
    """Black-Scholes European option valuation (sigma > 0, T > 0)."""

    def present_value(self, option_type: OptionType) -> float:
        """Compute the Black-Scholes option value.

        Call: S e^(-qT) N(d1) - K e^(-rT) N(d2)
        Put:  K e^(-rT) N(-d2) - S e^(-qT) N(-d1)
        """
        d1, d2 = self.derived.d1, self.derived.d2

        if option_type is OptionType.CALL:
            option_value = self.spot * self.df_q * std_normal_cdf(
                d1
            ) - self.strike * self.df_r * std_normal_cdf(d2)
        else:  # PUT
            option_value = self.strike * self.df_r * std_normal_cdf(
                -d2
            ) - self.spot * self.df_q * std_normal_cdf(-d1)

        return float(option_value)

    def delta(self, option_type: OptionType) -> float:
        """Calculate analytical delta.

        delta = df_q * N(d1) for calls
        delta = df_q * (N(d1) - 1) for puts

        Where N() is the cumulative standard normal distribution.
        """
        if option_type is OptionType.CALL:
            return float(self.df_q * std_normal_cdf(self.derived.d1))
        return float(self.df_q * (std_normal_cdf(self.derived.d1) - 1.0))

    def gamma(self, option_type: OptionType) -> float:
        """Calculate analytical gamma (identical for calls and puts).

        gamma = df_q * N'(d1) / (S * sigma * sqrt(T))

        Where N'() is the standard normal probability density function.
        """
        n_prime_d1 = std_normal_pdf(self.derived.d1)
        vol_sqrt_t = self.parameters.volatility * np.sqrt(self.time_to_maturity)
        # Divide in steps; S * sigma * sqrt(T) alone can underflow to 0.
        with np.errstate(over="ignore"):
            gamma = self.df_q * n_prime_d1 / self.spot / vol_sqrt_t
        return float(gamma)

    def vega(self, option_type: OptionType) -> float:
        """Calculate analytical vega (identical for calls and puts).

        vega = S * df_q * N'(d1) * sqrt(T)

        Returned per unit of volatility: a 1% point move changes the value
        by roughly ``vega / 100``.
        """
        n_prime_d1 = std_normal_pdf(self.derived.d1)
        return float(self.spot * self.df_q * n_prime_d1 * np.sqrt(self.time_to_maturity))

    def theta(self, option_type: OptionType) -> float:
        """Calculate analytical theta, per year.

        For call:
            theta = -(S * N'(d1) * sigma * e^(-qT)) / (2 * sqrt(T))
                    - r * K * e^(-rT) * N(d2)
                    + q * S * e^(-qT) * N(d1)

        For put:
            theta = -(S * N'(d1) * sigma * e^(-qT)) / (2 * sqrt(T))
                    + r * K * e^(-rT) * N(-d2)
                    - q * S * e^(-qT) * N(-d1)
        """
        d1, d2 = self.derived.d1, self.derived.d2
        rate = self.parameters.interest
        dividend_yield = self.parameters.dividend_yield

        # Common term for both call and put
        term1 = -(
            self.spot
            * self.df_q
            * std_normal_pdf(d1)
            * self.parameters.volatility
            / (2 * np.sqrt(self.time_to_maturity))
        )

        if option_type is OptionType.CALL:
            term2 = -self.strike * self.df_r * rate * std_normal_cdf(d2)
            term3 = self.spot * self.df_q * dividend_yield * std_normal_cdf(d1)
        else:  # PUT
            term2 = self.strike * self.df_r * rate * std_normal_cdf(-d2)
            term3 = -self.spot * self.df_q * dividend_yield * std_normal_cdf(-d1)

        return float(term1 + term2 + term3)

    def rho(self, option_type: OptionType) -> float:
        """Calculate analytical rho, per unit of interest rate.

        For call: rho = K * T * e^(-rT) * N(d2)
        For put:  rho = -K * T * e^(-rT) * N(-d2)
        """
        rho = self.strike * self.df_r * self.time_to_maturity
        if option_type is OptionType.CALL:
            return float(rho * std_normal_cdf(self.derived.d2))
        return float(-rho * std_normal_cdf(-self.derived.d2))


class _BSMExpiredValuation(_BSMValuationBase):
    """Valuation at or after maturity (T = 0).

    The option is worth its intrinsic value. Delta is +1 / -1 when strictly
    in the money and 0 otherwise; exactly at the money (S == K) delta is
    discontinuous and reported as 0. Every other Greek is 0.
    """

    def _in_the_money(self, option_type: OptionType) -> bool:
        if option_type is OptionType.CALL:
            return self.spot > self.strike
        return self.spot < self.strike

    def present_value(self, option_type: OptionType) -> float:
        if option_type is OptionType.CALL:
            return max(self.spot - self.strike, 0.0)
        return max(self.strike - self.spot, 0.0)

    def delta(self, option_type: OptionType) -> float:
        if not self._in_the_money(option_type):
            return 0.0
        return 1.0 if option_type is OptionType.CALL else -1.0

    def gamma(self, option_type: OptionType) -> float:
        return 0.0

    def vega(self, option_type: OptionType) -> float:
        return 0.0

    def theta(self, option_type: OptionType) -> float:
        return 0.0

    def rho(self, option_type: OptionType) -> float:
        return 0.0


class _BSMZeroVolValuation(_BSMValuationBase):
    """Valuation with zero volatility and time left (sigma = 0, T > 0).

    The terminal spot is the deterministic forward F = S e^((r - q)T), so the
    option is worth the discounted payoff of F. Gamma and vega are 0; delta,
    theta and rho are the derivatives of the deterministic payoff and are 0
    out of the money or exactly at the forward (F == K).
    """

    @property
    def forward(self) -> float:
        return forward_price(
            spot=self.spot,
            time_to_maturity=self.time_to_maturity,
            short_rate=self.parameters.interest,
            dividend_yield=self.parameters.dividend_yield,
        )

    def _in_the_money(self, option_type: OptionType) -> bool:
        if option_type is OptionType.CALL:
            return self.forward > self.strike
        return self.forward < self.strike

    def present_value(self, option_type: OptionType) -> float:
        if option_type is OptionType.CALL:
            payoff = max(self.forward - self.strike, 0.0)
        else:  # PUT
            payoff = max(self.strike - self.forward, 0.0)
        return self.df_r * payoff

    def delta(self, option_type: OptionType) -> float:
        if not self._in_the_money(option_type):
            return 0.0
        return self.df_q if option_type is OptionType.CALL else -self.df_q

    def gamma(self, option_type: OptionType) -> float:
        return 0.0

    def vega(self, option_type: OptionType) -> float:
        return 0.0

    def theta(self, option_type: OptionType) -> float:
        """Time decay of S e^(-qT) - K e^(-rT) (call) or its negative (put)."""
        if not self._in_the_money(option_type):
            return 0.0
        call_theta = (
            self.spot * self.df_q * self.parameters.dividend_yield
            - self.strike * self.df_r * self.parameters.interest
        )
        return call_theta if option_type is OptionType.CALL else -call_theta

    def rho(self, option_type: OptionType) -> float:
        if not self._in_the_money(option_type):
            return 0.0
        rho = self.strike * self.df_r * self.time_to_maturity
        return rho if option_type is OptionType.CALL else -rho
