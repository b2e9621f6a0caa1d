"""Fluent builder that collects, validates and finalizes option inputs."""

from __future__ import annotations

import logging

from ..exceptions import InvalidParameterError, MissingParameterError
from .core import OptionParameters, OptionRecord
from .derived import compute_derived_quantities
from .params import BSMParams

logger = logging.getLogger(__name__)

__all__ = ["OptionBuilder", "create_option"]

# Declaration order; MissingParameterError reports fields in this order.
_REQUIRED_FIELDS = (
    "asset_price",
    "strike",
    "volatility",
    "interest",
    "current_time",
    "maturity_time",
)


class OptionBuilder:
    """Builds an :class:`OptionRecord`.

    Every ``with_*`` step overwrites its slot and returns the builder, so steps
    can be chained in any order. The six market/contract inputs are required;
    ``with_dividend_yield`` (default 0.0) and ``with_params`` (default
    :class:`BSMParams`) are optional.

    Examples
    --------
    >>> option = (
    ...     OptionBuilder()
    ...     .with_asset_price(100.0)
    ...     .with_strike(105.0)
    ...     .with_interest(0.005)
    ...     .with_volatility(0.23)
    ...     .with_current_time(1_606_780_800)  # 2020-12-01 00:00:00 UTC
    ...     .with_maturity_time(1_610_668_800)  # 2021-01-15 00:00:00 UTC
    ...     .finalize()
    ... )
    >>> option.put_value() > option.call_value()
    True

    Notes
    -----
    A builder performs no I/O and holds no global state. ``finalize`` does not
    consume it: the same builder can be adjusted and finalized again.
    """

    def __init__(self) -> None:
        self.asset_price: float | None = None
        self.strike: float | None = None
        self.volatility: float | None = None
        self.interest: float | None = None
        self.current_time: int | None = None
        self.maturity_time: int | None = None
        self.dividend_yield: float = 0.0
        self.params: BSMParams = BSMParams()

    def __repr__(self) -> str:
        slots = ", ".join(f"{name}={getattr(self, name)!r}" for name in _REQUIRED_FIELDS)
        return f"{type(self).__name__}({slots}, dividend_yield={self.dividend_yield!r})"

    def with_asset_price(self, asset_price: float) -> OptionBuilder:
        """Set the underlying's current price."""
        self.asset_price = asset_price
        return self

    def with_strike(self, strike: float) -> OptionBuilder:
        """Set the option's strike price."""
        self.strike = strike
        return self

    def with_volatility(self, volatility: float) -> OptionBuilder:
        """Set the annualized volatility, in decimal form (``0.2398`` for 23.98%)."""
        self.volatility = volatility
        return self

    def with_interest(self, interest: float) -> OptionBuilder:
        """Set the continuously-compounded risk-free rate, in decimal form."""
        self.interest = interest
        return self

    def with_current_time(self, current_time: int) -> OptionBuilder:
        """Set the valuation time, a timestamp in seconds."""
        self.current_time = current_time
        return self

    def with_maturity_time(self, maturity_time: int) -> OptionBuilder:
        """Set the option's maturity time, a timestamp in seconds."""
        self.maturity_time = maturity_time
        return self

    def with_dividend_yield(self, dividend_yield: float) -> OptionBuilder:
        """Set a continuous dividend (payout) yield. Optional, defaults to 0.0."""
        self.dividend_yield = dividend_yield
        return self

    def with_params(self, params: BSMParams) -> OptionBuilder:
        """Set valuation settings (day-count basis, timing logs). Optional."""
        self.params = params
        return self

    def missing_fields(self) -> tuple[str, ...]:
        """Required fields that have not been supplied yet."""
        return tuple(name for name in _REQUIRED_FIELDS if getattr(self, name) is None)

    def finalize(self) -> OptionRecord:
        """Validate the collected inputs and return an immutable option.

        Raises
        ------
        MissingParameterError
            If any required input was never supplied.
        InvalidParameterError
            If a supplied input violates its domain constraint, or is finite
            but too large to price over the option's life.
        """
        missing = self.missing_fields()
        if missing:
            raise MissingParameterError(missing)
        if not isinstance(self.params, BSMParams):
            raise InvalidParameterError(
                "params", f"must be a BSMParams, got {type(self.params).__name__}"
            )

        parameters = OptionParameters(
            asset_price=self.asset_price,
            strike=self.strike,
            volatility=self.volatility,
            interest=self.interest,
            current_time=self.current_time,
            maturity_time=self.maturity_time,
            dividend_yield=self.dividend_yield,
        )
        derived = compute_derived_quantities(parameters, day_count=self.params.day_count)

        logger.debug(
            "Finalized option S=%.6g K=%.6g sigma=%.6g r=%.6g q=%.6g T=%.6g regime=%s",
            parameters.asset_price,
            parameters.strike,
            parameters.volatility,
            parameters.interest,
            parameters.dividend_yield,
            derived.time_to_maturity,
            derived.regime.value,
        )
        return OptionRecord(parameters=parameters, derived=derived, settings=self.params)


def create_option() -> OptionBuilder:
    """Return a fresh :class:`OptionBuilder`.

    Convenience entry point for callers chaining the ``with_*`` steps
    directly::

        option = (
            create_option()
            .with_asset_price(100)
            .with_strike(105)
            .with_interest(0.008)
            .with_volatility(0.23)
            .with_current_time(1606780800)
            .with_maturity_time(1610668800)
            .finalize()
        )
    """
    return OptionBuilder()
