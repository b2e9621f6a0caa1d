from dataclasses import dataclass, field
import numbers
import logging
import numpy as np
from ..exceptions import InvalidParameterError
from ..enums import OptionType, ValuationRegime
from ..utils import log_timing
from .bsm import (
    _BSMEuropeanValuation,
    _BSMExpiredValuation,
    _BSMZeroVolValuation,
)
from .derived import DerivedQuantities
from .params import BSMParams

logger = logging.getLogger(__name__)

# ── Implementation registry ─────────────────────────────────────────
# Maps ValuationRegime → implementation class.
_REGIME_REGISTRY: dict[ValuationRegime, type] = {
    ValuationRegime.STANDARD: _BSMEuropeanValuation,
    ValuationRegime.EXPIRED: _BSMExpiredValuation,
    ValuationRegime.ZERO_VOLATILITY: _BSMZeroVolValuation,
}


def _finite_float(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(name, f"must be numeric, got {type(value).__name__}")
    value = float(value)
    if not np.isfinite(value):
        raise InvalidParameterError(name, "must be finite")
    return value


def _timestamp(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(
            name, f"must be an integer timestamp in seconds, got {type(value).__name__}"
        )
    return int(value)


@dataclass(frozen=True, slots=True)
class OptionParameters:
    """Market and contract inputs for a Black-Scholes European option.

    Validated on construction, in field order; the first violation raises
    :class:`~opcalc.exceptions.InvalidParameterError`.
    """

    asset_price: float
    strike: float
    volatility: float
    interest: float
    current_time: int
    maturity_time: int
    dividend_yield: float = 0.0

    def __post_init__(self) -> None:
        """Validate domain constraints and coerce numeric types."""
        asset_price = _finite_float("asset_price", self.asset_price)
        if asset_price <= 0.0:
            raise InvalidParameterError("asset_price", "must be > 0")
        strike = _finite_float("strike", self.strike)
        if strike <= 0.0:
            raise InvalidParameterError("strike", "must be > 0")
        volatility = _finite_float("volatility", self.volatility)
        if volatility < 0.0:
            raise InvalidParameterError("volatility", "must be >= 0")
        interest = _finite_float("interest", self.interest)
        dividend_yield = _finite_float("dividend_yield", self.dividend_yield)
        current_time = _timestamp("current_time", self.current_time)
        maturity_time = _timestamp("maturity_time", self.maturity_time)
        if maturity_time < current_time:
            raise InvalidParameterError("maturity_time", "must be >= current_time")

        object.__setattr__(self, "asset_price", asset_price)
        object.__setattr__(self, "strike", strike)
        object.__setattr__(self, "volatility", volatility)
        object.__setattr__(self, "interest", interest)
        object.__setattr__(self, "dividend_yield", dividend_yield)
        object.__setattr__(self, "current_time", current_time)
        object.__setattr__(self, "maturity_time", maturity_time)


@dataclass(frozen=True, slots=True)
class OptionOutputs:
    """Value and Greeks for one side (call or put) of an option."""

    value: float
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float


@dataclass(frozen=True, slots=True)
class CallPutOutputs:
    call: OptionOutputs
    put: OptionOutputs


@dataclass(frozen=True, slots=True)
class OptionRecord:
    """An immutable, fully validated Black-Scholes European option.

    Built by :meth:`OptionBuilder.finalize`; direct construction checks the
    component types but not the values. Every accessor is a
    pure function of the stored state, so repeated calls return identical
    results and a record may be shared freely between threads.

    Greeks are raw: vega per unit of volatility, theta per year, rho per
    unit of interest rate.
    """

    parameters: OptionParameters
    derived: DerivedQuantities
    settings: BSMParams = field(default_factory=BSMParams)

    def __post_init__(self) -> None:
        """Validate component types."""
        if not isinstance(self.parameters, OptionParameters):
            raise InvalidParameterError(
                "parameters",
                f"must be an OptionParameters, got {type(self.parameters).__name__}",
            )
        if not isinstance(self.derived, DerivedQuantities):
            raise InvalidParameterError(
                "derived",
                f"must be a DerivedQuantities, got {type(self.derived).__name__}",
            )
        if not isinstance(self.settings, BSMParams):
            raise InvalidParameterError(
                "settings", f"must be a BSMParams, got {type(self.settings).__name__}"
            )

    # ── Inputs and derived state ────────────────────────────────────

    @property
    def asset_price(self) -> float:
        return self.parameters.asset_price

    @property
    def strike(self) -> float:
        return self.parameters.strike

    @property
    def volatility(self) -> float:
        return self.parameters.volatility

    @property
    def interest(self) -> float:
        return self.parameters.interest

    @property
    def dividend_yield(self) -> float:
        return self.parameters.dividend_yield

    @property
    def current_time(self) -> int:
        return self.parameters.current_time

    @property
    def maturity_time(self) -> int:
        return self.parameters.maturity_time

    @property
    def time_to_maturity(self) -> float:
        """Time to maturity in years under the configured day-count basis."""
        return self.derived.time_to_maturity

    @property
    def regime(self) -> ValuationRegime:
        return self.derived.regime

    # ── Valuation ───────────────────────────────────────────────────

    def _compute(self, measure: str, option_type: OptionType) -> float:
        impl = _REGIME_REGISTRY[self.derived.regime](self.parameters, self.derived)
        label = f"{self.derived.regime.value} {option_type.value} {measure}"
        with log_timing(logger, label, self.settings.log_timings):
            return float(getattr(impl, measure)(option_type))

    def call_value(self) -> float:
        return self._compute("present_value", OptionType.CALL)

    def put_value(self) -> float:
        return self._compute("present_value", OptionType.PUT)

    def call_delta(self) -> float:
        return self._compute("delta", OptionType.CALL)

    def put_delta(self) -> float:
        return self._compute("delta", OptionType.PUT)

    def call_gamma(self) -> float:
        return self._compute("gamma", OptionType.CALL)

    def put_gamma(self) -> float:
        return self._compute("gamma", OptionType.PUT)

    def call_vega(self) -> float:
        return self._compute("vega", OptionType.CALL)

    def put_vega(self) -> float:
        return self._compute("vega", OptionType.PUT)

    def call_theta(self) -> float:
        return self._compute("theta", OptionType.CALL)

    def put_theta(self) -> float:
        return self._compute("theta", OptionType.PUT)

    def call_rho(self) -> float:
        return self._compute("rho", OptionType.CALL)

    def put_rho(self) -> float:
        return self._compute("rho", OptionType.PUT)

    def outputs(self) -> CallPutOutputs:
        """Bundle value and every Greek for both the call and the put."""
        return CallPutOutputs(
            call=OptionOutputs(
                value=self.call_value(),
                delta=self.call_delta(),
                gamma=self.call_gamma(),
                vega=self.call_vega(),
                theta=self.call_theta(),
                rho=self.call_rho(),
            ),
            put=OptionOutputs(
                value=self.put_value(),
                delta=self.put_delta(),
                gamma=self.put_gamma(),
                vega=self.put_vega(),
                theta=self.put_theta(),
                rho=self.put_rho(),
            ),
        )
