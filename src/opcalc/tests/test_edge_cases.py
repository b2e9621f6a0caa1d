"""Edge-case tests: expiry, zero vol, near-zero vol/expiry, extreme inputs.

These tests verify that the degenerate regimes are priced by their explicit
branches and that the standard formulas converge to them.
"""

import warnings

import numpy as np
import pytest

from opcalc.enums import ValuationRegime

from opcalc.tests.helpers import ACCESSORS, BASE_TIME, SECONDS_PER_YEAR, build_option

RATE = 0.05


def _expired(spot: float, strike: float = 100.0, vol: float = 0.20):
    return build_option(
        asset_price=spot, strike=strike, volatility=vol, maturity_time=BASE_TIME
    )


# ═══════════════════════════════════════════════════════════════════════
#  At expiry (T = 0)
# ═══════════════════════════════════════════════════════════════════════


class TestExpired:
    """T = 0 ⇒ intrinsic value; delta ±1 in the money, every other Greek 0."""

    def test_regime(self):
        assert _expired(110.0).regime is ValuationRegime.EXPIRED

    @pytest.mark.parametrize(
        "spot,call,put",
        [
            (110.0, 10.0, 0.0),
            (90.0, 0.0, 10.0),
            (100.0, 0.0, 0.0),
        ],
    )
    def test_intrinsic_value(self, spot, call, put):
        option = _expired(spot)
        assert option.call_value() == call
        assert option.put_value() == put

    @pytest.mark.parametrize(
        "spot,call_delta,put_delta",
        [
            (110.0, 1.0, 0.0),
            (90.0, 0.0, -1.0),
            (100.0, 0.0, 0.0),  # at the money: reported as 0 for both
        ],
    )
    def test_delta(self, spot, call_delta, put_delta):
        option = _expired(spot)
        assert option.call_delta() == call_delta
        assert option.put_delta() == put_delta

    @pytest.mark.parametrize("spot", [90.0, 100.0, 110.0])
    def test_other_greeks_zero(self, spot):
        option = _expired(spot)
        for name in ("gamma", "vega", "theta", "rho"):
            assert getattr(option, f"call_{name}")() == 0.0
            assert getattr(option, f"put_{name}")() == 0.0

    def test_zero_vol_at_expiry(self):
        option = _expired(120.0, vol=0.0)
        assert option.regime is ValuationRegime.EXPIRED
        assert option.call_value() == 20.0


# ═══════════════════════════════════════════════════════════════════════
#  Zero volatility (sigma = 0, T > 0)
# ═══════════════════════════════════════════════════════════════════════


class TestZeroVolatility:
    """sigma = 0 ⇒ deterministic forward; value = discounted payoff of F."""

    DF = np.exp(-RATE)

    def test_regime(self):
        assert build_option(volatility=0.0).regime is ValuationRegime.ZERO_VOLATILITY

    def test_itm_call(self):
        option = build_option(strike=90.0, volatility=0.0)
        assert np.isclose(option.call_value(), 100.0 - 90.0 * self.DF)
        assert option.put_value() == 0.0
        assert option.call_delta() == 1.0
        assert option.put_delta() == 0.0
        assert np.isclose(option.call_theta(), -RATE * 90.0 * self.DF)
        assert np.isclose(option.call_rho(), 90.0 * self.DF)
        assert option.put_theta() == 0.0
        assert option.put_rho() == 0.0

    def test_itm_put(self):
        """F = 100 e^0.05 ≈ 105.13 < 110 ⇒ put in the money, call worthless."""
        option = build_option(strike=110.0, volatility=0.0)
        assert option.call_value() == 0.0
        assert np.isclose(option.put_value(), 110.0 * self.DF - 100.0)
        assert option.put_delta() == -1.0
        assert option.call_delta() == 0.0
        assert np.isclose(option.put_theta(), RATE * 110.0 * self.DF)
        assert np.isclose(option.put_rho(), -110.0 * self.DF)

    def test_itm_relative_to_forward_not_spot(self):
        """K=104 is above spot but below the forward: the call is in the money."""
        option = build_option(strike=104.0, volatility=0.0)
        assert option.call_value() > 0.0
        assert option.put_value() == 0.0

    def test_at_the_forward(self):
        option = build_option(volatility=0.0, interest=0.0)
        assert option.call_value() == 0.0
        assert option.put_value() == 0.0
        assert option.call_delta() == 0.0
        assert option.put_delta() == 0.0

    def test_gamma_vega_zero(self):
        option = build_option(strike=90.0, volatility=0.0)
        assert option.call_gamma() == option.put_gamma() == 0.0
        assert option.call_vega() == option.put_vega() == 0.0

    def test_dividend_yield(self):
        q = 0.02
        option = build_option(strike=90.0, volatility=0.0, dividend_yield=q)
        df_q = np.exp(-q)
        assert np.isclose(option.call_value(), 100.0 * df_q - 90.0 * self.DF)
        assert np.isclose(option.call_delta(), df_q)
        assert np.isclose(option.call_theta(), q * 100.0 * df_q - RATE * 90.0 * self.DF)

    def test_parity_holds(self):
        for strike in (80.0, 104.0, 106.0, 130.0):
            option = build_option(strike=strike, volatility=0.0)
            assert np.isclose(
                option.call_value() - option.put_value(), 100.0 - strike * self.DF, atol=1e-12
            )


# ═══════════════════════════════════════════════════════════════════════
#  Convergence to the degenerate branches
# ═══════════════════════════════════════════════════════════════════════


class TestConvergence:
    @pytest.mark.parametrize("strike", [80.0, 90.0, 100.0, 110.0, 120.0])
    def test_tiny_vol_matches_zero_vol(self, strike):
        tiny = build_option(strike=strike, volatility=1e-6)
        zero = build_option(strike=strike, volatility=0.0)
        assert tiny.regime is ValuationRegime.STANDARD
        assert abs(tiny.call_value() - zero.call_value()) <= 1e-4
        assert abs(tiny.put_value() - zero.put_value()) <= 1e-4

    @pytest.mark.parametrize("strike", [80.0, 90.0, 110.0, 120.0])
    def test_tiny_vol_delta_matches_zero_vol(self, strike):
        tiny = build_option(strike=strike, volatility=1e-6)
        zero = build_option(strike=strike, volatility=0.0)
        assert tiny.call_delta() == pytest.approx(zero.call_delta(), abs=1e-9)
        assert tiny.call_theta() == pytest.approx(zero.call_theta(), abs=1e-6)

    @pytest.mark.parametrize("spot", [80.0, 95.0, 105.0, 120.0])
    def test_one_second_matches_intrinsic(self, spot):
        nearly = build_option(asset_price=spot, maturity_time=BASE_TIME + 1)
        expired = build_option(asset_price=spot, maturity_time=BASE_TIME)
        assert nearly.time_to_maturity == pytest.approx(1.0 / SECONDS_PER_YEAR)
        assert abs(nearly.call_value() - expired.call_value()) <= 1e-4
        assert abs(nearly.put_value() - expired.put_value()) <= 1e-4
        assert nearly.call_delta() == pytest.approx(expired.call_delta(), abs=1e-6)

    def test_one_second_at_the_money_is_small(self):
        nearly = build_option(maturity_time=BASE_TIME + 1)
        # Only time value of order S * sigma * sqrt(T) remains.
        assert 0.0 < nearly.call_value() < 5e-3


# ═══════════════════════════════════════════════════════════════════════
#  Numerical hygiene
# ═══════════════════════════════════════════════════════════════════════


class TestNoNaNs:
    CASES = [
        dict(volatility=0.0),
        dict(maturity_time=BASE_TIME),
        dict(volatility=0.0, maturity_time=BASE_TIME),
        dict(volatility=1e-12, maturity_time=BASE_TIME + 1),
        dict(asset_price=1e-8, strike=1e8),
        dict(asset_price=1e8, strike=1e-8),
        dict(volatility=5.0, years=30.0),
        dict(interest=-0.05),
        dict(interest=-500.0),
        dict(interest=500.0),
        dict(dividend_yield=-300.0),
        dict(volatility=0.0, interest=-500.0, strike=1e-8),
    ]

    @pytest.mark.parametrize("kwargs", CASES)
    def test_all_accessors_finite_without_warnings(self, kwargs):
        option = build_option(**kwargs)
        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            for name in ACCESSORS:
                assert np.isfinite(getattr(option, name)()), name

    def test_deep_itm_call_delta_saturates(self):
        option = build_option(asset_price=1e6, strike=1.0, volatility=0.2)
        assert option.call_delta() == pytest.approx(1.0)
        assert option.put_delta() == pytest.approx(0.0, abs=1e-12)
