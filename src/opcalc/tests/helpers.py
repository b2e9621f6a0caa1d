from opcalc.valuation import BSMParams, OptionRecord, create_option

SECONDS_PER_YEAR = 31_536_000
BASE_TIME = 1_735_689_600  # 2025-01-01 00:00:00 UTC

ACCESSORS = (
    "call_value",
    "put_value",
    "call_delta",
    "put_delta",
    "call_gamma",
    "put_gamma",
    "call_vega",
    "put_vega",
    "call_theta",
    "put_theta",
    "call_rho",
    "put_rho",
)


def build_option(
    *,
    asset_price: float = 100.0,
    strike: float = 100.0,
    volatility: float = 0.20,
    interest: float = 0.05,
    current_time: int = BASE_TIME,
    maturity_time: int | None = None,
    years: float = 1.0,
    dividend_yield: float = 0.0,
    params: BSMParams | None = None,
) -> OptionRecord:
    """Finalize an option; maturity defaults to ``years`` after current_time."""
    if maturity_time is None:
        maturity_time = current_time + int(round(years * SECONDS_PER_YEAR))
    builder = (
        create_option()
        .with_asset_price(asset_price)
        .with_strike(strike)
        .with_volatility(volatility)
        .with_interest(interest)
        .with_current_time(current_time)
        .with_maturity_time(maturity_time)
        .with_dividend_yield(dividend_yield)
    )
    if params is not None:
        builder = builder.with_params(params)
    return builder.finalize()
