"""Enums for option valuation."""

from enum import Enum

__all__ = [
    "OptionType",
    "ValuationRegime",
    "DayCountConvention",
]


class OptionType(Enum):
    CALL = "call"
    PUT = "put"


class ValuationRegime(Enum):
    """Which closed-form branch prices an option."""

    STANDARD = "standard"
    EXPIRED = "expired"
    ZERO_VOLATILITY = "zero_volatility"


class DayCountConvention(Enum):
    ACT_360 = "ACT/360"
    ACT_365F = "ACT/365F"
    ACT_365_25 = "ACT/365.25"
