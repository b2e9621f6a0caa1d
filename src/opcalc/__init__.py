from .distributions import std_normal_cdf, std_normal_pdf
from .enums import DayCountConvention, OptionType, ValuationRegime
from .exceptions import (
    InvalidParameterError,
    MissingParameterError,
    OpcalcError,
    ValidationError,
)
from .valuation import (
    BSMParams,
    CallPutOutputs,
    OptionBuilder,
    OptionOutputs,
    OptionParameters,
    OptionRecord,
    create_option,
)


__all__ = [
    "std_normal_pdf",
    "std_normal_cdf",
    "DayCountConvention",
    "OptionType",
    "ValuationRegime",
    "OpcalcError",
    "ValidationError",
    "MissingParameterError",
    "InvalidParameterError",
    "BSMParams",
    "CallPutOutputs",
    "OptionBuilder",
    "OptionOutputs",
    "OptionParameters",
    "OptionRecord",
    "create_option",
]
