"""Black-Scholes European option valuation.

Public API
----------
Construction:
    OptionBuilder: Fluent, validating accumulator of option inputs
    create_option: Convenience factory returning a fresh OptionBuilder

Results:
    OptionRecord: Immutable option exposing value and Greek accessors
    OptionParameters: Validated market/contract inputs
    DerivedQuantities: Time to maturity, d1/d2 and valuation regime
    OptionOutputs / CallPutOutputs: Bundled value and Greeks

Parameter classes:
    BSMParams: Day-count basis and timing-log configuration
"""

from .builder import OptionBuilder, create_option
from .core import (
    CallPutOutputs,
    OptionOutputs,
    OptionParameters,
    OptionRecord,
)
from .derived import DerivedQuantities, compute_derived_quantities
from .params import BSMParams

__all__ = [
    # Construction
    "OptionBuilder",
    "create_option",
    # Results
    "OptionRecord",
    "OptionParameters",
    "DerivedQuantities",
    "compute_derived_quantities",
    "OptionOutputs",
    "CallPutOutputs",
    # Parameter classes
    "BSMParams",
]
