"""Parameter class for Black-Scholes valuation configuration."""

from dataclasses import dataclass

from ..enums import DayCountConvention
from ..exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class BSMParams:
    """Parameters for Black-Scholes option valuation.

    Attributes
    ==========
    day_count:
        Day-count basis used to turn the seconds between ``current_time`` and
        ``maturity_time`` into a year fraction. Strings are coerced to
        :class:`DayCountConvention`. Default: ACT/365F (31,536,000 seconds
        per year).
    log_timings:
        When True, every accessor on the resulting option is timed and the
        elapsed time logged at DEBUG level. Default: False.
    """

    day_count: DayCountConvention | str = DayCountConvention.ACT_365F
    log_timings: bool = False

    def __post_init__(self):
        if isinstance(self.day_count, str):
            try:
                object.__setattr__(self, "day_count", DayCountConvention(self.day_count))
            except ValueError:
                raise ValidationError(
                    f"day_count must be a DayCountConvention, got {self.day_count!r}"
                ) from None
        if not isinstance(self.day_count, DayCountConvention):
            raise ValidationError(f"day_count must be a DayCountConvention, got {self.day_count}")
        if not isinstance(self.log_timings, bool):
            raise ValidationError(f"log_timings must be a bool, got {self.log_timings!r}")
