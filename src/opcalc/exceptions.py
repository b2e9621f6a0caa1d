"""Custom exception hierarchy for the opcalc library.

All library-specific exceptions inherit from :class:`OpcalcError`, enabling
callers to catch *any* library error with a single ``except`` clause::

    try:
        option = create_option().with_strike(105.0).finalize()
    except OpcalcError as exc:
        log.error("Library error: %s", exc)
"""

from __future__ import annotations


class OpcalcError(Exception):
    """Base exception for all library errors."""


# ── Input validation ────────────────────────────────────────────────


class ValidationError(OpcalcError):
    """Invalid construction input (missing, out-of-range, non-finite, wrong type)."""


class MissingParameterError(ValidationError):
    """``finalize()`` was called before every required parameter was supplied.

    Attributes
    ----------
    field
        The first missing field, in declaration order.
    fields
        Every missing field, in declaration order.
    """

    def __init__(self, fields: tuple[str, ...]) -> None:
        self.fields = tuple(fields)
        self.field = self.fields[0]
        names = ", ".join(self.fields)
        super().__init__(f"Missing required option parameter(s): {names}")


class InvalidParameterError(ValidationError):
    """A supplied value violates a domain constraint.

    Attributes
    ----------
    field
        Name of the offending parameter.
    constraint
        Human-readable description of the violated constraint.
    """

    def __init__(self, field: str, constraint: str) -> None:
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field} {constraint}")
