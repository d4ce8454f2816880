"""Exceptions raised by calperiod.

Every error is a ``ValueError`` as well, so callers that only guard against
bad arguments keep working.
"""

from collections.abc import Iterable


class CalperiodError(Exception):
    """Base class for all calperiod errors."""


class ConfigurationError(CalperiodError, ValueError):
    """A temporal context is missing its adapter or is misconfigured."""


class UnknownUnitError(CalperiodError, ValueError):
    """A unit name is not registered (or not understood by an adapter)."""

    def __init__(self, unit: str, known: Iterable[str] = ()):
        self.unit: str = unit
        known = sorted(known)
        message = f"Unknown unit: {unit!r}"
        if known:
            message += f"\nKnown units: {', '.join(known)}"
        message += (
            "\nHint: Register custom units before using them:\n"
            "  define_unit('sprint', UnitDefinition(create_period=...))"
        )
        super().__init__(message)


class InvalidDivisionError(CalperiodError, ValueError):
    """A period was divided into an equal, larger or overlapping unit."""


class ValidationError(CalperiodError, ValueError):
    """A period failed its unit's validate predicate."""
