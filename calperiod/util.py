"""Unit names, duration mappings and helpers shared across calperiod.

A duration is a plain mapping of field name to integer count, e.g.
``{"months": 1}`` or ``{"days": 3, "hours": 12}``. Calendar fields (years,
months) are applied before fixed-length fields by every adapter.
"""

from collections.abc import Mapping
from datetime import timedelta
from typing import Literal, TypeAlias, TypedDict

from calperiod.errors import UnknownUnitError

# Unit names
YEAR = "year"
QUARTER = "quarter"
MONTH = "month"
WEEK = "week"
DAY = "day"
HOUR = "hour"
MINUTE = "minute"
SECOND = "second"
CUSTOM = "custom"

AdapterUnit: TypeAlias = Literal[
    "year", "month", "week", "day", "hour", "minute", "second"
]

# Units every DateAdapter must understand (quarters are computed on top)
ADAPTER_UNITS: tuple[str, ...] = (YEAR, MONTH, WEEK, DAY, HOUR, MINUTE, SECOND)

# Smallest step between two instants
RESOLUTION = timedelta(microseconds=1)


class Duration(TypedDict, total=False):
    years: int
    months: int
    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    microseconds: int


DURATION_FIELDS: tuple[str, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
)

# Duration field holding one of each adapter unit
UNIT_FIELDS: dict[str, str] = {
    YEAR: "years",
    MONTH: "months",
    WEEK: "weeks",
    DAY: "days",
    HOUR: "hours",
    MINUTE: "minutes",
    SECOND: "seconds",
}


def normalize_duration(duration: Mapping[str, int]) -> dict[str, int]:
    """Validate a duration and fold milliseconds into microseconds.

    Zero fields are dropped, so an empty result means "no movement".
    """
    unknown = [key for key in duration if key not in DURATION_FIELDS]
    if unknown:
        raise ValueError(
            f"Unknown duration field(s): {', '.join(sorted(unknown))}\n"
            f"Valid fields: {', '.join(DURATION_FIELDS)}\n"
            f'Example: adapter.add(date, {{"months": 1, "days": 2}})'
        )

    result: dict[str, int] = {}
    for key in DURATION_FIELDS:
        value = duration.get(key, 0)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(
                f"Duration field {key!r} must be an int, got {type(value).__name__}"
            )
        if key == "milliseconds":
            if value:
                result["microseconds"] = result.get("microseconds", 0) + value * 1000
            continue
        if value:
            result[key] = result.get(key, 0) + value
    return result


def negate_duration(duration: Mapping[str, int]) -> dict[str, int]:
    return {key: -value for key, value in normalize_duration(duration).items()}


def scale_duration(duration: Mapping[str, int], factor: int) -> dict[str, int]:
    return {key: value * factor for key, value in normalize_duration(duration).items()}


def fixed_timedelta(duration: Mapping[str, int]) -> timedelta:
    """Return the fixed-length part of a normalized duration as a timedelta."""
    return timedelta(
        weeks=duration.get("weeks", 0),
        days=duration.get("days", 0),
        hours=duration.get("hours", 0),
        minutes=duration.get("minutes", 0),
        seconds=duration.get("seconds", 0),
        microseconds=duration.get("microseconds", 0),
    )


def unit_duration(unit: str) -> Duration:
    """Return a duration of exactly one adapter unit."""
    if unit not in UNIT_FIELDS:
        raise UnknownUnitError(unit, known=ADAPTER_UNITS)
    return {UNIT_FIELDS[unit]: 1}  # type: ignore[return-value]
