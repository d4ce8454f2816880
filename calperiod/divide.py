import logging

from calperiod.errors import InvalidDivisionError
from calperiod.factory import create_period
from calperiod.navigation import next_period
from calperiod.period import Period
from calperiod.registry import UnitDefinition
from calperiod.temporal import Temporal, require_adapter
from calperiod.util import CUSTOM

logger = logging.getLogger(__name__)


def divide(temporal: Temporal, period: Period, unit: str) -> list[Period]:
    """Return every ``unit`` period overlapping ``period``, in calendar order.

    Subdivisions start at the ``unit`` period containing ``period.start`` and
    step forward until one starts at or after ``period.end``. Aligned units
    (days of a month, months of a year) tile the period exactly; units that
    straddle its edges (weeks of a month) are returned whole, so their
    count depends on alignment. A zero-length period yields the single
    ``unit`` period containing its instant.

    Raises:
        UnknownUnitError: If ``unit`` or ``period.type`` is not registered
        InvalidDivisionError: If ``unit`` is not smaller than ``period.type``

    Example:
        >>> feb = create_period(temporal, "month", datetime(2024, 2, 10))
        >>> len(divide(temporal, feb, "day"))
        29
    """
    require_adapter(temporal)
    definition = temporal.registry.require(unit)
    _check_division(temporal, period, unit, definition)

    if period.start == period.end:
        return [create_period(temporal, unit, period.start)]

    result: list[Period] = []
    current = create_period(temporal, unit, period.start)

    while current.start < period.end:
        if current.end > period.start:
            result.append(current)
        following = next_period(temporal, current)
        if following.start <= current.start:
            raise ValueError(
                f"Unit {unit!r} did not advance past {current.start.isoformat()}.\n"
                f"Its create_period must return increasing periods for later dates"
            )
        current = following

    logger.debug("Divided %s into %d %s periods", period, len(result), unit)
    return result


def zoom_in(temporal: Temporal, period: Period, unit: str) -> list[Period]:
    """Alias of ``divide`` for drill-down navigation."""
    return divide(temporal, period, unit)


def _check_division(
    temporal: Temporal, period: Period, unit: str, definition: UnitDefinition
) -> None:
    """Reject divisions into equal, larger or overlapping units."""
    if not definition.partitions:
        raise InvalidDivisionError(
            f"Cannot divide into {unit!r}: its periods overlap their neighbours.\n"
            f"Hint: Create it directly with create_period(temporal, {unit!r}, date)"
        )
    if period.type == CUSTOM:
        return

    registry = temporal.registry
    registry.require(period.type)
    if unit == period.type:
        raise InvalidDivisionError(
            f"Cannot divide a {unit!r} period into {unit!r}: units are equal.\n"
            f"Hint: Use next_period/previous_period to move between {unit} periods"
        )
    if unit in registry.divisions_of(period.type):
        return

    larger = period.type in registry.divisions_of(unit)
    if not larger:
        sample = create_period(temporal, unit, period.start)
        larger = sample.duration >= period.duration
    if larger:
        raise InvalidDivisionError(
            f"Cannot divide a {period.type!r} period into the larger unit {unit!r}.\n"
            f"Hint: Use zoom_out(temporal, period, {unit!r}) to go up a level"
        )
