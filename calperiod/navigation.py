"""Moving between periods of the same unit.

Units with a ``step`` move their anchor date by that duration and rebuild
the period, so ``go(temporal, p, n)`` is a single adapter call whatever the
size of ``n``. Units without a step fall back to walking adjacent periods
one at a time. Custom periods shift by their own length.
"""

from datetime import datetime

from calperiod.factory import create_period
from calperiod.period import Period
from calperiod.temporal import Temporal, require_adapter
from calperiod.util import CUSTOM, RESOLUTION, scale_duration


def next_period(temporal: Temporal, period: Period) -> Period:
    """Return the period of the same unit immediately after ``period``."""
    return go(temporal, period, 1)


def previous_period(temporal: Temporal, period: Period) -> Period:
    """Return the period of the same unit immediately before ``period``."""
    return go(temporal, period, -1)


def go(temporal: Temporal, period: Period, steps: int) -> Period:
    """Move ``steps`` periods forward (positive) or backward (negative).

    Example:
        >>> from datetime import datetime
        >>> from calperiod import create_period, create_temporal, go
        >>> temporal = create_temporal("native")
        >>> jan = create_period(temporal, "month", datetime(2024, 1, 31))
        >>> go(temporal, jan, 13).start
        datetime.datetime(2025, 2, 1, 0, 0)
    """
    adapter = require_adapter(temporal)
    if steps == 0:
        return period
    if period.type == CUSTOM:
        return _shift_custom(period, steps)

    definition = temporal.registry.require(period.type)
    if definition.step:
        delta = scale_duration(definition.step, abs(steps))
        if steps > 0:
            anchor = adapter.add(period.date, delta)
        else:
            anchor = adapter.subtract(period.date, delta)
        return create_period(temporal, period.type, anchor)

    current = period
    for _ in range(abs(steps)):
        current = _adjacent(temporal, current, forward=steps > 0)
    return current


def _adjacent(temporal: Temporal, period: Period, *, forward: bool) -> Period:
    anchor: datetime = period.end if forward else period.start - RESOLUTION
    return create_period(temporal, period.type, anchor)


def _shift_custom(period: Period, steps: int) -> Period:
    offset = period.duration * steps
    return Period(
        type=CUSTOM,
        start=period.start + offset,
        end=period.end + offset,
        date=period.date + offset,
        number=period.number,
    )


def zoom_to(temporal: Temporal, period: Period, unit: str) -> Period:
    """Return the ``unit`` period around ``period``'s anchor date."""
    return create_period(temporal, unit, period.date)


def zoom_out(temporal: Temporal, period: Period, unit: str) -> Period:
    """Return the coarser ``unit`` period containing ``period``'s anchor.

    Raises:
        ValueError: If ``unit`` is one of the period's own subdivisions
    """
    if unit in temporal.registry.divisions_of(period.type):
        raise ValueError(
            f"Cannot zoom out from {period.type!r} to the smaller unit {unit!r}.\n"
            f"Hint: Use zoom_in(temporal, period, {unit!r}) to subdivide instead"
        )
    return zoom_to(temporal, period, unit)
