from datetime import datetime

from calperiod.errors import UnknownUnitError
from calperiod.factory import create_period
from calperiod.period import Period, anchor_of
from calperiod.temporal import Temporal, require_adapter
from calperiod.util import ADAPTER_UNITS, DAY


def contains(period: Period, target: datetime | Period) -> bool:
    """Return True if ``target`` lies within ``period``.

    Dates are tested against the half-open ``[start, end)`` interval, so a
    period contains its start but not its end. A zero-length period contains
    only its own instant. Periods must fit entirely inside, except that a
    zero-length period is tested as the instant it stands for.
    """
    if isinstance(target, Period):
        if target.start == target.end:
            return contains(period, target.start)
        return target.start >= period.start and target.end <= period.end
    if period.start == period.end:
        return target == period.start
    return period.start <= target < period.end


def is_same(
    temporal: Temporal,
    a: datetime | Period | None,
    b: datetime | Period | None,
    unit: str,
) -> bool:
    """Return True if ``a`` and ``b`` fall in the same ``unit``.

    Periods are compared through their anchor dates; a missing value is
    never the same as anything. Resolution order:

    1. The unit definition's ``is_same`` hook (quarters compare year and
       ``(month - 1) // 3`` here, since no adapter has to know quarters)
    2. ``adapter.is_same`` for units every adapter understands
    3. Equality of the two created periods for other registered units
    """
    if a is None or b is None:
        return False

    adapter = require_adapter(temporal)
    a, b = anchor_of(a), anchor_of(b)

    definition = temporal.registry.get(unit)
    if definition is not None and definition.is_same is not None:
        return definition.is_same(a, b, temporal)
    if unit in ADAPTER_UNITS:
        return adapter.is_same(a, b, unit, week_starts_on=temporal.week_starts_on)
    if definition is not None:
        return create_period(temporal, unit, a) == create_period(temporal, unit, b)
    raise UnknownUnitError(unit, known=temporal.registry.units())


def is_weekend(period: Period) -> bool:
    """True if the period's anchor date is a Saturday or Sunday."""
    return period.date.weekday() >= 5


def is_weekday(period: Period) -> bool:
    return not is_weekend(period)


def is_today(temporal: Temporal, period: Period, now: datetime | None = None) -> bool:
    """True if the period's anchor falls on the same day as ``now``.

    ``now`` defaults to the current time in the anchor's timezone.
    """
    if now is None:
        now = datetime.now(tz=period.date.tzinfo)
    return is_same(temporal, period, now, DAY)
