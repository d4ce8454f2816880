from datetime import datetime

from calperiod.errors import ValidationError
from calperiod.period import Period, anchor_of
from calperiod.temporal import Temporal, require_adapter
from calperiod.util import CUSTOM, DAY


def create_period(temporal: Temporal, unit: str, date: datetime | Period) -> Period:
    """Return the ``unit`` period containing ``date``.

    Args:
        temporal: Context supplying the adapter, week start and unit registry
        unit: Registered unit name ("month", "stableMonth", ...)
        date: Reference date, or a period whose anchor date is used

    Raises:
        ConfigurationError: If the context has no adapter
        UnknownUnitError: If ``unit`` is not registered

    Example:
        >>> from datetime import datetime
        >>> from calperiod import create_period, create_temporal
        >>> temporal = create_temporal("native")
        >>> march = create_period(temporal, "month", datetime(2024, 3, 15))
        >>> print(march)
        Period(month: 2024-03-01T00:00:00→2024-04-01T00:00:00)
    """
    require_adapter(temporal)
    definition = temporal.registry.require(unit)
    anchor = anchor_of(date)
    start, end = definition.create_period(anchor, temporal)
    number = definition.number(anchor, temporal) if definition.number else 0
    return Period(type=unit, start=start, end=end, date=anchor, number=number)


def to_period(temporal: Temporal, date: datetime, unit: str = DAY) -> Period:
    """Convenience wrapper around ``create_period`` defaulting to days."""
    return create_period(temporal, unit, date)


def validate_period(
    temporal: Temporal, period: Period, *, strict: bool = False
) -> bool:
    """Run the unit's ``validate`` predicate against ``period``.

    Units without a predicate, and custom periods, are always valid. A failed
    check returns False unless ``strict`` is set, in which case it raises
    ``ValidationError``.
    """
    if period.type == CUSTOM:
        return True
    definition = temporal.registry.require(period.type)
    if definition.validate is None:
        return True

    valid = bool(definition.validate(period))
    if not valid and strict:
        raise ValidationError(
            f"{period} does not satisfy the {period.type!r} unit's validation"
        )
    return valid
