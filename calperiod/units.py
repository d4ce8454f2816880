"""Built-in unit definitions: year, quarter, month, week, day, hour, minute, second.

Calendar units delegate to the adapter's ``start_of``/``end_of``. Quarters
are not required of any adapter, so their boundaries and equality are
computed here from ``(month - 1) // 3`` on top of plain month arithmetic.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from calperiod.registry import CreatePeriod, UnitDefinition, UnitRegistry
from calperiod.util import DAY, HOUR, MINUTE, MONTH, QUARTER, RESOLUTION, SECOND
from calperiod.util import WEEK, YEAR, UNIT_FIELDS

if TYPE_CHECKING:
    from calperiod.temporal import Temporal


def _calendar_period(unit: str) -> CreatePeriod:
    def create(date: datetime, temporal: "Temporal") -> tuple[datetime, datetime]:
        adapter = temporal.adapter
        start = adapter.start_of(date, unit, week_starts_on=temporal.week_starts_on)
        last = adapter.end_of(date, unit, week_starts_on=temporal.week_starts_on)
        return start, last + RESOLUTION

    return create


def quarter_index(date: datetime) -> int:
    """Return the zero-based quarter of ``date`` (0 for Jan-Mar)."""
    return (date.month - 1) // 3


def _quarter_period(date: datetime, temporal: "Temporal") -> tuple[datetime, datetime]:
    adapter = temporal.adapter
    month_start = adapter.start_of(date, MONTH)
    start = adapter.subtract(month_start, {"months": (date.month - 1) % 3})
    return start, adapter.add(start, {"months": 3})


def _same_quarter(a: datetime, b: datetime, temporal: "Temporal") -> bool:
    return a.year == b.year and quarter_index(a) == quarter_index(b)


def week_number(date: datetime, temporal: "Temporal") -> int:
    """Return the 1-based week of the year, 0 for a week started last year."""
    adapter = temporal.adapter
    year_start = adapter.start_of(date, YEAR)
    week_start = adapter.start_of(date, WEEK, week_starts_on=temporal.week_starts_on)
    return (week_start - year_start).days // 7 + 1


BUILTIN_UNITS: dict[str, UnitDefinition] = {
    YEAR: UnitDefinition(
        create_period=_calendar_period(YEAR),
        divisions=(QUARTER, MONTH, WEEK, DAY),
        step={UNIT_FIELDS[YEAR]: 1},
        number=lambda date, temporal: date.year,
    ),
    QUARTER: UnitDefinition(
        create_period=_quarter_period,
        divisions=(MONTH, WEEK, DAY),
        merges_to=YEAR,
        step={"months": 3},
        number=lambda date, temporal: quarter_index(date) + 1,
        is_same=_same_quarter,
    ),
    MONTH: UnitDefinition(
        create_period=_calendar_period(MONTH),
        divisions=(WEEK, DAY),
        merges_to=QUARTER,
        step={UNIT_FIELDS[MONTH]: 1},
        number=lambda date, temporal: date.month,
    ),
    WEEK: UnitDefinition(
        create_period=_calendar_period(WEEK),
        divisions=(DAY,),
        merges_to=MONTH,
        step={UNIT_FIELDS[WEEK]: 1},
        number=week_number,
        validate=lambda period: period.duration.days == 7,
    ),
    DAY: UnitDefinition(
        create_period=_calendar_period(DAY),
        divisions=(HOUR,),
        merges_to=WEEK,
        step={UNIT_FIELDS[DAY]: 1},
        number=lambda date, temporal: date.day,
    ),
    HOUR: UnitDefinition(
        create_period=_calendar_period(HOUR),
        divisions=(MINUTE,),
        merges_to=DAY,
        step={UNIT_FIELDS[HOUR]: 1},
        number=lambda date, temporal: date.hour,
    ),
    MINUTE: UnitDefinition(
        create_period=_calendar_period(MINUTE),
        divisions=(SECOND,),
        merges_to=HOUR,
        step={UNIT_FIELDS[MINUTE]: 1},
        number=lambda date, temporal: date.minute,
    ),
    SECOND: UnitDefinition(
        create_period=_calendar_period(SECOND),
        divisions=(),
        merges_to=MINUTE,
        step={UNIT_FIELDS[SECOND]: 1},
        number=lambda date, temporal: date.second,
    ),
}


def install_builtin_units(registry: UnitRegistry) -> None:
    for name, definition in BUILTIN_UNITS.items():
        registry.define(name, definition)
