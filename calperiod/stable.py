"""The ``stableMonth`` unit: a fixed 6x7 calendar grid for every month.

A month spans four to six calendar rows depending on its length and on the
weekday it starts. ``stableMonth`` always covers exactly 42 days, starting
on the configured first day of the week and padding with days from the
adjacent months, so grids never reflow while browsing.

Example:
    >>> from datetime import datetime
    >>> from calperiod import create_period, create_temporal, divide
    >>> from calperiod.stable import is_padding
    >>>
    >>> temporal = create_temporal("native", week_starts_on=0)
    >>> grid = create_period(temporal, "stableMonth", datetime(2024, 2, 10))
    >>> cells = divide(temporal, grid, "day")  # always 42
    >>> greyed = [c for c in cells if is_padding(temporal, grid, c.start)]
"""

from datetime import datetime
from typing import TYPE_CHECKING

from calperiod.compare import contains
from calperiod.factory import create_period
from calperiod.period import Period
from calperiod.registry import UnitDefinition, UnitRegistry
from calperiod.util import DAY, MONTH, WEEK

if TYPE_CHECKING:
    from calperiod.temporal import Temporal

STABLE_MONTH = "stableMonth"
GRID_WEEKS = 6
GRID_DAYS = GRID_WEEKS * 7


def _stable_month_period(
    date: datetime, temporal: "Temporal"
) -> tuple[datetime, datetime]:
    adapter = temporal.adapter
    month_start = adapter.start_of(date, MONTH)
    padding = (adapter.get_weekday(month_start) - temporal.week_starts_on + 7) % 7
    start = adapter.subtract(month_start, {"days": padding})
    return start, adapter.add(start, {"days": GRID_DAYS})


def _is_full_grid(period: Period) -> bool:
    return period.duration.days == GRID_DAYS and not period.duration.seconds


STABLE_MONTH_UNIT = UnitDefinition(
    create_period=_stable_month_period,
    divisions=(WEEK, DAY),
    step={"months": 1},
    number=lambda date, temporal: date.month,
    validate=_is_full_grid,
    partitions=False,
)


def install_stable_month(registry: UnitRegistry) -> None:
    registry.define(STABLE_MONTH, STABLE_MONTH_UNIT)


def nominal_month(temporal: "Temporal", period: Period) -> Period:
    """Return the real calendar month a grid was built for."""
    return create_period(temporal, MONTH, period.date)


def is_padding(temporal: "Temporal", period: Period, date: datetime) -> bool:
    """True if ``date`` is on the grid but belongs to an adjacent month."""
    month = nominal_month(temporal, period)
    return contains(period, date) and not contains(month, date)
