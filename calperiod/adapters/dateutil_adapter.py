"""Adapter backed by python-dateutil's ``relativedelta``.

``relativedelta`` already clamps month arithmetic and can express
"start of week" as an absolute weekday jump, so every operation here is a
single ``date + relativedelta(...)``.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import override

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from calperiod.adapters.base import DateAdapter
from calperiod.util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR
from calperiod.util import normalize_duration

# Indexed by 0=Sunday .. 6=Saturday
_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)

_FLOOR = dict(hour=0, minute=0, second=0, microsecond=0)
_CEIL = dict(hour=23, minute=59, second=59, microsecond=999999)

_START: dict[str, relativedelta] = {
    YEAR: relativedelta(month=1, day=1, **_FLOOR),
    MONTH: relativedelta(day=1, **_FLOOR),
    DAY: relativedelta(**_FLOOR),
    HOUR: relativedelta(minute=0, second=0, microsecond=0),
    MINUTE: relativedelta(second=0, microsecond=0),
    SECOND: relativedelta(microsecond=0),
}

_END: dict[str, relativedelta] = {
    YEAR: relativedelta(month=12, day=31, **_CEIL),
    # day=31 clamps to the last day of shorter months
    MONTH: relativedelta(day=31, **_CEIL),
    DAY: relativedelta(**_CEIL),
    HOUR: relativedelta(minute=59, second=59, microsecond=999999),
    MINUTE: relativedelta(second=59, microsecond=999999),
    SECOND: relativedelta(microsecond=999999),
}


class DateutilAdapter(DateAdapter):
    name = "dateutil"

    @override
    def add(self, date: datetime, duration: Mapping[str, int]) -> datetime:
        self._check_date(date)
        return date + relativedelta(**normalize_duration(duration))

    @override
    def subtract(self, date: datetime, duration: Mapping[str, int]) -> datetime:
        self._check_date(date)
        return date - relativedelta(**normalize_duration(duration))

    @override
    def start_of(
        self, date: datetime, unit: str, *, week_starts_on: int = 1
    ) -> datetime:
        self._check_unit(unit)
        self._check_date(date)
        if unit == WEEK:
            # weekday(-1) is the given weekday on or before date
            first = _WEEKDAYS[week_starts_on]
            return date + relativedelta(weekday=first(-1), **_FLOOR)
        return date + _START[unit]

    @override
    def end_of(self, date: datetime, unit: str, *, week_starts_on: int = 1) -> datetime:
        self._check_unit(unit)
        self._check_date(date)
        if unit == WEEK:
            last = _WEEKDAYS[(week_starts_on + 6) % 7]
            return date + relativedelta(weekday=last(+1), **_CEIL)
        return date + _END[unit]
