"""Zero-dependency adapter built on the standard library.

``datetime`` arithmetic silently refuses invalid days instead of clamping
them, so month shifts go through :func:`calendar.monthrange` to land on the
last valid day of the target month.
"""

import calendar
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import override

from calperiod.adapters.base import DateAdapter
from calperiod.util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR
from calperiod.util import fixed_timedelta, normalize_duration


def _shift_months(date: datetime, months: int) -> datetime:
    total = date.year * 12 + (date.month - 1) + months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    last_day = calendar.monthrange(year, month)[1]
    return date.replace(year=year, month=month, day=min(date.day, last_day))


class NativeAdapter(DateAdapter):
    name = "native"

    @override
    def add(self, date: datetime, duration: Mapping[str, int]) -> datetime:
        self._check_date(date)
        fields = normalize_duration(duration)
        months = fields.get("years", 0) * 12 + fields.get("months", 0)
        if months:
            date = _shift_months(date, months)
        return date + fixed_timedelta(fields)

    @override
    def start_of(
        self, date: datetime, unit: str, *, week_starts_on: int = 1
    ) -> datetime:
        self._check_unit(unit)
        self._check_date(date)
        if unit == SECOND:
            return date.replace(microsecond=0)
        if unit == MINUTE:
            return date.replace(second=0, microsecond=0)
        if unit == HOUR:
            return date.replace(minute=0, second=0, microsecond=0)

        midnight = date.replace(hour=0, minute=0, second=0, microsecond=0)
        if unit == DAY:
            return midnight
        if unit == WEEK:
            offset = (self.get_weekday(date) - week_starts_on) % 7
            return midnight - timedelta(days=offset)
        if unit == MONTH:
            return midnight.replace(day=1)
        # YEAR
        return midnight.replace(month=1, day=1)

    @override
    def end_of(self, date: datetime, unit: str, *, week_starts_on: int = 1) -> datetime:
        self._check_unit(unit)
        self._check_date(date)
        if unit == MONTH:
            last_day = calendar.monthrange(date.year, date.month)[1]
            return date.replace(
                day=last_day, hour=23, minute=59, second=59, microsecond=999999
            )
        if unit == YEAR:
            return date.replace(
                month=12, day=31, hour=23, minute=59, second=59, microsecond=999999
            )
        return super().end_of(date, unit, week_starts_on=week_starts_on)
