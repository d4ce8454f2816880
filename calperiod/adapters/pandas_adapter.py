"""Adapter backed by pandas ``Timestamp`` and ``DateOffset``.

Inputs are wrapped in ``pd.Timestamp`` and results converted back with
``to_pydatetime`` so callers only ever see ``datetime`` values.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import override

import pandas as pd

from calperiod.adapters.base import DateAdapter
from calperiod.util import DAY, HOUR, MINUTE, MONTH, SECOND, UNIT_FIELDS, WEEK
from calperiod.util import normalize_duration


class PandasAdapter(DateAdapter):
    name = "pandas"

    @override
    def add(self, date: datetime, duration: Mapping[str, int]) -> datetime:
        self._check_date(date)
        fields = normalize_duration(duration)
        # DateOffset() with no fields means one day
        if not fields:
            return date
        return (pd.Timestamp(date) + pd.DateOffset(**fields)).to_pydatetime()

    @override
    def subtract(self, date: datetime, duration: Mapping[str, int]) -> datetime:
        self._check_date(date)
        fields = normalize_duration(duration)
        if not fields:
            return date
        return (pd.Timestamp(date) - pd.DateOffset(**fields)).to_pydatetime()

    @override
    def start_of(
        self, date: datetime, unit: str, *, week_starts_on: int = 1
    ) -> datetime:
        self._check_date(date)
        return self._floor(pd.Timestamp(date), unit, week_starts_on).to_pydatetime()

    @override
    def end_of(self, date: datetime, unit: str, *, week_starts_on: int = 1) -> datetime:
        self._check_date(date)
        start = self._floor(pd.Timestamp(date), unit, week_starts_on)
        step = pd.DateOffset(**{UNIT_FIELDS[unit]: 1})
        end = start + step - pd.Timedelta(microseconds=1)
        return end.to_pydatetime()

    @override
    def get_weekday(self, date: datetime) -> int:
        return (pd.Timestamp(date).dayofweek + 1) % 7

    def _floor(self, ts: pd.Timestamp, unit: str, week_starts_on: int) -> pd.Timestamp:
        self._check_unit(unit)
        if unit == SECOND:
            return ts.replace(microsecond=0, nanosecond=0)
        if unit == MINUTE:
            return ts.replace(second=0, microsecond=0, nanosecond=0)
        if unit == HOUR:
            return ts.replace(minute=0, second=0, microsecond=0, nanosecond=0)

        midnight = ts.normalize()
        if unit == DAY:
            return midnight
        if unit == WEEK:
            offset = (int(ts.dayofweek) + 1 - week_starts_on) % 7
            return midnight - pd.Timedelta(days=offset)
        if unit == MONTH:
            return midnight.replace(day=1)
        # YEAR
        return midnight.replace(month=1, day=1)
