from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime

from calperiod.errors import UnknownUnitError
from calperiod.util import ADAPTER_UNITS, RESOLUTION, negate_duration, unit_duration


class DateAdapter(ABC):
    """Primitive date arithmetic over ``datetime`` values.

    Implementations must agree exactly on every method so that no period
    operation depends on the backend in use. Dates may be naive or carry a
    fixed UTC offset; tzinfo is preserved. Zones with daylight-saving
    transitions are rejected with ``ValueError``.
    """

    name: str = "abstract"

    @abstractmethod
    def add(self, date: datetime, duration: Mapping[str, int]) -> datetime:
        """Return ``date`` moved forward by ``duration``.

        Month and year steps clamp the day of month (Jan 31 + 1 month is the
        last day of February), never overflowing into the next month.
        """
        pass

    def subtract(self, date: datetime, duration: Mapping[str, int]) -> datetime:
        return self.add(date, negate_duration(duration))

    @abstractmethod
    def start_of(
        self, date: datetime, unit: str, *, week_starts_on: int = 1
    ) -> datetime:
        """Return the first instant of the ``unit`` containing ``date``."""
        pass

    def end_of(self, date: datetime, unit: str, *, week_starts_on: int = 1) -> datetime:
        """Return the last representable instant of the ``unit`` containing ``date``."""
        start = self.start_of(date, unit, week_starts_on=week_starts_on)
        return self.add(start, unit_duration(unit)) - RESOLUTION

    def is_same(
        self, a: datetime, b: datetime, unit: str, *, week_starts_on: int = 1
    ) -> bool:
        return self.start_of(a, unit, week_starts_on=week_starts_on) == self.start_of(
            b, unit, week_starts_on=week_starts_on
        )

    def get_weekday(self, date: datetime) -> int:
        """Return the weekday of ``date`` with 0=Sunday through 6=Saturday."""
        return (date.weekday() + 1) % 7

    def _check_unit(self, unit: str) -> None:
        if unit not in ADAPTER_UNITS:
            raise UnknownUnitError(unit, known=ADAPTER_UNITS)

    def _check_date(self, date: datetime) -> None:
        tzinfo = date.tzinfo
        # utcoffset(None) is only defined for zones with a single offset
        if tzinfo is not None and tzinfo.utcoffset(None) is None:
            raise ValueError(
                f"{self.name} adapter got {date!r}.\n"
                f"Its zone ({tzinfo}) has a variable UTC offset; only naive "
                f"datetimes and fixed offsets are supported.\n"
                f"Hint: Convert before building periods:\n"
                f"  date.astimezone(timezone.utc)\n"
                f"  # or a fixed offset: date.astimezone(timezone(timedelta(hours=1)))"
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
