from dataclasses import dataclass, field
from datetime import datetime, timedelta

from calperiod.util import CUSTOM


@dataclass(frozen=True, kw_only=True)
class Period:
    """A bounded span of time at a given granularity.

    ``start`` is inclusive and ``end`` exclusive. ``date`` is the anchor the
    period was built from and ``number`` its position (2024 for a year, 12
    for December); neither takes part in equality.
    """

    type: str
    start: datetime
    end: datetime
    date: datetime = field(compare=False)
    number: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Period start ({self.start}) must be <= end ({self.end})"
            )

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def __contains__(self, item: "datetime | Period") -> bool:
        from calperiod.compare import contains

        return contains(self, item)

    def __str__(self) -> str:
        """Human-friendly string showing type and range."""
        return f"Period({self.type}: {self.start.isoformat()}→{self.end.isoformat()})"


def anchor_of(value: "datetime | Period") -> datetime:
    """Return the date itself, or a period's anchor date."""
    return value.date if isinstance(value, Period) else value


def create_custom_period(start: datetime, end: datetime, *, number: int = 0) -> Period:
    """Return an ad-hoc ``custom`` period anchored at its midpoint."""
    return Period(
        type=CUSTOM,
        start=start,
        end=end,
        date=start + (end - start) / 2,
        number=number,
    )
