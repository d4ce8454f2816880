"""Splitting periods into arbitrary pieces and merging runs of periods."""

from collections.abc import Mapping, Sequence
from datetime import datetime
from itertools import pairwise

from calperiod.divide import divide
from calperiod.factory import create_period
from calperiod.period import Period, create_custom_period
from calperiod.temporal import Temporal, require_adapter
from calperiod.util import CUSTOM, normalize_duration, scale_duration


def split(
    temporal: Temporal,
    period: Period,
    *,
    by: str | None = None,
    count: int | None = None,
    duration: Mapping[str, int] | None = None,
) -> list[Period]:
    """Split ``period`` into consecutive pieces.

    Exactly one option must be given:

    - ``by``: a unit name, equivalent to ``divide(temporal, period, by)``
    - ``count``: that many equal ``custom`` periods numbered from 1, the
      last one ending exactly at ``period.end``
    - ``duration``: consecutive ``custom`` periods of an adapter duration
      measured from ``period.start``, the last one clipped to ``period.end``

    Example:
        >>> split(temporal, january, duration={"weeks": 2})  # 3 pieces
    """
    chosen = [option for option in (by, count, duration) if option is not None]
    if len(chosen) != 1:
        raise ValueError(
            "split() takes exactly one of by=, count= or duration=.\n"
            "Examples:\n"
            "  split(temporal, year, by='month')\n"
            "  split(temporal, month, count=3)\n"
            "  split(temporal, month, duration={'weeks': 2})"
        )
    if by is not None:
        return divide(temporal, period, by)
    if count is not None:
        return _split_count(period, count)
    assert duration is not None
    return _split_duration(temporal, period, duration)


def _split_count(period: Period, count: int) -> list[Period]:
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    total = period.duration
    bounds = [period.start + total * i // count for i in range(count)]
    bounds.append(period.end)
    return [
        create_custom_period(start, end, number=index)
        for index, (start, end) in enumerate(pairwise(bounds), start=1)
    ]


def _split_duration(
    temporal: Temporal, period: Period, duration: Mapping[str, int]
) -> list[Period]:
    adapter = require_adapter(temporal)
    if not normalize_duration(duration):
        raise ValueError(f"duration must be non-empty, got {dict(duration)}")

    parts: list[Period] = []
    cursor = period.start
    while cursor < period.end:
        # Offsets are taken from period.start so month steps do not drift
        boundary = adapter.add(period.start, scale_duration(duration, len(parts) + 1))
        if boundary <= cursor:
            raise ValueError(
                f"duration must move forward in time, got {dict(duration)}"
            )
        boundary = min(boundary, period.end)
        parts.append(create_custom_period(cursor, boundary, number=len(parts) + 1))
        cursor = boundary
    return parts


def split_at(period: Period, at: datetime) -> tuple[Period, Period]:
    """Cut ``period`` at ``at`` into ``[start, at)`` and ``[at, end)``.

    ``at`` is clamped to the period, so cutting outside it yields one empty
    (zero-length) half.
    """
    at = min(max(at, period.start), period.end)
    return create_custom_period(period.start, at), create_custom_period(at, period.end)


def merge(temporal: Temporal, periods: Sequence[Period]) -> Period | None:
    """Combine ``periods`` into a single period.

    A contiguous run of same-unit periods that exactly covers a unit on its
    ``merges_to`` chain becomes that unit (seven days of a week become the
    week, three months of a quarter become the quarter). Anything else
    becomes a ``custom`` period from the earliest start to the latest end.
    Returns None for no periods and the period itself for one.
    """
    if not periods:
        return None
    if len(periods) == 1:
        return periods[0]

    ordered = sorted(periods, key=lambda p: (p.start, p.end))
    if len({p.type for p in ordered}) == 1 and all(
        a.end == b.start for a, b in pairwise(ordered)
    ):
        natural = _natural_unit(temporal, ordered)
        if natural is not None:
            return natural

    return create_custom_period(ordered[0].start, max(p.end for p in ordered))


def _natural_unit(temporal: Temporal, ordered: list[Period]) -> Period | None:
    kind = ordered[0].type
    if kind == CUSTOM:
        return None

    start, end = ordered[0].start, ordered[-1].end
    anchor = ordered[len(ordered) // 2].date
    for parent in temporal.registry.merge_chain(kind):
        candidate = create_period(temporal, parent, anchor)
        if candidate.start == start and candidate.end == end:
            return candidate
        if candidate.start <= start and candidate.end >= end:
            # Coarser units only cover more
            return None
    return None
