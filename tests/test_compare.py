from datetime import datetime

import pytest

from calperiod import (
    UnknownUnitError,
    contains,
    create_custom_period,
    create_period,
    is_same,
    is_today,
    is_weekday,
    is_weekend,
)


def test_contains_is_half_open(temporal):
    march = create_period(temporal, "month", datetime(2024, 3, 10))
    assert contains(march, datetime(2024, 3, 1))
    assert contains(march, datetime(2024, 3, 31, 23, 59, 59, 999999))
    assert not contains(march, datetime(2024, 4, 1))
    assert not contains(march, datetime(2024, 2, 29, 23, 59))


def test_contains_periods(temporal):
    march = create_period(temporal, "month", datetime(2024, 3, 10))
    assert contains(march, create_period(temporal, "day", datetime(2024, 3, 31)))
    assert contains(march, march)
    # The week of Feb 29 starts in February
    assert not contains(march, create_period(temporal, "week", datetime(2024, 2, 29)))


def test_zero_length_period_contains_its_instant():
    instant = datetime(2024, 5, 1, 12)
    point = create_custom_period(instant, instant)
    assert contains(point, instant)
    assert not contains(point, datetime(2024, 5, 1, 12, 0, 0, 1))


def test_zero_length_target_is_tested_as_an_instant(temporal):
    january = create_period(temporal, "month", datetime(2024, 1, 10))
    assert contains(january, create_custom_period(january.start, january.start))
    assert not contains(january, create_custom_period(january.end, january.end))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (datetime(2024, 1, 15), datetime(2024, 3, 20), True),
        (datetime(2024, 3, 31, 23, 59), datetime(2024, 4, 1), False),
        (datetime(2024, 10, 1), datetime(2024, 12, 31), True),
        (datetime(2024, 2, 1), datetime(2023, 2, 1), False),
    ],
)
def test_is_same_quarter(temporal, a, b, expected):
    assert is_same(temporal, a, b, "quarter") is expected


@pytest.mark.parametrize(
    "a, b, unit, expected",
    [
        (datetime(2024, 6, 15, 1), datetime(2024, 6, 15, 23), "day", True),
        (datetime(2024, 6, 15), datetime(2024, 6, 16), "day", False),
        (datetime(2024, 6, 1), datetime(2024, 6, 30), "month", True),
        (datetime(2024, 6, 15), datetime(2024, 6, 16), "week", True),
        (datetime(2024, 6, 16), datetime(2024, 6, 17), "week", False),
        (datetime(2024, 1, 1), datetime(2024, 12, 31), "year", True),
        (datetime(2024, 6, 15, 10, 5), datetime(2024, 6, 15, 10, 59), "hour", True),
    ],
)
def test_is_same_adapter_units(temporal, a, b, unit, expected):
    assert is_same(temporal, a, b, unit) is expected


def test_is_same_week_follows_week_start(sunday_temporal):
    # Sunday opens a new week when weeks start on Sunday
    assert not is_same(
        sunday_temporal, datetime(2024, 6, 15), datetime(2024, 6, 16), "week"
    )


def test_is_same_accepts_periods_and_none(temporal):
    day = create_period(temporal, "day", datetime(2024, 6, 15, 9))
    month = create_period(temporal, "month", datetime(2024, 6, 28))
    assert is_same(temporal, day, month, "month")
    assert not is_same(temporal, day, month, "day")
    assert not is_same(temporal, None, day, "day")
    assert not is_same(temporal, day, None, "day")


def test_is_same_stable_month(temporal):
    # Jan 2 and Jan 30 2024 build the same January grid
    assert is_same(temporal, datetime(2024, 1, 2), datetime(2024, 1, 30), "stableMonth")
    assert not is_same(
        temporal, datetime(2024, 1, 30), datetime(2024, 2, 2), "stableMonth"
    )


def test_is_same_unknown_unit(temporal):
    with pytest.raises(UnknownUnitError):
        is_same(temporal, datetime(2024, 1, 1), datetime(2024, 1, 2), "fortnight")


def test_weekend_and_weekday(temporal):
    saturday = create_period(temporal, "day", datetime(2024, 6, 15))
    monday = create_period(temporal, "day", datetime(2024, 6, 17))
    assert is_weekend(saturday)
    assert not is_weekday(saturday)
    assert is_weekday(monday)
    assert not is_weekend(monday)


def test_is_today(temporal):
    now = datetime(2024, 6, 15, 18, 45)
    assert is_today(temporal, create_period(temporal, "day", now), now=now)
    hour = create_period(temporal, "hour", datetime(2024, 6, 15, 2))
    assert is_today(temporal, hour, now=now)
    assert not is_today(
        temporal, create_period(temporal, "day", datetime(2024, 6, 14)), now=now
    )
    assert is_today(temporal, create_period(temporal, "day", datetime.now()))
