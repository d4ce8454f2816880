from datetime import datetime, timedelta

import pytest

from calperiod import (
    ConfigurationError,
    NativeAdapter,
    PandasAdapter,
    Period,
    Temporal,
    UnknownUnitError,
    ValidationError,
    create_custom_period,
    create_period,
    create_temporal,
    to_period,
    validate_period,
)


def test_create_month_period(temporal):
    anchor = datetime(2024, 3, 15, 10, 30)
    march = create_period(temporal, "month", anchor)

    assert march.type == "month"
    assert march.start == datetime(2024, 3, 1)
    assert march.end == datetime(2024, 4, 1)
    assert march.date == anchor
    assert march.number == 3


@pytest.mark.parametrize(
    "unit, start, end, number",
    [
        ("year", datetime(2024, 1, 1), datetime(2025, 1, 1), 2024),
        ("quarter", datetime(2024, 4, 1), datetime(2024, 7, 1), 2),
        ("week", datetime(2024, 5, 20), datetime(2024, 5, 27), 21),
        ("day", datetime(2024, 5, 20), datetime(2024, 5, 21), 20),
        ("hour", datetime(2024, 5, 20, 9), datetime(2024, 5, 20, 10), 9),
        ("minute", datetime(2024, 5, 20, 9, 45), datetime(2024, 5, 20, 9, 46), 45),
        (
            "second",
            datetime(2024, 5, 20, 9, 45, 30),
            datetime(2024, 5, 20, 9, 45, 31),
            30,
        ),
    ],
)
def test_builtin_unit_boundaries(temporal, unit, start, end, number):
    period = create_period(temporal, unit, datetime(2024, 5, 20, 9, 45, 30, 500))
    assert (period.start, period.end, period.number) == (start, end, number)


def test_quarter_boundaries_across_year_end(temporal):
    q4 = create_period(temporal, "quarter", datetime(2024, 12, 31, 23, 59))
    assert q4.start == datetime(2024, 10, 1)
    assert q4.end == datetime(2025, 1, 1)
    assert q4.number == 4

    q1 = create_period(temporal, "quarter", datetime(2024, 1, 1))
    assert q1.start == datetime(2024, 1, 1)
    assert q1.end == datetime(2024, 4, 1)


def test_week_number(temporal):
    # 2024 starts on a Monday
    assert create_period(temporal, "week", datetime(2024, 1, 3)).number == 1
    assert create_period(temporal, "week", datetime(2024, 1, 10)).number == 2
    # Sunday Jan 1 2023 belongs to a Monday-first week that began in 2022
    assert create_period(temporal, "week", datetime(2023, 1, 1)).number == 0


def test_create_period_from_period_uses_anchor(temporal):
    day = create_period(temporal, "day", datetime(2024, 7, 4, 12))
    month = create_period(temporal, "month", day)
    assert month.start == datetime(2024, 7, 1)
    assert month.date == day.date


def test_unknown_unit(temporal):
    with pytest.raises(UnknownUnitError, match="bogus"):
        create_period(temporal, "bogus", datetime(2024, 1, 1))


def test_missing_adapter():
    with pytest.raises(ConfigurationError):
        create_period(None, "day", datetime(2024, 1, 1))  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError):
        create_temporal()
    with pytest.raises(ConfigurationError):
        Temporal(adapter=None)  # type: ignore[arg-type]


def test_create_temporal_options():
    temporal = create_temporal("pandas", week_starts_on=0)
    assert isinstance(temporal.adapter, PandasAdapter)
    assert temporal.week_starts_on == 0

    with pytest.raises(ConfigurationError, match="week_starts_on"):
        create_temporal(NativeAdapter(), week_starts_on=7)
    with pytest.raises(ConfigurationError, match="Unknown adapter"):
        create_temporal("moment")


def test_to_period_defaults_to_day(temporal):
    period = to_period(temporal, datetime(2024, 2, 29, 18))
    assert period.type == "day"
    assert period.start == datetime(2024, 2, 29)

    assert to_period(temporal, datetime(2024, 2, 29), "year").number == 2024


def test_period_rejects_inverted_bounds():
    with pytest.raises(ValueError, match="must be <= end"):
        Period(
            type="day",
            start=datetime(2024, 1, 2),
            end=datetime(2024, 1, 1),
            date=datetime(2024, 1, 1),
        )


def test_equality_ignores_anchor_and_number():
    a = Period(
        type="month",
        start=datetime(2024, 1, 1),
        end=datetime(2024, 2, 1),
        date=datetime(2024, 1, 31),
        number=1,
    )
    b = Period(
        type="month",
        start=datetime(2024, 1, 1),
        end=datetime(2024, 2, 1),
        date=datetime(2024, 1, 29),
    )
    assert a == b
    assert hash(a) == hash(b)
    assert a != Period(type="custom", start=a.start, end=a.end, date=a.date)


def test_period_is_immutable(temporal):
    period = create_period(temporal, "day", datetime(2024, 1, 1))
    with pytest.raises(AttributeError):
        period.start = datetime(2023, 1, 1)  # type: ignore[misc]


def test_duration_and_membership(temporal):
    feb = create_period(temporal, "month", datetime(2024, 2, 1))
    assert feb.duration == timedelta(days=29)
    assert datetime(2024, 2, 29, 23, 59) in feb
    assert datetime(2024, 3, 1) not in feb
    assert str(feb) == "Period(month: 2024-02-01T00:00:00→2024-03-01T00:00:00)"


def test_custom_period_is_anchored_at_midpoint():
    custom = create_custom_period(datetime(2024, 1, 1), datetime(2024, 1, 3), number=2)
    assert custom.type == "custom"
    assert custom.date == datetime(2024, 1, 2)
    assert custom.number == 2


def test_validate_period(temporal):
    week = create_period(temporal, "week", datetime(2024, 1, 3))
    assert validate_period(temporal, week)

    short_week = Period(
        type="week",
        start=week.start,
        end=week.end - timedelta(days=1),
        date=week.date,
    )
    assert not validate_period(temporal, short_week)
    with pytest.raises(ValidationError):
        validate_period(temporal, short_week, strict=True)

    # No predicate registered for months
    assert validate_period(temporal, create_period(temporal, "month", week.date))
    assert validate_period(temporal, create_custom_period(week.start, week.start))
