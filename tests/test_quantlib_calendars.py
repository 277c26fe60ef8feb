from datetime import date, timedelta

import pytest

from accrua.calendar.base import AdjustmentError, BusinessCalendar
from accrua.calendar.calendars_quantlib import (
    CH,
    JP,
    KR,
    TARGET,
    UK,
    US,
    WEEKEND_ONLY,
    CalendarRangeError,
)
from accrua.calendar.holidays import HolidayCalendar
from accrua.conventions.types import BusinessDayConvention


# --- TARGET ---

@pytest.mark.parametrize(
    "holiday",
    [
        date(2024, 1, 1),  # New Year
        date(2024, 3, 29),  # Good Friday
        date(2024, 4, 1),  # Easter Monday
        date(2024, 5, 1),  # Labour Day
        date(2024, 12, 25),
        date(2024, 12, 26),
    ],
)
def test_target_holidays(holiday):
    assert TARGET.is_holiday(holiday)
    assert not TARGET.is_weekend(holiday)
    assert not TARGET.is_business_day(holiday)


def test_weekend_is_not_a_holiday():
    saturday = date(2024, 5, 4)
    assert TARGET.is_weekend(saturday)
    assert not TARGET.is_holiday(saturday)
    assert not TARGET.is_business_day(saturday)


def test_weekend_days_read_from_quantlib():
    assert TARGET.weekend_days == frozenset({5, 6})
    assert WEEKEND_ONLY.weekend_days == frozenset({5, 6})


def test_target_easter_rolls():
    assert TARGET.following(date(2024, 3, 29)) == date(2024, 4, 2)
    assert TARGET.preceding(date(2024, 4, 1)) == date(2024, 3, 28)
    # following lands in April, so modified following stays in March
    assert TARGET.modified_following(date(2024, 3, 29)) == date(2024, 3, 28)
    assert TARGET.modified_preceding(date(2024, 4, 1)) == date(2024, 4, 2)


def test_target_business_day_arithmetic():
    assert TARGET.add_business_days(date(2024, 12, 23), 2) == date(2024, 12, 27)
    assert TARGET.add_business_days(date(2024, 12, 27), -2) == date(2024, 12, 23)
    assert TARGET.business_days_between(date(2024, 12, 23), date(2024, 12, 27)) == 2
    assert TARGET.business_days_between(date(2024, 12, 27), date(2024, 12, 23)) == 0


def test_target_holiday_list():
    assert TARGET.holiday_list(date(2024, 3, 25), date(2024, 4, 5)) == [
        date(2024, 3, 29),
        date(2024, 4, 1),
    ]


@pytest.mark.parametrize(
    "convention, base_method",
    [
        (BusinessDayConvention.FOLLOWING, BusinessCalendar.following),
        (BusinessDayConvention.MODIFIED_FOLLOWING, BusinessCalendar.modified_following),
        (BusinessDayConvention.PRECEDING, BusinessCalendar.preceding),
        (BusinessDayConvention.MODIFIED_PRECEDING, BusinessCalendar.modified_preceding),
    ],
)
def test_quantlib_adjust_matches_base_algorithm(convention, base_method):
    day = date(2024, 1, 1)
    while day <= date(2024, 12, 31):
        assert TARGET.adjust(day, convention) == base_method(TARGET, day)
        day += timedelta(days=1)


def test_quantlib_advance_matches_base_algorithm():
    start = date(2024, 12, 20)
    for offset in range(-10, 11):
        assert TARGET.add_business_days(start, offset) == BusinessCalendar.add_business_days(
            TARGET, start, offset
        )
    end = date(2025, 1, 31)
    assert TARGET.business_days_between(start, end) == BusinessCalendar.business_days_between(
        TARGET, start, end
    )


# --- Other markets ---

def test_uk_summer_bank_holiday():
    assert UK.is_holiday(date(2024, 8, 26))
    assert TARGET.is_business_day(date(2024, 8, 26))


def test_us_independence_day_and_thanksgiving():
    assert US.is_holiday(date(2024, 7, 4))
    assert US.is_holiday(date(2024, 11, 28))
    assert US.following(date(2024, 7, 4)) == date(2024, 7, 5)


@pytest.mark.parametrize("market_calendar", [TARGET, UK, US, JP, KR, CH])
def test_new_year_closed_everywhere(market_calendar):
    assert not market_calendar.is_business_day(date(2024, 1, 1))


def test_weekend_only_calendar():
    assert WEEKEND_ONLY.is_business_day(date(2024, 12, 25))
    assert not WEEKEND_ONLY.is_holiday(date(2024, 12, 25))
    assert WEEKEND_ONLY.following(date(2024, 8, 31)) == date(2024, 9, 2)


# --- Errors ---

def test_out_of_range_date():
    with pytest.raises(CalendarRangeError):
        TARGET.is_business_day(date(1800, 1, 1))
    with pytest.raises(ValueError):
        TARGET.adjust(date(2300, 1, 1), BusinessDayConvention.FOLLOWING)


def test_unknown_convention_rejected():
    with pytest.raises(ValueError, match="Unknown business day convention"):
        TARGET.adjust(date(2024, 1, 6), "MF")


def test_advance_past_quantlib_range():
    with pytest.raises(AdjustmentError):
        TARGET.add_business_days(date(2199, 12, 31), 1)
    with pytest.raises(AdjustmentError):
        TARGET.add_business_days(date(1901, 1, 1), -1)


def test_roll_past_quantlib_range():
    # New Year's Day 1901 is the first supported date
    with pytest.raises(AdjustmentError):
        TARGET.adjust(date(1901, 1, 1), BusinessDayConvention.PRECEDING)
    assert TARGET.following(date(1901, 1, 1)) == date(1901, 1, 2)


def test_holiday_on_weekend_matches_holiday_calendar():
    christmas = date(2022, 12, 25)  # Sunday
    listed = HolidayCalendar("X", [christmas])
    assert not TARGET.is_holiday(christmas)
    assert not listed.is_holiday(christmas)
    assert TARGET.is_weekend(christmas) and listed.is_weekend(christmas)
