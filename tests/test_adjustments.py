from datetime import date, datetime

import pytest

from accrua.adjustments import (
    adjust_date,
    apply_end_of_month_rule,
    get_month_end,
    is_end_of_month,
)
from accrua.calendar.calendars_quantlib import TARGET, WEEKEND_ONLY
from accrua.conventions.types import BusinessDayConvention


@pytest.mark.parametrize(
    "name, expected",
    [
        ("MF", BusinessDayConvention.MODIFIED_FOLLOWING),
        ("ModFollow", BusinessDayConvention.MODIFIED_FOLLOWING),
        ("Modified Following", BusinessDayConvention.MODIFIED_FOLLOWING),
        ("following", BusinessDayConvention.FOLLOWING),
        ("P", BusinessDayConvention.PRECEDING),
        ("modified-preceding", BusinessDayConvention.MODIFIED_PRECEDING),
        ("Unadjusted", BusinessDayConvention.NO_ADJUSTMENT),
        ("NONE", BusinessDayConvention.NO_ADJUSTMENT),
    ],
)
def test_convention_from_string(name, expected):
    assert BusinessDayConvention.from_string(name) is expected


def test_convention_from_string_unknown():
    with pytest.raises(ValueError, match="Unknown business day convention"):
        BusinessDayConvention.from_string("NEAREST")


def test_adjust_date_with_enum_and_string():
    assert adjust_date(date(2024, 3, 29), BusinessDayConvention.FOLLOWING, TARGET) == date(2024, 4, 2)
    assert adjust_date(datetime(2024, 3, 29, 9), "MF", TARGET) == date(2024, 3, 28)
    assert adjust_date("2024-08-31", "NONE", WEEKEND_ONLY) == date(2024, 8, 31)


@pytest.mark.parametrize(
    "dt, expected",
    [
        (date(2024, 2, 29), True),
        (date(2023, 2, 28), True),
        (date(2024, 2, 28), False),
        (date(2024, 12, 31), True),
        (date(2024, 4, 30), True),
        (date(2024, 4, 29), False),
        (date.max, True),
    ],
)
def test_is_end_of_month(dt, expected):
    assert is_end_of_month(dt) is expected


def test_get_month_end():
    assert get_month_end(2024, 2) == date(2024, 2, 29)
    assert get_month_end(2023, 2) == date(2023, 2, 28)
    assert get_month_end(2023, 12) == date(2023, 12, 31)


@pytest.mark.parametrize(
    "start, months, eom, expected",
    [
        (date(2024, 1, 31), 1, True, date(2024, 2, 29)),
        (date(2024, 2, 29), 1, True, date(2024, 3, 31)),
        (date(2024, 2, 29), 1, False, date(2024, 3, 29)),
        (date(2024, 3, 31), -1, True, date(2024, 2, 29)),
        (date(2024, 1, 30), 1, False, date(2024, 2, 29)),
        (date(2024, 1, 15), 12, True, date(2025, 1, 15)),
        (date(2024, 11, 30), 3, True, date(2025, 2, 28)),
        (date(2024, 4, 30), 1, True, date(2024, 5, 31)),
        (date(2024, 4, 30), 1, False, date(2024, 5, 30)),
    ],
)
def test_apply_end_of_month_rule(start, months, eom, expected):
    assert apply_end_of_month_rule(start, months, eom) == expected
