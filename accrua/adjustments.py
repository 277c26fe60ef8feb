"""
Date adjustment functions: business day conventions and the end-of-month rule.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from accrua.calendar.base import BusinessCalendar
from accrua.conventions.types import BusinessDayConvention
from accrua.utils.date import DateLike, to_date


def adjust_date(
    dt: DateLike, adjustment: BusinessDayConvention, calendar: BusinessCalendar
) -> date:
    """Apply business day adjustment to a date."""
    if isinstance(adjustment, str):
        adjustment = BusinessDayConvention.from_string(adjustment)
    return calendar.adjust(to_date(dt), adjustment)


def is_end_of_month(dt: DateLike) -> bool:
    """Check if date is end of month."""
    dt = to_date(dt)
    return dt == get_month_end(dt.year, dt.month)


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    return date(year, month, 1) + relativedelta(day=31)


def apply_end_of_month_rule(
    dt: DateLike, months_to_add: int, apply_eom_rule: bool = True
) -> date:
    """Add months to a date, applying end-of-month rule if applicable.

    A month-end start stays on the month end when the rule applies; otherwise
    the day of month is kept, clamped to the length of the target month
    (Jan 31 + 1M -> Feb 28/29).
    """
    dt = to_date(dt)
    shifted = dt + relativedelta(months=months_to_add)

    if apply_eom_rule and is_end_of_month(dt):
        return get_month_end(shifted.year, shifted.month)
    return shifted
