"""Accrual date conventions.

This package provides business calendars and ISDA business day conventions
used to roll coupon and settlement dates over bank and currency holidays.

Key modules:
- calendar: Business calendar base class, QuantLib market calendars,
  holiday-list and joint calendars, calendar registry
- conventions: Business day convention and calendar enums
- adjustments: Business day adjustment and end-of-month rule
- date_utils: Spot lag, tenor arithmetic and market defaults
"""

from accrua.adjustments import adjust_date
from accrua.calendar import (
    AdjustmentError,
    BusinessCalendar,
    HolidayCalendar,
    JointCalendar,
    get_calendar,
)
from accrua.conventions.types import BusinessDayConvention

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AdjustmentError",
    "BusinessCalendar",
    "BusinessDayConvention",
    "HolidayCalendar",
    "JointCalendar",
    "adjust_date",
    "get_calendar",
]
