"""Business calendars for date adjustment."""

from .base import AdjustmentError, BusinessCalendar
from .calendars_quantlib import (
    CH,
    JP,
    KR,
    TARGET,
    UK,
    US,
    WEEKEND_ONLY,
    CalendarRangeError,
    QuantLibCalendar,
)
from .holidays import HolidayCalendar
from .joint import JointCalendar
from .registry import (
    available_calendars,
    calendar_for_currency,
    get_calendar,
    register_calendar,
)

__all__ = [
    "AdjustmentError",
    "BusinessCalendar",
    "CalendarRangeError",
    "HolidayCalendar",
    "JointCalendar",
    "QuantLibCalendar",
    "TARGET",
    "WEEKEND_ONLY",
    "UK",
    "US",
    "JP",
    "KR",
    "CH",
    "available_calendars",
    "calendar_for_currency",
    "get_calendar",
    "register_calendar",
]
