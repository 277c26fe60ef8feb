"""
Settlement date utilities.
Provides standalone functions for business day adjustments, spot lag calculations, and tenor arithmetic.
"""

import logging
import os
import re
from datetime import date
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from accrua.adjustments import adjust_date, apply_end_of_month_rule
from accrua.calendar.base import BusinessCalendar
from accrua.calendar.registry import CalendarSpec, get_calendar
from accrua.conventions.types import BusinessDayConvention
from accrua.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR_ENV = "ACCRUA_DEFAULT_CALENDAR"

# Default market settings
_DEFAULT_CALENDAR: Optional[BusinessCalendar] = None  # Will be initialized on first use
_DEFAULT_SPOT_LAG = 2
_DEFAULT_BUSINESS_DAY_CONVENTION = BusinessDayConvention.MODIFIED_FOLLOWING
_DEFAULT_END_OF_MONTH_RULE = True

_TENOR_RE = re.compile(r"^([+-]?\d+)([BDWMY])$")


def get_default_calendar() -> BusinessCalendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        name = os.getenv(DEFAULT_CALENDAR_ENV, "TARGET")
        _DEFAULT_CALENDAR = get_calendar(name)
        logger.debug("Default calendar initialised to %s", _DEFAULT_CALENDAR.name)
    return _DEFAULT_CALENDAR


def set_default_calendar(calendar: CalendarSpec) -> None:
    """Set the default calendar for date calculations."""
    global _DEFAULT_CALENDAR
    _DEFAULT_CALENDAR = get_calendar(calendar)


def reset_defaults() -> None:
    """Forget the default calendar so it is re-read from the environment."""
    global _DEFAULT_CALENDAR
    _DEFAULT_CALENDAR = None


def _resolve_calendar(calendar: Optional[CalendarSpec]) -> BusinessCalendar:
    if calendar is None:
        return get_default_calendar()
    return get_calendar(calendar)


def parse_tenor(tenor: str) -> Tuple[int, str]:
    """Split a tenor string ('2B', '1W', '3M', '10Y') into (count, unit)."""
    match = _TENOR_RE.match(tenor.upper().strip())
    if match is None:
        raise ValueError(f"Unsupported tenor: {tenor}")
    return int(match.group(1)), match.group(2)


def tenor_to_months(tenor: str) -> int:
    """Convert tenor string (e.g., '3M', '2Y') to number of months."""
    count, unit = parse_tenor(tenor)
    if unit == "M":
        return count
    if unit == "Y":
        return count * 12
    raise ValueError(f"Unsupported tenor: {tenor}")


def tenor_to_days(tenor: str) -> int:
    """Convert tenor string to number of calendar days for short tenors."""
    count, unit = parse_tenor(tenor)
    if unit == "D":
        return count
    if unit == "W":
        return count * 7
    raise ValueError(f"Unsupported short tenor: {tenor}")


def apply_spot_lag(
    trade_date: DateLike,
    spot_lag_days: int = _DEFAULT_SPOT_LAG,
    calendar: Optional[CalendarSpec] = None,
) -> date:
    """Apply spot lag to get settlement/value date."""
    return _resolve_calendar(calendar).add_business_days(to_date(trade_date), spot_lag_days)


def get_spot_date(
    trade_date: DateLike,
    calendar: Optional[CalendarSpec] = None,
    spot_lag: Optional[int] = None,
) -> date:
    """Get spot date from trade date using market conventions."""
    if spot_lag is None:
        spot_lag = _DEFAULT_SPOT_LAG
    return apply_spot_lag(trade_date, spot_lag, calendar)


def adjust_business_date(
    dt: DateLike,
    convention: Optional[BusinessDayConvention] = None,
    calendar: Optional[CalendarSpec] = None,
) -> date:
    """Apply business day adjustment using market conventions."""
    if convention is None:
        convention = _DEFAULT_BUSINESS_DAY_CONVENTION
    return adjust_date(dt, convention, _resolve_calendar(calendar))


def add_tenor(
    start_date: DateLike,
    tenor: str,
    calendar: Optional[CalendarSpec] = None,
    convention: Optional[BusinessDayConvention] = None,
    end_of_month_rule: Optional[bool] = None,
) -> date:
    """
    Add a tenor to a date.

    Args:
        start_date: Date to roll from
        tenor: '<n>B' business days, '<n>D'/'<n>W' calendar days/weeks,
            '<n>M'/'<n>Y' months/years
        calendar: Calendar name or instance (default calendar if None)
        convention: Business day convention for the result
        end_of_month_rule: Keep month-end starts on month-end for M/Y tenors

    Returns:
        The adjusted date. Business-day tenors always land on a business day.
    """
    cal = _resolve_calendar(calendar)
    if convention is None:
        convention = _DEFAULT_BUSINESS_DAY_CONVENTION
    if end_of_month_rule is None:
        end_of_month_rule = _DEFAULT_END_OF_MONTH_RULE

    start = to_date(start_date)
    count, unit = parse_tenor(tenor)

    if unit == "B":
        return cal.add_business_days(start, count)
    if unit in ("D", "W"):
        unadjusted = start + relativedelta(days=tenor_to_days(tenor))
    else:
        unadjusted = apply_end_of_month_rule(start, tenor_to_months(tenor), end_of_month_rule)
    return adjust_date(unadjusted, convention, cal)


def compute_maturity(
    trade_date: DateLike,
    tenor: str,
    calendar: Optional[CalendarSpec] = None,
    spot_lag: Optional[int] = None,
    convention: Optional[BusinessDayConvention] = None,
    end_of_month_rule: Optional[bool] = None,
) -> date:
    """Compute maturity date from trade date and tenor (spot date + tenor)."""
    spot = get_spot_date(trade_date, calendar, spot_lag)
    return add_tenor(spot, tenor, calendar, convention, end_of_month_rule)
