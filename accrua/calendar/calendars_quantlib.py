"""
QuantLib-backed market calendars.

QuantLib maintains the official holiday rules for the major settlement
calendars (TARGET, London, New York, ...). This module wraps them behind
the :class:`~accrua.calendar.base.BusinessCalendar` interface.
"""

from datetime import date
from typing import Dict

import QuantLib as ql

from accrua.conventions.types import BusinessDayConvention
from accrua.utils.date import DateLike, to_date

from .base import AdjustmentError, BusinessCalendar

QL_MIN_DATE = date(1901, 1, 1)
QL_MAX_DATE = date(2199, 12, 31)

_QL_CONVENTIONS: Dict[BusinessDayConvention, int] = {
    BusinessDayConvention.NO_ADJUSTMENT: ql.Unadjusted,
    BusinessDayConvention.FOLLOWING: ql.Following,
    BusinessDayConvention.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayConvention.PRECEDING: ql.Preceding,
    BusinessDayConvention.MODIFIED_PRECEDING: ql.ModifiedPreceding,
}


class CalendarRangeError(ValueError):
    """Raised for dates outside the range QuantLib calendars support."""

    pass


def _to_ql_date(dt: DateLike) -> ql.Date:
    """Convert a Python date-like to QuantLib Date."""
    dt = to_date(dt)
    if dt < QL_MIN_DATE or dt > QL_MAX_DATE:
        raise CalendarRangeError(
            f"Date {dt} outside QuantLib calendar range [{QL_MIN_DATE}, {QL_MAX_DATE}]"
        )
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


def _ql_weekday(py_weekday: int) -> int:
    """Python weekday (Monday=0) to QuantLib weekday (Sunday=1)."""
    return (py_weekday + 1) % 7 + 1


class QuantLibCalendar(BusinessCalendar):
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        weekend = [d for d in range(7) if ql_calendar.isWeekend(_ql_weekday(d))]
        super().__init__(name, weekend)
        self._ql_calendar = ql_calendar

    @property
    def ql_calendar(self) -> ql.Calendar:
        """Underlying QuantLib calendar."""
        return self._ql_calendar

    def is_holiday(self, dt: DateLike) -> bool:
        """Check if date is a holiday.

        QuantLib treats weekends as holidays too; only bank holidays on working
        weekdays count here, so a holiday falling on a weekend reports False.
        """
        ql_date = _to_ql_date(dt)
        return self._ql_calendar.isHoliday(ql_date) and not self._ql_calendar.isWeekend(
            ql_date.weekday()
        )

    def is_business_day(self, dt: DateLike) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def adjust(
        self,
        day: DateLike,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> date:
        """Apply a business day convention using QuantLib."""
        if convention not in _QL_CONVENTIONS:
            raise ValueError(f"Unknown business day convention: {convention}")
        ql_date = _to_ql_date(day)
        try:
            adjusted = self._ql_calendar.adjust(ql_date, _QL_CONVENTIONS[convention])
        except RuntimeError as exc:
            raise AdjustmentError(f"{self.name}: cannot adjust {to_date(day)}: {exc}") from exc
        return _to_py_date(adjusted)

    def following(self, day: DateLike) -> date:
        return self.adjust(day, BusinessDayConvention.FOLLOWING)

    def modified_following(self, day: DateLike) -> date:
        return self.adjust(day, BusinessDayConvention.MODIFIED_FOLLOWING)

    def preceding(self, day: DateLike) -> date:
        return self.adjust(day, BusinessDayConvention.PRECEDING)

    def modified_preceding(self, day: DateLike) -> date:
        return self.adjust(day, BusinessDayConvention.MODIFIED_PRECEDING)

    def add_business_days(self, start_date: DateLike, days: int) -> date:
        """Add business days to a date."""
        ql_date = _to_ql_date(start_date)
        try:
            ql_result = self._ql_calendar.advance(ql_date, days, ql.Days)
        except RuntimeError as exc:
            raise AdjustmentError(
                f"{self.name}: cannot advance {to_date(start_date)} by {days} business days: {exc}"
            ) from exc
        return _to_py_date(ql_result)

    def business_days_between(self, start: DateLike, end: DateLike) -> int:
        """Count business days between two dates (exclusive of start, inclusive of end)."""
        ql_start = _to_ql_date(start)
        ql_end = _to_ql_date(end)

        if ql_end <= ql_start:
            return 0

        # QuantLib counts [start, end) by default; shift to (start, end]
        return self._ql_calendar.businessDaysBetween(ql_start, ql_end, False, True)


class TargetCalendar(QuantLibCalendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar.

    Settlement calendar for EUR.
    """

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(QuantLibCalendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class UnitedKingdomCalendar(QuantLibCalendar):
    """London settlement calendar (GBP)."""

    def __init__(self):
        super().__init__("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))


class UnitedStatesCalendar(QuantLibCalendar):
    """New York settlement calendar (USD)."""

    def __init__(self):
        super().__init__("US", ql.UnitedStates(ql.UnitedStates.Settlement))


class JapanCalendar(QuantLibCalendar):
    """Tokyo calendar (JPY)."""

    def __init__(self):
        super().__init__("JP", ql.Japan())


class SouthKoreaCalendar(QuantLibCalendar):
    """Seoul settlement calendar (KRW)."""

    def __init__(self):
        super().__init__("KR", ql.SouthKorea(ql.SouthKorea.Settlement))


class SwitzerlandCalendar(QuantLibCalendar):
    """Zurich calendar (CHF)."""

    def __init__(self):
        super().__init__("CH", ql.Switzerland())


# Pre-defined calendar instances
TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()
UK = UnitedKingdomCalendar()
US = UnitedStatesCalendar()
JP = JapanCalendar()
KR = SouthKoreaCalendar()
CH = SwitzerlandCalendar()
