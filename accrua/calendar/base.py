"""
Business calendar abstraction for date adjustment.

A calendar only has to say which days are bank holidays; weekend handling,
the ISDA business day conventions and business-day arithmetic are built on
top of that single question.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Iterable, List

from accrua.conventions.types import BusinessDayConvention
from accrua.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
DEFAULT_WEEKEND = frozenset({5, 6})  # Saturday, Sunday


class AdjustmentError(ValueError):
    """Raised when no business day exists in the requested direction."""

    pass


class BusinessCalendar(ABC):
    """Base class for bank holiday calendars used for date rolling.

    Subclasses implement :meth:`is_holiday`. Weekends default to Saturday and
    Sunday, which is not true for every market; pass ``weekend_days`` (Python
    weekday numbers, Monday=0) to change it.
    """

    def __init__(self, name: str, weekend_days: Iterable[int] = DEFAULT_WEEKEND):
        weekend = frozenset(int(d) for d in weekend_days)
        if any(d < 0 or d > 6 for d in weekend):
            raise ValueError(f"Weekend days must be in 0..6, got {sorted(weekend)}")
        if len(weekend) == 7:
            raise ValueError("Weekend cannot cover the whole week")
        self.name = name
        self.weekend_days = weekend

    @abstractmethod
    def is_holiday(self, day: DateLike) -> bool:
        """Check whether the date is a bank holiday on a working weekday.

        A holiday that falls on a weekend is reported by :meth:`is_weekend`
        only, so ``is_holiday`` and ``is_weekend`` are never both True.
        """

    def is_weekend(self, day: DateLike) -> bool:
        """Check whether the date falls on a weekend."""
        return to_date(day).weekday() in self.weekend_days

    def is_business_day(self, day: DateLike) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        day = to_date(day)
        return not self.is_holiday(day) and not self.is_weekend(day)

    # ------------------------------------------------------------------
    # Business day conventions
    # ------------------------------------------------------------------

    def _next(self, day: date) -> date:
        if day == date.max:
            raise AdjustmentError(f"{self.name}: no business day on or after {day}")
        return day + ONE_DAY

    def _previous(self, day: date) -> date:
        if day == date.min:
            raise AdjustmentError(f"{self.name}: no business day on or before {day}")
        return day - ONE_DAY

    def following(self, day: DateLike) -> date:
        """First business day on or after the date."""
        day = to_date(day)
        while not self.is_business_day(day):
            day = self._next(day)
        return day

    def preceding(self, day: DateLike) -> date:
        """First business day on or before the date."""
        day = to_date(day)
        while not self.is_business_day(day):
            day = self._previous(day)
        return day

    def modified_following(self, day: DateLike) -> date:
        """Following, unless that lands in the next month; then preceding."""
        unadjusted = to_date(day)
        adjusted = unadjusted
        while not self.is_business_day(adjusted):
            if adjusted == date.max:
                break
            adjusted += ONE_DAY
            if adjusted.month != unadjusted.month:
                break
        if adjusted.month == unadjusted.month and self.is_business_day(adjusted):
            return adjusted
        return self.preceding(unadjusted)

    def modified_preceding(self, day: DateLike) -> date:
        """Preceding, unless that lands in the previous month; then following."""
        unadjusted = to_date(day)
        adjusted = unadjusted
        while not self.is_business_day(adjusted):
            if adjusted == date.min:
                break
            adjusted -= ONE_DAY
            if adjusted.month != unadjusted.month:
                break
        if adjusted.month == unadjusted.month and self.is_business_day(adjusted):
            return adjusted
        return self.following(unadjusted)

    def adjust(
        self,
        day: DateLike,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> date:
        """Apply a business day convention to a date."""
        day = to_date(day)

        if convention == BusinessDayConvention.NO_ADJUSTMENT:
            return day
        elif convention == BusinessDayConvention.FOLLOWING:
            adjusted = self.following(day)
        elif convention == BusinessDayConvention.MODIFIED_FOLLOWING:
            adjusted = self.modified_following(day)
        elif convention == BusinessDayConvention.PRECEDING:
            adjusted = self.preceding(day)
        elif convention == BusinessDayConvention.MODIFIED_PRECEDING:
            adjusted = self.modified_preceding(day)
        else:
            raise ValueError(f"Unknown business day convention: {convention}")

        if adjusted != day:
            logger.debug("%s: rolled %s -> %s (%s)", self.name, day, adjusted, convention.value)
        return adjusted

    # ------------------------------------------------------------------
    # Business day arithmetic
    # ------------------------------------------------------------------

    def add_business_days(self, start_date: DateLike, days: int) -> date:
        """Move a date by a number of business days.

        A zero shift rolls the date to the following business day.
        """
        current = to_date(start_date)
        if days == 0:
            return self.following(current)

        step = self._next if days > 0 else self._previous
        remaining = abs(days)
        while remaining > 0:
            current = step(current)
            if self.is_business_day(current):
                remaining -= 1
        return current

    def business_days_between(self, start: DateLike, end: DateLike) -> int:
        """Count business days between two dates (exclusive of start, inclusive of end)."""
        start, end = to_date(start), to_date(end)
        count = 0
        current = start
        while current < end:
            current += ONE_DAY
            if self.is_business_day(current):
                count += 1
        return count

    def business_days(self, start: DateLike, end: DateLike) -> List[date]:
        """List business days in [start, end]."""
        start, end = to_date(start), to_date(end)
        result: List[date] = []
        current = start
        while current <= end:
            if self.is_business_day(current):
                result.append(current)
            if current == date.max:
                break
            current += ONE_DAY
        return result

    def holiday_list(
        self, start: DateLike, end: DateLike, include_weekends: bool = False
    ) -> List[date]:
        """List non-business days in [start, end]."""
        start, end = to_date(start), to_date(end)
        result: List[date] = []
        current = start
        while current <= end:
            if include_weekends:
                closed = not self.is_business_day(current)
            else:
                closed = self.is_holiday(current) and not self.is_weekend(current)
            if closed:
                result.append(current)
            if current == date.max:
                break
            current += ONE_DAY
        return result

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
