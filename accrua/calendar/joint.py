"""
Joint calendars, e.g. TARGET + London for EUR trades settled in London.
"""

from typing import Sequence

from accrua.conventions.types import JoinRule
from accrua.utils.date import DateLike, to_date

from .base import BusinessCalendar


class JointCalendar(BusinessCalendar):
    """Combination of several calendars.

    JOIN_HOLIDAYS: a day is a business day only if it is one in every member.
    JOIN_BUSINESS_DAYS: a day is a business day if it is one in any member.
    """

    def __init__(
        self,
        calendars: Sequence[BusinessCalendar],
        rule: JoinRule = JoinRule.JOIN_HOLIDAYS,
    ):
        calendars = tuple(calendars)
        if not calendars:
            raise ValueError("JointCalendar requires at least one calendar")

        if rule == JoinRule.JOIN_HOLIDAYS:
            prefix = "JoinHolidays"
            weekend = frozenset().union(*(c.weekend_days for c in calendars))
        elif rule == JoinRule.JOIN_BUSINESS_DAYS:
            prefix = "JoinBusinessDays"
            weekend = frozenset.intersection(*(c.weekend_days for c in calendars))
        else:
            raise ValueError(f"Unknown join rule: {rule}")

        name = f"{prefix}({', '.join(c.name for c in calendars)})"
        super().__init__(name, weekend)
        self.calendars = calendars
        self.rule = rule

    def is_business_day(self, day: DateLike) -> bool:
        day = to_date(day)
        if self.rule == JoinRule.JOIN_HOLIDAYS:
            return all(c.is_business_day(day) for c in self.calendars)
        return any(c.is_business_day(day) for c in self.calendars)

    def is_holiday(self, day: DateLike) -> bool:
        day = to_date(day)
        return not self.is_business_day(day) and not self.is_weekend(day)
