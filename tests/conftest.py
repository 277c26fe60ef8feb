"""
Shared fixtures for calendar tests.

Dates used throughout are in 2024: Jan 6/7, Jun 1, Aug 31 and Nov 30 fall on
weekends; the test holiday calendar closes May 1 and Dec 25/26.
"""

from datetime import date

import pytest

from accrua import date_utils
from accrua.calendar.base import BusinessCalendar
from accrua.calendar.holidays import HolidayCalendar

TEST_HOLIDAYS = [date(2024, 5, 1), date(2024, 12, 25), date(2024, 12, 26)]


class ListCalendar(BusinessCalendar):
    """Minimal calendar exercising only the base-class algorithms."""

    def __init__(self, holidays=(), weekend_days=(5, 6)):
        super().__init__("LIST", weekend_days)
        self._holidays = set(holidays)

    def is_holiday(self, day):
        return day in self._holidays and not self.is_weekend(day)


@pytest.fixture(params=["base", "numpy"])
def calendar(request) -> BusinessCalendar:
    """Same holidays, once through the base algorithms and once through numpy."""
    if request.param == "base":
        return ListCalendar(TEST_HOLIDAYS)
    return HolidayCalendar("TEST", TEST_HOLIDAYS)


@pytest.fixture(autouse=True)
def _clean_defaults(monkeypatch):
    monkeypatch.delenv(date_utils.DEFAULT_CALENDAR_ENV, raising=False)
    date_utils.reset_defaults()
    yield
    date_utils.reset_defaults()
