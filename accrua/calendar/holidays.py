"""
Holiday-list calendars.

Calendars defined by an explicit set of bank holidays and a weekend mask,
for markets QuantLib does not cover or for in-house holiday files. Bulk
business-day arithmetic is delegated to numpy's busday functions.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from accrua.utils.date import DateLike, to_date

from .base import DEFAULT_WEEKEND, AdjustmentError, BusinessCalendar

logger = logging.getLogger(__name__)

_PANDAS_MIN = pd.Timestamp.min.date()
_PANDAS_MAX = pd.Timestamp.max.date()


def _weekmask(weekend_days: Iterable[int]) -> str:
    """numpy weekmask string, Monday first; '1' marks a working day."""
    return "".join("0" if d in weekend_days else "1" for d in range(7))


def _to_datetime64(day: date) -> np.datetime64:
    return np.datetime64(day, "D")


class HolidayCalendar(BusinessCalendar):
    """Calendar backed by an explicit list of holiday dates."""

    def __init__(
        self,
        name: str,
        holidays: Iterable[DateLike] = (),
        weekend_days: Iterable[int] = DEFAULT_WEEKEND,
    ):
        super().__init__(name, weekend_days)
        self._holidays = frozenset(to_date(h) for h in holidays)
        self._weekmask = _weekmask(self.weekend_days)
        self._busdaycal = np.busdaycalendar(
            weekmask=self._weekmask,
            holidays=np.array(sorted(self._holidays), dtype="datetime64[D]"),
        )

    @property
    def holidays(self) -> tuple:
        """Holiday dates, sorted."""
        return tuple(sorted(self._holidays))

    def with_holidays(self, extra: Iterable[DateLike]) -> "HolidayCalendar":
        """Return a copy of this calendar with additional holidays."""
        merged = set(self._holidays)
        merged.update(to_date(h) for h in extra)
        return HolidayCalendar(self.name, merged, self.weekend_days)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        name: Optional[str] = None,
        column: str = "date",
        weekend_days: Iterable[int] = DEFAULT_WEEKEND,
    ) -> "HolidayCalendar":
        """
        Load holidays from a file.

        Args:
            path: CSV file with a header row, or a text file with one date per line
            name: Calendar name (defaults to the file stem, upper-cased)
            column: Column holding the dates in a CSV file
            weekend_days: Weekday numbers treated as weekend (Monday=0)

        Blank lines and lines starting with '#' are ignored in text files.
        """
        path = Path(path)
        if path.suffix.lower() == ".csv":
            frame = pd.read_csv(path, dtype=str)
            if column not in frame.columns:
                raise ValueError(
                    f"Column {column!r} not found in {path}. Available: {list(frame.columns)}"
                )
            raw = [v for v in frame[column].dropna()]
        else:
            lines = path.read_text().splitlines()
            raw = [ln.strip() for ln in lines if ln.strip() and not ln.strip().startswith("#")]

        logger.debug("Loaded %d holidays from %s", len(raw), path)
        return cls(name or path.stem.upper(), raw, weekend_days)

    def is_holiday(self, day: DateLike) -> bool:
        """Check if date is a listed holiday falling on a working weekday.

        A listed holiday that lands on a weekend is reported as a weekend
        only, matching the QuantLib calendars.
        """
        day = to_date(day)
        return day in self._holidays and not self.is_weekend(day)

    def is_business_day_array(self, days: Sequence[DateLike]) -> np.ndarray:
        """Vectorised business day check."""
        arr = np.array([to_date(d) for d in days], dtype="datetime64[D]")
        return np.is_busday(arr, busdaycal=self._busdaycal)

    def add_business_days(self, start_date: DateLike, days: int) -> date:
        """Move a date by a number of business days."""
        start = to_date(start_date)
        if days == 0:
            return self.following(start)
        # Roll towards the origin first so a non-business start is not double counted
        roll = "backward" if days > 0 else "forward"
        result = np.busday_offset(_to_datetime64(start), days, roll=roll, busdaycal=self._busdaycal)
        if result > _to_datetime64(date.max) or result < _to_datetime64(date.min):
            raise AdjustmentError(
                f"{self.name}: cannot move {start} by {days} business days within the date range"
            )
        return result.item()

    def business_days_between(self, start: DateLike, end: DateLike) -> int:
        """Count business days between two dates (exclusive of start, inclusive of end)."""
        start, end = to_date(start), to_date(end)
        if end <= start:
            return 0
        # busday_count counts [begin, end), so shift both ends by a day
        begin = _to_datetime64(start) + 1
        stop = _to_datetime64(end) + 1
        return int(np.busday_count(begin, stop, busdaycal=self._busdaycal))

    def business_days(self, start: DateLike, end: DateLike) -> List[date]:
        """List business days in [start, end]."""
        start, end = to_date(start), to_date(end)
        if start <= _PANDAS_MIN or end >= _PANDAS_MAX:
            return super().business_days(start, end)
        index = pd.bdate_range(
            start,
            end,
            freq="C",
            weekmask=self._weekmask,
            holidays=sorted(self._holidays),
        )
        return [ts.date() for ts in index]
