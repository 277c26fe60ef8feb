"""
Calendar registry: lookup by market name, alias or settlement currency.
"""

import logging
from typing import Dict, List, Union

from accrua.conventions.types import CalendarType, JoinRule

from .base import BusinessCalendar
from .calendars_quantlib import CH, JP, KR, TARGET, UK, US, WEEKEND_ONLY
from .joint import JointCalendar

logger = logging.getLogger(__name__)

CalendarSpec = Union[str, CalendarType, BusinessCalendar]

# Calendar registry
CALENDARS: Dict[str, BusinessCalendar] = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "WEEKEND": WEEKEND_ONLY,
    "UK": UK,
    "GBP": UK,
    "LONDON": UK,
    "US": US,
    "USD": US,
    "NYC": US,
    "JP": JP,
    "JPY": JP,
    "TOKYO": JP,
    "KR": KR,
    "KRW": KR,
    "SEOUL": KR,
    "CH": CH,
    "CHF": CH,
    "ZURICH": CH,
}

# Settlement calendar per ISO currency code
CURRENCY_CALENDARS: Dict[str, str] = {
    "EUR": "TARGET",
    "GBP": "UK",
    "USD": "US",
    "JPY": "JP",
    "KRW": "KR",
    "CHF": "CH",
}


def available_calendars() -> List[str]:
    """Registered calendar names and aliases."""
    return sorted(CALENDARS)


def register_calendar(name: str, calendar: BusinessCalendar, overwrite: bool = False) -> None:
    """Register a calendar under a name (case-insensitive)."""
    key = name.upper().strip()
    if "+" in key:
        raise ValueError(f"Calendar name may not contain '+': {name}")
    if key in CALENDARS and not overwrite:
        raise ValueError(f"Calendar '{name}' already registered")
    CALENDARS[key] = calendar
    logger.debug("Registered calendar %s -> %r", key, calendar)


def get_calendar(name: CalendarSpec) -> BusinessCalendar:
    """
    Get a calendar by name.

    Args:
        name: Registered name or alias ("TARGET", "EUR", "UK", ...), a
            CalendarType, or a calendar instance (returned unchanged).
            Names joined with '+' ("TARGET+UK") give a JointCalendar
            where a holiday in any member is a holiday.
    """
    if isinstance(name, BusinessCalendar):
        return name
    if isinstance(name, CalendarType):
        name = name.value

    parts = [p.strip().upper() for p in name.split("+")]
    if len(parts) > 1:
        return JointCalendar([get_calendar(p) for p in parts], JoinRule.JOIN_HOLIDAYS)

    try:
        return CALENDARS[parts[0]]
    except KeyError as exc:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {available_calendars()}"
        ) from exc


def calendar_for_currency(currency: str) -> BusinessCalendar:
    """Settlement calendar for an ISO currency code."""
    code = currency.upper().strip()
    try:
        return get_calendar(CURRENCY_CALENDARS[code])
    except KeyError as exc:
        raise ValueError(
            f"No settlement calendar for currency: {currency}. "
            f"Available: {sorted(CURRENCY_CALENDARS)}"
        ) from exc
