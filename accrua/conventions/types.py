"""
Basic types and enums used across the calendar system.
"""

from enum import Enum


class BusinessDayConvention(Enum):
    """Business day adjustment rules (ISDA 2006 Section 4.12)."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"

    @classmethod
    def from_string(cls, name: str) -> "BusinessDayConvention":
        """Parse a convention from its enum name or a common market spelling."""
        key = name.upper().strip().replace(" ", "_").replace("-", "_")
        try:
            return _CONVENTION_ALIASES[key]
        except KeyError as exc:
            raise ValueError(f"Unknown business day convention: {name}") from exc


_CONVENTION_ALIASES = {
    "NO_ADJUSTMENT": BusinessDayConvention.NO_ADJUSTMENT,
    "NONE": BusinessDayConvention.NO_ADJUSTMENT,
    "UNADJUSTED": BusinessDayConvention.NO_ADJUSTMENT,
    "FOLLOWING": BusinessDayConvention.FOLLOWING,
    "F": BusinessDayConvention.FOLLOWING,
    "MODIFIED_FOLLOWING": BusinessDayConvention.MODIFIED_FOLLOWING,
    "MODFOLLOW": BusinessDayConvention.MODIFIED_FOLLOWING,
    "MF": BusinessDayConvention.MODIFIED_FOLLOWING,
    "PRECEDING": BusinessDayConvention.PRECEDING,
    "P": BusinessDayConvention.PRECEDING,
    "MODIFIED_PRECEDING": BusinessDayConvention.MODIFIED_PRECEDING,
    "MODPRECEDING": BusinessDayConvention.MODIFIED_PRECEDING,
    "MP": BusinessDayConvention.MODIFIED_PRECEDING,
}


class CalendarType(Enum):
    """Predefined calendars."""

    TARGET = "TARGET"
    WEEKEND = "WEEKEND"
    UK = "UK"
    US = "US"
    JP = "JP"
    KR = "KR"
    CH = "CH"


class JoinRule(Enum):
    """How a joint calendar combines its members."""

    JOIN_HOLIDAYS = "JOIN_HOLIDAYS"  # holiday in any member
    JOIN_BUSINESS_DAYS = "JOIN_BUSINESS_DAYS"  # business day in any member
