from .types import BusinessDayConvention, CalendarType, JoinRule

__all__ = ["BusinessDayConvention", "CalendarType", "JoinRule"]
