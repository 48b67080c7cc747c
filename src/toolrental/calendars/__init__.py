"""
Tool Rental Calendars

Holiday-aware day classification for rental billing.

Provides:
- HolidayCalendar protocol for custom implementations
- RentalCalendar, driven by configured holiday specs and weekend days
- Date helpers for resolving holiday rules

Usage:
    from toolrental.calendars import RentalCalendar

    calendar = RentalCalendar(holiday_specs=specs, settings=settings)
    calendar.classify_day(date(2024, 7, 4))          # DayType.HOLIDAY
    calendar.classify_period(date(2024, 7, 18), 5)   # RentalPeriod(3, 2, 0)
"""
from __future__ import annotations

from .base import HolidayCalendar, nth_weekday_of_month, slide_off_weekend
from .rental_calendar import RentalCalendar

__all__ = [
    "HolidayCalendar",
    "RentalCalendar",
    "nth_weekday_of_month",
    "slide_off_weekend",
]
