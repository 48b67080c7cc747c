"""
Tool Rental Calendar Base

The protocol the rental engine depends on, plus the date arithmetic used to
resolve holiday specs into concrete dates.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Protocol, runtime_checkable

from ..models import DayType, RentalPeriod, RentalSettings


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for rental calendars.

    Implementations classify single days and runs of days. This lets the
    agreement builder run against fixture calendars in tests.
    """

    def holidays_for_year(self, year: int) -> frozenset[date]:
        """
        Get the holiday dates observed in a year.

        Args:
            year: Calendar year

        Returns:
            Frozenset of holiday dates within that year
        """
        ...

    def classify_day(self, d: date) -> DayType:
        """
        Classify a date as weekday, weekend or holiday.

        Holidays take precedence over weekends.
        """
        ...

    def classify_period(self, start: date, num_days: int) -> RentalPeriod:
        """
        Count day types over consecutive days.

        Args:
            start: First day of the period (inclusive)
            num_days: Number of days in the period

        Returns:
            RentalPeriod with the three counts
        """
        ...


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        n: Which occurrence (1=first, 2=second, etc.)

    Returns:
        The date of the nth weekday

    Raises:
        ValueError: If the month has no nth occurrence of the weekday
    """
    first_day = date(year, month, 1)
    days_until_weekday = (weekday - first_day.weekday()) % 7
    result = first_day + timedelta(days=days_until_weekday, weeks=n - 1)
    if result.month != month:
        raise ValueError(
            f"{year}-{month:02d} has no occurrence #{n} of weekday {weekday}"
        )
    return result


def slide_off_weekend(holiday: date, settings: RentalSettings) -> date:
    """
    Calculate the observed date for a fixed holiday that may land on a weekend.

    A holiday on the weekend-start day is observed one day earlier; on any
    other weekend day, one day later. Only one day of slide is applied, even
    if the result is itself a weekend day or another holiday.

    Args:
        holiday: The actual holiday date
        settings: Weekend configuration

    Returns:
        The observed holiday date
    """
    weekday = holiday.weekday()
    if not settings.is_weekend(weekday):
        return holiday
    if weekday == settings.weekend_start:
        return holiday - timedelta(days=1)
    return holiday + timedelta(days=1)
