"""
Rental Calendar

Classifies rental days as weekdays, weekend days or holidays, using a
configured set of holiday specs and weekend days.

Holidays:
- Fixed holidays fall on the same month/day every year. When
  ``adjust_on_weekend`` is set and the date lands on a weekend, it is observed
  one day earlier (on the weekend-start day) or one day later (on any other
  weekend day).
- Floating holidays fall on the Nth weekday of a month and never slide.

Holiday dates are computed once per year and cached for the lifetime of the
calendar. Each year's set is an immutable frozenset published into the cache
in a single step, so concurrent readers never see a partial year.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Iterable, Optional

from ..exceptions import InvalidHolidaySpecError
from ..models import (
    DayType,
    FixedHoliday,
    FloatingHoliday,
    HolidaySpec,
    RentalPeriod,
    RentalSettings,
)
from .base import nth_weekday_of_month, slide_off_weekend

logger = logging.getLogger(__name__)


@dataclass
class RentalCalendar:
    """
    Holiday-aware day classifier for rental periods.

    Usage:
        calendar = RentalCalendar(
            holiday_specs=[
                FixedHoliday("Independence Day", month=7, day=4, adjust_on_weekend=True),
                FloatingHoliday("Labor Day", month=9, ordinal_week=1,
                                day_of_week=Weekday.MONDAY),
            ],
        )
        period = calendar.classify_period(date(2024, 7, 18), 5)
    """

    holiday_specs: tuple[HolidaySpec, ...] = ()
    settings: RentalSettings = field(default_factory=RentalSettings)

    # Cache for computed holidays, keyed by year
    _holiday_cache: dict[int, frozenset[date]] = field(
        default_factory=dict, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.holiday_specs = tuple(self.holiday_specs)
        for spec in self.holiday_specs:
            if not isinstance(spec, (FixedHoliday, FloatingHoliday)):
                raise InvalidHolidaySpecError(
                    message=f"Unsupported holiday spec type: {type(spec).__name__}",
                )

    # ── holiday resolution ───────────────────────────────────────────────

    def resolve_fixed_holiday(self, spec: FixedHoliday, year: int) -> Optional[date]:
        """
        Resolve a fixed holiday for a year, sliding it off a weekend if required.

        Returns:
            The observed date, or None when the date does not exist that year
            (February 29 outside leap years)
        """
        try:
            holiday = date(year, spec.month, spec.day)
        except ValueError:
            logger.debug("%s does not occur in %d", spec.name, year)
            return None
        if spec.adjust_on_weekend:
            try:
                return slide_off_weekend(holiday, self.settings)
            except OverflowError:
                logger.debug("%s slides outside the supported date range in %d", spec.name, year)
                return None
        return holiday

    def resolve_floating_holiday(self, spec: FloatingHoliday, year: int) -> date:
        """Resolve a floating holiday to the Nth weekday of its month."""
        return nth_weekday_of_month(year, spec.month, spec.day_of_week, spec.ordinal_week)

    def resolve(self, spec: HolidaySpec, year: int) -> Optional[date]:
        """Resolve any holiday spec for a year."""
        if isinstance(spec, FixedHoliday):
            return self.resolve_fixed_holiday(spec, year)
        if isinstance(spec, FloatingHoliday):
            return self.resolve_floating_holiday(spec, year)
        raise InvalidHolidaySpecError(
            message=f"Unsupported holiday spec type: {type(spec).__name__}",
        )

    def resolve_holidays(self, year: int) -> list[tuple[date, HolidaySpec]]:
        """
        Resolve every holiday spec for a year.

        An adjusted fixed holiday may be observed in the neighbouring year
        (January 1 on a Saturday is observed on December 31).

        Returns:
            List of (observed date, spec) tuples sorted by date
        """
        resolved = []
        for spec in self.holiday_specs:
            observed = self.resolve(spec, year)
            if observed is not None:
                resolved.append((observed, spec))
        return sorted(resolved, key=lambda x: x[0])

    def _compute_holidays_for_year(self, year: int) -> frozenset[date]:
        """Collect every observed holiday date that falls within a year."""
        holidays = set()
        for spec_year in _neighbouring_years(year):
            for observed, _ in self.resolve_holidays(spec_year):
                if observed.year == year:
                    holidays.add(observed)
        return frozenset(holidays)

    # ── public queries ───────────────────────────────────────────────────

    def holidays_for_year(self, year: int) -> frozenset[date]:
        """Get holidays for a year, using cache."""
        holidays = self._holiday_cache.get(year)
        if holidays is None:
            holidays = self._compute_holidays_for_year(year)
            logger.debug("Computed %d holidays for %d", len(holidays), year)
            holidays = self._holiday_cache.setdefault(year, holidays)
        return holidays

    def is_holiday(self, d: date) -> bool:
        return d in self.holidays_for_year(d.year)

    def is_weekend(self, d: date) -> bool:
        return self.settings.is_weekend(d.weekday())

    def holiday_name(self, d: date) -> Optional[str]:
        """
        Get the name of the holiday observed on a date.

        Returns:
            Holiday name if the date is a holiday, None otherwise
        """
        for spec_year in _neighbouring_years(d.year):
            for observed, spec in self.resolve_holidays(spec_year):
                if observed == d:
                    return spec.name
        return None

    def classify_day(self, d: date) -> DayType:
        """Classify a date; holidays take precedence over weekends."""
        return self._classify(d, self.holidays_for_year(d.year))

    def classify_period(self, start: date, num_days: int) -> RentalPeriod:
        """
        Count weekdays, weekend days and holidays over consecutive days.

        Every day of the period is visited once, starting at ``start``.
        Holidays for a new year are fetched when the walk crosses into it.

        Args:
            start: First day of the period (inclusive)
            num_days: Number of days to classify

        Returns:
            RentalPeriod whose counts sum to ``num_days``

        Raises:
            ValueError: If num_days is negative
        """
        if num_days < 0:
            raise ValueError(f"num_days must be >= 0; got {num_days}")

        counts = {DayType.WEEKDAY: 0, DayType.WEEKEND: 0, DayType.HOLIDAY: 0}
        year = start.year
        holidays = self.holidays_for_year(year)
        for offset in range(num_days):
            current = start + timedelta(days=offset)
            if current.year != year:
                year = current.year
                holidays = self.holidays_for_year(year)
            counts[self._classify(current, holidays)] += 1

        period = RentalPeriod(
            weekday_count=counts[DayType.WEEKDAY],
            weekend_count=counts[DayType.WEEKEND],
            holiday_count=counts[DayType.HOLIDAY],
        )
        logger.debug(
            "Classified %d days from %s: %s", num_days, start.isoformat(), period.to_dict()
        )
        return period

    def _classify(self, d: date, holidays: frozenset[date]) -> DayType:
        if d in holidays:
            return DayType.HOLIDAY
        if self.is_weekend(d):
            return DayType.WEEKEND
        return DayType.WEEKDAY

    @property
    def cached_years(self) -> tuple[int, ...]:
        return tuple(sorted(self._holiday_cache))


def _neighbouring_years(year: int) -> Iterable[int]:
    return (y for y in (year - 1, year, year + 1) if MINYEAR <= y <= MAXYEAR)
