"""
Tool Rental Holiday Specifications

A holiday spec is a tagged variant:

- FixedHoliday: same month/day every year, optionally slid off a weekend
  (e.g., Independence Day, July 4)
- FloatingHoliday: the Nth occurrence of a weekday in a month
  (e.g., Labor Day, first Monday in September)

Each variant carries only the fields relevant to its kind. Specs are
validated on construction and immutable afterwards.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import InvalidHolidaySpecError
from .enums import HolidayKind, Weekday


MAX_ORDINAL_WEEK = 4


def max_month_length(month: int) -> int:
    """Longest a month can be in any year (February counts as 29)."""
    return calendar.monthrange(2000, month)[1]


def _check_month(name: str, month: int) -> None:
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidHolidaySpecError(
            message=f"Holiday '{name}' month must be between 1 and 12; got {month!r}",
            key=f"{name}.month",
        )


@dataclass(frozen=True)
class FixedHoliday:
    """
    Holiday on a fixed month/day.

    Attributes:
        name: Holiday name
        month: Month (1-12)
        day: Day of month (1..max length of the month)
        adjust_on_weekend: Slide to the nearest weekday when on a weekend
    """
    name: str
    month: int
    day: int
    adjust_on_weekend: bool = False

    def __post_init__(self) -> None:
        _check_month(self.name, self.month)
        limit = max_month_length(self.month)
        if isinstance(self.day, bool) or not isinstance(self.day, int) or not 1 <= self.day <= limit:
            raise InvalidHolidaySpecError(
                message=f"Holiday '{self.name}' day must be between 1 and {limit} "
                        f"for month {self.month}; got {self.day!r}",
                key=f"{self.name}.day",
            )

    @property
    def kind(self) -> HolidayKind:
        return HolidayKind.FIXED

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "month": self.month,
            "day": self.day,
            "adjust_on_weekend": self.adjust_on_weekend,
        }


@dataclass(frozen=True)
class FloatingHoliday:
    """
    Holiday on the Nth weekday of a month.

    Attributes:
        name: Holiday name
        month: Month (1-12)
        ordinal_week: Which occurrence of the weekday (1-4)
        day_of_week: The weekday
    """
    name: str
    month: int
    ordinal_week: int
    day_of_week: Weekday

    def __post_init__(self) -> None:
        _check_month(self.name, self.month)
        if (
            isinstance(self.ordinal_week, bool)
            or not isinstance(self.ordinal_week, int)
            or not 1 <= self.ordinal_week <= MAX_ORDINAL_WEEK
        ):
            raise InvalidHolidaySpecError(
                message=f"Holiday '{self.name}' ordinal week must be between 1 and "
                        f"{MAX_ORDINAL_WEEK}; got {self.ordinal_week!r}",
                key=f"{self.name}.ordinal_week",
            )
        if not isinstance(self.day_of_week, Weekday):
            try:
                object.__setattr__(self, "day_of_week", Weekday.parse(self.day_of_week))
            except ValueError as e:
                raise InvalidHolidaySpecError(
                    message=f"Holiday '{self.name}' has an invalid day of week: {e}",
                    key=f"{self.name}.day_of_week",
                ) from e

    @property
    def kind(self) -> HolidayKind:
        return HolidayKind.FLOATING

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "month": self.month,
            "ordinal_week": self.ordinal_week,
            "day_of_week": self.day_of_week.name,
        }


HolidaySpec = Union[FixedHoliday, FloatingHoliday]
