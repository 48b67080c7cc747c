"""
Tool Rental Enumerations

String enums inherit from (str, Enum) for JSON serialization compatibility.
Weekday is an IntEnum aligned with ``date.weekday()`` (0=Monday).
"""
from __future__ import annotations

import decimal
from enum import Enum, IntEnum
from typing import Union


# =============================================================================
# Day Classification
# =============================================================================

class DayType(str, Enum):
    """Billing category of a single calendar day."""
    WEEKDAY = "weekday"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


class HolidayKind(str, Enum):
    """How a holiday's date is determined each year."""
    FIXED = "fixed"          # Same month/day every year
    FLOATING = "floating"    # Nth weekday of a month


# =============================================================================
# Calendar Units
# =============================================================================

class Weekday(IntEnum):
    """Day of week, numbered like ``date.weekday()``."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value: Union[int, str, "Weekday"]) -> "Weekday":
        """
        Parse a weekday from an int (0=Monday) or a name.

        Names are case-insensitive and may be abbreviated to three letters
        ("sat", "Saturday", "SATURDAY").

        Raises:
            ValueError: If the value is not a weekday
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a weekday: {value!r}")
        if isinstance(value, int):
            return cls(value)
        name = str(value).strip().upper()
        for day in cls:
            if day.name == name or (len(name) == 3 and day.name.startswith(name)):
                return day
        raise ValueError(f"Not a weekday: {value!r}")

    @property
    def label(self) -> str:
        return self.name.capitalize()


MONTH_NAMES = (
    "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE",
    "JULY", "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
)


def parse_month(value: Union[int, str]) -> int:
    """
    Parse a month from an int (1-12) or an English name.

    Raises:
        ValueError: If the value is not a month
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a month: {value!r}")
    if isinstance(value, int):
        if 1 <= value <= 12:
            return value
        raise ValueError(f"Month must be between 1 and 12; got {value}")
    name = str(value).strip().upper()
    if name.isdigit():
        return parse_month(int(name))
    for index, month_name in enumerate(MONTH_NAMES, start=1):
        if month_name == name or (len(name) == 3 and month_name.startswith(name)):
            return index
    raise ValueError(f"Not a month: {value!r}")


# =============================================================================
# Decimal Rounding
# =============================================================================

class RoundingMode(str, Enum):
    """
    Rounding modes for monetary amounts.

    Values are the ``decimal`` module's rounding constants; pass ``.value``
    to ``Decimal.quantize``.
    """
    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    HALF_UP = decimal.ROUND_HALF_UP
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN

    @classmethod
    def parse(cls, value: Union[str, "RoundingMode"]) -> "RoundingMode":
        """
        Parse a rounding mode from "HALF_UP" or "ROUND_HALF_UP" style names.

        Raises:
            ValueError: If the name is not a supported rounding mode
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if name.startswith("ROUND_"):
            name = name[len("ROUND_"):]
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unsupported rounding mode: {value!r}") from None
