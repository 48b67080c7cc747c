"""
Tool Rental Settings

Calendar and decimal settings shared by the calendar, the charge calculator
and the presentation layer. Read-only once loaded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from ..exceptions import InvalidSettingsError
from .enums import RoundingMode, Weekday


DEFAULT_WEEKEND_DAYS = (Weekday.SATURDAY, Weekday.SUNDAY)


@dataclass(frozen=True)
class RentalSettings:
    """
    Calendar, rounding and display settings.

    Attributes:
        weekend_days: Days classified as weekend
        weekend_start: First day of the weekend; fixed holidays that land on it
            slide backward, those on other weekend days slide forward.
            Defaults to the weekend day whose previous day is a weekday, so a
            SUNDAY/MONDAY weekend starts on Sunday.
        decimal_scale: Decimal places for rounded amounts
        rounding_mode: Rounding applied to the discount amount
        locale: Locale tag, informational
        date_format: strftime/strptime pattern for display and parsing
        currency_symbol: Prefix for displayed amounts
    """
    weekend_days: frozenset[Weekday] = field(
        default_factory=lambda: frozenset(DEFAULT_WEEKEND_DAYS)
    )
    weekend_start: Optional[Weekday] = None
    decimal_scale: int = 2
    rounding_mode: RoundingMode = RoundingMode.HALF_UP
    locale: str = "en_US"
    date_format: str = "%m/%d/%y"
    currency_symbol: str = "$"

    def __post_init__(self) -> None:
        try:
            weekend_days = frozenset(Weekday.parse(d) for d in self.weekend_days)
            weekend_start = (
                Weekday.parse(self.weekend_start) if self.weekend_start is not None else None
            )
        except ValueError as e:
            raise InvalidSettingsError(message=str(e), key="weekend_days") from e
        object.__setattr__(self, "weekend_days", weekend_days)
        object.__setattr__(self, "weekend_start", weekend_start)
        if self.weekend_start is None and self.weekend_days:
            object.__setattr__(self, "weekend_start", _first_weekend_day(self.weekend_days))
        if self.weekend_start is not None and self.weekend_start not in self.weekend_days:
            raise InvalidSettingsError(
                message=f"Weekend start {Weekday(self.weekend_start).label} "
                        f"is not one of the weekend days",
                key="weekend_start",
            )
        try:
            object.__setattr__(self, "rounding_mode", RoundingMode.parse(self.rounding_mode))
        except ValueError as e:
            raise InvalidSettingsError(message=str(e), key="rounding_mode") from e
        if isinstance(self.decimal_scale, bool) or not isinstance(self.decimal_scale, int) \
                or self.decimal_scale < 0:
            raise InvalidSettingsError(
                message=f"Decimal scale must be a non-negative integer; got {self.decimal_scale!r}",
                key="decimal_scale",
            )

    @property
    def quantum(self) -> Decimal:
        """Smallest representable amount at the configured scale (0.01 for 2)."""
        return Decimal(1).scaleb(-self.decimal_scale)

    def is_weekend(self, weekday: int) -> bool:
        return weekday in self.weekend_days

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "weekend_days": [d.name for d in sorted(self.weekend_days)],
            "weekend_start": self.weekend_start.name if self.weekend_start is not None else None,
            "decimal_scale": self.decimal_scale,
            "rounding_mode": self.rounding_mode.name,
            "locale": self.locale,
            "date_format": self.date_format,
            "currency_symbol": self.currency_symbol,
        }


def _first_weekend_day(weekend_days: frozenset[Weekday]) -> Weekday:
    """The weekend day preceded by a weekday; Monday when every day is weekend."""
    for day in sorted(weekend_days):
        if Weekday((day - 1) % 7) not in weekend_days:
            return day
    return min(weekend_days)
