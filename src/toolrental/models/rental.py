"""
Tool Rental Result Models

Per-call derived values:

- RentalPeriod: how many weekdays, weekend days and holidays a rental spans
- ChargeBreakdown: charge days and the monetary amounts
- RentalAgreement: the complete, immutable checkout result

All monetary values use Decimal for precision.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from .enums import DayType
from .tool import Tool, ToolType


# =============================================================================
# Rental Period
# =============================================================================

@dataclass(frozen=True)
class RentalPeriod:
    """
    Day-type counts over a run of consecutive calendar days.

    The three counts always partition the period:
    ``weekday_count + weekend_count + holiday_count == total_days``.
    """
    weekday_count: int = 0
    weekend_count: int = 0
    holiday_count: int = 0

    @property
    def total_days(self) -> int:
        return self.weekday_count + self.weekend_count + self.holiday_count

    def count(self, day_type: DayType) -> int:
        """Number of days of the given type."""
        if day_type is DayType.WEEKDAY:
            return self.weekday_count
        if day_type is DayType.WEEKEND:
            return self.weekend_count
        return self.holiday_count

    def to_dict(self) -> dict[str, int]:
        return {
            "weekdays": self.weekday_count,
            "weekend_days": self.weekend_count,
            "holidays": self.holiday_count,
        }


# =============================================================================
# Charge Breakdown
# =============================================================================

@dataclass(frozen=True)
class ChargeBreakdown:
    """
    Monetary result of applying a tool type's billing rules to a period.

    Attributes:
        charge_days: Days that count toward the bill
        pre_discount_charge: daily charge x charge days, unrounded
        discount_percent: Discount as a fraction (0.10 for 10%)
        discount_amount: Discount, rounded to the configured scale
        final_charge: pre_discount_charge - discount_amount
    """
    charge_days: int
    pre_discount_charge: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    final_charge: Decimal


# =============================================================================
# Rental Agreement
# =============================================================================

@dataclass(frozen=True)
class RentalAgreement:
    """
    A completed tool rental agreement.

    Produced by RentalAgreementBuilder; never mutated afterwards.
    """
    tool: Tool
    tool_type: ToolType
    checkout_date: date
    due_date: date
    rental_days: int
    period: RentalPeriod
    charge_days: int
    pre_discount_charge: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    final_charge: Decimal

    @property
    def daily_charge(self) -> Decimal:
        return self.tool_type.daily_charge

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (ISO dates, decimals as strings)."""
        return {
            "tool_code": self.tool.code,
            "tool_type": self.tool.type_name,
            "tool_brand": self.tool.brand,
            "rental_days": self.rental_days,
            "checkout_date": self.checkout_date.isoformat(),
            "due_date": self.due_date.isoformat(),
            "daily_charge": str(self.daily_charge),
            "period": self.period.to_dict(),
            "charge_days": self.charge_days,
            "pre_discount_charge": str(self.pre_discount_charge),
            "discount_percent": str(self.discount_percent),
            "discount_amount": str(self.discount_amount),
            "final_charge": str(self.final_charge),
        }
