"""
Tool Rental Charge Calculator

Applies a tool type's billing rules to a classified rental period.

Order of operations:
1. charge_days = sum of the counts whose day type is chargeable
2. pre_discount_charge = daily_charge x charge_days (exact, never rounded)
3. discount_amount = pre_discount_charge x percent / 100, rounded once
4. final_charge = pre_discount_charge - discount_amount (exact)

Rounding happens in exactly one place, ``round_amount``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ..models import ChargeBreakdown, DayType, RentalPeriod, RentalSettings, ToolType


HUNDRED = Decimal(100)


@dataclass
class ChargeCalculator:
    """
    Computes charge days and monetary amounts for a rental.

    Usage:
        calculator = ChargeCalculator(settings=RentalSettings())
        breakdown = calculator.calculate(jackhammer, period, discount_percent=10)
    """

    settings: RentalSettings = field(default_factory=RentalSettings)

    def charge_days(self, tool_type: ToolType, period: RentalPeriod) -> int:
        """Count the days in the period that the tool type bills for."""
        chargeable = {
            DayType.WEEKDAY: tool_type.weekday_chargeable,
            DayType.WEEKEND: tool_type.weekend_chargeable,
            DayType.HOLIDAY: tool_type.holiday_chargeable,
        }
        return sum(period.count(day_type) for day_type, billed in chargeable.items() if billed)

    def pre_discount_charge(self, tool_type: ToolType, charge_days: int) -> Decimal:
        return tool_type.daily_charge * charge_days

    def round_amount(self, amount: Decimal) -> Decimal:
        """Round to the configured scale with the configured rounding mode."""
        return amount.quantize(self.settings.quantum, rounding=self.settings.rounding_mode.value)

    def discount_amount(self, pre_discount_charge: Decimal, discount_percent: int) -> Decimal:
        return self.round_amount(pre_discount_charge * discount_percent / HUNDRED)

    def calculate(
        self,
        tool_type: ToolType,
        period: RentalPeriod,
        discount_percent: int,
    ) -> ChargeBreakdown:
        """
        Price a rental period.

        Args:
            tool_type: Billing rules and daily charge
            period: Classified rental days
            discount_percent: Whole-number percent, 0 to 100

        Returns:
            ChargeBreakdown; ``discount_percent`` is stored as a fraction
        """
        charge_days = self.charge_days(tool_type, period)
        pre_discount = self.pre_discount_charge(tool_type, charge_days)
        discount = self.discount_amount(pre_discount, discount_percent)
        return ChargeBreakdown(
            charge_days=charge_days,
            pre_discount_charge=pre_discount,
            discount_percent=Decimal(discount_percent) / HUNDRED,
            discount_amount=discount,
            final_charge=pre_discount - discount,
        )
