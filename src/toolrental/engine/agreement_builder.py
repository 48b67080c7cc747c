"""
Tool Rental Agreement Builder

Builds a RentalAgreement from checkout inputs in a single pass:

1. Validate inputs (tool code, checkout date, rental days, discount)
2. Look up the tool and its tool type
3. Classify the rental period with the holiday calendar
4. Price the period with the charge calculator
5. Assemble the immutable agreement

Validation stops at the first failure; no partial agreement is returned.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

from ..calendars import HolidayCalendar, RentalCalendar
from ..catalog import ReferenceData, ToolCatalog
from ..exceptions import (
    InvalidCheckoutDate,
    InvalidDiscountPercent,
    InvalidRentalDuration,
    InvalidToolCode,
)
from ..models import RentalAgreement, RentalSettings, Tool
from .charge_calculator import ChargeCalculator

logger = logging.getLogger(__name__)


MIN_RENTAL_DAYS = 1
MIN_DISCOUNT_PERCENT = 0
MAX_DISCOUNT_PERCENT = 100

CheckoutDateInput = Union[date, datetime, str]


class RentalAgreementBuilder:
    """
    Computes rental agreements against injected reference data.

    Usage:
        data = load_reference_data()
        builder = RentalAgreementBuilder.from_reference_data(data)
        agreement = builder.compute_agreement("JAKR", date(2024, 7, 2), 9, 0)
    """

    def __init__(
        self,
        catalog: ToolCatalog,
        calendar: HolidayCalendar,
        calculator: Optional[ChargeCalculator] = None,
        settings: Optional[RentalSettings] = None,
    ) -> None:
        self.catalog = catalog
        self.calendar = calendar
        self.settings = settings or getattr(calendar, "settings", None) or RentalSettings()
        self.calculator = calculator or ChargeCalculator(settings=self.settings)

    @classmethod
    def from_reference_data(cls, data: ReferenceData) -> "RentalAgreementBuilder":
        """Wire a builder from loaded reference data."""
        calendar = RentalCalendar(holiday_specs=data.holiday_specs, settings=data.settings)
        return cls(catalog=data.catalog, calendar=calendar, settings=data.settings)

    def compute_agreement(
        self,
        tool_code: str,
        checkout_date: CheckoutDateInput,
        rental_day_count: int,
        discount_percent: int,
    ) -> RentalAgreement:
        """
        Compute a rental agreement.

        Args:
            tool_code: Code of a tool in the catalog
            checkout_date: date, datetime, or text in the configured date
                format or ISO-8601
            rental_day_count: Whole days, at least 1
            discount_percent: Whole-number percent, 0 to 100

        Returns:
            The completed RentalAgreement

        Raises:
            InvalidToolCode: Unknown or empty tool code
            InvalidCheckoutDate: Missing or unparseable checkout date
            InvalidRentalDuration: Rental day count below 1 or not an integer
            InvalidDiscountPercent: Discount outside 0..100 or not an integer
            ConfigurationError: The tool's type is missing from the catalog
        """
        tool = self._validate_tool_code(tool_code)
        checkout = self.parse_checkout_date(checkout_date)
        self._validate_rental_days(rental_day_count)
        self._validate_discount(discount_percent)

        tool_type = self.catalog.tool_type_for(tool)
        due_date = self._due_date(checkout, rental_day_count)
        period = self.calendar.classify_period(checkout, rental_day_count)
        breakdown = self.calculator.calculate(tool_type, period, discount_percent)

        agreement = RentalAgreement(
            tool=tool,
            tool_type=tool_type,
            checkout_date=checkout,
            due_date=due_date,
            rental_days=rental_day_count,
            period=period,
            charge_days=breakdown.charge_days,
            pre_discount_charge=breakdown.pre_discount_charge,
            discount_percent=breakdown.discount_percent,
            discount_amount=breakdown.discount_amount,
            final_charge=breakdown.final_charge,
        )
        logger.info(
            "Computed agreement for %s from %s: %d days, final charge %s",
            tool.code, checkout.isoformat(), rental_day_count, breakdown.final_charge,
            extra={
                "tool_code": tool.code,
                "checkout_date": checkout.isoformat(),
                "rental_days": rental_day_count,
                "final_charge": str(breakdown.final_charge),
            },
        )
        return agreement

    # Same operation under the name the checkout counter uses
    checkout = compute_agreement

    # ── validation ───────────────────────────────────────────────────────

    def _validate_tool_code(self, tool_code: Any) -> Tool:
        if not isinstance(tool_code, str) or not tool_code:
            raise InvalidToolCode(message="Tool code cannot be empty.")
        return self.catalog.get_tool(tool_code)

    def parse_checkout_date(self, value: Any) -> date:
        """
        Normalize a checkout date input.

        Text is tried against the configured date format first, then ISO-8601.

        Raises:
            InvalidCheckoutDate: If the value is missing or not a date
        """
        if value is None:
            raise InvalidCheckoutDate(message="Checkout date cannot be empty.")
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return datetime.strptime(text, self.settings.date_format).date()
            except ValueError:
                pass
            try:
                return date.fromisoformat(text)
            except ValueError:
                raise InvalidCheckoutDate(
                    message=f"{value} is not a valid date.",
                    details={"expected_format": self.settings.date_format},
                ) from None
        raise InvalidCheckoutDate(
            message=f"Checkout date must be a date, got {type(value).__name__}."
        )

    def _validate_rental_days(self, rental_day_count: Any) -> None:
        if (
            isinstance(rental_day_count, bool)
            or not isinstance(rental_day_count, int)
            or rental_day_count < MIN_RENTAL_DAYS
        ):
            raise InvalidRentalDuration(
                message="Rental period must be at least one day.",
                details={"value": repr(rental_day_count)},
            )

    def _validate_discount(self, discount_percent: Any) -> None:
        if (
            isinstance(discount_percent, bool)
            or not isinstance(discount_percent, int)
            or not MIN_DISCOUNT_PERCENT <= discount_percent <= MAX_DISCOUNT_PERCENT
        ):
            raise InvalidDiscountPercent(
                message="Discount must be a valid percentage between 0 and 100.",
                details={"value": repr(discount_percent)},
            )

    def _due_date(self, checkout: date, rental_day_count: int) -> date:
        try:
            return checkout + timedelta(days=rental_day_count)
        except OverflowError:
            raise InvalidRentalDuration(
                message="Rental period extends past the last supported date.",
                details={"value": repr(rental_day_count)},
            ) from None
