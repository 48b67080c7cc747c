"""
toolrental Agreement Builder Tests

Tests cover:
- Input validation and its order
- Checkout date parsing
- The counter scenarios against the standard catalog
- Agreement invariants
- Injected calendars and broken reference data
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal
from types import MappingProxyType

import pytest

from toolrental.calendars import HolidayCalendar
from toolrental.engine import RentalAgreementBuilder
from toolrental.exceptions import (
    ConfigurationError,
    InvalidCheckoutDate,
    InvalidDiscountPercent,
    InvalidRentalDuration,
    InvalidToolCode,
    UnknownToolTypeError,
)
from toolrental.models import DayType, RentalPeriod, RentalSettings

from tests.conftest import THURSDAY_2024_07_18, make_builder, make_catalog


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidation:
    """Each bad input raises its own error and no agreement is built."""

    def test_unknown_tool_code(self, builder) -> None:
        with pytest.raises(InvalidToolCode, match="There is no tool with tool code: XXXX"):
            builder.compute_agreement("XXXX", THURSDAY_2024_07_18, 5, 10)

    @pytest.mark.parametrize("tool_code", ["", None, 42])
    def test_empty_tool_code(self, builder, tool_code) -> None:
        with pytest.raises(InvalidToolCode):
            builder.compute_agreement(tool_code, THURSDAY_2024_07_18, 5, 10)

    @pytest.mark.parametrize("checkout_date", [None, "not a date", "13/45/20", 20240718])
    def test_bad_checkout_date(self, builder, checkout_date) -> None:
        with pytest.raises(InvalidCheckoutDate):
            builder.compute_agreement("JAKR", checkout_date, 5, 10)

    @pytest.mark.parametrize("days", [0, -1, True, 1.5, "5"])
    def test_bad_rental_days(self, builder, days) -> None:
        with pytest.raises(InvalidRentalDuration, match="at least one day"):
            builder.compute_agreement("JAKR", THURSDAY_2024_07_18, days, 10)

    @pytest.mark.parametrize("discount", [101, -1, True, 10.0, "10"])
    def test_bad_discount(self, builder, discount) -> None:
        with pytest.raises(InvalidDiscountPercent, match="between 0 and 100"):
            builder.compute_agreement("JAKR", THURSDAY_2024_07_18, 5, discount)

    def test_first_failure_wins(self, builder) -> None:
        """Tool code is checked before the date, days and discount."""
        with pytest.raises(InvalidToolCode):
            builder.compute_agreement("XXXX", None, 0, 101)
        with pytest.raises(InvalidCheckoutDate):
            builder.compute_agreement("JAKR", None, 0, 101)
        with pytest.raises(InvalidRentalDuration):
            builder.compute_agreement("JAKR", THURSDAY_2024_07_18, 0, 101)

    def test_rental_past_last_date(self, builder) -> None:
        with pytest.raises(InvalidRentalDuration, match="last supported date"):
            builder.compute_agreement("JAKR", date(9999, 12, 30), 5, 0)

    def test_boundaries_accepted(self, builder) -> None:
        assert builder.compute_agreement("JAKR", THURSDAY_2024_07_18, 1, 0).rental_days == 1
        assert builder.compute_agreement("JAKR", THURSDAY_2024_07_18, 1, 100).final_charge == 0


class TestCheckoutDateParsing:
    """Test the accepted checkout date forms."""

    def test_configured_format(self, builder) -> None:
        assert builder.parse_checkout_date("07/02/20") == date(2020, 7, 2)

    def test_iso_format(self, builder) -> None:
        assert builder.parse_checkout_date("2020-07-02") == date(2020, 7, 2)

    def test_datetime_reduced_to_date(self, builder) -> None:
        assert builder.parse_checkout_date(datetime(2020, 7, 2, 15, 30)) == date(2020, 7, 2)

    def test_surrounding_whitespace(self, builder) -> None:
        assert builder.parse_checkout_date(" 07/02/20 ") == date(2020, 7, 2)

    def test_custom_format(self) -> None:
        builder = make_builder(RentalSettings(date_format="%d.%m.%Y"))
        assert builder.parse_checkout_date("02.07.2020") == date(2020, 7, 2)

    def test_error_names_expected_format(self, builder) -> None:
        with pytest.raises(InvalidCheckoutDate) as exc_info:
            builder.parse_checkout_date("tomorrow")
        assert exc_info.value.message == "tomorrow is not a valid date."
        assert exc_info.value.details == {"expected_format": "%m/%d/%y"}


# =============================================================================
# Counter Scenarios
# =============================================================================

class TestScenarios:
    """Standard catalog, Independence Day (adjusted) and Labor Day."""

    def test_jackhammer_thursday_example(self, builder) -> None:
        agreement = builder.compute_agreement("JAKR", THURSDAY_2024_07_18, 5, 10)
        assert agreement.due_date == date(2024, 7, 23)
        assert agreement.period == RentalPeriod(weekday_count=3, weekend_count=2)
        assert agreement.charge_days == 3
        assert agreement.pre_discount_charge == Decimal("8.97")
        assert agreement.discount_amount == Decimal("0.90")
        assert agreement.final_charge == Decimal("8.07")

    @pytest.mark.parametrize(
        "tool_code,checkout,days,discount,due,charge_days,pre,discount_amount,final",
        [
            # Ladder over the observed Independence Day: Thu, Fri (holiday), Sat
            ("LADW", date(2020, 7, 2), 3, 10, date(2020, 7, 5), 2, "3.98", "0.40", "3.58"),
            # Chainsaw bills the observed holiday but not the weekend
            ("CHNS", date(2015, 7, 2), 5, 25, date(2015, 7, 7), 3, "4.47", "1.12", "3.35"),
            # Jackhammer over Labor Day weekend
            ("JAKD", date(2015, 9, 3), 6, 0, date(2015, 9, 9), 3, "8.97", "0.00", "8.97"),
            # Jackhammer for nine days over Independence Day
            ("JAKR", date(2015, 7, 2), 9, 0, date(2015, 7, 11), 6, "17.94", "0.00", "17.94"),
            # Half off a single charge day rounds the discount up
            ("JAKR", date(2020, 7, 2), 4, 50, date(2020, 7, 6), 1, "2.99", "1.50", "1.49"),
        ],
    )
    def test_scenario(
        self, builder, tool_code, checkout, days, discount, due, charge_days, pre,
        discount_amount, final,
    ) -> None:
        agreement = builder.compute_agreement(tool_code, checkout, days, discount)
        assert agreement.tool.code == tool_code
        assert agreement.due_date == due
        assert agreement.charge_days == charge_days
        assert agreement.pre_discount_charge == Decimal(pre)
        assert agreement.discount_amount == Decimal(discount_amount)
        assert agreement.final_charge == Decimal(final)

    def test_string_inputs_from_the_counter(self, builder) -> None:
        agreement = builder.compute_agreement("LADW", "07/02/20", 3, 10)
        assert agreement.checkout_date == date(2020, 7, 2)
        assert agreement.final_charge == Decimal("3.58")

    def test_checkout_alias(self, builder) -> None:
        assert builder.checkout("LADW", date(2020, 7, 2), 3, 10) == builder.compute_agreement(
            "LADW", date(2020, 7, 2), 3, 10
        )


# =============================================================================
# Invariant Tests
# =============================================================================

class TestInvariants:
    """Properties that hold for every agreement."""

    @pytest.mark.parametrize("tool_code", ["CHNS", "LADW", "JAKD", "JAKR"])
    @pytest.mark.parametrize("days", [1, 2, 5, 10, 31, 400])
    @pytest.mark.parametrize("checkout", [date(2015, 7, 2), date(2020, 12, 28), date(2024, 8, 30)])
    def test_invariants(self, builder, tool_code, days, checkout) -> None:
        agreement = builder.compute_agreement(tool_code, checkout, days, 15)
        assert agreement.due_date == checkout + timedelta(days=days)
        assert agreement.period.total_days == days
        assert 0 <= agreement.charge_days <= days
        assert agreement.final_charge == agreement.pre_discount_charge - agreement.discount_amount
        assert agreement.pre_discount_charge == agreement.daily_charge * agreement.charge_days

    def test_all_days_chargeable(self, builder) -> None:
        agreement = builder.compute_agreement("LADW", date(2024, 8, 1), 10, 0)
        # August 2024 has no holidays before Labor Day
        assert agreement.charge_days == 10


# =============================================================================
# Wiring Tests
# =============================================================================

class AllHolidaysCalendar:
    """Fixture calendar that treats every day as a holiday."""

    def holidays_for_year(self, year: int) -> frozenset:
        return frozenset()

    def classify_day(self, d: date) -> DayType:
        return DayType.HOLIDAY

    def classify_period(self, start: date, num_days: int) -> RentalPeriod:
        return RentalPeriod(holiday_count=num_days)


class TestWiring:
    """Test dependency injection and failure of reference data."""

    def test_injected_calendar(self) -> None:
        calendar = AllHolidaysCalendar()
        assert isinstance(calendar, HolidayCalendar)
        builder = RentalAgreementBuilder(catalog=make_catalog(), calendar=calendar)
        assert builder.compute_agreement("CHNS", THURSDAY_2024_07_18, 4, 0).charge_days == 4
        assert builder.compute_agreement("LADW", THURSDAY_2024_07_18, 4, 0).charge_days == 0

    def test_from_reference_data(self, reference_data) -> None:
        builder = RentalAgreementBuilder.from_reference_data(reference_data)
        assert builder.settings is reference_data.settings
        agreement = builder.compute_agreement("JAKR", date(2020, 7, 2), 4, 50)
        assert agreement.final_charge == Decimal("1.49")

    def test_missing_tool_type_is_configuration_error(self) -> None:
        catalog = make_catalog()
        catalog._tool_types = MappingProxyType({})
        builder = RentalAgreementBuilder(catalog=catalog, calendar=AllHolidaysCalendar())
        with pytest.raises(UnknownToolTypeError) as exc_info:
            builder.compute_agreement("LADW", THURSDAY_2024_07_18, 3, 0)
        assert isinstance(exc_info.value, ConfigurationError)

    def test_logs_computed_agreement(self, builder, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="toolrental"):
            builder.compute_agreement("JAKR", THURSDAY_2024_07_18, 5, 10)
        record = next(r for r in caplog.records if r.name == "toolrental.engine.agreement_builder")
        assert "Computed agreement for JAKR" in record.getMessage()
        assert record.tool_code == "JAKR"
        assert record.final_charge == "8.07"
