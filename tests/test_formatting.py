"""
toolrental Formatting Tests

The counter printout and its date, money and percent renderings.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from toolrental.formatting import (
    AGREEMENT_LABELS,
    agreement_lines,
    date_format_hint,
    format_agreement,
    format_date,
    format_money,
    format_percent,
)
from toolrental.models import RentalSettings, RoundingMode


class TestFormatters:
    """Test the single-value formatters."""

    def test_date(self, settings) -> None:
        assert format_date(date(2020, 7, 2), settings) == "07/02/20"

    def test_date_custom_format(self) -> None:
        assert format_date(date(2020, 7, 2), RentalSettings(date_format="%Y-%m-%d")) == "2020-07-02"

    @pytest.mark.parametrize(
        "date_format,expected",
        [
            ("%m/%d/%y", "mm/dd/yy"),
            ("%Y-%m-%d", "yyyy-mm-dd"),
            ("%d %b %Y", "dd mon yyyy"),
        ],
    )
    def test_date_format_hint(self, date_format, expected) -> None:
        assert date_format_hint(RentalSettings(date_format=date_format)) == expected

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("1.99"), "$1.99"),
            (Decimal("0"), "$0.00"),
            (Decimal("1234.5"), "$1,234.50"),
            (Decimal("5.085"), "$5.09"),
            (Decimal("1000000"), "$1,000,000.00"),
        ],
    )
    def test_money(self, settings, amount, expected) -> None:
        assert format_money(amount, settings) == expected

    def test_money_uses_settings(self) -> None:
        settings = RentalSettings(
            currency_symbol="€", decimal_scale=3, rounding_mode=RoundingMode.DOWN
        )
        assert format_money(Decimal("2.9999"), settings) == "€2.999"

    @pytest.mark.parametrize(
        "fraction,expected",
        [
            (Decimal("0"), "0%"),
            (Decimal("0.1"), "10%"),
            (Decimal("0.5"), "50%"),
            (Decimal("1"), "100%"),
        ],
    )
    def test_percent(self, fraction, expected) -> None:
        assert format_percent(fraction) == expected


class TestAgreementPrintout:
    """Test the full printout."""

    def test_half_off_jackhammer(self, builder, settings) -> None:
        agreement = builder.compute_agreement("JAKR", date(2020, 7, 2), 4, 50)
        assert format_agreement(agreement, settings).splitlines() == [
            "Tool code: JAKR",
            "Tool type: Jackhammer",
            "Tool brand: Ridgid",
            "Rental days: 4",
            "Checkout date: 07/02/20",
            "Due date: 07/06/20",
            "Daily rental charge: $2.99",
            "Charge days: 1",
            "Pre-discount charge: $2.99",
            "Discount percent: 50%",
            "Discount amount: $1.50",
            "Final charge: $1.49",
        ]

    def test_lines_follow_labels(self, builder, settings) -> None:
        agreement = builder.compute_agreement("LADW", date(2020, 7, 2), 3, 10)
        lines = agreement_lines(agreement, settings)
        assert [label for label, _ in lines] == list(AGREEMENT_LABELS)
        assert dict(lines)["Final charge"] == "$3.58"

    def test_no_trailing_newline(self, builder, settings) -> None:
        agreement = builder.compute_agreement("CHNS", date(2015, 7, 2), 5, 25)
        assert not format_agreement(agreement, settings).endswith("\n")
