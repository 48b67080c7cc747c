"""
Tool Rental Agreement Formatting

Renders a RentalAgreement as the counter printout: one "Label: value" line
per field, with dates, money and percentages formatted from RentalSettings.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from .models import RentalAgreement, RentalSettings


AGREEMENT_LABELS = (
    "Tool code",
    "Tool type",
    "Tool brand",
    "Rental days",
    "Checkout date",
    "Due date",
    "Daily rental charge",
    "Charge days",
    "Pre-discount charge",
    "Discount percent",
    "Discount amount",
    "Final charge",
)


def format_date(value: date, settings: RentalSettings) -> str:
    return value.strftime(settings.date_format)


_DATE_DIRECTIVE_HINTS = {
    "%d": "dd",
    "%m": "mm",
    "%y": "yy",
    "%Y": "yyyy",
    "%b": "mon",
    "%B": "month",
}


def date_format_hint(settings: RentalSettings) -> str:
    """Readable form of the date format for prompts; "%m/%d/%y" reads "mm/dd/yy"."""
    hint = settings.date_format
    for directive, text in _DATE_DIRECTIVE_HINTS.items():
        hint = hint.replace(directive, text)
    return hint


def format_money(amount: Decimal, settings: RentalSettings) -> str:
    """Currency symbol, thousands grouping, rounded to the configured scale."""
    rounded = amount.quantize(settings.quantum, rounding=settings.rounding_mode.value)
    return f"{settings.currency_symbol}{rounded:,f}"


def format_percent(fraction: Decimal) -> str:
    """Whole-number percent; 0.1 renders as 10%."""
    percent = (fraction * 100).quantize(Decimal(1))
    return f"{percent}%"


def agreement_lines(agreement: RentalAgreement, settings: RentalSettings) -> list[tuple[str, str]]:
    """(label, value) pairs in printout order."""
    values = (
        agreement.tool.code,
        agreement.tool.type_name,
        agreement.tool.brand,
        str(agreement.rental_days),
        format_date(agreement.checkout_date, settings),
        format_date(agreement.due_date, settings),
        format_money(agreement.daily_charge, settings),
        str(agreement.charge_days),
        format_money(agreement.pre_discount_charge, settings),
        format_percent(agreement.discount_percent),
        format_money(agreement.discount_amount, settings),
        format_money(agreement.final_charge, settings),
    )
    return list(zip(AGREEMENT_LABELS, values))


def format_agreement(agreement: RentalAgreement, settings: RentalSettings) -> str:
    """
    Render the agreement printout.

    Example:
        Tool code: JAKR
        Tool type: Jackhammer
        ...
        Final charge: $8.07
    """
    return "\n".join(f"{label}: {value}" for label, value in agreement_lines(agreement, settings))
