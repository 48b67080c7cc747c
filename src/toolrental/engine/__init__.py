"""
Tool Rental Engine

Core services for computing rental agreements.

Services:
- ChargeCalculator: Charge days, pre-discount charge, discount and final charge
- RentalAgreementBuilder: Validate inputs and assemble the agreement

Usage:
    from toolrental.engine import RentalAgreementBuilder

    builder = RentalAgreementBuilder.from_reference_data(load_reference_data())
    agreement = builder.compute_agreement("LADW", date(2020, 7, 2), 3, 10)
"""
from __future__ import annotations

from .agreement_builder import (
    MAX_DISCOUNT_PERCENT,
    MIN_DISCOUNT_PERCENT,
    MIN_RENTAL_DAYS,
    RentalAgreementBuilder,
)
from .charge_calculator import ChargeCalculator

__all__ = [
    "ChargeCalculator",
    "RentalAgreementBuilder",
    "MIN_RENTAL_DAYS",
    "MIN_DISCOUNT_PERCENT",
    "MAX_DISCOUNT_PERCENT",
]
