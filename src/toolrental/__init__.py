"""
toolrental - Tool Rental Agreements

Computes rental agreements for tools: due date, chargeable days and charges,
following each tool type's billing rules and a holiday calendar of fixed and
floating holidays.

Quick Start:
    from datetime import date

    from toolrental import RentalAgreementBuilder, load_reference_data

    data = load_reference_data()
    builder = RentalAgreementBuilder.from_reference_data(data)
    agreement = builder.compute_agreement("JAKR", date(2020, 7, 2), 9, 0)
    print(agreement.final_charge)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

# =============================================================================
# Core Models (Re-exported for convenience)
# =============================================================================
from .models import (
    ChargeBreakdown,
    DayType,
    FixedHoliday,
    FloatingHoliday,
    HolidayKind,
    HolidaySpec,
    RentalAgreement,
    RentalPeriod,
    RentalSettings,
    RoundingMode,
    Tool,
    ToolType,
    Weekday,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    CatalogValidationError,
    ConfigurationError,
    InvalidCheckoutDate,
    InvalidDiscountPercent,
    InvalidHolidaySpecError,
    InvalidRentalDuration,
    InvalidSettingsError,
    InvalidToolCode,
    ReferenceDataLoadError,
    ReferenceDataValidationError,
    ReferenceDataVersionMismatch,
    ToolRentalError,
    UnknownToolTypeError,
    ValidationError,
)

# =============================================================================
# Services
# =============================================================================
from .calendars import HolidayCalendar, RentalCalendar
from .catalog import (
    ReferenceData,
    ReferenceDataLoader,
    ToolCatalog,
    load_reference_data,
    load_reference_data_from_strings,
)
from .engine import ChargeCalculator, RentalAgreementBuilder
from .formatting import format_agreement

__all__ = [
    "__version__",
    # Models
    "ChargeBreakdown",
    "DayType",
    "FixedHoliday",
    "FloatingHoliday",
    "HolidayKind",
    "HolidaySpec",
    "RentalAgreement",
    "RentalPeriod",
    "RentalSettings",
    "RoundingMode",
    "Tool",
    "ToolType",
    "Weekday",
    # Exceptions
    "ToolRentalError",
    "ValidationError",
    "InvalidToolCode",
    "InvalidCheckoutDate",
    "InvalidRentalDuration",
    "InvalidDiscountPercent",
    "ConfigurationError",
    "ReferenceDataLoadError",
    "ReferenceDataValidationError",
    "ReferenceDataVersionMismatch",
    "CatalogValidationError",
    "UnknownToolTypeError",
    "InvalidHolidaySpecError",
    "InvalidSettingsError",
    # Services
    "HolidayCalendar",
    "RentalCalendar",
    "ToolCatalog",
    "ReferenceData",
    "ReferenceDataLoader",
    "load_reference_data",
    "load_reference_data_from_strings",
    "ChargeCalculator",
    "RentalAgreementBuilder",
    "format_agreement",
]
