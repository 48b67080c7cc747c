"""
Tool Rental Models

Domain models for the tool rental system:

    from toolrental.models import (
        # Enums
        DayType, HolidayKind, Weekday, RoundingMode,
        # Catalog
        Tool, ToolType,
        # Holidays
        FixedHoliday, FloatingHoliday, HolidaySpec,
        # Settings
        RentalSettings,
        # Results
        RentalPeriod, ChargeBreakdown, RentalAgreement,
    )
"""
from __future__ import annotations

from .enums import (
    MONTH_NAMES,
    DayType,
    HolidayKind,
    RoundingMode,
    Weekday,
    parse_month,
)
from .holiday import (
    MAX_ORDINAL_WEEK,
    FixedHoliday,
    FloatingHoliday,
    HolidaySpec,
    max_month_length,
)
from .rental import ChargeBreakdown, RentalAgreement, RentalPeriod
from .settings import DEFAULT_WEEKEND_DAYS, RentalSettings
from .tool import Tool, ToolType

__all__ = [
    # Enums
    "DayType",
    "HolidayKind",
    "RoundingMode",
    "Weekday",
    "MONTH_NAMES",
    "parse_month",
    # Catalog
    "Tool",
    "ToolType",
    # Holidays
    "FixedHoliday",
    "FloatingHoliday",
    "HolidaySpec",
    "MAX_ORDINAL_WEEK",
    "max_month_length",
    # Settings
    "RentalSettings",
    "DEFAULT_WEEKEND_DAYS",
    # Results
    "RentalPeriod",
    "ChargeBreakdown",
    "RentalAgreement",
]
