"""
Tool Rental Reference Data Schemas

Pydantic models for validating reference data YAML/JSON files:

- tools.yaml: tool types (pricing, chargeable days) and tools
- holidays.yaml: fixed and floating holiday specs
- settings.yaml: weekend days, decimal rounding, display formats

They map to the domain models in toolrental.models.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check the major version
"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..models import (
    MAX_ORDINAL_WEEK,
    DEFAULT_WEEKEND_DAYS,
    RoundingMode,
    Weekday,
    max_month_length,
    parse_month,
)


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Shared Validators
# =============================================================================

def _to_month(value: Any) -> int:
    return parse_month(value)


def _to_weekday(value: Any) -> Weekday:
    return Weekday.parse(value)


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Tool Catalog Schemas
# =============================================================================

class ToolTypeSchema(_StrictModel):
    """Schema for a tool type."""
    name: str = Field(..., min_length=1, description="Unique tool type name")
    daily_charge: Decimal = Field(..., ge=0, description="Charge per chargeable day")
    weekday_charge: bool = Field(..., description="Weekdays are chargeable")
    weekend_charge: bool = Field(..., description="Weekend days are chargeable")
    holiday_charge: bool = Field(..., description="Holidays are chargeable")

    @field_validator("daily_charge", mode="before")
    @classmethod
    def decimal_from_text(cls, v: Any) -> Any:
        """Parse floats through their text form so 1.99 stays 1.99."""
        if isinstance(v, bool):
            raise ValueError("daily_charge must be a number")
        if isinstance(v, (int, float, str)):
            try:
                return Decimal(str(v).strip())
            except InvalidOperation:
                raise ValueError(f"'{v}' is not a valid decimal number") from None
        return v

    @field_validator("daily_charge")
    @classmethod
    def finite_charge(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("daily_charge must be finite")
        return v


class ToolSchema(_StrictModel):
    """Schema for a rentable tool."""
    code: str = Field(..., min_length=1, description="Unique tool code")
    type: str = Field(..., min_length=1, description="Tool type name")
    brand: str = Field(..., description="Manufacturer")


class ToolCatalogSchema(_StrictModel):
    """Schema for tools.yaml."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version")
    tool_types: list[ToolTypeSchema] = Field(..., min_length=1)
    tools: list[ToolSchema] = Field(..., min_length=1)


# =============================================================================
# Holiday Schemas
# =============================================================================

class FixedHolidaySchema(_StrictModel):
    """Schema for a fixed-date holiday."""
    kind: Literal["fixed"]
    name: str = Field(..., min_length=1)
    month: int = Field(..., description="Month number or name")
    day: int = Field(..., ge=1, description="Day of month")
    adjust_on_weekend: bool = Field(False, description="Slide off weekends")

    @field_validator("month", mode="before")
    @classmethod
    def parse_month_name(cls, v: Any) -> int:
        return _to_month(v)

    @model_validator(mode="after")
    def day_fits_month(self) -> "FixedHolidaySchema":
        limit = max_month_length(self.month)
        if self.day > limit:
            raise ValueError(
                f"day {self.day} is out of range for month {self.month} (max {limit})"
            )
        return self


class FloatingHolidaySchema(_StrictModel):
    """Schema for an Nth-weekday-of-month holiday."""
    kind: Literal["floating"]
    name: str = Field(..., min_length=1)
    month: int = Field(..., description="Month number or name")
    ordinal_week: int = Field(..., ge=1, le=MAX_ORDINAL_WEEK, description="Nth occurrence")
    day_of_week: Weekday = Field(..., description="Weekday name or number (0=Monday)")

    @field_validator("month", mode="before")
    @classmethod
    def parse_month_name(cls, v: Any) -> int:
        return _to_month(v)

    @field_validator("day_of_week", mode="before")
    @classmethod
    def parse_day_of_week(cls, v: Any) -> Weekday:
        return _to_weekday(v)


HolidaySchema = Annotated[
    Union[FixedHolidaySchema, FloatingHolidaySchema],
    Field(discriminator="kind"),
]


class HolidayCalendarSchema(_StrictModel):
    """Schema for holidays.yaml."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version")
    holidays: list[HolidaySchema] = Field(default_factory=list)

    @field_validator("holidays", mode="before")
    @classmethod
    def normalize_kind(cls, v: Any) -> Any:
        """Accept FIXED/Floating spellings of the discriminator."""
        if isinstance(v, list):
            return [
                {**item, "kind": item["kind"].lower()}
                if isinstance(item, dict) and isinstance(item.get("kind"), str)
                else item
                for item in v
            ]
        return v


# =============================================================================
# Settings Schema
# =============================================================================

class SettingsSchema(_StrictModel):
    """Schema for settings.yaml."""
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version")
    weekend_days: list[Weekday] = Field(
        default_factory=lambda: list(DEFAULT_WEEKEND_DAYS),
        description="Weekend days; the first listed is the weekend start",
    )
    weekend_start: Optional[Weekday] = Field(None, description="Overrides the first listed day")
    decimal_scale: int = Field(2, ge=0, le=12)
    rounding_mode: RoundingMode = Field(RoundingMode.HALF_UP)
    locale: str = Field("en_US")
    date_format: str = Field("%m/%d/%y", description="strftime pattern")
    currency_symbol: str = Field("$")

    @field_validator("weekend_days", mode="before")
    @classmethod
    def parse_weekend_days(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [part for part in v.split(",") if part.strip()]
        if isinstance(v, list):
            return [_to_weekday(d) for d in v]
        return v

    @field_validator("weekend_start", mode="before")
    @classmethod
    def parse_weekend_start(cls, v: Any) -> Any:
        return None if v is None else _to_weekday(v)

    @field_validator("rounding_mode", mode="before")
    @classmethod
    def parse_rounding_mode(cls, v: Any) -> Any:
        return RoundingMode.parse(v)

    @field_validator("date_format")
    @classmethod
    def date_format_round_trips(cls, v: str) -> str:
        """The format must both render and parse a date."""
        sample = date(2024, 7, 4)
        try:
            parsed = datetime.strptime(sample.strftime(v), v).date()
        except ValueError as e:
            raise ValueError(f"'{v}' is not a usable date format: {e}") from None
        if parsed != sample:
            raise ValueError(f"'{v}' does not identify a unique date")
        return v

    @model_validator(mode="after")
    def start_is_weekend_day(self) -> "SettingsSchema":
        if self.weekend_start is not None and self.weekend_start not in self.weekend_days:
            raise ValueError("weekend_start must be one of weekend_days")
        return self


# =============================================================================
# Validation Helpers
# =============================================================================

def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a reference data file's schema version is compatible.

    Args:
        data: Dictionary with schema_version field

    Returns:
        True if the major version matches, False otherwise
    """
    file_version = str(data.get("schema_version", SCHEMA_VERSION))
    return file_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
