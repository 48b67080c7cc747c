"""
Tool Rental Exception Hierarchy

Two families of errors, kept distinct so callers can decide whether to
re-prompt or halt:

- ValidationError: bad user input for a checkout. Recoverable.
- ConfigurationError: broken reference data (catalog, holidays, settings).
  Fatal for the current process.

Exception codes follow the pattern: TR_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ToolRentalError(Exception):
    """
    Base exception for all tool rental errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (TR_*)
        details: Additional context about the error
    """
    message: str
    code: str = "TR_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Errors (user input)
# =============================================================================

@dataclass
class ValidationError(ToolRentalError):
    """
    A checkout input failed validation.

    Attributes:
        field: Name of the offending input
    """
    code: str = "TR_VALIDATION_ERROR"
    field: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


@dataclass
class InvalidToolCode(ValidationError):
    """Tool code is empty or not in the catalog."""
    code: str = "TR_INVALID_TOOL_CODE"
    field: Optional[str] = "tool_code"


@dataclass
class InvalidCheckoutDate(ValidationError):
    """Checkout date is missing or cannot be parsed."""
    code: str = "TR_INVALID_CHECKOUT_DATE"
    field: Optional[str] = "checkout_date"


@dataclass
class InvalidRentalDuration(ValidationError):
    """Rental day count is not an integer of at least one."""
    code: str = "TR_INVALID_RENTAL_DURATION"
    field: Optional[str] = "rental_day_count"


@dataclass
class InvalidDiscountPercent(ValidationError):
    """Discount percent is not an integer between 0 and 100."""
    code: str = "TR_INVALID_DISCOUNT_PERCENT"
    field: Optional[str] = "discount_percent"


# =============================================================================
# Configuration Errors (reference data)
# =============================================================================

@dataclass
class ConfigurationError(ToolRentalError):
    """
    Reference data is missing or malformed.

    Attributes:
        source: File (or other origin) the bad data came from
        key: Offending key within the source, dotted for nested keys
    """
    code: str = "TR_CONFIGURATION_ERROR"
    source: Optional[str] = None
    key: Optional[str] = None

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.key:
            parts.append(f"(key: {self.key})")
        if self.source:
            parts.append(f"(source: {self.source})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.source:
            result["source"] = self.source
        if self.key:
            result["key"] = self.key
        return result


@dataclass
class ReferenceDataLoadError(ConfigurationError):
    """Failed to read a reference data file."""
    code: str = "TR_REFDATA_LOAD_ERROR"


@dataclass
class ReferenceDataValidationError(ConfigurationError):
    """Reference data file failed schema validation."""
    code: str = "TR_REFDATA_VALIDATION_ERROR"


@dataclass
class ReferenceDataVersionMismatch(ConfigurationError):
    """Reference data schema version is not the supported one."""
    code: str = "TR_REFDATA_VERSION_MISMATCH"


@dataclass
class CatalogValidationError(ConfigurationError):
    """Tool catalog has duplicate keys or dangling references."""
    code: str = "TR_CATALOG_INVALID"


@dataclass
class UnknownToolTypeError(ConfigurationError):
    """A tool references a tool type that is not defined."""
    code: str = "TR_UNKNOWN_TOOL_TYPE"


@dataclass
class InvalidHolidaySpecError(ConfigurationError):
    """Holiday specification is out of range or of an unknown kind."""
    code: str = "TR_INVALID_HOLIDAY_SPEC"


@dataclass
class InvalidSettingsError(ConfigurationError):
    """Calendar or decimal settings are invalid."""
    code: str = "TR_INVALID_SETTINGS"
