"""
Tool Rental Catalog Models

- Tool: a rentable item, keyed by its tool code
- ToolType: pricing and chargeable-day rules shared by tools of one type

Both are immutable once the catalog is loaded. Monetary values use Decimal.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..exceptions import CatalogValidationError


@dataclass(frozen=True)
class ToolType:
    """
    Billing rules for a type of tool.

    Attributes:
        name: Unique type name (e.g., "Ladder")
        daily_charge: Charge per chargeable day
        weekday_chargeable: Whether weekdays are billed
        weekend_chargeable: Whether weekend days are billed
        holiday_chargeable: Whether holidays are billed
    """
    name: str
    daily_charge: Decimal
    weekday_chargeable: bool = True
    weekend_chargeable: bool = True
    holiday_chargeable: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise CatalogValidationError(message="Tool type name must not be empty")
        if not isinstance(self.daily_charge, Decimal):
            raise CatalogValidationError(
                message=f"Daily charge for '{self.name}' must be a Decimal, "
                        f"got {type(self.daily_charge).__name__}",
                key=f"{self.name}.daily_charge",
            )
        if not self.daily_charge.is_finite() or self.daily_charge < 0:
            raise CatalogValidationError(
                message=f"Daily charge for '{self.name}' must be non-negative; "
                        f"got {self.daily_charge}",
                key=f"{self.name}.daily_charge",
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "daily_charge": str(self.daily_charge),
            "weekday_chargeable": self.weekday_chargeable,
            "weekend_chargeable": self.weekend_chargeable,
            "holiday_chargeable": self.holiday_chargeable,
        }


@dataclass(frozen=True)
class Tool:
    """
    A rentable tool.

    Attributes:
        code: Unique tool code (e.g., "LADW")
        type_name: Name of the ToolType that prices this tool
        brand: Manufacturer
    """
    code: str
    type_name: str
    brand: str

    def __post_init__(self) -> None:
        if not self.code:
            raise CatalogValidationError(message="Tool code must not be empty")
        if not self.type_name:
            raise CatalogValidationError(
                message=f"Tool '{self.code}' has no tool type",
                key=f"{self.code}.type",
            )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "code": self.code,
            "type": self.type_name,
            "brand": self.brand,
        }
