"""Request and response schemas for the API."""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt


class AgreementRequest(BaseModel):
    """Request to compute a rental agreement."""
    tool_code: str = Field(..., description="Tool code, e.g., 'LADW'")
    checkout_date: str = Field(
        ..., description="Checkout date (ISO format YYYY-MM-DD, or the configured format)"
    )
    rental_days: StrictInt = Field(..., description="Number of rental days, at least 1")
    discount_percent: StrictInt = Field(default=0, description="Discount percent, 0-100")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tool_code": "JAKR",
                    "checkout_date": "2020-07-02",
                    "rental_days": 4,
                    "discount_percent": 50,
                },
            ]
        }
    }


class HealthResponse(BaseModel):
    """Liveness check response."""
    status: str
    version: str
    tools: int
    holidays: int
    source: Optional[str] = None


class ToolResponse(BaseModel):
    """A tool with the pricing of its type."""
    code: str
    type: str
    brand: str
    daily_charge: str
    weekday_chargeable: bool
    weekend_chargeable: bool
    holiday_chargeable: bool


class HolidayResponse(BaseModel):
    """A holiday observed on a date."""
    date: str
    weekday: str
    name: Optional[str] = None


class PeriodResponse(BaseModel):
    """Day-type counts over the rental."""
    weekdays: int
    weekend_days: int
    holidays: int


class AgreementResponse(BaseModel):
    """A computed rental agreement. Amounts are decimal strings."""
    tool_code: str
    tool_type: str
    tool_brand: str
    rental_days: int
    checkout_date: str
    due_date: str
    daily_charge: str
    period: PeriodResponse
    charge_days: int
    pre_discount_charge: str
    discount_percent: str
    discount_amount: str
    final_charge: str
    printout: str


class ErrorResponse(BaseModel):
    """Structured error response."""
    code: str
    message: str
    field: Optional[str] = None
    source: Optional[str] = None
    key: Optional[str] = None
    details: Optional[dict] = None
