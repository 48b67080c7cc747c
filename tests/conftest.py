"""
Pytest configuration and fixtures for toolrental tests.

Provides helper factories and common fixtures matching the model definitions.
"""
import logging
from datetime import date
from decimal import Decimal

import pytest

from toolrental.calendars import RentalCalendar
from toolrental.catalog import ToolCatalog, load_reference_data
from toolrental.config import LOGGER_NAME
from toolrental.engine import ChargeCalculator, RentalAgreementBuilder
from toolrental.models import (
    FixedHoliday,
    FloatingHoliday,
    RentalSettings,
    Tool,
    ToolType,
    Weekday,
)


THURSDAY_2024_07_18 = date(2024, 7, 18)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_tool_type(
    name: str = "Jackhammer",
    daily_charge: str = "2.99",
    weekday: bool = True,
    weekend: bool = False,
    holiday: bool = False,
) -> ToolType:
    """Create a ToolType from a decimal string."""
    return ToolType(
        name=name,
        daily_charge=Decimal(daily_charge),
        weekday_chargeable=weekday,
        weekend_chargeable=weekend,
        holiday_chargeable=holiday,
    )


def make_tool(code: str = "JAKR", type_name: str = "Jackhammer", brand: str = "Ridgid") -> Tool:
    return Tool(code=code, type_name=type_name, brand=brand)


def independence_day() -> FixedHoliday:
    return FixedHoliday("Independence Day", month=7, day=4, adjust_on_weekend=True)


def labor_day() -> FloatingHoliday:
    return FloatingHoliday("Labor Day", month=9, ordinal_week=1, day_of_week=Weekday.MONDAY)


def make_catalog() -> ToolCatalog:
    """The standard four-tool catalog."""
    return ToolCatalog(
        tools=[
            make_tool("CHNS", "Chainsaw", "Stihl"),
            make_tool("LADW", "Ladder", "Werner"),
            make_tool("JAKD", "Jackhammer", "DeWalt"),
            make_tool("JAKR", "Jackhammer", "Ridgid"),
        ],
        tool_types=[
            make_tool_type("Ladder", "1.99", weekday=True, weekend=True, holiday=False),
            make_tool_type("Chainsaw", "1.49", weekday=True, weekend=False, holiday=True),
            make_tool_type("Jackhammer", "2.99", weekday=True, weekend=False, holiday=False),
        ],
    )


def make_builder(settings: RentalSettings = None) -> RentalAgreementBuilder:
    settings = settings or RentalSettings()
    calendar = RentalCalendar(
        holiday_specs=[independence_day(), labor_day()],
        settings=settings,
    )
    return RentalAgreementBuilder(catalog=make_catalog(), calendar=calendar, settings=settings)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings() -> RentalSettings:
    return RentalSettings()


@pytest.fixture
def calendar(settings: RentalSettings) -> RentalCalendar:
    """Calendar with Independence Day (adjusted) and Labor Day."""
    return RentalCalendar(holiday_specs=[independence_day(), labor_day()], settings=settings)


@pytest.fixture
def calculator(settings: RentalSettings) -> ChargeCalculator:
    return ChargeCalculator(settings=settings)


@pytest.fixture
def catalog() -> ToolCatalog:
    return make_catalog()


@pytest.fixture
def builder() -> RentalAgreementBuilder:
    return make_builder()


@pytest.fixture
def reference_data():
    """The bundled reference data."""
    return load_reference_data(strict_version=True)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in (
        "TOOLRENTAL_DATA_DIR",
        "TOOLRENTAL_LOG_LEVEL",
        "TOOLRENTAL_LOG_FORMAT",
        "TOOLRENTAL_STRICT_VERSION",
        "TOOLRENTAL_DOCS_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """The CLI and API install a handler on the package logger; remove it afterwards."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_toolrental_handler", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
