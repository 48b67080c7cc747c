"""
Tool Rental Catalog

Reference data: the tool catalog, holiday specs and rental settings,
validated with pydantic schemas and loaded from YAML or JSON.

Usage:
    from toolrental.catalog import load_reference_data, ReferenceDataLoader

    # Bundled data (or TOOLRENTAL_DATA_DIR when set)
    data = load_reference_data()
    tool = data.catalog.get_tool("LADW")

    # A specific directory
    data = ReferenceDataLoader(strict_version=False).load("path/to/data")
"""
from __future__ import annotations

from .catalog import ToolCatalog, validate_reference_integrity
from .loader import (
    BUNDLED_DATA_DIR,
    ReferenceData,
    ReferenceDataLoader,
    load_reference_data,
    load_reference_data_from_strings,
)
from .schema import (
    SCHEMA_VERSION,
    FixedHolidaySchema,
    FloatingHolidaySchema,
    HolidayCalendarSchema,
    SettingsSchema,
    ToolCatalogSchema,
    ToolSchema,
    ToolTypeSchema,
    check_schema_version,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Catalog
    "ToolCatalog",
    "validate_reference_integrity",
    # Loader
    "BUNDLED_DATA_DIR",
    "ReferenceData",
    "ReferenceDataLoader",
    "load_reference_data",
    "load_reference_data_from_strings",
    # Validation
    "check_schema_version",
    # Schemas (for advanced usage)
    "ToolCatalogSchema",
    "ToolTypeSchema",
    "ToolSchema",
    "HolidayCalendarSchema",
    "FixedHolidaySchema",
    "FloatingHolidaySchema",
    "SettingsSchema",
]
