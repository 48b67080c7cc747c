"""
Tool Rental Reference Data Loader

Loads and validates the reference data directory:

    tools.yaml      tool types and tools            (required)
    holidays.yaml   fixed and floating holidays     (required)
    settings.yaml   weekend, rounding and display   (optional)

JSON files (tools.json, ...) are accepted in place of YAML. Pydantic schema
models are converted to toolrental domain models.
"""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional, Union

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ..config import RuntimeConfig
from ..exceptions import (
    ConfigurationError,
    ReferenceDataLoadError,
    ReferenceDataValidationError,
    ReferenceDataVersionMismatch,
)
from ..models import (
    FixedHoliday,
    FloatingHoliday,
    HolidaySpec,
    RentalSettings,
    Tool,
    ToolType,
)
from .catalog import ToolCatalog
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

logger = logging.getLogger(__name__)

BUNDLED_DATA_DIR = Path(__file__).parent / "data"

TOOLS_FILE = "tools"
HOLIDAYS_FILE = "holidays"
SETTINGS_FILE = "settings"

_SUFFIXES = (".yaml", ".yml", ".json")


@dataclass(frozen=True)
class ReferenceData:
    """Everything the agreement builder needs, loaded once at startup."""
    catalog: ToolCatalog
    holiday_specs: tuple[HolidaySpec, ...]
    settings: RentalSettings
    source: Optional[str] = None


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_tool_type(schema: ToolTypeSchema) -> ToolType:
    """Convert ToolTypeSchema to ToolType model."""
    return ToolType(
        name=schema.name,
        daily_charge=schema.daily_charge,
        weekday_chargeable=schema.weekday_charge,
        weekend_chargeable=schema.weekend_charge,
        holiday_chargeable=schema.holiday_charge,
    )


def _convert_tool(schema: ToolSchema) -> Tool:
    """Convert ToolSchema to Tool model."""
    return Tool(code=schema.code, type_name=schema.type, brand=schema.brand)


def _convert_holiday(schema: Union[FixedHolidaySchema, FloatingHolidaySchema]) -> HolidaySpec:
    """Convert a holiday schema to its HolidaySpec variant."""
    if isinstance(schema, FixedHolidaySchema):
        return FixedHoliday(
            name=schema.name,
            month=schema.month,
            day=schema.day,
            adjust_on_weekend=schema.adjust_on_weekend,
        )
    return FloatingHoliday(
        name=schema.name,
        month=schema.month,
        ordinal_week=schema.ordinal_week,
        day_of_week=schema.day_of_week,
    )


def _convert_settings(schema: SettingsSchema) -> RentalSettings:
    """Convert SettingsSchema to RentalSettings; the first listed weekend day starts the weekend."""
    weekend_start = schema.weekend_start
    if weekend_start is None and schema.weekend_days:
        weekend_start = schema.weekend_days[0]
    return RentalSettings(
        weekend_days=frozenset(schema.weekend_days),
        weekend_start=weekend_start,
        decimal_scale=schema.decimal_scale,
        rounding_mode=schema.rounding_mode,
        locale=schema.locale,
        date_format=schema.date_format,
        currency_symbol=schema.currency_symbol,
    )


def _error_key(error: dict[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ()))


# =============================================================================
# Reference Data Loader
# =============================================================================

class ReferenceDataLoader:
    """
    Loads reference data from a directory of YAML or JSON files.

    Usage:
        loader = ReferenceDataLoader()
        data = loader.load("path/to/data")
        builder = RentalAgreementBuilder.from_reference_data(data)
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject files with incompatible schema versions
        """
        self.strict_version = strict_version

    def load(self, directory: Union[str, Path]) -> ReferenceData:
        """
        Load the reference data directory.

        Raises:
            ReferenceDataLoadError: If a required file is missing or unreadable
            ReferenceDataValidationError: If a file fails schema validation
            ReferenceDataVersionMismatch: If a schema version is incompatible
            ConfigurationError: If the data is structurally valid but inconsistent
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ReferenceDataLoadError(
                message=f"Reference data directory not found: {directory}",
                source=str(directory),
            )

        tools_path = self._find_file(directory, TOOLS_FILE, required=True)
        holidays_path = self._find_file(directory, HOLIDAYS_FILE, required=True)
        settings_path = self._find_file(directory, SETTINGS_FILE, required=False)

        catalog = self.parse_catalog(self._read(tools_path), source=str(tools_path))
        holiday_specs = self.parse_holidays(self._read(holidays_path), source=str(holidays_path))
        if settings_path is None:
            logger.debug("No settings file in %s; using defaults", directory)
            settings = RentalSettings()
        else:
            settings = self.parse_settings(self._read(settings_path), source=str(settings_path))

        logger.info(
            "Loaded reference data from %s: %d tools, %d holidays",
            directory, len(catalog), len(holiday_specs),
            extra={"source": str(directory)},
        )
        return ReferenceData(
            catalog=catalog,
            holiday_specs=holiday_specs,
            settings=settings,
            source=str(directory),
        )

    # ── parsing ──────────────────────────────────────────────────────────

    def parse_catalog(self, data: Any, source: Optional[str] = None) -> ToolCatalog:
        """Validate tools.yaml content and build the catalog."""
        schema = self._validate(ToolCatalogSchema, data, source)
        with _attributed_to(source):
            return ToolCatalog(
                tools=[_convert_tool(t) for t in schema.tools],
                tool_types=[_convert_tool_type(t) for t in schema.tool_types],
                source=source,
            )

    def parse_holidays(self, data: Any, source: Optional[str] = None) -> tuple[HolidaySpec, ...]:
        """Validate holidays.yaml content and build the holiday specs."""
        schema = self._validate(HolidayCalendarSchema, data, source)
        with _attributed_to(source):
            return tuple(_convert_holiday(h) for h in schema.holidays)

    def parse_settings(self, data: Any, source: Optional[str] = None) -> RentalSettings:
        """Validate settings.yaml content and build the settings."""
        if data is None:
            data = {}
        schema = self._validate(SettingsSchema, data, source)
        with _attributed_to(source):
            return _convert_settings(schema)

    def _validate(self, schema_cls: type[BaseModel], data: Any, source: Optional[str]) -> Any:
        if not isinstance(data, dict):
            raise ReferenceDataValidationError(
                message=f"Reference data must be a mapping, got {type(data).__name__}",
                source=source,
            )

        if self.strict_version and not check_schema_version(data):
            file_version = data.get("schema_version", "unknown")
            raise ReferenceDataVersionMismatch(
                message=f"Schema version mismatch: file has {file_version}, "
                        f"expected {SCHEMA_VERSION}",
                details={
                    "file_version": file_version,
                    "expected_version": SCHEMA_VERSION,
                },
                source=source,
                key="schema_version",
            )

        try:
            return schema_cls.model_validate(data)
        except SchemaValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            first_key = _error_key(errors[0]) if errors else None
            raise ReferenceDataValidationError(
                message=f"Reference data validation failed: {e.error_count()} errors"
                        + (f"; {errors[0]['msg']}" if errors else ""),
                details={
                    "errors": [
                        {"key": _error_key(err), "message": err["msg"]} for err in errors
                    ],
                },
                source=source,
                key=first_key,
            ) from e

    # ── files ────────────────────────────────────────────────────────────

    def _find_file(self, directory: Path, stem: str, required: bool) -> Optional[Path]:
        for suffix in _SUFFIXES:
            candidate = directory / f"{stem}{suffix}"
            if candidate.is_file():
                return candidate
        if required:
            raise ReferenceDataLoadError(
                message=f"Missing reference data file '{stem}.yaml' in {directory}",
                source=str(directory),
                key=stem,
            )
        return None

    def _read(self, path: Path) -> Any:
        try:
            return self._load_file(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ReferenceDataLoadError(
                message=f"Failed to load reference data: {e}",
                details={"path": str(path), "error": str(e)},
                source=str(path),
            ) from e

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)


@contextmanager
def _attributed_to(source: Optional[str]) -> Iterator[None]:
    """Fill in the source of configuration errors raised while converting."""
    try:
        yield
    except ConfigurationError as e:
        if e.source is None:
            e.source = source
        raise


# =============================================================================
# Convenience Functions
# =============================================================================

def load_reference_data(
    directory: Optional[Union[str, Path]] = None,
    strict_version: Optional[bool] = None,
) -> ReferenceData:
    """
    Load reference data.

    Args:
        directory: Reference data directory. Defaults to TOOLRENTAL_DATA_DIR,
            then the bundled data.
        strict_version: Defaults to TOOLRENTAL_STRICT_VERSION

    Returns:
        Loaded ReferenceData
    """
    runtime = RuntimeConfig.from_env()
    if directory is None:
        directory = runtime.data_dir or BUNDLED_DATA_DIR
    if strict_version is None:
        strict_version = runtime.strict_version
    return ReferenceDataLoader(strict_version=strict_version).load(directory)


def load_reference_data_from_strings(
    tools: str,
    holidays: str,
    settings: Optional[str] = None,
    format: str = "yaml",
) -> ReferenceData:
    """
    Load reference data from strings.

    Args:
        tools: tools.yaml content
        holidays: holidays.yaml content
        settings: settings.yaml content, or None for defaults
        format: "yaml" or "json"

    Returns:
        Loaded ReferenceData
    """
    def parse(content: str, source: str) -> Any:
        try:
            if format.lower() == "json":
                return json.loads(content)
            return yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ReferenceDataLoadError(
                message=f"Failed to parse reference data: {e}",
                source=source,
            ) from e

    loader = ReferenceDataLoader()
    return ReferenceData(
        catalog=loader.parse_catalog(parse(tools, "<tools>"), source="<tools>"),
        holiday_specs=loader.parse_holidays(parse(holidays, "<holidays>"), source="<holidays>"),
        settings=(
            RentalSettings() if settings is None
            else loader.parse_settings(parse(settings, "<settings>"), source="<settings>")
        ),
        source="<string>",
    )
