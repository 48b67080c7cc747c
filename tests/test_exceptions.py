"""
toolrental Exception Tests

Error codes, string forms and serialization of the two error families.
"""
from __future__ import annotations

import pytest

from toolrental.exceptions import (
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


class TestHierarchy:
    """The two families stay distinct."""

    @pytest.mark.parametrize(
        "exc_class,field",
        [
            (InvalidToolCode, "tool_code"),
            (InvalidCheckoutDate, "checkout_date"),
            (InvalidRentalDuration, "rental_day_count"),
            (InvalidDiscountPercent, "discount_percent"),
        ],
    )
    def test_validation_errors(self, exc_class, field) -> None:
        exc = exc_class(message="bad")
        assert isinstance(exc, ValidationError)
        assert not isinstance(exc, ConfigurationError)
        assert exc.field == field
        assert exc.code.startswith("TR_INVALID_")

    @pytest.mark.parametrize(
        "exc_class",
        [
            ReferenceDataLoadError,
            ReferenceDataValidationError,
            ReferenceDataVersionMismatch,
            CatalogValidationError,
            UnknownToolTypeError,
            InvalidHolidaySpecError,
            InvalidSettingsError,
        ],
    )
    def test_configuration_errors(self, exc_class) -> None:
        exc = exc_class(message="bad")
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, ToolRentalError)
        assert not isinstance(exc, ValidationError)


class TestSerialization:
    """String forms and to_dict()."""

    def test_str(self) -> None:
        exc = InvalidDiscountPercent(message="Discount must be a valid percentage between 0 and 100.")
        assert str(exc) == (
            "[TR_INVALID_DISCOUNT_PERCENT] Discount must be a valid percentage between 0 and 100."
        )

    def test_validation_to_dict(self) -> None:
        exc = InvalidToolCode(message="There is no tool with tool code: XXXX")
        assert exc.to_dict() == {
            "code": "TR_INVALID_TOOL_CODE",
            "message": "There is no tool with tool code: XXXX",
            "field": "tool_code",
        }

    def test_configuration_str_includes_key_and_source(self) -> None:
        exc = ReferenceDataValidationError(
            message="Reference data validation failed",
            source="data/tools.yaml",
            key="tool_types.0.daily_charge",
        )
        assert str(exc) == (
            "[TR_REFDATA_VALIDATION_ERROR] Reference data validation failed "
            "(key: tool_types.0.daily_charge) (source: data/tools.yaml)"
        )

    def test_configuration_to_dict(self) -> None:
        exc = ReferenceDataVersionMismatch(
            message="Schema version mismatch",
            details={"file_version": "2.0.0"},
            source="holidays.yaml",
            key="schema_version",
        )
        assert exc.to_dict() == {
            "code": "TR_REFDATA_VERSION_MISMATCH",
            "message": "Schema version mismatch",
            "details": {"file_version": "2.0.0"},
            "source": "holidays.yaml",
            "key": "schema_version",
        }

    def test_raise_and_catch_as_base(self) -> None:
        with pytest.raises(ToolRentalError, match="bad input"):
            raise InvalidRentalDuration(message="bad input")
