"""Unit tests for structured errors."""

import pytest

from liquid_core.errors import (
    ErrorCategory,
    ErrorFactory,
    ErrorRegistry,
    ErrorTemplate,
    FilterRegistrationError,
    LiquidError,
    create_error,
)


class TestErrorRegistry:
    """Tests for creating errors from templates."""

    def test_builtin_codes(self):
        codes = ErrorRegistry().list_codes()
        assert {
            "FILTER_INVALID_ARGUMENT",
            "FILTER_REGISTRY_FROZEN",
            "CONFIG_INVALID",
            "INTERNAL_ERROR",
        } <= set(codes)

    def test_filter_errors_use_registration_class(self):
        error = ErrorRegistry().create("FILTER_INVALID_ARGUMENT", {"filter_name": "42"})
        assert isinstance(error, FilterRegistrationError)
        assert isinstance(error, LiquidError)
        assert error.message == "Cannot register filter 42"
        assert error.filter_name == "42"
        assert error.category == ErrorCategory.FILTER

    def test_config_errors_are_plain(self):
        error = ErrorRegistry().create("CONFIG_INVALID", {"detail": "bad"})
        assert type(error) is LiquidError
        assert error.detail == "bad"

    def test_unknown_code(self):
        with pytest.raises(ValueError):
            ErrorRegistry().create("NOPE")

    def test_missing_context_keeps_template(self):
        error = ErrorRegistry().create("FILTER_INVALID_ARGUMENT")
        assert error.message == "Cannot register filter {filter_name}"

    def test_register_custom_template(self):
        registry = ErrorRegistry()
        registry.register(
            ErrorTemplate(
                code="FILTER_DEPRECATED",
                category=ErrorCategory.FILTER,
                message_template="Filter {filter_name} is deprecated",
            )
        )
        error = ErrorFactory(registry).create("FILTER_DEPRECATED", filter_name="money")
        assert error.message == "Filter money is deprecated"


class TestLiquidError:
    """Tests for LiquidError helpers."""

    def test_raisable_with_message(self):
        with pytest.raises(FilterRegistrationError, match="Cannot register filter 1"):
            raise create_error("FILTER_INVALID_ARGUMENT", filter_name="1")

    def test_to_dict(self):
        cause = create_error("CONFIG_INVALID", detail="inner")
        error = LiquidError(
            code="INTERNAL_ERROR",
            category=ErrorCategory.SYSTEM,
            message="outer",
            cause=cause,
        )
        data = error.to_dict()
        assert data["code"] == "INTERNAL_ERROR"
        assert data["category"] == "SYSTEM"
        assert data["cause"]["detail"] == "inner"

    def test_with_context_keeps_class(self):
        error = create_error("FILTER_REGISTRY_FROZEN", filter_name="'x'")
        copy = error.with_context(filter_name="y")
        assert isinstance(copy, FilterRegistrationError)
        assert copy.filter_name == "y"
        assert copy.timestamp == error.timestamp
