"""Error registry for creating errors from templates."""

from typing import Any

from .errors import ErrorCategory, ErrorTemplate, FilterRegistrationError, LiquidError


class ErrorRegistry:
    """Registry of error templates. Creates errors from templates + context."""

    def __init__(self) -> None:
        """Initialize error registry with built-in templates."""
        self._templates: dict[str, ErrorTemplate] = {}
        self._load_builtin_templates()

    def get_template(self, code: str) -> ErrorTemplate | None:
        """Get template by error code.

        Args:
            code: Error code to look up

        Returns:
            ErrorTemplate if found, None otherwise
        """
        return self._templates.get(code)

    def list_codes(self) -> list[str]:
        """List all registered error codes."""
        return list(self._templates.keys())

    def register(self, template: ErrorTemplate) -> None:
        """Add or replace an error template.

        Args:
            template: Template to register under its code
        """
        self._templates[template.code] = template

    def create(
        self,
        code: str,
        context: dict[str, Any] | None = None,
        cause: LiquidError | None = None,
    ) -> LiquidError:
        """Create error instance from template + context.

        Args:
            code: Error code
            context: Context variables for template interpolation
            cause: Optional cause error

        Returns:
            Instance of the template's error class

        Raises:
            ValueError: If error code not found
        """
        template = self.get_template(code)
        if not template:
            msg = f"Unknown error code: {code}"
            raise ValueError(msg)

        context = context or {}

        message = self._interpolate(template.message_template, context)
        detail = self._interpolate(template.detail_template, context)
        suggestion = self._interpolate(template.suggestion_template, context)

        if message is None:
            message = f"Error {code}"

        # Explicit detail in context overrides the template
        if context.get("detail"):
            detail = str(context["detail"])

        return template.error_class(
            code=template.code,
            category=template.category,
            message=message,
            detail=detail,
            suggestion=suggestion,
            filter_name=context.get("filter_name"),
            cause=cause,
        )

    def _interpolate(
        self,
        template: str | None,
        context: dict[str, Any],
    ) -> str | None:
        """Safe string interpolation.

        Args:
            template: Template string with {var} placeholders
            context: Context variables

        Returns:
            Interpolated string or None if template is None
        """
        if template is None:
            return None

        try:
            return template.format(**context)
        except KeyError:
            # Missing context variable - return template as-is
            return template

    def _load_builtin_templates(self) -> None:
        """Load hardcoded built-in templates."""
        # FILTER Errors
        self._templates["FILTER_INVALID_ARGUMENT"] = ErrorTemplate(
            code="FILTER_INVALID_ARGUMENT",
            category=ErrorCategory.FILTER,
            message_template="Cannot register filter {filter_name}",
            detail_template=(
                "A filter must be a name with a callback, a class, the name of a "
                "function, or an object instance"
            ),
            suggestion_template=(
                "Pass a class or provider instance, or register a callable with "
                "add_filter(name, callback)"
            ),
            error_class=FilterRegistrationError,
        )

        self._templates["FILTER_REGISTRY_FROZEN"] = ErrorTemplate(
            code="FILTER_REGISTRY_FROZEN",
            category=ErrorCategory.FILTER,
            message_template="Cannot register filter {filter_name}: filter bank is frozen",
            detail_template="Filters must be registered before rendering starts",
            suggestion_template="Register all filters before calling freeze()",
            error_class=FilterRegistrationError,
        )

        # CONFIG Errors
        self._templates["CONFIG_INVALID"] = ErrorTemplate(
            code="CONFIG_INVALID",
            category=ErrorCategory.CONFIG,
            message_template="Configuration is invalid",
            suggestion_template="Check the configuration file and referenced modules",
        )

        # SYSTEM Errors
        self._templates["INTERNAL_ERROR"] = ErrorTemplate(
            code="INTERNAL_ERROR",
            category=ErrorCategory.SYSTEM,
            message_template="Internal error",
            detail_template="{detail}",
        )
