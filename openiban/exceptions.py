"""Exception hierarchy for OpenIBAN.

Validation outcomes are never exceptions: ``IbanValidator.validate`` always
returns a ``ValidationResult``. Exceptions are reserved for programming and
configuration mistakes (building a validator without a registry, mutating
the read-only registry) and for the parser, which turns a failed validation
into ``InvalidIbanError``.

Usage:
    from openiban.exceptions import ConfigurationError, InvalidIbanError

    try:
        iban = IbanParser().parse(raw)
    except InvalidIbanError as e:
        logger.warning("iban_rejected", result=str(e.result.result), context=e.context)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openiban.validation.value_objects import ValidationResult


class OpenIbanError(Exception):
    """Base exception for all OpenIBAN errors.

    Attributes:
        message: Human-readable error message
        context: Additional context for debugging (dict)
        original_error: Original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize exception with rich context.

        Args:
            message: Human-readable error description
            context: Additional structured data for debugging
            original_error: Original exception if this wraps another error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        """Format exception with context for logging."""
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        if self.original_error:
            base = f"{base} [caused by: {type(self.original_error).__name__}]"
        return base

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(OpenIbanError, ValueError):
    """Raised when a validator is built from invalid options.

    Used for a missing registry, a missing validation method, or an
    unknown validation method name coming from settings.
    """

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error description
            setting: Name of the problematic setting
            expected: Expected value or type
            **kwargs: Additional context
        """
        context = kwargs.get("context", {})
        if setting:
            context["setting"] = setting
        if expected:
            context["expected"] = expected
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class NullConfigurationError(ConfigurationError):
    """Raised when a required configuration object is ``None`` altogether."""


# =============================================================================
# Registry Errors
# =============================================================================


class UnsupportedOperationError(OpenIbanError, TypeError):
    """Raised when a read-only collection is asked to change."""

    def __init__(self, message: str = "Collection is read-only.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(OpenIbanError):
    """Raised when input validation fails.

    Used where a caller asked for an exception instead of a result object.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        constraint: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Error description
            field: Name of the invalid field
            value: The invalid value (will be sanitized in logs)
            constraint: Validation constraint that was violated
            **kwargs: Additional context
        """
        context = kwargs.get("context", {})
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)[:100]  # Truncate for safety
        if constraint:
            context["constraint"] = constraint
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class InvalidIbanError(ValidationError):
    """Raised by ``IbanParser.parse`` when the value is not a valid IBAN."""

    def __init__(self, result: ValidationResult, **kwargs: Any) -> None:
        self.result = result
        super().__init__(
            f"The value is not a valid IBAN: {result.result.value}",
            field="iban",
            value=result.value,
            constraint=result.result.value,
            **kwargs,
        )


# =============================================================================
# Utility Functions
# =============================================================================


def wrap_exception(
    error: Exception,
    message: str,
    *,
    exception_class: type[OpenIbanError] = OpenIbanError,
    **context: Any,
) -> OpenIbanError:
    """Wrap an external exception in the OpenIBAN exception hierarchy.

    Args:
        error: Original exception to wrap
        message: Human-readable description
        exception_class: Which OpenIBAN exception to use
        **context: Additional context to attach

    Returns:
        Wrapped exception with original error preserved

    Example:
        try:
            method = ValidationMethod.from_name(settings.validation_method)
        except KeyError as e:
            raise wrap_exception(e, "Unknown method", exception_class=ConfigurationError)
    """
    return exception_class(
        message,
        context=context,
        original_error=error,
    )


__all__ = [
    "OpenIbanError",
    "ConfigurationError",
    "NullConfigurationError",
    "UnsupportedOperationError",
    "ValidationError",
    "InvalidIbanError",
    "wrap_exception",
]
