"""IBAN validation pipeline.

Stages run in a fixed order and the first failing stage decides the outcome:

    1. Normalize          remove whitespace; empty → INVALID_LENGTH
    2. Country prefix     not A-Z → ILLEGAL_CHARACTERS, not registered → UNKNOWN_COUNTRY_CODE
    3. Length             ≠ country length → INVALID_LENGTH
    4. Characters         outside [0-9A-Za-z] or check digits outside 02-98 → ILLEGAL_CHARACTERS
    5. Structure          validation method rejects the BBAN → INVALID_STRUCTURE
    6. Checksum           MOD-97 remainder ≠ 1 → INVALID_CHECK_DIGITS

Malformed input never raises; only invalid options at construction do.
"""

from __future__ import annotations

from collections.abc import Mapping

from openiban.checksum import is_valid_checksum
from openiban.exceptions import ConfigurationError, NullConfigurationError
from openiban.iban import normalize
from openiban.registry import CountryInfo, CountryRegistry
from openiban.utils.logging import get_logger

from .enums import IbanValidationResult
from .methods import ValidationMethod
from .options import IbanValidatorOptions
from .value_objects import ValidationResult

logger = get_logger(__name__)

_NOT_GIVEN = object()


def _is_upper_letter(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_alphanumeric(value: str) -> bool:
    return value.isascii() and value.isalnum()


def _has_valid_check_digits(value: str) -> bool:
    check_digits = value[2:4]
    return check_digits.isdigit() and check_digits.isascii() and 2 <= int(check_digits) <= 98


class IbanValidator:
    """Validate IBANs against a country registry.

    Example:
        >>> validator = IbanValidator()
        >>> result = validator.validate("NL91 ABNA 0417 1643 00")
        >>> result.result
        <IbanValidationResult.VALID: 'valid'>
        >>> result.value
        'NL91ABNA0417164300'
    """

    def __init__(self, options: IbanValidatorOptions | None = _NOT_GIVEN) -> None:  # type: ignore[assignment]
        """Initialize validator.

        Args:
            options: Registry and validation method. Omit for defaults.

        Raises:
            NullConfigurationError: If ``options`` is explicitly ``None``
            ConfigurationError: If the registry or validation method is missing
        """
        if options is _NOT_GIVEN:
            options = IbanValidatorOptions()
        if options is None:
            raise NullConfigurationError("Options must not be None", setting="options")
        if options.registry is None:
            raise ConfigurationError(
                "A registry is required", setting="registry", expected="Mapping[str, CountryInfo]"
            )
        if options.validation_method is None:
            raise ConfigurationError(
                "A validation method is required",
                setting="validation_method",
                expected="ValidationMethod",
            )

        self._registry = self._as_registry(options.registry)
        self._method: ValidationMethod = options.validation_method

    @staticmethod
    def _as_registry(registry: Mapping[str, CountryInfo]) -> CountryRegistry:
        if isinstance(registry, CountryRegistry):
            return registry
        return CountryRegistry(registry.values())

    @property
    def supported_countries(self) -> CountryRegistry:
        """Read-only view of the countries this validator knows."""
        return self._registry

    @property
    def validation_method(self) -> ValidationMethod:
        return self._method

    def validate(self, value: str | None) -> ValidationResult:
        """Validate ``value`` and classify it.

        Args:
            value: Raw IBAN, possibly with whitespace, possibly ``None``

        Returns:
            ValidationResult with exactly one outcome
        """
        if value is None:
            result = ValidationResult(value=None, result=IbanValidationResult.INVALID_LENGTH)
        else:
            result = self._validate(normalize(value))

        logger.debug(
            "iban_validated",
            iban=result.value,
            result=result.result.value,
            country_code=result.country.country_code if result.country else None,
            method=self._method.name,
        )
        return result

    def is_valid(self, value: str | None) -> bool:
        """Shortcut for ``validate(value).is_valid``."""
        return self.validate(value).is_valid

    def _validate(self, value: str) -> ValidationResult:
        if not value:
            return ValidationResult(value, IbanValidationResult.INVALID_LENGTH)

        prefix = value[:2]
        if not all(_is_upper_letter(ch) for ch in prefix):
            return ValidationResult(value, IbanValidationResult.ILLEGAL_CHARACTERS)
        if len(prefix) < 2:
            return ValidationResult(value, IbanValidationResult.INVALID_LENGTH)

        country = self._registry.get(prefix)
        if country is None:
            return ValidationResult(value, IbanValidationResult.UNKNOWN_COUNTRY_CODE)

        if len(value) != country.length:
            return ValidationResult(value, IbanValidationResult.INVALID_LENGTH, country)

        if not _is_alphanumeric(value) or not _has_valid_check_digits(value):
            return ValidationResult(value, IbanValidationResult.ILLEGAL_CHARACTERS, country)

        if not self._method.check_structure(value, country):
            return ValidationResult(value, IbanValidationResult.INVALID_STRUCTURE, country)

        if not is_valid_checksum(value):
            return ValidationResult(value, IbanValidationResult.INVALID_CHECK_DIGITS, country)

        return ValidationResult(value, IbanValidationResult.VALID, country)

    def __repr__(self) -> str:
        return f"<IbanValidator(method={self._method.name}, countries={len(self._registry)})>"
