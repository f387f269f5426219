"""Enums for IBAN validation."""

from enum import Enum


class IbanValidationResult(str, Enum):
    """Outcome of a single validation.

    Pipeline order (first failing stage wins):
        ILLEGAL_CHARACTERS / UNKNOWN_COUNTRY_CODE (country prefix)
        → INVALID_LENGTH → ILLEGAL_CHARACTERS (body) → INVALID_STRUCTURE
        → INVALID_CHECK_DIGITS → VALID
    """

    VALID = "valid"
    INVALID_LENGTH = "invalid_length"
    ILLEGAL_CHARACTERS = "illegal_characters"
    UNKNOWN_COUNTRY_CODE = "unknown_country_code"
    INVALID_CHECK_DIGITS = "invalid_check_digits"
    INVALID_STRUCTURE = "invalid_structure"

    def __str__(self) -> str:
        return self.value

    @property
    def is_valid(self) -> bool:
        return self is IbanValidationResult.VALID
