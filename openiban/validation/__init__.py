"""IBAN validation pipeline.

Usage:
    >>> from openiban.validation import IbanValidator, IbanValidationResult
    >>> validator = IbanValidator()
    >>> validator.validate("NL92ABNA0417164300").result is IbanValidationResult.INVALID_CHECK_DIGITS
    True
"""

__all__ = [
    "IbanValidationResult",
    "IbanValidator",
    "IbanValidatorOptions",
    "LooseValidation",
    "StrictValidation",
    "ValidationMethod",
    "ValidationResult",
]

from .enums import IbanValidationResult
from .methods import LooseValidation, StrictValidation, ValidationMethod
from .options import IbanValidatorOptions
from .validator import IbanValidator
from .value_objects import ValidationResult
