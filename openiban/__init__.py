"""OpenIBAN: IBAN normalization, structure and MOD-97 validation.

Usage:
    >>> from openiban import IbanValidator
    >>> IbanValidator().validate("NL91 ABNA 0417 1643 00").is_valid
    True
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "CountryInfo",
    "CountryRegistry",
    "Iban",
    "IbanFormat",
    "IbanParser",
    "IbanValidationResult",
    "IbanValidator",
    "IbanValidatorOptions",
    "LooseValidation",
    "StrictValidation",
    "ValidationMethod",
    "ValidationResult",
    "calculate_check_digits",
    "default_registry",
    "normalize",
]

from .checksum import calculate_check_digits
from .iban import Iban, IbanFormat, normalize
from .parser import IbanParser
from .registry import CountryInfo, CountryRegistry, default_registry
from .validation import (
    IbanValidationResult,
    IbanValidator,
    IbanValidatorOptions,
    LooseValidation,
    StrictValidation,
    ValidationMethod,
    ValidationResult,
)
