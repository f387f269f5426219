"""Value objects for IBAN validation.

Value Objects in DDD:
- Immutable (frozen dataclasses)
- No identity (equality based on attributes)
"""

from dataclasses import dataclass
from typing import Any

from openiban.registry.models import CountryInfo

from .enums import IbanValidationResult


@dataclass(frozen=True)
class ValidationResult:
    """Result of ``IbanValidator.validate``.

    Attributes:
        value: Normalized input (``None`` when the input was ``None``)
        result: Outcome of the validation
        country: Resolved country, ``None`` when the prefix could not be resolved
    """

    value: str | None
    result: IbanValidationResult
    country: CountryInfo | None = None

    @property
    def is_valid(self) -> bool:
        """Whether the IBAN passed every stage."""
        return self.result.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "value": self.value,
            "result": self.result.value,
            "is_valid": self.is_valid,
            "country_code": self.country.country_code if self.country else None,
            "country_name": self.country.country_name if self.country else None,
        }
