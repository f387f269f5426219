"""Validation methods (Strategy pattern).

A validation method decides how strictly the BBAN is checked once length,
characters and check digits are known to be well-formed:

- StrictValidation: every segment must match the country's structure pattern,
  including its lower case policy.
- LooseValidation: no positional check; only the checksum guards the BBAN.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from openiban.exceptions import ConfigurationError
from openiban.registry.models import CountryInfo


class ValidationMethod(ABC):
    """Abstract base class for structure validation strategies.

    Implementing a new method:
        1. Inherit from ValidationMethod
        2. Set a unique ``name``
        3. Implement ``check_structure``
    """

    name: ClassVar[str]

    @abstractmethod
    def check_structure(self, value: str, country: CountryInfo) -> bool:
        """Check a normalized IBAN of the right length against ``country``.

        Args:
            value: Normalized IBAN, length already equal to ``country.length``
            country: Resolved country rules

        Returns:
            True if the value is structurally acceptable
        """

    @classmethod
    def from_name(cls, name: str) -> "ValidationMethod":
        """Resolve a method by name ("strict" or "loose").

        Raises:
            ConfigurationError: If the name is unknown
        """
        methods = {method.name: method for method in (StrictValidation, LooseValidation)}
        try:
            return methods[name.strip().lower()]()
        except (KeyError, AttributeError):
            raise ConfigurationError(
                f"Unknown validation method: {name!r}",
                setting="validation_method",
                expected=" | ".join(methods),
            ) from None

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class StrictValidation(ValidationMethod):
    """Match every character against the country's structure pattern."""

    name = "strict"

    def check_structure(self, value: str, country: CountryInfo) -> bool:
        return country.structure.matches(value, country.allows_lower_case)


class LooseValidation(ValidationMethod):
    """Skip positional checks; length, characters and checksum still apply."""

    name = "loose"

    def check_structure(self, value: str, country: CountryInfo) -> bool:
        return True
