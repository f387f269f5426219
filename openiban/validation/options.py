"""Options for building an ``IbanValidator``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from openiban.registry import CountryInfo, default_registry

from .methods import StrictValidation, ValidationMethod

if TYPE_CHECKING:
    from openiban.utils.config import Settings


@dataclass
class IbanValidatorOptions:
    """Validator configuration.

    Attributes:
        registry: Country rules to validate against (default: bundled SWIFT table)
        validation_method: Structure checking strategy (default: strict)
    """

    registry: Mapping[str, CountryInfo] | None = field(default_factory=default_registry)
    validation_method: ValidationMethod | None = field(default_factory=StrictValidation)

    @classmethod
    def from_settings(cls, settings: Settings) -> IbanValidatorOptions:
        """Build options from application settings."""
        return cls(
            registry=settings.build_registry(),
            validation_method=ValidationMethod.from_name(settings.validation_method),
        )
