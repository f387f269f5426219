"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

from collections.abc import Generator

import pytest

from openiban.registry import CountryRegistry, default_registry
from openiban.utils import config
from openiban.validation import (
    IbanValidator,
    IbanValidatorOptions,
    LooseValidation,
    StrictValidation,
)


@pytest.fixture
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start from a fresh settings instance."""
    monkeypatch.setattr(config, "_settings", None)
    yield


@pytest.fixture
def registry() -> CountryRegistry:
    """The bundled country registry."""
    return default_registry()


@pytest.fixture
def strict_validator(registry: CountryRegistry) -> IbanValidator:
    """Validator with positional structure checks."""
    return IbanValidator(
        IbanValidatorOptions(registry=registry, validation_method=StrictValidation())
    )


@pytest.fixture
def loose_validator(registry: CountryRegistry) -> IbanValidator:
    """Validator that only checks length, characters and checksum."""
    return IbanValidator(
        IbanValidatorOptions(registry=registry, validation_method=LooseValidation())
    )


@pytest.fixture(params=["strict", "loose"])
def validator(request, strict_validator: IbanValidator, loose_validator: IbanValidator):
    """Both validation methods, for behavior they must share."""
    return strict_validator if request.param == "strict" else loose_validator
