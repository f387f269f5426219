"""Tests for IbanValidator behavior shared by every validation method.

Each test runs against both the strict and the loose validator through the
parametrized ``validator`` fixture.
"""

import pytest

from openiban.exceptions import (
    ConfigurationError,
    NullConfigurationError,
    UnsupportedOperationError,
)
from openiban.iban import normalize
from openiban.registry import default_registry
from openiban.registry.models import CountryInfo
from openiban.registry.swift_data import COUNTRIES
from openiban.validation import (
    IbanValidationResult,
    IbanValidator,
    IbanValidatorOptions,
    StrictValidation,
    ValidationResult,
)

from tests.fixtures import NL_IBAN, TAMPERED_IBANS

pytestmark = pytest.mark.unit


class TestConstruction:
    """Test configuration errors at construction time."""

    def test_default_options(self):
        """No options means the default registry and strict checks."""
        validator = IbanValidator()

        assert validator.supported_countries is default_registry()
        assert validator.validation_method == StrictValidation()

    def test_none_options_raises_null_error(self):
        """Explicit None options are rejected."""
        with pytest.raises(NullConfigurationError):
            IbanValidator(None)

    @pytest.mark.parametrize(
        "options,setting",
        [
            (IbanValidatorOptions(registry=None), "registry"),
            (IbanValidatorOptions(validation_method=None), "validation_method"),
        ],
    )
    def test_invalid_options_raise_configuration_error(self, options, setting):
        """A missing registry or method names the bad setting."""
        with pytest.raises(ConfigurationError) as exc_info:
            IbanValidator(options)

        assert type(exc_info.value) is ConfigurationError
        assert exc_info.value.context["setting"] == setting

    def test_configuration_errors_are_value_errors(self):
        """Configuration errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            IbanValidator(None)

    def test_plain_mapping_is_wrapped_read_only(self):
        """A plain dict registry is accepted and wrapped."""
        nl = default_registry()["NL"]
        validator = IbanValidator(IbanValidatorOptions(registry={"NL": nl}))

        assert dict(validator.supported_countries) == {"NL": nl}
        assert validator.validate(NL_IBAN).is_valid
        assert validator.validate("NO9386011117947").result is (
            IbanValidationResult.UNKNOWN_COUNTRY_CODE
        )


class TestValidate:
    """Test the validation pipeline outcomes."""

    def test_none_value(self, validator):
        """None is an invalid length without a country."""
        actual = validator.validate(None)

        assert actual == ValidationResult(value=None, result=IbanValidationResult.INVALID_LENGTH)
        assert actual.country is None

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_empty_value(self, validator, value):
        """Empty or blank input is an invalid length."""
        actual = validator.validate(value)

        assert actual == ValidationResult(value="", result=IbanValidationResult.INVALID_LENGTH)

    @pytest.mark.parametrize("value", ["NL91ABNA041716430!", "NL91ABNA^417164300"])
    def test_illegal_characters(self, validator, value):
        """Illegal characters after the prefix keep the country."""
        actual = validator.validate(value)

        assert actual == ValidationResult(
            value=value,
            result=IbanValidationResult.ILLEGAL_CHARACTERS,
            country=validator.supported_countries[value[:2]],
        )

    @pytest.mark.parametrize(
        "value",
        ["0091ABNA0417164300", "4591ABNA0417164300", "#L91ABNA0417164300", "nl91abna0417164300"],
    )
    def test_illegal_country_code(self, validator, value):
        """A prefix outside A-Z is illegal and has no country."""
        actual = validator.validate(value)

        assert actual == ValidationResult(
            value=value, result=IbanValidationResult.ILLEGAL_CHARACTERS
        )
        assert actual.country is None

    @pytest.mark.parametrize("value", ["NL00ABNA0417164300", "NL01ABNA0417164300", "NL99ABNA0417164300"])
    def test_impossible_check_digits(self, validator, value):
        """Check digits 00, 01 and 99 are illegal."""
        actual = validator.validate(value)

        assert actual == ValidationResult(
            value=value,
            result=IbanValidationResult.ILLEGAL_CHARACTERS,
            country=validator.supported_countries["NL"],
        )

    @pytest.mark.parametrize(
        "value",
        ["NL91ABNA04171643000", "NL91ABNA041716430", "NO938601111794", "NO93860111179470"],
    )
    def test_incorrect_length(self, validator, value):
        """A wrong length keeps the resolved country."""
        actual = validator.validate(value)

        assert actual == ValidationResult(
            value=value,
            result=IbanValidationResult.INVALID_LENGTH,
            country=validator.supported_countries[value[:2]],
        )

    @pytest.mark.parametrize("value", ["N", "1"])
    def test_single_character(self, validator, value):
        """A lone letter is too short, anything else is illegal."""
        actual = validator.validate(value)

        expected = (
            IbanValidationResult.INVALID_LENGTH
            if value.isalpha()
            else IbanValidationResult.ILLEGAL_CHARACTERS
        )
        assert actual.result is expected
        assert actual.country is None

    @pytest.mark.parametrize("value", ["AA91ABNA0417164300", "ZZ93860111179470"])
    def test_unknown_country_code(self, validator, value):
        """Unregistered prefixes have no country."""
        actual = validator.validate(value)

        assert actual == ValidationResult(
            value=value, result=IbanValidationResult.UNKNOWN_COUNTRY_CODE
        )

    @pytest.mark.parametrize("value", TAMPERED_IBANS)
    def test_tampered_iban(self, validator, value):
        """A changed check digit fails the checksum."""
        actual = validator.validate(value)

        assert actual == ValidationResult(
            value=value,
            result=IbanValidationResult.INVALID_CHECK_DIGITS,
            country=validator.supported_countries[value[:2]],
        )

    @pytest.mark.parametrize(
        "value",
        ["NL91 ABNA 0417 1643 00", "NL91\tABNA\t0417\t1643\t00", " NL91 ABNA041 716 4300 "],
    )
    def test_whitespace_is_ignored(self, validator, value):
        """Whitespace anywhere is removed before validation."""
        actual = validator.validate(value)

        assert actual == ValidationResult(
            value=normalize(value),
            result=IbanValidationResult.VALID,
            country=validator.supported_countries["NL"],
        )
        assert actual.value == NL_IBAN

    @pytest.mark.parametrize("country", COUNTRIES, ids=lambda c: c.country_code)
    def test_valid_iban_per_country(self, validator, country: CountryInfo):
        """Every registry example validates."""
        actual = validator.validate(country.example)

        assert actual == ValidationResult(
            value=country.example,
            result=IbanValidationResult.VALID,
            country=validator.supported_countries[country.country_code],
        )
        assert actual.is_valid

    def test_is_valid_shortcut(self, validator):
        """is_valid mirrors the result."""
        assert validator.is_valid(NL_IBAN)
        assert not validator.is_valid(None)

    def test_result_is_immutable(self, validator):
        """Results cannot be changed."""
        actual = validator.validate(NL_IBAN)

        with pytest.raises(AttributeError):
            actual.result = IbanValidationResult.INVALID_LENGTH  # type: ignore[misc]

    def test_result_to_dict(self, validator):
        """Results serialize with country details."""
        assert validator.validate("NL92ABNA0417164300").to_dict() == {
            "value": "NL92ABNA0417164300",
            "result": "invalid_check_digits",
            "is_valid": False,
            "country_code": "NL",
            "country_name": "Netherlands",
        }


class TestSupportedCountries:
    """Test the registry exposed by a validator."""

    def test_matches_default_registry(self, validator):
        """Default validators expose the bundled registry."""
        assert validator.supported_countries == default_registry()

    def test_cannot_add(self, validator):
        """Adding a country raises."""
        countries = validator.supported_countries

        with pytest.raises(UnsupportedOperationError, match="Collection is read-only."):
            countries["XX"] = countries["NL"]

    def test_cannot_update(self, validator):
        """Updating the registry raises."""
        with pytest.raises(UnsupportedOperationError):
            validator.supported_countries.update({})
