"""Parse strings into ``Iban`` value objects."""

from __future__ import annotations

from openiban.exceptions import InvalidIbanError
from openiban.iban import Iban
from openiban.validation import IbanValidator


class IbanParser:
    """Validate and wrap IBANs.

    Example:
        >>> str(IbanParser().parse("NL91 ABNA 0417 1643 00"))
        'NL91ABNA0417164300'
        >>> IbanParser().try_parse("NL92ABNA0417164300") is None
        True
    """

    def __init__(self, validator: IbanValidator | None = None) -> None:
        self.validator = validator or IbanValidator()

    def parse(self, value: str | None) -> Iban:
        """Parse ``value`` or raise.

        Raises:
            InvalidIbanError: If validation fails; ``.result`` holds the outcome
        """
        result = self.validator.validate(value)
        if not result.is_valid or result.value is None or result.country is None:
            raise InvalidIbanError(result)
        return Iban(result.value, result.country)

    def try_parse(self, value: str | None) -> Iban | None:
        """Parse ``value``, returning None instead of raising."""
        try:
            return self.parse(value)
        except InvalidIbanError:
            return None
