"""Read-only registry of IBAN country rules."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, NoReturn

from openiban.exceptions import UnsupportedOperationError

from .models import CountryInfo


class CountryRegistry(Mapping[str, CountryInfo]):
    """Immutable mapping from country code to ``CountryInfo``.

    Reads are forwarded to an internal dict that is never exposed. Every
    mutating method raises ``UnsupportedOperationError``, so a registry can be
    shared between validators and threads without copying.

    Example:
        >>> registry = default_registry()
        >>> registry["NL"].length
        18
        >>> registry["XX"] = registry["NL"]
        Traceback (most recent call last):
        ...
        openiban.exceptions.UnsupportedOperationError: Collection is read-only.
    """

    __slots__ = ("_countries",)

    def __init__(self, countries: Iterable[CountryInfo] = ()) -> None:
        entries: dict[str, CountryInfo] = {}
        for country in countries:
            if country.country_code in entries:
                raise ValueError(f"Duplicate country code: {country.country_code}")
            entries[country.country_code] = country
        object.__setattr__(self, "_countries", entries)

    @classmethod
    def from_definitions(cls, *definitions: Iterable[CountryInfo]) -> "CountryRegistry":
        """Merge several country definition sources into one registry."""
        return cls(country for definition in definitions for country in definition)

    def __getitem__(self, country_code: str) -> CountryInfo:
        return self._countries[country_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._countries)

    def __len__(self) -> int:
        return len(self._countries)

    def __contains__(self, country_code: object) -> bool:
        return country_code in self._countries

    def __repr__(self) -> str:
        return f"<CountryRegistry({len(self)} countries)>"

    def filter(self, *, sepa_only: bool = False) -> "CountryRegistry":
        """Return a new registry restricted to a subset of countries."""
        return CountryRegistry(c for c in self.values() if c.is_sepa or not sepa_only)

    # Mutation is rejected explicitly

    def _read_only(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise UnsupportedOperationError()

    __setitem__ = _read_only
    __delitem__ = _read_only
    add = _read_only
    update = _read_only
    pop = _read_only
    popitem = _read_only
    clear = _read_only
    setdefault = _read_only

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise UnsupportedOperationError()

    def __delattr__(self, name: str) -> NoReturn:
        raise UnsupportedOperationError()


_default: CountryRegistry | None = None


def default_registry() -> CountryRegistry:
    """Process-wide registry built from the bundled SWIFT table."""
    global _default

    if _default is None:
        from .swift_data import COUNTRIES

        _default = CountryRegistry(COUNTRIES)

    return _default
