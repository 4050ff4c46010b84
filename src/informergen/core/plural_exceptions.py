"""Parsing of irregular Singular=Plural overrides."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .errors import PluralExceptionError


def parse_plural_exceptions(entries: Iterable[str]) -> Mapping[str, str]:
    """Parse ``Singular=Plural`` entries into a read-only mapping.

    Entries are case-sensitive.

    Args:
        entries: Override strings such as ``"Endpoints=Endpoints"``

    Returns:
        Read-only singular -> plural mapping

    Raises:
        PluralExceptionError: If an entry is malformed or repeats a singular
    """
    exceptions: dict[str, str] = {}
    for entry in entries:
        parts = entry.split("=")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise PluralExceptionError(f"invalid plural exception definition: {entry!r}")
        singular, plural = parts
        if singular in exceptions:
            raise PluralExceptionError(f"duplicate plural exception for {singular!r}")
        exceptions[singular] = plural
    return MappingProxyType(exceptions)
