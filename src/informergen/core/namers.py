"""Name systems used to order types and resolve plural resource names.

The planner depends only on the ``Namer`` protocol. ``name_systems`` returns
the fixed set of concrete strategies keyed by ``NameSystem``.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Protocol

from ..models import TypeDescriptor

VOWELS = frozenset("aeiou")


class NameSystem(str, Enum):
    """Available name systems."""

    PUBLIC = "public"
    PRIVATE = "private"
    RAW = "raw"
    PUBLIC_PLURAL = "publicPlural"
    ALL_LOWERCASE_PLURAL = "allLowercasePlural"
    LOWERCASE_SINGULAR = "lowercaseSingular"


class Namer(Protocol):
    """Resolves a display name for a type."""

    def name(self, t: TypeDescriptor) -> str: ...


def initial_capital(s: str) -> str:
    """Upper-case the first character of ``s``."""
    return s[:1].upper() + s[1:]


def initial_lower(s: str) -> str:
    """Lower-case the first character of ``s``."""
    return s[:1].lower() + s[1:]


def pluralize(singular: str, exceptions: Mapping[str, str] | None = None) -> str:
    """Return the plural of a type name.

    Exceptions are consulted first; otherwise English suffix rules apply.
    """
    if exceptions and singular in exceptions:
        return exceptions[singular]
    if len(singular) < 2:
        return singular

    last, before = singular[-1], singular[-2]
    if last in "sxz":
        return singular + "es"
    if last == "y":
        return singular[:-1] + "ies" if before.lower() not in VOWELS else singular + "s"
    if last == "h":
        return singular + "es" if before in "cs" else singular + "s"
    if last == "e" and before == "f":
        return singular[:-2] + "ves"
    if last == "f":
        return singular[:-1] + "ves"
    return singular + "s"


class PublicNamer:
    """Exported-style name: ``deployment`` -> ``Deployment``."""

    def name(self, t: TypeDescriptor) -> str:
        return initial_capital(t.name)


class PrivateNamer:
    """Unexported-style name: ``Deployment`` -> ``deployment``."""

    def name(self, t: TypeDescriptor) -> str:
        return initial_lower(t.name)


class RawNamer:
    """Package-qualified name: ``k8s.io/api/apps/v1.Deployment``."""

    def name(self, t: TypeDescriptor) -> str:
        return f"{t.package}.{t.name}"


class LowercaseSingularNamer:
    """All-lowercase singular name: ``ReplicaSet`` -> ``replicaset``."""

    def name(self, t: TypeDescriptor) -> str:
        return t.name.lower()


class PublicPluralNamer:
    """Exported-style plural: ``Ingress`` -> ``Ingresses``."""

    def __init__(self, exceptions: Mapping[str, str] | None = None) -> None:
        self.exceptions = MappingProxyType(dict(exceptions or {}))

    def name(self, t: TypeDescriptor) -> str:
        return initial_capital(pluralize(t.name, self.exceptions))


class AllLowercasePluralNamer:
    """All-lowercase plural, as used for resource names: ``Policy`` -> ``policies``."""

    def __init__(self, exceptions: Mapping[str, str] | None = None) -> None:
        self.exceptions = MappingProxyType(dict(exceptions or {}))

    def name(self, t: TypeDescriptor) -> str:
        return pluralize(t.name, self.exceptions).lower()


def name_systems(plural_exceptions: Mapping[str, str] | None = None) -> dict[NameSystem, Namer]:
    """Build every name system, sharing one plural-exception table."""
    return {
        NameSystem.PUBLIC: PublicNamer(),
        NameSystem.PRIVATE: PrivateNamer(),
        NameSystem.RAW: RawNamer(),
        NameSystem.PUBLIC_PLURAL: PublicPluralNamer(plural_exceptions),
        NameSystem.ALL_LOWERCASE_PLURAL: AllLowercasePluralNamer(plural_exceptions),
        NameSystem.LOWERCASE_SINGULAR: LowercaseSingularNamer(),
    }
