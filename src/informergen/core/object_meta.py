"""Locating the ObjectMeta member that splits internal from external packages."""

from typing import NamedTuple

from ..constants import OBJECT_META_MEMBER, SERIALIZATION_MARKER
from ..models import Member, PackageDescriptor
from .errors import ObjectMetaNotFoundError
from .tags import must_parse_client_gen_tags


class ObjectMetaResult(NamedTuple):
    """The ObjectMeta member found for a package and its classification."""

    member: Member
    is_internal: bool


def is_internal(member: Member) -> bool:
    """Return True if the member carries no serialization tag."""
    return SERIALIZATION_MARKER not in member.tags


def locate_object_meta(package: PackageDescriptor) -> ObjectMetaResult | None:
    """Find the ObjectMeta member used by a package.

    Types without ``+genclient`` are ignored. The first generated type
    that has an ObjectMeta member decides the result.

    Args:
        package: Package to inspect

    Returns:
        The member and whether the package is internal, or None when no
        type in the package requests client generation

    Raises:
        ObjectMetaNotFoundError: If generated types exist but none has ObjectMeta
        TagSyntaxError: If a type's tags are malformed
    """
    generating = False
    for t in package.types:
        if not must_parse_client_gen_tags(t.tag_lines).generate:
            continue
        generating = True
        member = t.member(OBJECT_META_MEMBER)
        if member is not None:
            return ObjectMetaResult(member, is_internal(member))
    if generating:
        raise ObjectMetaNotFoundError(package.path)
    return None
