"""Deterministic ordering of types within a version."""

from collections.abc import Iterable

from ..models import TypeDescriptor
from .namers import Namer, PrivateNamer


def order_types(
    types: Iterable[TypeDescriptor], namer: Namer | None = None
) -> list[TypeDescriptor]:
    """Stable-sort types by their private name.

    Args:
        types: Types to order
        namer: Name system supplying the sort key (private names by default)

    Returns:
        New list in ascending key order; ties keep their input order
    """
    key_namer = namer or PrivateNamer()
    return sorted(types, key=key_namer.name)
