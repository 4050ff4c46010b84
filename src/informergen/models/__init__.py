"""Pydantic data models for informergen.

This package defines the data structures used throughout informergen for:
- Input descriptors (Member, TypeDescriptor, PackageDescriptor, DescriptorSet)
- Group/version identity and aggregation (GroupVersion, PackageVersion, GroupVersions)
- Planned output (Target and its generator records)

Example:
    >>> from informergen.models import GroupVersion
    >>> GroupVersion(group="apps", version="v1").version_non_empty()
    'v1'
"""

from .descriptors import DescriptorSet, Member, PackageDescriptor, TypeDescriptor
from .group_version import GroupVersion, GroupVersions, PackageVersion
from .target import (
    FactoryGenerator,
    FactoryInterfacesGenerator,
    GeneratorKind,
    GeneratorSpec,
    GenericGenerator,
    GenericResource,
    GroupInterfaceGenerator,
    InformerGenerator,
    Target,
    TargetKind,
    TypeFilter,
    VersionInterfaceGenerator,
)

__all__ = [
    "DescriptorSet",
    "FactoryGenerator",
    "FactoryInterfacesGenerator",
    "GeneratorKind",
    "GeneratorSpec",
    "GenericGenerator",
    "GenericResource",
    "GroupInterfaceGenerator",
    "GroupVersion",
    "GroupVersions",
    "InformerGenerator",
    "Member",
    "PackageDescriptor",
    "PackageVersion",
    "Target",
    "TargetKind",
    "TypeDescriptor",
    "TypeFilter",
    "VersionInterfaceGenerator",
]
