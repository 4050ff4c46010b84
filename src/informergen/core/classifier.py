"""Group/version classification of input packages.

Packages are bucketed into an internal or an external table keyed by the
group's output slug. The tables are accumulated on an explicit builder that
the planner threads through its collect phase.
"""

import logging
import posixpath
from dataclasses import dataclass, field

from ..constants import GROUP_GO_NAME_TAG, GROUP_NAME_TAG, TAG_MARKER
from ..models import GroupVersion, GroupVersions, PackageDescriptor, PackageVersion, TypeDescriptor
from .errors import GroupDerivationError
from .namers import initial_capital
from .object_meta import locate_object_meta
from .tags import extract_comment_tags, is_informable_type

logger = logging.getLogger(__name__)


def derive_group_version(package: PackageDescriptor, internal: bool) -> tuple[GroupVersion, str]:
    """Derive the group version of a package from its path and comments.

    Args:
        package: Package to classify
        internal: Whether the package is the unversioned internal representation

    Returns:
        Tuple of (group version, output slug). The slug is the path-derived
        group name and ignores any ``+groupName`` override.

    Raises:
        GroupDerivationError: If the path has too few segments
    """
    parts = package.path.split("/")
    if len(parts) < 2:
        raise GroupDerivationError(package.path)
    if internal:
        gv = GroupVersion(group=parts[-1])
    else:
        gv = GroupVersion(group=parts[-2], version=parts[-1])
    package_name = gv.group_non_empty()

    override = extract_comment_tags(TAG_MARKER, package.comments).get(GROUP_NAME_TAG)
    if override:
        gv = GroupVersion(group=override[0], version=gv.version)
    return gv, package_name


def group_go_name(package: PackageDescriptor, gv: GroupVersion) -> str:
    """Return the identifier used for a group in generated declarations.

    ``+groupGoName`` wins; otherwise the first dot segment of the group.
    """
    override = extract_comment_tags(TAG_MARKER, package.comments).get(GROUP_GO_NAME_TAG)
    if override:
        return initial_capital(override[0])
    return initial_capital(gv.group_non_empty().split(".")[0])


@dataclass(frozen=True)
class ClassifiedPackage:
    """A package with at least one informable type."""

    package: PackageDescriptor
    group_version: GroupVersion
    package_name: str
    group_go_name: str
    internal: bool
    types: list[TypeDescriptor]


@dataclass(frozen=True)
class Classification:
    """Result of classifying the full package set."""

    packages: list[ClassifiedPackage]
    internal: dict[str, GroupVersions]
    external: dict[str, GroupVersions]
    group_go_names: dict[str, str]
    types_for_group_version: dict[GroupVersion, list[TypeDescriptor]]

    def table(self, internal: bool) -> dict[str, GroupVersions]:
        """Return the internal or external aggregation table."""
        return self.internal if internal else self.external


@dataclass
class ClassificationBuilder:
    """Accumulates group/version tables one package at a time."""

    packages: list[ClassifiedPackage] = field(default_factory=list)
    internal: dict[str, GroupVersions] = field(default_factory=dict)
    external: dict[str, GroupVersions] = field(default_factory=dict)
    group_go_names: dict[str, str] = field(default_factory=dict)
    types_for_group_version: dict[GroupVersion, list[TypeDescriptor]] = field(
        default_factory=dict
    )

    def add_package(self, package: PackageDescriptor) -> ClassifiedPackage | None:
        """Classify a package and register its informable types.

        Args:
            package: Package to classify

        Returns:
            The classified package, or None when it contributes nothing

        Raises:
            ObjectMetaNotFoundError: If generated types lack ObjectMeta
            GroupDerivationError: If no group can be derived from the path
            TagSyntaxError: If any type's tags are malformed
        """
        object_meta = locate_object_meta(package)
        if object_meta is None:
            logger.debug(f"Skipping {package.path}: no types request client generation")
            return None

        internal = object_meta.is_internal
        gv, package_name = derive_group_version(package, internal)
        types = [t for t in package.types if is_informable_type(t)]
        if not types:
            logger.debug(f"Skipping {package.path}: no types support list and watch")
            return None

        go_name = group_go_name(package, gv)
        self.group_go_names[package_name] = go_name
        self.types_for_group_version.setdefault(gv, []).extend(types)

        table = self.internal if internal else self.external
        entry = table.get(package_name)
        if entry is None:
            entry = GroupVersions(package_name=package_name, group=gv.group)
            table[package_name] = entry
        entry.versions.append(
            PackageVersion(version=gv.version, package=posixpath.normpath(package.path))
        )

        classified = ClassifiedPackage(
            package=package,
            group_version=gv,
            package_name=package_name,
            group_go_name=go_name,
            internal=internal,
            types=types,
        )
        self.packages.append(classified)
        logger.debug(
            f"Classified {package.path} as {'internal' if internal else 'external'} "
            f"{gv} with {len(types)} type(s)"
        )
        return classified

    def build(self) -> Classification:
        """Return the accumulated tables."""
        return Classification(
            packages=list(self.packages),
            internal=dict(self.internal),
            external=dict(self.external),
            group_go_names=dict(self.group_go_names),
            types_for_group_version={
                gv: list(types) for gv, types in self.types_for_group_version.items()
            },
        )


def classify_packages(packages: list[PackageDescriptor]) -> Classification:
    """Classify every package in traversal order."""
    builder = ClassificationBuilder()
    for package in packages:
        builder.add_package(package)
    return builder.build()
