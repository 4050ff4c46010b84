"""Planning of informer output targets.

Planning runs in three phases:
1. Collect: classify every input package into the internal or external table
2. Per group version: one target per package bundling the version interface
   and one informer per type
3. Global: factory interfaces, factory and group targets for each non-empty tree

The result is an ordered list of Target records. Nothing is written to disk.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from ..constants import EXTERNAL_VERSIONS_DIR, INTERNAL_INTERFACES_DIR, INTERNAL_VERSION_DIR
from ..models import (
    FactoryGenerator,
    FactoryInterfacesGenerator,
    GeneratorKind,
    GenericGenerator,
    GenericResource,
    GroupInterfaceGenerator,
    GroupVersion,
    GroupVersions,
    InformerGenerator,
    PackageDescriptor,
    Target,
    TargetKind,
    TypeDescriptor,
    VersionInterfaceGenerator,
)
from .classifier import Classification, ClassificationBuilder, ClassifiedPackage
from .namers import NameSystem, name_systems
from .orderer import order_types
from .tags import is_informable_type

if TYPE_CHECKING:
    from ..config import InformerGenConfig

logger = logging.getLogger(__name__)


def join_path(base: str, *parts: str) -> str:
    """Join slash-separated path segments, dropping empty and ``.`` segments."""
    return PurePosixPath(base, *parts).as_posix()


def internal_interfaces_path(base: str) -> str:
    """Return the internal-interfaces sub-path of an output dir or package."""
    return join_path(base, INTERNAL_INTERFACES_DIR)


@dataclass(frozen=True)
class OutputTree:
    """Output location and clientset for one of the two trees."""

    internal: bool
    output_dir: str
    output_package: str
    clientset_package: str

    @property
    def label(self) -> str:
        return "internal" if self.internal else "external"


def resolve_output_trees(config: "InformerGenConfig") -> tuple[OutputTree, OutputTree]:
    """Resolve the (internal, external) output trees from the config.

    Without ``single_directory`` the trees live under ``internalversion`` and
    ``externalversions``; with it both share the output root.
    """
    base, pkg = config.output.base, config.output.package
    internal_dir = external_dir = base
    internal_pkg = external_pkg = pkg
    if not config.output.single_directory:
        internal_dir = join_path(base, INTERNAL_VERSION_DIR)
        internal_pkg = join_path(pkg, INTERNAL_VERSION_DIR)
        external_dir = join_path(base, EXTERNAL_VERSIONS_DIR)
        external_pkg = join_path(pkg, EXTERNAL_VERSIONS_DIR)
    return (
        OutputTree(True, internal_dir, internal_pkg, config.packages.internal_clientset),
        OutputTree(False, external_dir, external_pkg, config.packages.versioned_clientset),
    )


def version_target(
    tree: OutputTree,
    classified: ClassifiedPackage,
    types: list[TypeDescriptor],
    listers_package: str,
    header: bytes,
) -> Target:
    """Build the target for one group version."""
    gv = classified.group_version
    version_pkg_name = gv.version_non_empty().lower()
    subdir = join_path(classified.package_name, version_pkg_name)
    output_pkg = join_path(tree.output_package, subdir)
    internal_interfaces = internal_interfaces_path(tree.output_package)

    generators = [
        VersionInterfaceGenerator(
            name="interface",
            output_package=output_pkg,
            types=types,
            internal_interfaces_package=internal_interfaces,
        )
    ]
    generators.extend(
        InformerGenerator(
            name=t.name.lower(),
            output_package=output_pkg,
            group_package_name=classified.package_name,
            group_version=gv,
            group_go_name=classified.group_go_name,
            type=t,
            clientset_package=tree.clientset_package,
            listers_package=listers_package,
            internal_interfaces_package=internal_interfaces,
        )
        for t in types
    )
    return Target(
        kind=TargetKind.VERSION_INTERFACE,
        package_name=version_pkg_name,
        package_path=output_pkg,
        package_dir=join_path(tree.output_dir, subdir),
        header=header,
        generators=generators,
        filter=is_informable_type,
    )


def factory_interfaces_target(tree: OutputTree, header: bytes) -> Target:
    """Build the target declaring the shared factory abstraction."""
    output_dir = internal_interfaces_path(tree.output_dir)
    output_pkg = internal_interfaces_path(tree.output_package)
    return Target(
        kind=TargetKind.FACTORY_INTERFACES,
        package_name=PurePosixPath(output_dir).name,
        package_path=output_pkg,
        package_dir=output_dir,
        header=header,
        generators=[
            FactoryInterfacesGenerator(
                name="factory_interfaces",
                output_package=output_pkg,
                clientset_package=tree.clientset_package,
            )
        ],
    )


def generic_resources(
    group_versions: Iterable[GroupVersions],
    types_for_group_version: Mapping[GroupVersion, list[TypeDescriptor]],
    plural_exceptions: Mapping[str, str],
) -> list[GenericResource]:
    """Resolve the generic accessor entries for every group version in a tree."""
    namers = name_systems(plural_exceptions)
    plural = namers[NameSystem.PUBLIC_PLURAL]
    resource = namers[NameSystem.ALL_LOWERCASE_PLURAL]

    resources = []
    for gvs in group_versions:
        for pv in gvs.versions:
            gv = GroupVersion(group=gvs.group, version=pv.version)
            for t in order_types(types_for_group_version.get(gv, [])):
                resources.append(
                    GenericResource(
                        group_version=gv,
                        type_name=t.name,
                        plural=plural.name(t),
                        resource=resource.name(t),
                    )
                )
    return resources


def factory_target(
    tree: OutputTree,
    group_versions: dict[str, GroupVersions],
    classification: Classification,
    plural_exceptions: Mapping[str, str],
    header: bytes,
) -> Target:
    """Build the target holding the informer factory and generic accessor."""
    gvs_list = list(group_versions.values())
    return Target(
        kind=TargetKind.FACTORY,
        package_name=PurePosixPath(tree.output_dir).name,
        package_path=tree.output_package,
        package_dir=tree.output_dir,
        header=header,
        generators=[
            FactoryGenerator(
                name="factory",
                output_package=tree.output_package,
                clientset_package=tree.clientset_package,
                internal_interfaces_package=internal_interfaces_path(tree.output_package),
                group_versions=gvs_list,
                group_go_names=classification.group_go_names,
            ),
            GenericGenerator(
                name="generic",
                output_package=tree.output_package,
                group_versions=gvs_list,
                group_go_names=classification.group_go_names,
                plural_exceptions=dict(plural_exceptions),
                resources=generic_resources(
                    gvs_list, classification.types_for_group_version, plural_exceptions
                ),
            ),
        ],
    )


def group_target(tree: OutputTree, group_versions: GroupVersions, header: bytes) -> Target:
    """Build the per-group interface target."""
    output_pkg = join_path(tree.output_package, group_versions.package_name)
    return Target(
        kind=TargetKind.GROUP_INTERFACE,
        package_name=group_versions.package_name.split(".")[0],
        package_path=output_pkg,
        package_dir=join_path(tree.output_dir, group_versions.package_name),
        header=header,
        generators=[
            GroupInterfaceGenerator(
                name="interface",
                output_package=output_pkg,
                group_versions=group_versions,
                internal_interfaces_package=internal_interfaces_path(tree.output_package),
            )
        ],
        filter=is_informable_type,
    )


def global_targets(
    tree: OutputTree,
    classification: Classification,
    plural_exceptions: Mapping[str, str],
    header: bytes,
) -> list[Target]:
    """Build the factory and group targets for one tree, if it has any groups."""
    table = classification.table(tree.internal)
    if not table:
        return []
    targets = [
        factory_interfaces_target(tree, header),
        factory_target(tree, table, classification, plural_exceptions, header),
    ]
    targets.extend(group_target(tree, gvs, header) for gvs in table.values())
    return targets


def plan_targets(
    packages: Iterable[PackageDescriptor],
    config: "InformerGenConfig",
    header: bytes = b"",
) -> list[Target]:
    """Plan every output target for a package set.

    Args:
        packages: Input packages in traversal order
        config: Planner configuration
        header: Boilerplate attached verbatim to every target

    Returns:
        Ordered target list: version targets in package order, then the
        external tree's global targets, then the internal tree's

    Raises:
        InformerGenError: On any malformed tag, plural exception or package
    """
    plural_exceptions = config.naming.plural_exception_map()
    internal_tree, external_tree = resolve_output_trees(config)

    builder = ClassificationBuilder()
    targets: list[Target] = []
    for package in packages:
        classified = builder.add_package(package)
        if classified is None:
            continue
        tree = internal_tree if classified.internal else external_tree
        target = version_target(
            tree,
            classified,
            order_types(classified.types),
            config.packages.listers,
            header,
        )
        logger.debug(f"Planned {tree.label} target {target.package_path}")
        targets.append(target)

    classification = builder.build()
    if config.output.single_directory and classification.internal and classification.external:
        logger.warning(
            "single_directory is set but both internal and external packages were found; "
            f"both trees resolve to {config.output.base}"
        )

    targets.extend(global_targets(external_tree, classification, plural_exceptions, header))
    targets.extend(global_targets(internal_tree, classification, plural_exceptions, header))

    logger.info(
        f"Planned {len(targets)} target(s) for {len(classification.packages)} package(s)"
    )
    return targets


@dataclass(frozen=True)
class PlanSummary:
    """Target counts per kind and the planned package paths."""

    counts: dict[str, int]
    package_paths: list[str]
    informer_count: int


def summarize_targets(targets: list[Target]) -> PlanSummary:
    """Summarize a plan for display."""
    counts: dict[str, int] = {}
    informers = 0
    for target in targets:
        counts[target.kind.value] = counts.get(target.kind.value, 0) + 1
        informers += sum(1 for g in target.generators if g.kind == GeneratorKind.INFORMER)
    return PlanSummary(
        counts=counts,
        package_paths=[t.package_path for t in targets],
        informer_count=informers,
    )
