"""Target and generator records handed to the emission stage.

A Target is one output package. Its generator records name the files that
belong in it and carry everything the emitter needs to render them.
"""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .descriptors import TypeDescriptor
from .group_version import GroupVersion, GroupVersions


class TargetKind(str, Enum):
    """Kinds of planned output packages."""

    FACTORY_INTERFACES = "factory_interfaces"
    FACTORY = "factory"
    GROUP_INTERFACE = "group_interface"
    VERSION_INTERFACE = "version_interface"


class GeneratorKind(str, Enum):
    """Kinds of generators a target may bundle."""

    FACTORY_INTERFACES = "factory_interfaces"
    FACTORY = "factory"
    GENERIC = "generic"
    GROUP_INTERFACE = "group_interface"
    VERSION_INTERFACE = "version_interface"
    INFORMER = "informer"


class GeneratorSpec(BaseModel):
    """Base record for one generated file.

    Attributes:
        kind: Which generator renders the file.
        name: Output file stem, unique within the target.
        output_package: Package path the file belongs to.
    """

    model_config = ConfigDict(frozen=True)

    kind: GeneratorKind
    name: str
    output_package: str


class FactoryInterfacesGenerator(GeneratorSpec):
    """Declares the shared factory abstraction used by every informer."""

    kind: GeneratorKind = GeneratorKind.FACTORY_INTERFACES
    clientset_package: str


class FactoryGenerator(GeneratorSpec):
    """Declares the shared informer factory and its per-group accessors."""

    kind: GeneratorKind = GeneratorKind.FACTORY
    clientset_package: str
    internal_interfaces_package: str
    group_versions: list[GroupVersions]
    group_go_names: dict[str, str]


class GenericResource(BaseModel):
    """A type exposed through the generic informer accessor."""

    model_config = ConfigDict(frozen=True)

    group_version: GroupVersion
    type_name: str
    plural: str
    resource: str


class GenericGenerator(GeneratorSpec):
    """Declares the generic accessor keyed by group/version/resource."""

    kind: GeneratorKind = GeneratorKind.GENERIC
    group_versions: list[GroupVersions]
    group_go_names: dict[str, str]
    plural_exceptions: dict[str, str]
    resources: list[GenericResource]


class GroupInterfaceGenerator(GeneratorSpec):
    """Declares the per-group interface returning each version's interface."""

    kind: GeneratorKind = GeneratorKind.GROUP_INTERFACE
    group_versions: GroupVersions
    internal_interfaces_package: str


class VersionInterfaceGenerator(GeneratorSpec):
    """Declares the per-version interface returning each type's informer."""

    kind: GeneratorKind = GeneratorKind.VERSION_INTERFACE
    types: list[TypeDescriptor]
    internal_interfaces_package: str


class InformerGenerator(GeneratorSpec):
    """Declares the informer for a single resource type."""

    kind: GeneratorKind = GeneratorKind.INFORMER
    group_package_name: str
    group_version: GroupVersion
    group_go_name: str
    type: TypeDescriptor
    clientset_package: str
    listers_package: str
    internal_interfaces_package: str


TypeFilter = Callable[[TypeDescriptor], bool]


class Target(BaseModel):
    """A planned output package.

    Attributes:
        kind: What the package provides.
        package_name: Package name used in generated declarations.
        package_path: Import path of the package.
        package_dir: Directory the emitter writes the package into.
        header: Boilerplate bytes prepended to every file. Base64-encoded in
            JSON.
        generators: Files to render, in emission order.
        filter: Optional predicate restricting the types the emitter may use.
    """

    model_config = ConfigDict(frozen=True, ser_json_bytes="base64", val_json_bytes="base64")

    kind: TargetKind
    package_name: str
    package_path: str
    package_dir: str
    header: bytes = b""
    generators: list[SerializeAsAny[GeneratorSpec]] = Field(default_factory=list)
    filter: TypeFilter | None = Field(default=None, exclude=True)

    def applies_to(self, t: TypeDescriptor) -> bool:
        """Return True if the emitter may render ``t`` in this target."""
        return self.filter is None or self.filter(t)

    def generator_names(self) -> list[str]:
        """Names of the bundled generators, in order."""
        return [g.name for g in self.generators]
