"""Group/version identity and per-group aggregation records."""

from pydantic import BaseModel, ConfigDict, Field


class GroupVersion(BaseModel):
    """Identity of one API package: a group and a version.

    The version is empty for internal (unversioned) packages.
    """

    model_config = ConfigDict(frozen=True)

    group: str
    version: str = ""

    def group_non_empty(self) -> str:
        """Group name, with the legacy empty group reported as ``core``."""
        return self.group or "core"

    def version_non_empty(self) -> str:
        """Version name, with the internal version reported as ``internalVersion``."""
        return self.version or "internalVersion"

    def __str__(self) -> str:
        if not self.version:
            return self.group_non_empty()
        return f"{self.group_non_empty()}/{self.version}"


class PackageVersion(BaseModel):
    """A version of a group together with the package it was read from."""

    model_config = ConfigDict(frozen=True)

    version: str
    package: str


class GroupVersions(BaseModel):
    """All versions seen for one group.

    Versions are kept in traversal order, not sorted. Records only grow
    while packages are classified.

    Attributes:
        package_name: Output slug for the group (path-derived group name).
        group: Resolved group name, after any ``+groupName`` override.
        versions: (version, source package) pairs in traversal order.
    """

    package_name: str
    group: str
    versions: list[PackageVersion] = Field(default_factory=list)
