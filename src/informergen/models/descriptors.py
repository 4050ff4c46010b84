"""Descriptor models for annotated API types and their packages.

Descriptors are produced by a front-end that parsed the source type
declarations. The planner treats them as immutable input.
"""

from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
    """A struct member of an API type.

    Attributes:
        name: Member name (e.g. ``ObjectMeta``).
        type_name: Fully qualified name of the member's type.
        tags: Raw serialization tag string (e.g. ``json:"metadata,omitempty"``).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str = ""
    tags: str = ""


class TypeDescriptor(BaseModel):
    """An API resource type definition.

    Attributes:
        name: Type name (e.g. ``Deployment``).
        package: Import path of the owning package.
        comment_lines: Comment block attached directly to the type.
        second_closest_comment_lines: Comment block of the nearest enclosing scope.
        members: Struct members in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    package: str
    comment_lines: tuple[str, ...] = ()
    second_closest_comment_lines: tuple[str, ...] = ()
    members: tuple[Member, ...] = ()

    @property
    def tag_lines(self) -> list[str]:
        """Merged comment lines consulted for client-gen tags."""
        return [*self.second_closest_comment_lines, *self.comment_lines]

    def member(self, name: str) -> Member | None:
        """Return the member called ``name``, if any."""
        return next((m for m in self.members if m.name == name), None)


class PackageDescriptor(BaseModel):
    """A package of API types sharing one import path.

    Attributes:
        path: Import path (e.g. ``k8s.io/api/apps/v1``).
        comments: Package-level comment lines (``+groupName=...`` lives here).
        types: Types declared in the package, in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    comments: tuple[str, ...] = ()
    types: tuple[TypeDescriptor, ...] = ()


class DescriptorSet(BaseModel):
    """Top-level descriptor document: the full input package set."""

    packages: list[PackageDescriptor] = Field(default_factory=list)
