"""Errors raised while planning informer targets.

Every error here is fatal: planning is a deterministic computation over the
descriptor set, so there is nothing to retry and no partial plan to keep.
"""


class InformerGenError(Exception):
    """Base exception for informergen errors."""


class ConfigurationError(InformerGenError):
    """Raised when tags, plural exceptions or input documents are malformed."""


class TagSyntaxError(ConfigurationError):
    """Raised when a +genclient comment tag cannot be parsed."""


class PluralExceptionError(ConfigurationError):
    """Raised when a Singular=Plural entry is malformed or duplicated."""


class DescriptorLoadError(ConfigurationError):
    """Raised when a descriptor document cannot be read or validated."""


class StructuralError(InformerGenError):
    """Raised when a package cannot be classified into a group version."""


class ObjectMetaNotFoundError(StructuralError):
    """Raised when a generated package has no type carrying ObjectMeta."""

    def __init__(self, package_path: str) -> None:
        super().__init__(f"unable to find ObjectMeta for any types in package {package_path}")
        self.package_path = package_path


class GroupDerivationError(StructuralError):
    """Raised when no group can be derived from a package path."""

    def __init__(self, package_path: str) -> None:
        super().__init__(f"error constructing group version for package {package_path!r}")
        self.package_path = package_path
