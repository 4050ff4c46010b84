"""Core planning logic for informergen.

This package contains pure planning logic with no output I/O:
- tags: +genclient comment-tag parsing
- object_meta: ObjectMeta lookup and internal/external split
- classifier: group/version derivation and aggregation tables
- namers: name systems for ordering and plural resolution
- orderer: deterministic type ordering
- plural_exceptions: Singular=Plural override parsing
- planner: target planning
- descriptor_loader: reading descriptor documents
"""

from .classifier import (
    Classification,
    ClassificationBuilder,
    ClassifiedPackage,
    classify_packages,
    derive_group_version,
    group_go_name,
)
from .descriptor_loader import load_descriptors
from .errors import (
    ConfigurationError,
    DescriptorLoadError,
    GroupDerivationError,
    InformerGenError,
    ObjectMetaNotFoundError,
    PluralExceptionError,
    StructuralError,
    TagSyntaxError,
)
from .namers import NameSystem, Namer, name_systems, pluralize
from .object_meta import ObjectMetaResult, locate_object_meta
from .orderer import order_types
from .planner import PlanSummary, plan_targets, resolve_output_trees, summarize_targets
from .plural_exceptions import parse_plural_exceptions
from .tags import (
    ClientGenTags,
    extract_comment_tags,
    is_informable_type,
    must_parse_client_gen_tags,
    parse_client_gen_tags,
)

__all__ = [
    "Classification",
    "ClassificationBuilder",
    "ClassifiedPackage",
    "ClientGenTags",
    "ConfigurationError",
    "DescriptorLoadError",
    "GroupDerivationError",
    "InformerGenError",
    "NameSystem",
    "Namer",
    "ObjectMetaNotFoundError",
    "ObjectMetaResult",
    "PlanSummary",
    "PluralExceptionError",
    "StructuralError",
    "TagSyntaxError",
    "classify_packages",
    "derive_group_version",
    "extract_comment_tags",
    "group_go_name",
    "is_informable_type",
    "load_descriptors",
    "locate_object_meta",
    "must_parse_client_gen_tags",
    "name_systems",
    "order_types",
    "parse_client_gen_tags",
    "parse_plural_exceptions",
    "plan_targets",
    "pluralize",
    "resolve_output_trees",
    "summarize_targets",
]
