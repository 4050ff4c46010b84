"""Comment-tag extraction and +genclient tag parsing.

Tags are comment lines of the form ``+name`` or ``+name=value``. A type's
client-gen tags decide whether an informer is planned for it.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from ..constants import TAG_MARKER
from ..models import TypeDescriptor
from .errors import TagSyntaxError

GENCLIENT = "genclient"
GENCLIENT_PREFIX = "genclient:"

SUPPORTED_VERBS = (
    "create",
    "update",
    "updateStatus",
    "delete",
    "deleteCollection",
    "get",
    "list",
    "watch",
    "patch",
    "apply",
    "applyStatus",
)
READONLY_VERBS = ("get", "list", "watch")

SUPPORTED_TAGS = frozenset(
    {
        GENCLIENT,
        GENCLIENT_PREFIX + "nonNamespaced",
        GENCLIENT_PREFIX + "noVerbs",
        GENCLIENT_PREFIX + "noStatus",
        GENCLIENT_PREFIX + "readonly",
        GENCLIENT_PREFIX + "onlyVerbs",
        GENCLIENT_PREFIX + "skipVerbs",
        GENCLIENT_PREFIX + "method",
    }
)


def extract_comment_tags(marker: str, lines: Iterable[str]) -> dict[str, list[str]]:
    """Collect ``marker``-prefixed tags from comment lines.

    Each matching line is split once on ``=``. Values accumulate per tag
    name in line order; a tag without ``=`` contributes an empty value.

    Args:
        marker: Tag prefix, usually ``+``
        lines: Comment lines, with comment markers already stripped

    Returns:
        Mapping of tag name to its values
    """
    out: dict[str, list[str]] = {}
    for line in lines:
        line = line.strip(" ")
        if not line or not line.startswith(marker):
            continue
        name, _, value = line[len(marker) :].partition("=")
        out.setdefault(name, []).append(value)
    return out


class ClientGenTags(BaseModel):
    """Parsed +genclient tags of one type.

    Attributes:
        generate: ``+genclient`` is present.
        non_namespaced: ``+genclient:nonNamespaced`` is present.
        no_verbs: ``+genclient:noVerbs`` is present.
        no_status: ``+genclient:noStatus`` is present.
        verbs: Verbs the generated client supports.
    """

    model_config = ConfigDict(frozen=True)

    generate: bool = False
    non_namespaced: bool = False
    no_verbs: bool = False
    no_status: bool = False
    verbs: frozenset[str] = frozenset(SUPPORTED_VERBS)

    @property
    def skip_verbs(self) -> list[str]:
        """Supported verbs not generated for the type, in canonical order."""
        return [v for v in SUPPORTED_VERBS if v not in self.verbs]

    def has_verb(self, verb: str) -> bool:
        """Return True if the client for this type supports ``verb``."""
        return not self.no_verbs and verb in self.verbs

    def is_informable(self) -> bool:
        """Return True if an informer can be generated for this type."""
        return self.generate and self.has_verb("list") and self.has_verb("watch")


def _split_verbs(value: str, tag: str) -> list[str]:
    verbs = [v.strip() for v in value.split(",") if v.strip()]
    unknown = [v for v in verbs if v not in SUPPORTED_VERBS]
    if unknown:
        raise TagSyntaxError(f"+{tag} names unsupported verbs: {', '.join(unknown)}")
    return verbs


def parse_client_gen_tags(lines: Iterable[str]) -> ClientGenTags:
    """Parse +genclient tags from a type's merged comment lines.

    Args:
        lines: Comment lines of the enclosing scope followed by the type's own

    Returns:
        Parsed tags

    Raises:
        TagSyntaxError: If a tag uses an invalid or legacy form, or a
            +genclient tag is not recognised
    """
    values = extract_comment_tags(TAG_MARKER, lines)

    genclient = values.get(GENCLIENT)
    if genclient is not None and genclient[0]:
        raise TagSyntaxError(
            f"+genclient={genclient[0]} is invalid, use +genclient to generate a client "
            "or omit it to disable generation"
        )
    for legacy in ("nonNamespaced", "readonly"):
        value = values.get(legacy, [""])[0]
        if value:
            raise TagSyntaxError(
                f"+{legacy}={value} is invalid, use +genclient:{legacy} instead"
            )

    unknown = [k for k in values if k.startswith(GENCLIENT) and k not in SUPPORTED_TAGS]
    if unknown:
        raise TagSyntaxError(f"unknown tag detected: {', '.join('+' + k for k in unknown)}")

    only_verbs: list[str] = []
    readonly = GENCLIENT_PREFIX + "readonly" in values
    if readonly:
        only_verbs.extend(READONLY_VERBS)
    only = values.get(GENCLIENT_PREFIX + "onlyVerbs")
    if only is not None:
        only_verbs.extend(_split_verbs(only[0], "genclient:onlyVerbs"))

    skip = values.get(GENCLIENT_PREFIX + "skipVerbs")
    skip_verbs = _split_verbs(skip[0], "genclient:skipVerbs") if skip is not None else []

    if readonly or only is not None:
        conflicts = sorted(set(only_verbs) & set(skip_verbs))
        if conflicts:
            raise TagSyntaxError(
                f"verbs {', '.join(conflicts)} used in both genclient:skipVerbs "
                "and genclient:onlyVerbs"
            )
        verbs = frozenset(only_verbs)
    else:
        verbs = frozenset(SUPPORTED_VERBS) - set(skip_verbs)

    return ClientGenTags(
        generate=genclient is not None,
        non_namespaced=GENCLIENT_PREFIX + "nonNamespaced" in values,
        no_verbs=GENCLIENT_PREFIX + "noVerbs" in values,
        no_status=GENCLIENT_PREFIX + "noStatus" in values,
        verbs=verbs,
    )


def must_parse_client_gen_tags(lines: Iterable[str]) -> ClientGenTags:
    """Parse +genclient tags, naming the offending lines on failure."""
    lines = list(lines)
    try:
        return parse_client_gen_tags(lines)
    except TagSyntaxError as e:
        raise TagSyntaxError(f"{e} (in comment lines {lines!r})") from e


def is_informable_type(t: TypeDescriptor) -> bool:
    """Return True if an informer is planned for ``t``.

    Used both to select types while classifying and as the target filter,
    so planning and emission agree on the same set of types.
    """
    return must_parse_client_gen_tags(t.tag_lines).is_informable()
