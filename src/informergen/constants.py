"""Constants for informergen."""

# Output sub-paths
INTERNAL_VERSION_DIR = "internalversion"
EXTERNAL_VERSIONS_DIR = "externalversions"
INTERNAL_INTERFACES_DIR = "internalinterfaces"

# Member name and tag marker used to split internal from external packages
OBJECT_META_MEMBER = "ObjectMeta"
SERIALIZATION_MARKER = "json"

# Comment tag marker and package-level override keys
TAG_MARKER = "+"
GROUP_NAME_TAG = "groupName"
GROUP_GO_NAME_TAG = "groupGoName"

DEFAULT_PLURAL_EXCEPTIONS = ["Endpoints=Endpoints"]
DEFAULT_CONFIG_FILE = "informergen.toml"
