"""Loading descriptor documents produced by a parsing front-end.

Documents are JSON or TOML with a top-level ``packages`` array.
"""

import json
import tomllib
from pathlib import Path

from pydantic import ValidationError

from ..models import DescriptorSet, PackageDescriptor
from .errors import DescriptorLoadError


def load_descriptors(path: Path) -> list[PackageDescriptor]:
    """Load packages from a descriptor document.

    Args:
        path: ``.json`` or ``.toml`` file

    Returns:
        Packages in document order

    Raises:
        DescriptorLoadError: If the file is missing, unreadable or invalid
    """
    if not path.exists():
        raise DescriptorLoadError(f"Descriptor file not found: {path}")

    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        else:
            data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise DescriptorLoadError(f"Failed to read {path}: {e}") from e

    try:
        return DescriptorSet.model_validate(data).packages
    except ValidationError as e:
        raise DescriptorLoadError(f"Invalid descriptor document {path}: {e}") from e
