"""Configuration management for informergen."""

import tomllib
from collections.abc import Mapping
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_CONFIG_FILE, DEFAULT_PLURAL_EXCEPTIONS
from .core.errors import PluralExceptionError
from .core.plural_exceptions import parse_plural_exceptions


class OutputConfig(BaseModel):
    """Where planned packages are written."""

    base: str = "."  # Output directory root
    package: str = ""  # Import path corresponding to base
    single_directory: bool = Field(
        default=False,
        description="Write internal and external trees directly into base",
    )


class PackagesConfig(BaseModel):
    """Packages that generated informers import."""

    internal_clientset: str = ""
    versioned_clientset: str = ""
    listers: str = ""


class NamingConfig(BaseModel):
    """Naming overrides."""

    plural_exceptions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PLURAL_EXCEPTIONS),
        description="Irregular plurals as Singular=Plural",
    )

    @field_validator("plural_exceptions")
    @classmethod
    def validate_plural_exceptions(cls, value: list[str]) -> list[str]:
        """Reject malformed or duplicate entries at construction time."""
        try:
            parse_plural_exceptions(value)
        except PluralExceptionError as e:
            raise ValueError(str(e)) from e
        return value

    def plural_exception_map(self) -> Mapping[str, str]:
        """Return the parsed, read-only exception table."""
        return parse_plural_exceptions(self.plural_exceptions)


class InformerGenConfig(BaseModel):
    """Root configuration for informergen."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    packages: PackagesConfig = Field(default_factory=PackagesConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    boilerplate: str | None = None  # Path to the header file, relative to the config


def load_config(config_path: Path) -> InformerGenConfig:
    """Load config from a TOML file.

    Args:
        config_path: Path to the config file

    Returns:
        Loaded configuration, or defaults if the file doesn't exist
    """
    if not config_path.exists():
        return InformerGenConfig()
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return InformerGenConfig.model_validate(data)


def load_boilerplate(config: InformerGenConfig, config_dir: Path | None = None) -> bytes:
    """Read the boilerplate header referenced by the config.

    Args:
        config: Loaded configuration
        config_dir: Directory relative boilerplate paths are resolved against

    Returns:
        Header bytes, or empty bytes when no boilerplate is configured
    """
    if not config.boilerplate:
        return b""
    path = Path(config.boilerplate)
    if not path.is_absolute() and config_dir is not None:
        path = config_dir / path
    return path.read_bytes()


def write_config_template(directory: Path) -> Path:
    """Write default config template.

    Args:
        directory: Directory to write the config into

    Returns:
        Path to the written config file
    """
    config_path = directory / DEFAULT_CONFIG_FILE
    template = {
        "output": {
            "base": "pkg/client/informers",
            "package": "example.com/project/pkg/client/informers",
            "single_directory": False,
        },
        "packages": {
            "internal_clientset": "example.com/project/pkg/client/clientset/internalclientset",
            "versioned_clientset": "example.com/project/pkg/client/clientset/versioned",
            "listers": "example.com/project/pkg/client/listers",
        },
        "naming": {"plural_exceptions": list(DEFAULT_PLURAL_EXCEPTIONS)},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
