"""Shared test fixtures for informergen tests."""

import json
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from typer.testing import CliRunner

from informergen.config import InformerGenConfig, NamingConfig, OutputConfig, PackagesConfig
from informergen.models import Member, PackageDescriptor, TypeDescriptor

EXTERNAL_META = Member(
    name="ObjectMeta",
    type_name="k8s.io/apimachinery/pkg/apis/meta/v1.ObjectMeta",
    tags='json:"metadata,omitempty" protobuf:"bytes,1,opt,name=metadata"',
)
INTERNAL_META = Member(
    name="ObjectMeta",
    type_name="k8s.io/apimachinery/pkg/apis/meta/v1.ObjectMeta",
)
WATCHABLE = ("+genclient",)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_type() -> Callable[..., TypeDescriptor]:
    """Build a type descriptor with an ObjectMeta member."""

    def _make(
        name: str,
        package: str = "k8s.io/api/apps/v1",
        tags: Sequence[str] = WATCHABLE,
        internal: bool = False,
        with_meta: bool = True,
        second_closest: Sequence[str] = (),
    ) -> TypeDescriptor:
        members = []
        if with_meta:
            members.append(INTERNAL_META if internal else EXTERNAL_META)
        return TypeDescriptor(
            name=name,
            package=package,
            comment_lines=tuple(tags),
            second_closest_comment_lines=tuple(second_closest),
            members=tuple(members),
        )

    return _make


@pytest.fixture
def make_package(make_type) -> Callable[..., PackageDescriptor]:
    """Build a package whose types are given by name (or as descriptors)."""

    def _make(
        path: str,
        *types: str | TypeDescriptor,
        comments: Sequence[str] = (),
        internal: bool = False,
        tags: Sequence[str] = WATCHABLE,
    ) -> PackageDescriptor:
        resolved = tuple(
            t if isinstance(t, TypeDescriptor) else make_type(t, path, tags, internal)
            for t in types
        )
        return PackageDescriptor(path=path, comments=tuple(comments), types=resolved)

    return _make


@pytest.fixture
def config() -> InformerGenConfig:
    """Planner config with explicit output and clientset packages."""
    return InformerGenConfig(
        output=OutputConfig(base="out", package="example.com/informers"),
        packages=PackagesConfig(
            internal_clientset="example.com/clientset/internal",
            versioned_clientset="example.com/clientset/versioned",
            listers="example.com/listers",
        ),
        naming=NamingConfig(),
    )


@pytest.fixture
def descriptor_file(tmp_path: Path) -> Callable[[list[PackageDescriptor]], Path]:
    """Write packages to a JSON descriptor document."""

    def _write(packages: list[PackageDescriptor], name: str = "descriptors.json") -> Path:
        path = tmp_path / name
        data = {"packages": [p.model_dump(mode="json") for p in packages]}
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write
