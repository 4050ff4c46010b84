"""Plan and inspect command implementations."""

import tomllib
from pathlib import Path

import typer
from pydantic import ValidationError

from ..config import InformerGenConfig, load_boilerplate, load_config
from ..constants import DEFAULT_CONFIG_FILE
from ..core import (
    ConfigurationError,
    StructuralError,
    classify_packages,
    load_descriptors,
    plan_targets,
    summarize_targets,
)
from ..models import PackageDescriptor
from ..output import OutputContext, get_output_context


def _load_inputs(
    ctx: OutputContext, descriptors: Path, config_path: Path
) -> tuple[list[PackageDescriptor], InformerGenConfig]:
    try:
        config = load_config(config_path)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        ctx.error(f"Invalid config {config_path}: {e}")
        raise typer.Exit(1) from None
    try:
        packages = load_descriptors(descriptors)
    except ConfigurationError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None
    return packages, config


def _apply_overrides(
    config: InformerGenConfig,
    output_base: str | None,
    output_package: str | None,
    single_directory: bool | None,
) -> InformerGenConfig:
    update: dict[str, object] = {}
    if output_base is not None:
        update["base"] = output_base
    if output_package is not None:
        update["package"] = output_package
    if single_directory is not None:
        update["single_directory"] = single_directory
    if not update:
        return config
    return config.model_copy(update={"output": config.output.model_copy(update=update)})


def plan(
    descriptors: Path = typer.Option(
        ..., "--descriptors", "-d", help="Descriptor document (.json or .toml)"
    ),
    config_path: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE), "--config", "-c", help="Config file"
    ),
    output_base: str | None = typer.Option(None, "--output-base", help="Output directory root"),
    output_package: str | None = typer.Option(
        None, "--output-package", help="Import path of the output root"
    ),
    single_directory: bool | None = typer.Option(
        None,
        "--single-directory/--split-directories",
        help="Put internal and external trees directly under the output root",
    ),
) -> None:
    """Plan informer targets for a descriptor set."""
    ctx = get_output_context()
    packages, config = _load_inputs(ctx, descriptors, config_path)
    config = _apply_overrides(config, output_base, output_package, single_directory)

    try:
        header = load_boilerplate(config, config_path.parent)
    except OSError as e:
        ctx.error(f"Failed loading boilerplate: {e}")
        raise typer.Exit(1) from None

    try:
        targets = plan_targets(packages, config, header)
    except ConfigurationError as e:
        ctx.error(str(e), {"kind": "configuration"})
        raise typer.Exit(1) from None
    except StructuralError as e:
        ctx.error(str(e), {"kind": "structural"})
        raise typer.Exit(2) from None

    ctx.report(
        [t.model_dump(mode="json") for t in targets],
        "Planned targets",
        ["Kind", "Package", "Directory", "Generators"],
        [
            [t.kind.value, t.package_path, t.package_dir, ", ".join(t.generator_names())]
            for t in targets
        ],
    )
    summary = summarize_targets(targets)
    ctx.print(
        f"[bold]{len(targets)}[/bold] target(s), "
        f"[bold]{summary.informer_count}[/bold] informer(s)"
    )


def inspect(
    descriptors: Path = typer.Option(
        ..., "--descriptors", "-d", help="Descriptor document (.json or .toml)"
    ),
) -> None:
    """Show how each package is classified."""
    ctx = get_output_context()
    try:
        packages = load_descriptors(descriptors)
        classification = classify_packages(packages)
    except ConfigurationError as e:
        ctx.error(str(e), {"kind": "configuration"})
        raise typer.Exit(1) from None
    except StructuralError as e:
        ctx.error(str(e), {"kind": "structural"})
        raise typer.Exit(2) from None

    rows = [
        {
            "package": c.package.path,
            "tree": "internal" if c.internal else "external",
            "group": c.group_version.group,
            "version": c.group_version.version,
            "group_go_name": c.group_go_name,
            "types": [t.name for t in c.types],
        }
        for c in classification.packages
    ]
    ctx.report(
        rows,
        "Classified packages",
        ["Package", "Tree", "Group", "Version", "Go name", "Types"],
        [
            [
                r["package"],
                r["tree"],
                r["group"],
                r["version"] or "-",
                r["group_go_name"],
                ", ".join(r["types"]),
            ]
            for r in rows
        ],
    )
    skipped = len(packages) - len(rows)
    if skipped:
        ctx.print(f"[dim]{skipped} package(s) contributed no informers[/dim]")
