"""Init command implementation."""

from pathlib import Path

import typer

from ..config import write_config_template
from ..constants import DEFAULT_CONFIG_FILE
from ..output import get_output_context


def init(
    path: Path = typer.Option(Path("."), "--path", "-p", help="Directory for the config file"),
) -> None:
    """Write a config template."""
    ctx = get_output_context()

    if not path.is_dir():
        ctx.error(f"Directory not found: {path}")
        raise typer.Exit(1)

    config_path = path / DEFAULT_CONFIG_FILE
    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        return

    write_config_template(path)
    ctx.success(f"Created config template: {config_path}", {"config": str(config_path)})
