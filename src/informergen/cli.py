"""informergen CLI: plan informer packages for API resource types."""

import typer
from rich.console import Console

from informergen import __version__

from .commands import init, inspect, plan
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"informergen {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="informergen",
    help="Plan informer, factory and interface packages for annotated API types",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging with timestamps",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """informergen - plan informer packages for annotated API types."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color, debug=debug)
    set_output_context(OutputContext(console=Console(no_color=no_color), json_mode=json_output))


app.command()(init)
app.command()(plan)
app.command()(inspect)


if __name__ == "__main__":
    app()
