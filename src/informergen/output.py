"""Text and JSON rendering for informergen commands."""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.table import Table


@dataclass
class OutputContext:
    """Where command results go and in which form.

    In JSON mode only machine-readable documents reach stdout; console
    messages and tables are dropped.
    """

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print a console message unless in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: Any) -> None:
        """Write ``data`` to stdout as JSON when in JSON mode."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def report(
        self,
        data: Any,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
    ) -> None:
        """Emit a command result.

        Args:
            data: JSON document written in JSON mode
            title: Table title in text mode
            columns: Table headers in text mode
            rows: Table cells in text mode, one sequence per row
        """
        if self.json_mode:
            self.print_json(data)
            return
        table = Table(title=title)
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*row)
        self.console.print(table)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report a failure; JSON mode merges ``data`` into the error document."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {message}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{message}[/green]")


# Set by the cli.py main callback
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Return the CLI's output context, or a plain console one outside the CLI."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext | None) -> None:
    global _ctx
    _ctx = ctx
