"""guard-ui command line: push messages through the console pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from guard._version import get_version
from guard.config import GuardSettings
from guard.errors import GuardError
from guard.logging import configure_logging
from guard.ui.attribution import DEFAULT_PLUGIN_NAME
from guard.ui.colors import STYLES, colorize
from guard.ui.pipeline import UI

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="guard-ui",
    help="Guard console output - format and filter plugin messages",
    add_completion=False,
    no_args_is_help=True,
)


class MessageKind(str, Enum):
    info = "info"
    warning = "warning"
    error = "error"
    debug = "debug"
    deprecation = "deprecation"


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Level for guard-ui's own diagnostics")
    ] = None,
) -> None:
    """Guard console output."""
    configure_logging(level=log_level or GuardSettings().log_level)


@app.command()
def say(
    message: Annotated[str, typer.Argument(help="Message to show")],
    kind: Annotated[MessageKind, typer.Option("--kind", "-k", help="Message kind")] = MessageKind.info,
    plugin: Annotated[str | None, typer.Option("--plugin", "-p", help="Plugin to attribute")] = None,
    level: Annotated[str, typer.Option("--level", "-l", help="Minimum level shown")] = "info",
    only: Annotated[str | None, typer.Option("--only", help="Only show matching plugins")] = None,
    except_: Annotated[
        str | None, typer.Option("--except", help="Hide matching plugins")
    ] = None,
    reset: Annotated[bool, typer.Option("--reset", help="Reset the line first")] = False,
    show_deprecations: Annotated[
        bool | None,
        typer.Option("--show-deprecations/--hide-deprecations", help="Show deprecation messages"),
    ] = None,
) -> None:
    """Show a message the way a plugin would."""
    settings = GuardSettings()
    if show_deprecations is not None:
        settings = settings.model_copy(update={"show_deprecations": show_deprecations})

    try:
        ui = UI({"level": level, "only": only, "except": except_}, settings=settings)
    except GuardError as e:
        err_console.print(f"[red]✗[/red] {e.message}")
        raise typer.Exit(1) from None

    getattr(ui, kind.value)(message, reset=reset, plugin=plugin or DEFAULT_PLUGIN_NAME)


@app.command()
def colors() -> None:
    """List the available color and style names."""
    table = Table(title="Styles", box=box.SIMPLE_HEAD, header_style="bold cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Code", justify="right")
    table.add_column("Sample")
    for name, code in STYLES.items():
        table.add_row(name, code, Text.from_ansi(colorize("Guard", name)))
    console.print(table)


@app.command()
def version() -> None:
    """Show the guard-ui version."""
    console.print(get_version())


if __name__ == "__main__":
    app()
