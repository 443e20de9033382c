"""Main CLI application for infer-version."""

import logging

import typer
from rich.logging import RichHandler

from ..settings import APP_NAME, VERSION
from .generate_cmd import generate
from .show_cmd import show

# Create main Typer app
app = typer.Typer(
    name=APP_NAME,
    help="Generate version, build and git revision constants at build time",
    no_args_is_help=True,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log each generation step"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the infer-version version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Generate version, build and git revision constants at build time."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


# Register commands
app.command("generate")(generate)
app.command("show")(show)
