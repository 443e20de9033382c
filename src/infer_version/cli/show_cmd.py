"""Show command for infer-version CLI."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ..assembler import assemble_version_info
from ..exceptions import InferVersionError
from .options import build_options, manifest_option, table_option, workdir_option

# Shared instances
console = Console()


def show(
    full: bool = typer.Option(False, "--full", help="Print the multi-line form"),
    workdir: Path | None = workdir_option(),
    manifest: str = manifest_option(),
    table: str = table_option(),
):
    """Print the version information a build would get, without writing it."""
    options = build_options(workdir, manifest, table)

    try:
        info = assemble_version_info(options)
    except InferVersionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1) from e

    text = info.format_full() if full else info.format()
    console.print(text, markup=False, highlight=False, soft_wrap=True)
