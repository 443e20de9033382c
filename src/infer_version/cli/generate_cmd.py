"""Generate command for infer-version CLI."""

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ..assembler import assemble_version_info
from ..emitter import render_json, render_python_module, write_generated
from ..exceptions import InferVersionError
from ..settings import DEFAULT_OUTPUT
from .options import build_options, manifest_option, table_option, workdir_option

# Shared instances
console = Console()


class OutputFormat(str, Enum):
    py = "py"
    json = "json"


def generate(
    output: Path = typer.Option(
        Path(DEFAULT_OUTPUT), "--output", "-o", help="File to write", dir_okay=False
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.py, "--format", "-f", help="Python module or JSON document"
    ),
    workdir: Path | None = workdir_option(),
    manifest: str = manifest_option(),
    table: str = table_option(),
):
    """Generate a version module from the manifest, clock and git HEAD.

    Run this as a pre-build step; nothing is written if any source fails.

    Example:
        infer-version generate -o src/myapp/version_info.py
    """
    options = build_options(workdir, manifest, table)

    try:
        info = assemble_version_info(options)
    except InferVersionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1) from e

    if output_format is OutputFormat.json:
        content = render_json(info)
    else:
        content = render_python_module(info)

    try:
        written = write_generated(content, output)
    except InferVersionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1) from e

    output_label = escape(str(output))
    if written:
        console.print(f"[green]✓[/green] Generated {output_label}", soft_wrap=True)
    else:
        console.print(f"[dim]{output_label} is up to date[/dim]", soft_wrap=True)
    console.print(info.format(), markup=False, highlight=False, soft_wrap=True)
