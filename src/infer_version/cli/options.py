"""Options shared by the generation commands."""

from pathlib import Path

import typer

from ..assembler import GenerationOptions
from ..settings import MANIFEST_FILE, PACKAGE_TABLE


def workdir_option():
    return typer.Option(
        None,
        "--workdir",
        "-C",
        help="Directory holding the manifest and the git repository",
        file_okay=False,
    )


def manifest_option():
    return typer.Option(MANIFEST_FILE, "--manifest", "-m", help="Manifest file name")


def table_option():
    return typer.Option(
        PACKAGE_TABLE, "--table", help="Manifest table holding name and version"
    )


def build_options(
    workdir: Path | None,
    manifest: str = MANIFEST_FILE,
    table: str = PACKAGE_TABLE,
) -> GenerationOptions:
    """Turn CLI option values into GenerationOptions."""
    if workdir is None:
        return GenerationOptions(manifest_file=manifest, table=table)
    return GenerationOptions(workdir=workdir, manifest_file=manifest, table=table)
