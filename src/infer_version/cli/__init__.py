"""CLI package for infer-version.

- main: Typer application and global options
- generate_cmd: write the generated version module
- show_cmd: print version information without writing anything
"""

from .main import app

__all__ = ["app"]
