"""Render version information as a generated source file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from .assembler import VersionInfo
from .exceptions import OutputWriteError
from .settings import APP_NAME, FULL_TEMPLATE, SHORT_SHA_LENGTH, SHORT_TEMPLATE

logger = logging.getLogger(__name__)

HEADER = f"# Auto-generated by {APP_NAME} at build time - DO NOT EDIT"


def _fstring_body(template: str) -> str:
    # Rewrite a settings template so it reads the emitted constants
    return template.format(
        bin_name="{BIN_NAME}",
        version="{VERSION}",
        short_sha=f"{{GIT_SHA1[:{SHORT_SHA_LENGTH}]}}",
        git_sha1="{GIT_SHA1}",
        build_number="{BUILD_NUMBER}",
    )


def render_python_module(info: VersionInfo) -> str:
    """Render a module defining the version constants and accessors.

    Args:
        info: Version information to bake in

    Returns:
        Python source text
    """
    lines = [
        HEADER,
        '"""Version information baked in at build time."""',
        "",
    ]
    for name, value in info.constants().items():
        lines.append(f"{name} = {value!r}")

    lines += [
        "",
        "",
        "def format() -> str:",
        f"    return f{_fstring_body(SHORT_TEMPLATE)!r}",
        "",
        "",
        "def format_full() -> str:",
        f"    return f{_fstring_body(FULL_TEMPLATE)!r}",
    ]
    return "\n".join(lines) + "\n"


def render_json(info: VersionInfo) -> str:
    """Render the constants and both formatted strings as JSON."""
    data: dict[str, str | int] = dict(info.constants())
    data["format"] = info.format()
    data["format_full"] = info.format_full()
    return json.dumps(data, indent=2) + "\n"


def write_generated(content: str, path: Path) -> bool:
    """Write generated content, leaving an identical file untouched.

    The file is replaced atomically, so a failed write never leaves a
    truncated module behind.

    Args:
        content: Text to write
        path: Destination file; parent directories are created

    Returns:
        True if the file was written, False if it was already up to date

    Raises:
        OutputWriteError: If the destination cannot be read or written
    """
    data = content.encode("utf-8")
    tmp_name = None

    try:
        if path.is_file() and path.read_bytes() == data:
            logger.info(f"{path} is up to date")
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as f:
            tmp_name = f.name
            f.write(data)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}")
        raise OutputWriteError(f"Cannot write {path}: {e}", path=path) from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.info(f"Wrote {path}")
    return True
