"""Read the package name and version string from the project manifest."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from .exceptions import ManifestParseError, ManifestReadError, SchemaError
from .settings import MANIFEST_FILE, PACKAGE_TABLE

logger = logging.getLogger(__name__)


class ManifestMetadata(BaseModel):
    """Name and version declared in the manifest."""

    model_config = ConfigDict(frozen=True)

    package_name: str
    version_string: str


def _require_string(table: dict[str, Any], table_name: str, key: str) -> str:
    field = f"{table_name}.{key}"
    if key not in table:
        raise SchemaError(f"Manifest is missing required field '{field}'", field=field)

    value = table[key]
    if not isinstance(value, str):
        raise SchemaError(
            f"Manifest field '{field}' must be a string, got {type(value).__name__}",
            field=field,
            value=value,
        )
    return value


def read_manifest(
    workdir: Path | None = None,
    manifest_file: str = MANIFEST_FILE,
    table: str = PACKAGE_TABLE,
) -> ManifestMetadata:
    """Read package metadata from the manifest in a working directory.

    The manifest is trusted to have been validated by the build tool that
    owns it, so only the two consumed fields are checked.

    Args:
        workdir: Directory holding the manifest (defaults to the current directory)
        manifest_file: Manifest file name
        table: Top-level table holding "name" and "version"

    Returns:
        Package name and raw version string

    Raises:
        ManifestReadError: If the manifest cannot be opened or read
        ManifestParseError: If the manifest is not valid TOML
        SchemaError: If the table or one of its fields is missing or mistyped
    """
    path = (workdir or Path.cwd()) / manifest_file

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.error(f"Failed to parse {path}: {e}")
        raise ManifestParseError(f"Malformed manifest {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode {path}: {e}")
        raise ManifestParseError(f"Malformed manifest {path}: {e}", path=path) from e
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        raise ManifestReadError(f"Cannot read manifest {path}: {e}", path=path) from e

    package = data.get(table)
    if package is None:
        raise SchemaError(f"Manifest {path} has no [{table}] table", field=table)
    if not isinstance(package, dict):
        raise SchemaError(
            f"Manifest entry '{table}' in {path} is not a table",
            field=table,
            value=package,
        )

    version_string = _require_string(package, table, "version")
    package_name = _require_string(package, table, "name")

    logger.info(f"Read manifest {path}: {package_name} {version_string}")
    return ManifestMetadata(package_name=package_name, version_string=version_string)
