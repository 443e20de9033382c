"""infer-version - bake version, build and git revision data into a build."""

from .assembler import GenerationOptions, VersionInfo, assemble_version_info, inject
from .build_stamp import make_build_number
from .exceptions import (
    InferVersionError,
    ManifestParseError,
    ManifestReadError,
    OutputWriteError,
    RepositoryError,
    SchemaError,
    VersionFormatError,
)
from .manifest import ManifestMetadata, read_manifest
from .repository import resolve_head
from .version import Version

__version__ = "1.0.0"

__all__ = [
    "GenerationOptions",
    "InferVersionError",
    "ManifestMetadata",
    "ManifestParseError",
    "ManifestReadError",
    "OutputWriteError",
    "RepositoryError",
    "SchemaError",
    "Version",
    "VersionFormatError",
    "VersionInfo",
    "__version__",
    "assemble_version_info",
    "inject",
    "make_build_number",
    "read_manifest",
    "resolve_head",
]
