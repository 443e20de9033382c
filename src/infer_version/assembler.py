"""Assemble manifest, clock and repository data into one version unit.

A generation run is a straight-line pipeline: read the manifest, parse its
version, stamp the build and resolve HEAD. The first failure aborts the run;
no field ever gets a placeholder value.
"""

import logging
from collections.abc import Callable, MutableMapping
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .build_stamp import make_build_number
from .manifest import read_manifest
from .repository import resolve_head
from .settings import (
    FULL_TEMPLATE,
    MANIFEST_FILE,
    PACKAGE_TABLE,
    SHORT_SHA_LENGTH,
    SHORT_TEMPLATE,
)
from .version import Version

logger = logging.getLogger(__name__)


class GenerationOptions(BaseModel):
    """Where a generation run looks for its inputs."""

    workdir: Path = Field(default_factory=Path.cwd)
    manifest_file: str = MANIFEST_FILE
    table: str = PACKAGE_TABLE


class VersionInfo(BaseModel):
    """Version identification of a build.

    Examples:
        >>> info = VersionInfo(
        ...     bin_name="demo",
        ...     version=Version(major=1, minor=2, patch=3),
        ...     git_sha1="abcdef1234567890abcdef1234567890abcdef12",
        ...     build_number="20240115093000",
        ... )
        >>> info.format()
        'demo version 1.2.3 (git rev abcd; build 20240115093000)'
    """

    model_config = ConfigDict(frozen=True)

    bin_name: str
    version: Version
    git_sha1: str
    build_number: str

    def format(self) -> str:
        """One-line description with a shortened revision."""
        return SHORT_TEMPLATE.format(
            bin_name=self.bin_name,
            version=self.version.as_string(),
            short_sha=self.git_sha1[:SHORT_SHA_LENGTH],
            build_number=self.build_number,
        )

    def format_full(self) -> str:
        """Three-line description with the full revision."""
        return FULL_TEMPLATE.format(
            bin_name=self.bin_name,
            version=self.version.as_string(),
            git_sha1=self.git_sha1,
            build_number=self.build_number,
        )

    def constants(self) -> dict[str, str | int]:
        """The generated constants, keyed by their emitted names."""
        return {
            "VERSION": self.version.as_string(),
            "VERSION_MAJOR": self.version.major,
            "VERSION_MINOR": self.version.minor,
            "VERSION_PATCH": self.version.patch,
            "GIT_SHA1": self.git_sha1,
            "BUILD_NUMBER": self.build_number,
            "BIN_NAME": self.bin_name,
        }

    def as_namespace(self) -> dict[str, Any]:
        """Constants plus the format/format_full accessors."""
        namespace: dict[str, Any] = dict(self.constants())
        namespace["format"] = self.format
        namespace["format_full"] = self.format_full
        return namespace


def assemble_version_info(
    options: GenerationOptions | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> VersionInfo:
    """Run one generation.

    Args:
        options: Input locations (defaults to the current directory)
        clock: Source of the build time

    Returns:
        Complete version information

    Raises:
        InferVersionError: From whichever source failed first
    """
    options = options or GenerationOptions()
    logger.info(f"Generating version info in {options.workdir}")

    manifest = read_manifest(options.workdir, options.manifest_file, options.table)
    version = Version.parse(manifest.version_string)
    build_number = make_build_number(clock())
    git_sha1 = resolve_head(options.workdir)

    info = VersionInfo(
        bin_name=manifest.package_name,
        version=version,
        git_sha1=git_sha1,
        build_number=build_number,
    )
    logger.info(f"Generated: {info.format()}")
    return info


def inject(
    namespace: MutableMapping[str, Any],
    options: GenerationOptions | None = None,
) -> VersionInfo:
    """Define the version constants and accessors in a namespace.

    Example:
        >>> inject(globals())  # doctest: +SKIP
        >>> format()  # doctest: +SKIP
        'demo version 1.2.3 (git rev abcd; build 20240115093000)'
    """
    info = assemble_version_info(options)
    namespace.update(info.as_namespace())
    return info
