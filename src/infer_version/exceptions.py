"""Custom exceptions for infer-version.

Every failure while collecting version metadata is fatal: a generation run
either produces a complete unit or raises one of these.
"""

from pathlib import Path
from typing import Any


class InferVersionError(Exception):
    """Base exception for all infer-version operations."""

    pass


class ManifestReadError(InferVersionError):
    """Manifest file is missing or unreadable."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ManifestParseError(InferVersionError):
    """Manifest content is not valid TOML."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class SchemaError(InferVersionError):
    """A required manifest field is missing or has the wrong type."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class VersionFormatError(InferVersionError):
    """Version string is not of the form major.minor.patch."""

    def __init__(self, message: str, value: str | None = None):
        super().__init__(message)
        self.value = value


class RepositoryError(InferVersionError):
    """Git repository is missing or HEAD cannot be resolved."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        stderr: str | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.stderr = stderr


class OutputWriteError(InferVersionError):
    """Generated file could not be written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path
