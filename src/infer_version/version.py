"""Semantic version triple parsed from a manifest version string."""

import logging
import re

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import VersionFormatError

logger = logging.getLogger(__name__)

U32_MAX = 2**32 - 1

_NUMERIC_SEGMENT = re.compile(r"\+?[0-9]+")


def _parse_segment(segment: str, label: str, value: str) -> int:
    if not _NUMERIC_SEGMENT.fullmatch(segment):
        raise VersionFormatError(
            f"Invalid version '{value}': {label} component '{segment}' is not a number",
            value=value,
        )
    number = int(segment, 10)
    if number > U32_MAX:
        raise VersionFormatError(
            f"Invalid version '{value}': {label} component {number} is out of range",
            value=value,
        )
    return number


class Version(BaseModel):
    """A major.minor.patch version.

    Examples:
        >>> Version.parse("1.2.3").as_string()
        '1.2.3'
        >>> Version.parse("1.2.3.4-beta").patch
        3
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0, le=U32_MAX)
    minor: int = Field(ge=0, le=U32_MAX)
    patch: int = Field(ge=0, le=U32_MAX)

    @classmethod
    def parse(cls, value: str) -> "Version":
        """Parse a dotted version string.

        Only the first three segments are read; anything after the third dot
        is ignored.

        Args:
            value: Version string such as "1.2.3"

        Returns:
            Parsed Version

        Raises:
            VersionFormatError: If fewer than three segments are present or
                one of the first three is not an unsigned 32-bit integer
        """
        segments = value.split(".")
        if len(segments) < 3:
            raise VersionFormatError(
                f"Invalid version '{value}' (expected MAJOR.MINOR.PATCH)",
                value=value,
            )

        major, minor, patch = (
            _parse_segment(segment, label, value)
            for segment, label in zip(segments[:3], ("major", "minor", "patch"))
        )
        version = cls(major=major, minor=minor, patch=patch)
        logger.info(f"Parsed version {value!r} as {version.as_string()}")
        return version

    def as_string(self) -> str:
        """Render as "major.minor.patch"."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.as_string()
