"""Tests for parsing major.minor.patch version strings."""

import logging

import pytest
from pydantic import ValidationError

from infer_version.exceptions import InferVersionError, VersionFormatError
from infer_version.version import U32_MAX, Version


class TestVersionParse:
    """Test Version.parse."""

    @pytest.mark.parametrize("value", ["0.0.0", "1.2.3", "10.20.30", "0.1.0"])
    def test_round_trip(self, value):
        """Test that canonical versions render back unchanged."""
        assert Version.parse(value).as_string() == value

    def test_components(self):
        """Test that each component is parsed as an integer."""
        version = Version.parse("4.15.926")
        assert (version.major, version.minor, version.patch) == (4, 15, 926)

    def test_extra_segments_ignored(self):
        """Test that anything after the third segment is ignored."""
        version = Version.parse("1.2.3.4")
        assert version.as_string() == "1.2.3"

    def test_prerelease_after_fourth_dot_ignored(self):
        """Test that a suffix in a fourth segment does not matter."""
        assert Version.parse("2.0.1.rc-1").as_string() == "2.0.1"

    def test_leading_zeros_normalized(self):
        """Test that leading zeros are accepted but not preserved."""
        assert Version.parse("01.002.3").as_string() == "1.2.3"

    def test_leading_plus_accepted(self):
        """Test that an explicit plus sign is accepted and dropped."""
        assert Version.parse("+1.+2.3").as_string() == "1.2.3"

    def test_u32_max_accepted(self):
        """Test the upper bound of a component."""
        version = Version.parse(f"{U32_MAX}.0.0")
        assert version.major == U32_MAX

    @pytest.mark.parametrize("value", ["", "1", "1.2", "1.2.", ".1.2"])
    def test_too_few_segments(self, value):
        """Test that missing or empty segments fail."""
        with pytest.raises(VersionFormatError):
            Version.parse(value)

    @pytest.mark.parametrize(
        "value",
        ["a.2.3", "1.b.3", "1.2.c", "1.2.3-beta", "-1.2.3", "++1.2.3", "1. 2.3", "1.2.0x3"],
    )
    def test_non_numeric_segment(self, value):
        """Test that a non-numeric first/second/third segment fails."""
        with pytest.raises(VersionFormatError) as exc_info:
            Version.parse(value)
        assert exc_info.value.value == value

    def test_out_of_range_segment(self):
        """Test that components beyond 32 bits fail."""
        with pytest.raises(VersionFormatError, match="out of range"):
            Version.parse(f"1.{U32_MAX + 1}.0")

    def test_error_is_infer_version_error(self):
        """Test the error hierarchy."""
        with pytest.raises(InferVersionError):
            Version.parse("1.2")


class TestVersionModel:
    """Test the Version model itself."""

    def test_str(self):
        """Test that str() matches as_string()."""
        assert str(Version(major=1, minor=0, patch=7)) == "1.0.7"

    def test_immutable(self):
        """Test that a Version cannot be changed after construction."""
        version = Version.parse("1.2.3")
        with pytest.raises(ValidationError):
            version.major = 2

    def test_negative_rejected(self):
        """Test that components must be non-negative."""
        with pytest.raises(ValidationError):
            Version(major=-1, minor=0, patch=0)

    def test_equality(self):
        """Test that equal triples compare equal."""
        assert Version.parse("1.2.3") == Version(major=1, minor=2, patch=3)

    def test_parse_is_logged(self, caplog):
        """Test that a successful parse is logged."""
        with caplog.at_level(logging.INFO, logger="infer_version.version"):
            Version.parse("1.2.3.4")

        assert "'1.2.3.4' as 1.2.3" in caplog.text
