"""Default settings for infer-version."""

from importlib.metadata import PackageNotFoundError, version


def get_version():
    """Get the installed version of infer-version itself."""
    try:
        return version("infer-version")
    except PackageNotFoundError:
        # Fallback for development when package isn't installed
        return "dev"


# Application metadata
APP_NAME = "infer-version"
VERSION = get_version()

# Manifest lookup
MANIFEST_FILE = "Cargo.toml"  # Looked up in the working directory only
PACKAGE_TABLE = "package"

# Generated output
DEFAULT_OUTPUT = "version_info.py"
SHORT_SHA_LENGTH = 4  # Hex characters of GIT_SHA1 shown by format()

# Output templates. The unmatched ")" in FULL_TEMPLATE is kept for
# compatibility with existing consumers of the long form.
SHORT_TEMPLATE = "{bin_name} version {version} (git rev {short_sha}; build {build_number})"
FULL_TEMPLATE = "{bin_name} version {version}\ngit revision {git_sha1}\nbuild {build_number})"
