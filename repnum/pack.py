#
# Repnum Packaging Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from importlib.metadata import PackageNotFoundError, version as metadata_version

from packaging.version import InvalidVersion, Version

# Constants ------------------------------------------------------------------------------------------------------------

PROG_NAME = "repnum"
PROG_LICENSE = "GNU GPL v3"

# Version reported when the distribution metadata is not installed
FALLBACK_VERSION = "1.0"


# Methods --------------------------------------------------------------------------------------------------------------

def prog_version(dist_name: str = PROG_NAME) -> Version:
    """
    Installed version of the distribution as a packaging Version.

    Falls back to FALLBACK_VERSION when the distribution is not installed.

    Raises:
        InvalidVersion: If the installed metadata carries a non-PEP440 version.
    """
    try:
        raw = metadata_version(dist_name)
    except PackageNotFoundError:
        raw = FALLBACK_VERSION
    try:
        return Version(raw)
    except InvalidVersion:
        raise InvalidVersion(f"Version '{raw}' of {dist_name} is not PEP440 compliant")


def fmt_version(version: Version | str) -> str:
    """
    Format a version as major.minor with a two digit minor.

    Examples:
        >>> fmt_version("1.0")
        'v1.00'
        >>> fmt_version("2.5.1")
        'v2.05'
    """
    if not isinstance(version, Version):
        version = Version(str(version))
    return f"v{version.major}.{version.minor:02d}"


def version_banner(prog: str = PROG_NAME) -> str:
    """The line printed by --version."""
    return f"{prog} {fmt_version(prog_version())}. Licenced under the {PROG_LICENSE} License."
