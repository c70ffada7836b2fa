"""Version information of the library."""

from __future__ import annotations

__all__ = ["VERSION_MAJOR", "VERSION_MINOR", "VERSION_REVISION", "version_string"]

VERSION_MAJOR = 2
VERSION_MINOR = 0
VERSION_REVISION = 0


def version_string() -> str:
    """Return the version as ``"major.minor.revision"``."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_REVISION}"