"""Minimal version helper for the arc_ellipse package."""

from importlib import metadata
from pathlib import Path

PACKAGE_NAME = "arc_ellipse"
FALLBACK_VERSION = "0.0.0"


def get_source_root() -> Path:
    """Return the repository root of a source checkout."""

    return Path(__file__).resolve().parents[2]


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        version = metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # dev checkout
        import setuptools_scm  # type: ignore[import-untyped]

        version = setuptools_scm.get_version(
            root=str(get_source_root()), fallback_version=FALLBACK_VERSION
        )
    return version


__all__ = ["get_version", "get_source_root"]
