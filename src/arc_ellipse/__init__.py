"""arc_ellipse package: canonical ellipse parameters under linear transforms."""

from __future__ import annotations

from ._version import get_version
from .ellipse import Ellipse
from .models import EllipseConfig, EllipseParams

__version__ = get_version()

__all__ = [
    "Ellipse",
    "EllipseConfig",
    "EllipseParams",
    "__version__",
    "get_version",
]
