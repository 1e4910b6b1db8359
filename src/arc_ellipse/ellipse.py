"""Origin-centred ellipse tracked through linear transforms.

The ellipse is the image of the unit circle by ``scale(rx, ry)`` followed by
``rotate(ax)`` (degrees). This is the representation used by SVG elliptical
arcs, so the operations here let path code carry an arc through a
``matrix()`` transform and read back drawable ``(rx, ry, ax)`` parameters.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Union

import numpy as np

from .models import EllipseConfig, EllipseParams
from .utils import TORAD, as_linear_map, rotate_vector

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-7


def _divide(num: float, den: float) -> float:
    # IEEE division: a zero radius gives inf, or nan for a zero component
    if den == 0:
        return math.nan if num == 0 or math.isnan(num) else math.inf
    return num / den


class Ellipse:
    """An ellipse centred at 0 with radii ``rx``, ``ry`` and x-axis angle ``ax``.

    ``precision`` is the number of decimal digits used by
    :meth:`is_degenerate`, :meth:`transform` and :meth:`normalize` to decide
    when an ellipse is a circle or collapsed.
    """

    def __init__(
        self, rx: float, ry: float, ax: float, precision: Optional[int] = None
    ) -> None:
        self.rx = float(rx)
        self.ry = float(ry)
        self.ax = float(ax)
        if precision is None:
            self._epsilon = DEFAULT_EPSILON
        else:
            self._epsilon = 10.0 ** -int(precision)

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @classmethod
    def from_params(
        cls, params: EllipseParams, config: Optional[EllipseConfig] = None
    ) -> "Ellipse":
        precision = None if config is None else config.precision
        return cls(params.rx, params.ry, params.ax, precision)

    def params(self) -> EllipseParams:
        return EllipseParams(rx=self.rx, ry=self.ry, ax=self.ax)

    def __repr__(self) -> str:
        return (
            f"Ellipse(rx={self.rx!r}, ry={self.ry!r}, ax={self.ax!r}, "
            f"epsilon={self._epsilon!r})"
        )

    def transform(self, m: Union[Sequence[float], np.ndarray]) -> "Ellipse":
        """Apply the linear map ``m`` and store the canonical image ellipse.

        ``m`` is ``[m0, m1, m2, m3]`` for the matrix::

            | m0 m2 |
            | m1 m3 |

        or the same matrix as a ``(2, 2)`` array. Afterwards a circle has
        ``ax == 0`` and any other ellipse has ``ax`` in ``[0, 90)``.
        """
        m0, m1, m2, m3 = as_linear_map(m)
        eps = self._epsilon

        # ma = m x rotate(ax) x scale(rx, ry), applied to the unit circle
        c = math.cos(self.ax * TORAD)
        s = math.sin(self.ax * TORAD)
        ma0 = self.rx * (m0 * c + m2 * s)
        ma1 = self.rx * (m1 * c + m3 * s)
        ma2 = self.ry * (-m0 * s + m2 * c)
        ma3 = self.ry * (-m1 * s + m3 * c)

        # ma x transpose(ma) = [[J, L], [L, K]]
        J = ma0 * ma0 + ma2 * ma2
        K = ma1 * ma1 + ma3 * ma3

        # difference of the eigenvalues of ma x transpose(ma)
        D = math.sqrt(
            ((ma0 - ma3) ** 2 + (ma2 + ma1) ** 2)
            * ((ma0 + ma3) ** 2 + (ma2 - ma1) ** 2)
        )
        JK = (J + K) / 2.0

        if D <= eps:
            logger.debug("transform: image is a circle (D=%g)", D)
            self.rx = self.ry = math.sqrt(JK)
            self.ax = 0.0
            return self

        if abs(D - abs(J - K)) <= eps:
            logger.debug("transform: image is axis aligned")
            self.rx = math.sqrt(J)
            self.ry = math.sqrt(K)
            self.ax = 0.0
            return self

        L = ma0 * ma1 + ma2 * ma3
        l1 = JK + D / 2.0
        l2 = max(JK - D / 2.0, 0.0)

        if abs(L) <= eps and abs(l1 - K) <= eps:
            # ax would be 90: fold to 0 and exchange axes
            logger.debug("transform: folding a 90 degree axis to 0")
            self.ax = 0.0
            self.rx = math.sqrt(l2)
            self.ry = math.sqrt(l1)
            return self

        # argument of the l1 eigenvector, from the better conditioned ratio
        if abs(L) > abs(l1 - K):
            self.ax = math.atan((l1 - J) / L) / TORAD
        else:
            self.ax = math.atan(L / (l1 - K)) / TORAD

        if self.ax >= 0:
            self.rx = math.sqrt(l1)
            self.ry = math.sqrt(l2)
        else:
            # ax in (-90, 0): exchange axes
            self.ax += 90.0
            self.rx = math.sqrt(l2)
            self.ry = math.sqrt(l1)
        logger.debug("transform: general case, ax=%g", self.ax)
        return self

    def is_degenerate(self) -> bool:
        """True when either radius is within ``epsilon`` of zero."""
        return abs(self.rx) <= self._epsilon or abs(self.ry) <= self._epsilon

    def scale_factor(self, dx: float, dy: float) -> float:
        """Return how far ``(dx, dy)`` lies outside the ellipse.

        The vector is rotated into the ellipse frame and divided by the radii;
        the result is its length there, so values above 1 are outside.
        """
        ux, uy = rotate_vector(dx, dy, -self.ax)
        ndx = _divide(ux, self.rx)
        ndy = _divide(uy, self.ry)
        return math.sqrt(ndx * ndx + ndy * ndy)

    def contains(self, dx: float, dy: float) -> bool:
        """True when ``(dx, dy)`` lies on or inside the ellipse."""
        return self.scale_factor(dx, dy) <= 1.0 + self._epsilon

    def normalize(self, dx: float = 0.0, dy: float = 0.0) -> "Ellipse":
        """Canonicalize the ellipse and grow it to contain ``(dx, dy)``.

        Radii become non-negative and the angle is brought into ``[0, 90)``
        by exchanging the axes when needed; an almost circular ellipse becomes
        a circle with ``ax == 0``. A non-zero vector that lies outside is put
        on the boundary by scaling both radii by the same factor.
        """
        self.rx = abs(self.rx)
        self.ry = abs(self.ry)

        if abs(self.rx - self.ry) <= self._epsilon:
            self.ax = 0.0
            self.rx = self.ry = (self.rx + self.ry) / 2.0
        else:
            ax = math.fmod(self.ax, 180.0)  # (-180, 180)
            if ax < 0:
                ax += 180.0
                if ax >= 180.0:
                    ax = 0.0
            if ax >= 90.0:
                self.rx, self.ry = self.ry, self.rx
                ax -= 90.0
            self.ax = ax

        if dx == 0 and dy == 0:
            return self

        k = self.scale_factor(dx, dy)
        if k > 1:
            logger.debug("normalize: scaling radii by %g", k)
            self.rx *= k
            self.ry *= k
        return self


__all__ = ["DEFAULT_EPSILON", "Ellipse"]
