"""Dataclasses describing ellipse parameters and tolerance configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

import json

DEFAULT_PRECISION = 7


@dataclass(frozen=True)
class EllipseParams:
    """Canonical parameters read back from an :class:`~arc_ellipse.Ellipse`."""

    rx: float
    ry: float
    ax: float  # degrees

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "EllipseParams":
        data: Dict = json.loads(text)
        return EllipseParams(
            rx=float(data["rx"]),
            ry=float(data["ry"]),
            ax=float(data.get("ax", 0.0)),
        )


@dataclass
class EllipseConfig:
    """Tolerance used to classify circular and degenerate ellipses."""

    precision: int = DEFAULT_PRECISION  # decimal digits

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(
                f"precision must be a non-negative integer, got {self.precision}."
            )

    @property
    def epsilon(self) -> float:
        return 10.0**-self.precision

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "EllipseConfig":
        data: Dict = json.loads(text)
        return EllipseConfig(
            precision=int(data.get("precision", DEFAULT_PRECISION)),
        )


__all__ = [
    "DEFAULT_PRECISION",
    "EllipseParams",
    "EllipseConfig",
]
