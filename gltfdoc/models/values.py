"""Tuple-like value types: node transforms and colors.

Each type is written as a plain JSON array of its components and is only
considered default when every component equals the type's default exactly.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict


class _Vector(BaseModel):
    """Base for fixed-size float aggregates."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def to_list(self) -> list[float]:
        return [getattr(self, name) for name in type(self).model_fields]

    def is_default(self) -> bool:
        return self.to_list() == type(self)().to_list()

    @classmethod
    def from_sequence(cls, values: Sequence[float]):
        names = list(cls.model_fields)
        if len(values) != len(names):
            raise ValueError(
                f"{cls.__name__} takes {len(names)} components, got {len(values)}"
            )
        return cls(**dict(zip(names, values)))


class Translation(_Vector):
    """Node translation, default origin."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Rotation(_Vector):
    """Node rotation as a unit quaternion (x, y, z, w), default identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


class Scale(_Vector):
    """Node scale, default (1, 1, 1)."""

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0


class Color4(_Vector):
    """Linear RGBA color, default opaque white."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0
