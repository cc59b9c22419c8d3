"""
Geometric Primitives shared by the generators and the host layer.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space (also used for points such as an origin).
    """
    x: float
    y: float
    z: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0, 0.0)


@dataclass
class Transform:
    """Local placement of an entity. Only translation and uniform scale are used."""
    translation: Vector = field(default_factory=Vector.zero)
    scale: float = 1.0

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> Transform:
        return cls(translation=Vector(x, y, z))

    def apply(self, points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Maps (N, 3) local points into the parent frame."""
        return np.asarray(points, dtype=np.float64) * self.scale + self.translation.to_array()
