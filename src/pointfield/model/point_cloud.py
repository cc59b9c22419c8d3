"""
Scalar Field (Point Cloud)
==========================
A grid of pseudo-random "noise" values, one signed 32-bit integer per cell,
generated once from a fixed seed so the field is stable between runs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, TYPE_CHECKING
import logging

import numpy as np

from pointfield import config
from pointfield.model.geometry_primitives import Vector
from pointfield.model.grid import GridDimensions, InvalidDimensions

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PointCloud:
    """
    Scalar field values plus the grid they live on.

    `dimensions` is stored in (width, height, depth) order.
    """
    points: npt.NDArray[np.int32] = field(default_factory=lambda: np.empty(0, dtype=np.int32))
    origin: Vector = field(default_factory=Vector.zero)
    dimensions: Tuple[int, int, int] = (0, 0, 0)

    def __post_init__(self) -> None:
        points = np.array(self.points, dtype=np.int32)
        expected = int(np.prod(self.dimensions))
        if points.shape != (expected,):
            raise InvalidDimensions(
                f"Point count {points.size} does not match dimensions {self.dimensions} ({expected})."
            )
        points.flags.writeable = False
        object.__setattr__(self, "points", points)

    @classmethod
    def new(
        cls,
        origin: Vector,
        width: int,
        depth: int,
        height: int,
        seed: int = config.DEFAULT_SEED,
    ) -> PointCloud:
        """
        Generates the scalar field for a width x depth x height grid.

        Values are drawn uniformly from [FIELD_MIN, FIELD_MAX] (inclusive),
        index 0 first. The same seed always yields the same field.

        Raises:
            InvalidDimensions: If any dimension is not a positive integer.
        """
        dims = GridDimensions.validated(width, depth, height)

        rng = np.random.default_rng(seed)
        points = rng.integers(
            config.FIELD_MIN, config.FIELD_MAX, size=dims.len, dtype=np.int32, endpoint=True
        )
        logger.debug(f"Generated scalar field of {dims.len} values (seed={seed}).")

        return cls(points=points, origin=origin, dimensions=dims.as_stored())

    def len(self) -> int:
        x, y, z = self.dimensions
        return x * y * z

    def __len__(self) -> int:
        return self.len()

    def inspect(self) -> Dict[str, Any]:
        """Read-only field view for the inspector UI."""
        return {
            "points": self.points.tolist(),
            "origin": (self.origin.x, self.origin.y, self.origin.z),
            "dimensions": tuple(self.dimensions),
            "len": self.len(),
            "min": int(self.points.min()) if self.points.size else None,
            "max": int(self.points.max()) if self.points.size else None,
        }
