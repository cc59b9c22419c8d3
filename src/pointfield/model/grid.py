"""
Grid Index Space
================
Maps linear indices of a width x depth x height grid onto integer cell
coordinates. The scalar field and the instance attributes are both ordered by
this mapping.

Layout of a linear index (integer division throughout):
    x = idx % width
    y = (idx // width // depth) % height
    z = (idx // width) % depth

so that idx == x + width * z + width * depth * y.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING
import logging
import numbers

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class InvalidDimensions(ValueError):
    """Raised when a grid dimension is not a positive integer."""


@dataclass(frozen=True)
class GridDimensions:
    width: int
    depth: int
    height: int

    @classmethod
    def validated(cls, width: int, depth: int, height: int) -> GridDimensions:
        """
        Builds the dimensions, rejecting anything that is not a positive integer.

        Raises:
            InvalidDimensions: If any of width, depth, height is zero, negative
                or not an integer.
        """
        for name, value in (("width", width), ("depth", depth), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDimensions(f"Grid {name} must be an integer, got {value!r}.")
            if value <= 0:
                raise InvalidDimensions(f"Grid {name} must be positive, got {value}.")
        return cls(int(width), int(depth), int(height))

    @property
    def len(self) -> int:
        return self.width * self.depth * self.height

    def as_stored(self) -> Tuple[int, int, int]:
        """Dimension vector in (width, height, depth) axis order."""
        return self.width, self.height, self.depth


def index_to_coord(idx: int, width: int, depth: int, height: int) -> Tuple[int, int, int]:
    """Decomposes a linear index into (x, y, z) cell coordinates."""
    x = idx % width
    y = (idx // width // depth) % height
    z = (idx // width) % depth
    return x, y, z


def coord_to_index(x: int, y: int, z: int, width: int, depth: int) -> int:
    """Inverse of `index_to_coord`."""
    return x + width * z + width * depth * y


def grid_coordinates(dims: GridDimensions) -> npt.NDArray[np.int64]:
    """
    Coordinates of every cell as an (N, 3) integer array of (x, y, z),
    row i holding the coordinates of linear index i.
    """
    idx = np.arange(dims.len, dtype=np.int64)
    coords = np.empty((dims.len, 3), dtype=np.int64)
    coords[:, 0] = idx % dims.width
    coords[:, 1] = (idx // dims.width // dims.depth) % dims.height
    coords[:, 2] = (idx // dims.width) % dims.depth
    return coords
