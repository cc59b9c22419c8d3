"""
Instance Attributes
===================
Per-cell render data for the instanced cube pipeline.

Every grid cell becomes one instance with
1. a position offset local to the cloud origin: (x, y, z) * SPACING_SCALE,
2. a uniform scale: INSTANCE_SCALE,
3. a color from an HSL gradient: hue sweeps along x, saturation along z.

The height axis (y) only affects position. The scalar field is not used here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple, TYPE_CHECKING
import logging

import numpy as np

from pointfield import config
from pointfield.model.geometry_primitives import Transform, Vector
from pointfield.model.grid import GridDimensions, grid_coordinates

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstanceData:
    """One instance record."""
    position: Tuple[float, float, float]
    scale: float
    color: Tuple[float, float, float, float]


@dataclass(eq=False)
class InstanceMaterialData:
    """
    Ordered buffer of instance records, stored column-wise.

    positions: (N, 3) float32
    scales: (N,) float32
    colors: (N, 4) float32, RGBA in [0, 1]
    """
    positions: npt.NDArray[np.float32]
    scales: npt.NDArray[np.float32]
    colors: npt.NDArray[np.float32]

    def __post_init__(self) -> None:
        n = len(self.positions)
        if self.positions.shape != (n, 3) or self.scales.shape != (n,) or self.colors.shape != (n, 4):
            raise ValueError(
                f"Inconsistent instance buffer shapes: positions {self.positions.shape}, "
                f"scales {self.scales.shape}, colors {self.colors.shape}."
            )

    def __len__(self) -> int:
        return len(self.positions)

    def __getitem__(self, idx: int) -> InstanceData:
        return InstanceData(
            position=tuple(float(v) for v in self.positions[idx]),
            scale=float(self.scales[idx]),
            color=tuple(float(v) for v in self.colors[idx]),
        )

    def __iter__(self) -> Iterator[InstanceData]:
        for idx in range(len(self)):
            yield self[idx]


def hsla_to_rgba(
    hue: npt.ArrayLike,
    saturation: npt.ArrayLike,
    lightness: npt.ArrayLike,
    alpha: npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """
    Standard HSL -> RGB conversion, vectorized.

    Args:
        hue: Degrees, any real value (taken modulo 360).
        saturation: [0, 1]
        lightness: [0, 1]
        alpha: [0, 1], passed through.

    Returns:
        (N, 4) array of RGBA components in [0, 1].
    """
    h, s, l, a = np.broadcast_arrays(
        *(np.atleast_1d(np.asarray(v, dtype=np.float64)) for v in (hue, saturation, lightness, alpha))
    )

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * s
    h_prime = np.mod(h, 360.0) / 60.0
    second = chroma * (1.0 - np.abs(np.mod(h_prime, 2.0) - 1.0))
    zero = np.zeros_like(chroma)

    sector = np.floor(h_prime).astype(int)
    # Sector 6 only appears through float rounding of values just below 360
    sector = np.clip(sector, 0, 5)

    r = np.choose(sector, [chroma, second, zero, zero, second, chroma])
    g = np.choose(sector, [second, chroma, chroma, second, zero, zero])
    b = np.choose(sector, [zero, zero, second, chroma, chroma, second])

    match = l - chroma / 2.0
    rgba = np.stack([r + match, g + match, b + match, a], axis=-1)
    return np.clip(rgba, 0.0, 1.0)


@dataclass
class Visibility:
    """User visibility flag plus the value the renderer resolved for this frame."""
    is_visible: bool = True
    computed: bool = False


@dataclass(frozen=True)
class NoFrustumCulling:
    """
    Marker: the renderer must not frustum-cull this entity.

    Culling works on the bounds of the shared mesh at the entity transform;
    the per-instance offsets are not part of those bounds.
    """


@dataclass(eq=False)
class PointCloudRender:
    """Bundle handed to the instanced-draw pipeline."""
    transform: Transform
    instance_material_data: InstanceMaterialData
    visibility: Visibility = field(default_factory=Visibility)
    no_frustum_culling: NoFrustumCulling = field(default_factory=NoFrustumCulling)

    @classmethod
    def new(cls, origin: Vector, width: int, depth: int, height: int) -> PointCloudRender:
        """
        Builds one instance per grid cell, ordered by linear index.

        Raises:
            InvalidDimensions: If any dimension is not a positive integer.
        """
        dims = GridDimensions.validated(width, depth, height)

        coords = grid_coordinates(dims).astype(np.float64)
        x, z = coords[:, 0], coords[:, 2]

        positions = coords * config.SPACING_SCALE
        scales = np.full(dims.len, config.INSTANCE_SCALE)
        colors = hsla_to_rgba(
            x / dims.width * config.HUE_SPAN,
            z / dims.depth * config.SATURATION_SPAN + config.SATURATION_BASE,
            config.LIGHTNESS,
            config.ALPHA,
        )
        logger.debug(f"Generated {dims.len} instances for grid {dims.width}x{dims.depth}x{dims.height}.")

        return cls(
            transform=Transform.from_xyz(origin.x, origin.y, origin.z),
            instance_material_data=InstanceMaterialData(
                positions=positions.astype(np.float32),
                scales=scales.astype(np.float32),
                colors=colors.astype(np.float32),
            ),
        )

    def components(self) -> tuple:
        """Flattens the bundle into the components inserted on the entity."""
        return self.transform, self.instance_material_data, self.visibility, self.no_frustum_culling
