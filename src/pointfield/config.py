"""
Configuration & Global Constants
================================
This module serves as the central registry for the generation constants
and the startup parameters of the point cloud.

Exports:
    DEFAULT_SEED (int): Seed of the scalar field random source.
    FIELD_MIN, FIELD_MAX (int): Closed range of the scalar field values.
    SPACING_SCALE (float): Grid coordinate -> local offset multiplier.
    INSTANCE_SCALE (float): Uniform size of every rendered instance.
    PointCloudSettings: Startup parameters shared by both generators.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from pointfield.model.geometry_primitives import Vector

# Scalar field
DEFAULT_SEED: int = 1
FIELD_MIN: int = -16
FIELD_MAX: int = 16

# Instance attributes
SPACING_SCALE: float = 0.3
INSTANCE_SCALE: float = 0.1
HUE_SPAN: float = 360.0
SATURATION_SPAN: float = 0.7
SATURATION_BASE: float = 0.3
LIGHTNESS: float = 0.5
ALPHA: float = 1.0

# Shared instance mesh (one per point cloud)
CUBE_SIZE: float = 1.1

POINT_CLOUD_STAGE: str = "point_cloud"


@dataclass
class PointCloudSettings:
    """Parameters the startup system feeds into both generators."""
    origin: Vector = field(default_factory=lambda: Vector(0.0, 0.0, 0.0))
    width: int = 3
    depth: int = 2
    height: int = 1
    seed: int = DEFAULT_SEED
