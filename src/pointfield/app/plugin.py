"""
Point Cloud Plugin
==================
Wires the two generators into the host: a parent entity carrying the
inspectable scalar field, and a child entity carrying the instance buffer,
the shared cube mesh and the culling opt-out.
"""
from __future__ import annotations

from typing import Optional
import logging

from pointfield import config
from pointfield.config import PointCloudSettings
from pointfield.app.application import Application
from pointfield.app.scene import Entity, MeshAssets, Scene, cube_mesh
from pointfield.model.instances import PointCloudRender, Visibility
from pointfield.model.point_cloud import PointCloud

logger = logging.getLogger(__name__)


class PointGenerationPlugin:
    def __init__(self, settings: Optional[PointCloudSettings] = None) -> None:
        self.settings = settings or PointCloudSettings()

    def build(self, app: Application) -> None:
        app.register_inspectable(PointCloud)
        app.add_startup_stage(config.POINT_CLOUD_STAGE)
        app.add_startup_system_to_stage(
            config.POINT_CLOUD_STAGE,
            lambda a: setup_point_cloud(a.scene, a.meshes, self.settings),
        )


def setup_point_cloud(scene: Scene, meshes: MeshAssets, settings: PointCloudSettings) -> Entity:
    """
    Generates the field and the instances from the same settings and spawns them.

    Returns:
        The parent entity holding the `PointCloud`.
    """
    s = settings
    point_cloud = PointCloud.new(s.origin, s.width, s.depth, s.height, seed=s.seed)
    render = PointCloudRender.new(s.origin, s.width, s.depth, s.height)

    # One cube per point cloud, shared by every instance
    mesh_handle = meshes.add(cube_mesh(config.CUBE_SIZE))

    parent = scene.spawn(point_cloud, Visibility())
    parent.with_children(lambda p: p.spawn_child(*render.components()).insert(mesh_handle))

    logger.info(
        f"Point cloud spawned: {point_cloud.len()} cells at "
        f"({s.origin.x}, {s.origin.y}, {s.origin.z})."
    )
    return parent
