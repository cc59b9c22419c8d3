"""
Instanced Renderer (PyVista)
Turns entities that carry an instance buffer into glyph actors: one copy of
the entity's shared mesh per instance.
"""
from __future__ import annotations

from typing import Dict, List, Optional
import logging

import numpy as np
import pyvista as pv

from pointfield.app.scene import Entity, MeshAssets, MeshHandle, Scene
from pointfield.model.geometry_primitives import Transform
from pointfield.model.instances import InstanceMaterialData, NoFrustumCulling, Visibility

logger = logging.getLogger(__name__)


def world_transform(entity: Entity) -> Transform:
    """Composes the local transforms from the root down to `entity`."""
    chain: List[Transform] = []
    node: Optional[Entity] = entity
    while node is not None:
        local = node.get(Transform)
        if local is not None:
            chain.append(local)
        node = node.parent

    result = Transform()
    for local in reversed(chain):
        result = Transform(
            translation=result.translation + local.translation * result.scale,
            scale=result.scale * local.scale,
        )
    return result


def resolve_visibility(entity: Entity) -> bool:
    """An entity is drawn only if it and all its ancestors are visible."""
    node: Optional[Entity] = entity
    while node is not None:
        vis = node.get(Visibility)
        if vis is not None and not vis.is_visible:
            return False
        node = node.parent
    return True


def build_instance_glyphs(
    data: InstanceMaterialData,
    mesh: pv.PolyData,
    transform: Optional[Transform] = None,
) -> pv.PolyData:
    """
    Places a scaled copy of `mesh` at every instance position.

    The output carries an 'rgba' uint8 point array with each instance's color.
    """
    transform = transform or Transform()
    centers = transform.apply(data.positions)

    cloud = pv.PolyData(centers)
    cloud["scale"] = data.scales.astype(np.float64) * transform.scale
    cloud["rgba"] = np.round(data.colors * 255.0).astype(np.uint8)

    return cloud.glyph(geom=mesh, orient=False, scale="scale", factor=1.0)


class InstancedRenderer:
    def __init__(self, plotter: pv.Plotter, meshes: MeshAssets) -> None:
        self.plotter = plotter
        self.meshes = meshes
        self._actors: Dict[int, pv.Actor] = {}

    def draw(self, scene: Scene) -> List[pv.Actor]:
        """Adds (or refreshes) one actor per instanced entity."""
        for entity in scene.query(Visibility):
            entity.get(Visibility).computed = resolve_visibility(entity)

        actors = []
        for entity in scene.query(InstanceMaterialData, MeshHandle):
            actors.append(self._draw_entity(entity))
        logger.info(f"Drew {len(actors)} instanced entities.")
        return actors

    def _draw_entity(self, entity: Entity) -> pv.Actor:
        data = entity.get(InstanceMaterialData)
        mesh = self.meshes.get(entity.get(MeshHandle))

        glyphs = build_instance_glyphs(data, mesh, world_transform(entity))

        old = self._actors.pop(entity.id, None)
        if old is not None:
            self.plotter.remove_actor(old)

        actor = self.plotter.add_mesh(
            glyphs,
            scalars="rgba",
            rgb=True,
            show_scalar_bar=False,
            pickable=False,
        )
        self._actors[entity.id] = actor

        visible = resolve_visibility(entity)
        actor.SetVisibility(visible)

        if entity.has(NoFrustumCulling):
            # Culling uses the shared mesh bounds, not the instance extent
            self.plotter.renderer.GetCullers().RemoveAllItems()

        logger.debug(f"Entity {entity.id}: {len(data)} instances, visible={visible}.")
        return actor
