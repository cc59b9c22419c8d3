"""
Scene Composition
=================
Entities are plain component containers. A component is any object; an
entity holds at most one component per type. Children are attached to a
parent entity and rendered relative to its transform.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar
import logging

import pyvista as pv

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class MeshHandle:
    """Reference to a mesh stored in `MeshAssets`."""
    id: int


class MeshAssets:
    """Registry of meshes shared between entities."""

    def __init__(self) -> None:
        self._meshes: Dict[MeshHandle, pv.PolyData] = {}
        self._ids = count()

    def add(self, mesh: pv.PolyData) -> MeshHandle:
        handle = MeshHandle(next(self._ids))
        self._meshes[handle] = mesh
        logger.debug(f"Registered mesh {handle.id} ({mesh.n_points} points).")
        return handle

    def get(self, handle: MeshHandle) -> pv.PolyData:
        try:
            return self._meshes[handle]
        except KeyError:
            raise KeyError(f"No mesh registered for handle {handle.id}") from None

    def __len__(self) -> int:
        return len(self._meshes)


def cube_mesh(size: float) -> pv.PolyData:
    """Axis-aligned cube of edge `size` centered at the origin."""
    return pv.Cube(center=(0.0, 0.0, 0.0), x_length=size, y_length=size, z_length=size)


class Entity:
    def __init__(self, scene: Scene, entity_id: int) -> None:
        self.scene = scene
        self.id = entity_id
        self.components: Dict[type, Any] = {}
        self.children: List[Entity] = []
        self.parent: Optional[Entity] = None

    def insert(self, *components: Any) -> Entity:
        """Adds components, replacing any existing component of the same type."""
        for component in components:
            self.components[type(component)] = component
        return self

    def get(self, component_type: Type[T]) -> Optional[T]:
        return self.components.get(component_type)

    def has(self, *component_types: type) -> bool:
        return all(t in self.components for t in component_types)

    def with_children(self, build: Callable[[Entity], None]) -> Entity:
        """Runs `build` with this entity as the parent of anything it spawns via `spawn_child`."""
        build(self)
        return self

    def spawn_child(self, *components: Any) -> Entity:
        child = self.scene.spawn(*components)
        child.parent = self
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self.components)
        return f"Entity({self.id}: {names})"


class Scene:
    def __init__(self) -> None:
        self._entities: List[Entity] = []
        self._ids = count()

    def spawn(self, *components: Any) -> Entity:
        entity = Entity(self, next(self._ids))
        entity.insert(*components)
        self._entities.append(entity)
        return entity

    def query(self, *component_types: type) -> Iterator[Entity]:
        """Entities carrying all the given component types, in spawn order."""
        for entity in self._entities:
            if entity.has(*component_types):
                yield entity

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)
