"""
Application Host
================
Owns the scene, the mesh assets and the startup schedule.

Startup stages run once, in the order they were added. Each system in a
stage is called with the application and may spawn entities or register
meshes.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Protocol
import logging

from pointfield.app.scene import MeshAssets, Scene

logger = logging.getLogger(__name__)

StartupSystem = Callable[["Application"], None]


class Plugin(Protocol):
    def build(self, app: Application) -> None: ...


class Application:
    def __init__(self) -> None:
        self.scene = Scene()
        self.meshes = MeshAssets()
        self._stages: Dict[str, List[StartupSystem]] = {}
        self._inspectables: List[type] = []
        self._started = False

    def add_plugin(self, plugin: Plugin) -> Application:
        logger.debug(f"Building plugin {type(plugin).__name__}.")
        plugin.build(self)
        return self

    def register_inspectable(self, component_type: type) -> Application:
        if component_type not in self._inspectables:
            self._inspectables.append(component_type)
        return self

    def inspectables(self) -> List[type]:
        return list(self._inspectables)

    def add_startup_stage(self, name: str) -> Application:
        if name in self._stages:
            raise ValueError(f"Startup stage '{name}' already exists.")
        self._stages[name] = []
        return self

    def add_startup_system_to_stage(self, name: str, system: StartupSystem) -> Application:
        if name not in self._stages:
            raise ValueError(f"Unknown startup stage '{name}'.")
        self._stages[name].append(system)
        return self

    def run_startup(self) -> None:
        """Runs every startup system once. Calling it again is a no-op."""
        if self._started:
            return
        self._started = True
        for name, systems in self._stages.items():
            logger.info(f"Running startup stage '{name}' ({len(systems)} systems).")
            for system in systems:
                system(self)
