from __future__ import annotations

import pytest

from pointfield.config import PointCloudSettings
from pointfield.app.application import Application
from pointfield.app.inspect import inspectable_components
from pointfield.app.plugin import PointGenerationPlugin, setup_point_cloud
from pointfield.app.scene import MeshAssets, MeshHandle, Scene
from pointfield.model.geometry_primitives import Transform, Vector
from pointfield.model.grid import InvalidDimensions
from pointfield.model.instances import InstanceMaterialData, NoFrustumCulling, Visibility
from pointfield.model.point_cloud import PointCloud


def test_setup_spawns_parent_and_instanced_child() -> None:
    scene = Scene()
    meshes = MeshAssets()
    parent = setup_point_cloud(scene, meshes, PointCloudSettings())

    assert len(scene) == 2
    assert parent.has(PointCloud, Visibility)
    assert parent.get(PointCloud).len() == 6

    (child,) = parent.children
    assert child.parent is parent
    assert child.has(Transform, InstanceMaterialData, Visibility, NoFrustumCulling, MeshHandle)
    assert len(child.get(InstanceMaterialData)) == parent.get(PointCloud).len()


def test_one_mesh_per_point_cloud() -> None:
    scene = Scene()
    meshes = MeshAssets()
    setup_point_cloud(scene, meshes, PointCloudSettings(width=5, depth=4, height=3))
    assert len(meshes) == 1
    (child,) = scene.query(InstanceMaterialData)
    cube = meshes.get(child.get(MeshHandle))
    assert cube.bounds[1] - cube.bounds[0] == pytest.approx(1.1)


def test_settings_flow_into_both_generators() -> None:
    settings = PointCloudSettings(origin=Vector(1.0, 2.0, 3.0), width=2, depth=3, height=4, seed=7)
    parent = setup_point_cloud(Scene(), MeshAssets(), settings)
    cloud = parent.get(PointCloud)
    assert cloud.dimensions == (2, 4, 3)
    assert cloud.origin == settings.origin
    assert parent.children[0].get(Transform).translation == settings.origin


def test_invalid_settings_fail_before_spawning() -> None:
    scene = Scene()
    meshes = MeshAssets()
    with pytest.raises(InvalidDimensions):
        setup_point_cloud(scene, meshes, PointCloudSettings(width=0))
    assert len(scene) == 0
    assert len(meshes) == 0


def test_plugin_registers_stage_and_inspectable() -> None:
    app = Application().add_plugin(PointGenerationPlugin())
    assert app.inspectables() == [PointCloud]
    assert len(app.scene) == 0

    app.run_startup()
    assert len(app.scene) == 2

    # Startup runs once
    app.run_startup()
    assert len(app.scene) == 2

    views = list(inspectable_components(app))
    assert len(views) == 1
    entity_id, type_name, view = views[0]
    assert type_name == "PointCloud"
    assert view["len"] == 6


def test_unknown_stage_rejected() -> None:
    app = Application()
    with pytest.raises(ValueError):
        app.add_startup_system_to_stage("missing", lambda a: None)


def test_unknown_mesh_handle() -> None:
    with pytest.raises(KeyError):
        MeshAssets().get(MeshHandle(42))
