from __future__ import annotations

import numpy as np
import pytest
import pyvista as pv

from pointfield.app.application import Application
from pointfield.app.scene import MeshAssets, Scene, cube_mesh
from pointfield.app.plugin import PointGenerationPlugin, setup_point_cloud
from pointfield.config import PointCloudSettings
from pointfield.model.geometry_primitives import Transform, Vector
from pointfield.model.instances import InstanceMaterialData, PointCloudRender, Visibility
from pointfield.model.point_cloud import PointCloud
from pointfield.view.renderer import (
    InstancedRenderer,
    build_instance_glyphs,
    resolve_visibility,
    world_transform,
)


def test_one_mesh_copy_per_instance() -> None:
    render = PointCloudRender.new(Vector.zero(), 3, 2, 1)
    cube = cube_mesh(1.1)
    glyphs = build_instance_glyphs(render.instance_material_data, cube)
    assert glyphs.n_points == 6 * cube.n_points
    assert glyphs["rgba"].shape == (6 * cube.n_points, 4)


def test_glyph_extent_covers_instance_offsets() -> None:
    render = PointCloudRender.new(Vector.zero(), 3, 2, 1)
    glyphs = build_instance_glyphs(render.instance_material_data, cube_mesh(1.1))
    half = 1.1 * 0.1 / 2
    x_min, x_max, y_min, y_max, z_min, z_max = glyphs.bounds
    assert x_min == pytest.approx(-half, abs=1e-5)
    assert x_max == pytest.approx(0.6 + half, abs=1e-5)
    assert y_max == pytest.approx(half, abs=1e-5)
    assert z_max == pytest.approx(0.3 + half, abs=1e-5)


def test_transform_translates_glyphs() -> None:
    render = PointCloudRender.new(Vector.zero(), 1, 1, 1)
    glyphs = build_instance_glyphs(
        render.instance_material_data, cube_mesh(1.0), Transform.from_xyz(5.0, 0.0, 0.0)
    )
    np.testing.assert_allclose(glyphs.center, (5.0, 0.0, 0.0), atol=1e-6)


def test_world_transform_composes_parents() -> None:
    scene = Scene()
    parent = scene.spawn(Transform(translation=Vector(1.0, 0.0, 0.0), scale=2.0))
    child = parent.spawn_child(Transform.from_xyz(0.5, 1.0, 0.0))
    result = world_transform(child)
    assert result.translation == Vector(2.0, 2.0, 0.0)
    assert result.scale == 2.0


def test_hidden_parent_hides_child() -> None:
    settings = PointCloudSettings()
    parent = setup_point_cloud(Scene(), MeshAssets(), settings)
    child = parent.children[0]
    assert resolve_visibility(child)

    parent.get(Visibility).is_visible = False
    assert not resolve_visibility(child)
    assert child.has(InstanceMaterialData)


def _started_app() -> Application:
    app = Application().add_plugin(PointGenerationPlugin())
    app.run_startup()
    return app


def test_draw_disables_culling_and_resolves_visibility() -> None:
    app = _started_app()
    plotter = pv.Plotter(off_screen=True)
    try:
        assert plotter.renderer.GetCullers().GetNumberOfItems() > 0

        actors = InstancedRenderer(plotter, app.meshes).draw(app.scene)

        assert len(actors) == 1
        assert plotter.renderer.GetCullers().GetNumberOfItems() == 0
        assert bool(actors[0].GetVisibility())
        for entity in app.scene:
            assert entity.get(Visibility).computed
    finally:
        plotter.close()


def test_hidden_parent_hides_drawn_instances() -> None:
    app = _started_app()
    plotter = pv.Plotter(off_screen=True)
    try:
        renderer = InstancedRenderer(plotter, app.meshes)
        renderer.draw(app.scene)

        (parent,) = app.scene.query(PointCloud)
        parent.get(Visibility).is_visible = False
        (actor,) = renderer.draw(app.scene)

        child = parent.children[0]
        assert not bool(actor.GetVisibility())
        assert child.get(Visibility).computed is False
        assert parent.get(Visibility).computed is False
        # Redraw replaces the previous actor instead of stacking a second one
        assert len(plotter.renderer.actors) == 1
    finally:
        plotter.close()
