from __future__ import annotations

import numpy as np
import pytest

from pointfield.model.grid import (
    GridDimensions,
    InvalidDimensions,
    coord_to_index,
    grid_coordinates,
    index_to_coord,
)


@pytest.mark.parametrize("width,depth,height", [(1, 1, 1), (3, 2, 1), (4, 3, 5), (2, 7, 3)])
def test_index_round_trip(width: int, depth: int, height: int) -> None:
    n = width * depth * height
    for idx in range(n):
        x, y, z = index_to_coord(idx, width, depth, height)
        assert 0 <= x < width
        assert 0 <= y < height
        assert 0 <= z < depth
        assert coord_to_index(x, y, z, width, depth) == idx


def test_x_varies_fastest_then_z_then_y() -> None:
    assert index_to_coord(0, 3, 2, 2) == (0, 0, 0)
    assert index_to_coord(1, 3, 2, 2) == (1, 0, 0)
    assert index_to_coord(3, 3, 2, 2) == (0, 0, 1)
    assert index_to_coord(6, 3, 2, 2) == (0, 1, 0)
    assert index_to_coord(11, 3, 2, 2) == (2, 1, 1)


def test_grid_coordinates_match_scalar_decomposition() -> None:
    dims = GridDimensions.validated(4, 3, 2)
    coords = grid_coordinates(dims)
    assert coords.shape == (24, 3)
    expected = np.array([index_to_coord(i, 4, 3, 2) for i in range(24)])
    np.testing.assert_array_equal(coords, expected)


def test_stored_axis_order_is_width_height_depth() -> None:
    dims = GridDimensions.validated(3, 2, 5)
    assert dims.len == 30
    assert dims.as_stored() == (3, 5, 2)


@pytest.mark.parametrize(
    "width,depth,height",
    [(0, 2, 1), (3, 0, 1), (3, 2, 0), (-1, 2, 1), (2.0, 2, 1), (True, 2, 1)],
)
def test_invalid_dimensions_rejected(width, depth, height) -> None:
    with pytest.raises(InvalidDimensions):
        GridDimensions.validated(width, depth, height)


def test_numpy_integers_accepted() -> None:
    dims = GridDimensions.validated(np.int64(2), np.int32(3), 4)
    assert dims == GridDimensions(2, 3, 4)
    assert type(dims.width) is int
