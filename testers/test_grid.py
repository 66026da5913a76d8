# -*- coding: utf-8 -*-
import numpy as np
import pytest

from mosaicfx.core.grid import BlockSize, GridSpec
from mosaicfx.errors import InvalidParameter
from conftest import make_solid_atlas


@pytest.mark.parametrize("columns,rows", [(1, 1), (2, 2), (3, 7), (128, 72), (1000, 3)])
def test_block_size_is_reciprocal(columns, rows):
    bs = GridSpec(columns, rows).block_size
    assert bs == BlockSize(1.0 / columns, 1.0 / rows)
    assert bs.width * columns == pytest.approx(1.0)
    assert bs.height * rows == pytest.approx(1.0)


@pytest.mark.parametrize("columns,rows", [(0, 1), (1, 0), (-2, 3), (2.0, 2), (True, 2), ("4", 4)])
def test_invalid_grid_rejected(columns, rows):
    with pytest.raises(InvalidParameter):
        GridSpec(columns, rows)


def test_invalid_parameter_is_value_error():
    with pytest.raises(ValueError):
        GridSpec(0, 0)


def test_first_block_center_of_2x2_grid():
    bs = GridSpec(2, 2).block_size
    assert bs == BlockSize(0.5, 0.5)
    assert bs.center(0, 0) == (0.25, 0.25)
    assert bs.origin(1, 1) == (0.5, 0.5)


def test_block_of():
    grid = GridSpec(4, 2)
    assert grid.block_of(0.0, 0.0) == (0, 0)
    assert grid.block_of(0.26, 0.49) == (1, 0)
    assert grid.block_of(0.99, 0.51) == (3, 1)


def test_from_atlas_uses_cell_size():
    atlas = make_solid_atlas(cell_w=8, cell_h=8)     # 128x8
    grid = GridSpec.from_atlas(64, 32, atlas)
    assert (grid.columns, grid.rows) == (8, 4)


def test_from_atlas_floors_partial_cells():
    atlas = make_solid_atlas(cell_w=4, cell_h=4)
    grid = GridSpec.from_atlas(10, 7, atlas)
    assert (grid.columns, grid.rows) == (2, 1)


def test_from_atlas_frame_smaller_than_cell():
    atlas = make_solid_atlas(cell_w=8, cell_h=8)
    with pytest.raises(InvalidParameter):
        GridSpec.from_atlas(4, 4, atlas)


def test_from_atlas_missing_atlas():
    with pytest.raises(InvalidParameter):
        GridSpec.from_atlas(64, 64, None)


def test_from_block_count_keeps_aspect():
    grid = GridSpec.from_block_count(128, 1920, 1080)
    assert (grid.columns, grid.rows) == (128, 72)


def test_from_block_count_square():
    grid = GridSpec.from_block_count(64.0, 256, 256)
    assert (grid.columns, grid.rows) == (64, 64)


@pytest.mark.parametrize("count", [0, -5.0])
def test_from_block_count_rejects_non_positive(count):
    with pytest.raises(InvalidParameter):
        GridSpec.from_block_count(count, 100, 100)


def test_from_block_count_empty_rows():
    # 1 блок по горизонтали на очень широком кадре → 0 строк
    with pytest.raises(InvalidParameter):
        GridSpec.from_block_count(1, 1000, 10)


def test_numpy_integers_accepted():
    grid = GridSpec(np.int64(6), np.uint16(4))
    assert (grid.columns, grid.rows) == (6, 4)
    assert type(grid.columns) is int
    assert grid == GridSpec(6, 4)


@pytest.mark.parametrize("columns,rows", [(np.bool_(True), 2), (2.0, 2), (np.int32(0), 3)])
def test_non_integer_or_empty_numpy_values_rejected(columns, rows):
    with pytest.raises(InvalidParameter):
        GridSpec(columns, rows)
