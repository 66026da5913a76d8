# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: тестовые кадры, атлас из 16 однотонных
ячеек, параметризованный бекенд и сброс синглтона конфигурации.
"""

import numpy as np
import pytest

from mosaicfx.core.image import Image
from mosaicfx.graphics import select_backend
from mosaicfx.utils.config import Config


# ----------------------------------------------------------------------
# Атлас: ячейка i залита цветом (i/16, 0.5, 1 - i/16, 1)
# ----------------------------------------------------------------------
def cell_color(i: int) -> np.ndarray:
    return np.array([i / 16.0, 0.5, 1.0 - i / 16.0, 1.0], dtype=np.float32)


def make_solid_atlas(cell_w: int = 4, cell_h: int = 4) -> Image:
    px = np.empty((cell_h, 16 * cell_w, 4), dtype=np.float32)
    for i in range(16):
        px[:, i * cell_w:(i + 1) * cell_w] = cell_color(i)
    return Image(px)


def gray(width: int, height: int, value: float) -> Image:
    return Image.blank(width, height, (value, value, value, 1.0))


@pytest.fixture
def solid_atlas() -> Image:
    """Атлас 64x4: 16 однотонных ячеек 4x4."""
    return make_solid_atlas()


@pytest.fixture
def noise_image() -> Image:
    """Детерминированный «шумный» кадр 16x12."""
    rng = np.random.default_rng(1234)
    return Image(rng.random((12, 16, 4), dtype=np.float32))


# ----------------------------------------------------------------------
# Бекенды: каждый тест с этой фикстурой гоняется на numpy и на Numba
# ----------------------------------------------------------------------
@pytest.fixture(params=["numpy", "numba"])
def backend(request):
    be = select_backend(request.param)
    be.init_device()
    yield be
    be.shutdown()


@pytest.fixture(autouse=True)
def _reset_config():
    """Config – синглтон; не даём ему протекать между тестами."""
    Config.reset()
    yield
    Config.reset()
