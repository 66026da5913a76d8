# mosaicfx/core/luminance.py
"""
Яркость выборки и выбор ячейки атласа.  Работает как со скалярами,
так и с ndarray (последняя ось – каналы).
"""

import numpy as np

from mosaicfx.core.grid import ATLAS_CELLS

LUMA_R = 0.3
LUMA_G = 0.59
LUMA_B = 0.11


def luminance(rgb):
    """``clamp(0.3 R + 0.59 G + 0.11 B, 0, 1)``."""
    rgb = np.asarray(rgb, dtype=np.float64)
    lum = LUMA_R * rgb[..., 0] + LUMA_G * rgb[..., 1] + LUMA_B * rgb[..., 2]
    return np.clip(lum, 0.0, 1.0)


def cell_index(lum):
    """Номер ячейки атласа ``floor(lum * 16)``, ограниченный [0, 15]."""
    lum = np.asarray(lum, dtype=np.float64)
    idx = np.floor(lum * ATLAS_CELLS).astype(np.int64)
    idx = np.clip(idx, 0, ATLAS_CELLS - 1)
    if idx.ndim == 0:
        return int(idx)
    return idx


def cell_offset(index) -> float:
    """Горизонтальное UV‑смещение ячейки в атласе."""
    return index / ATLAS_CELLS
