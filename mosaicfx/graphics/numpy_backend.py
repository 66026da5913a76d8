"""
Векторизованный бекенд на numpy.

Кадр делится на полосы строк; при ``workers > 1`` полосы считаются
параллельно на ``TaskPool``.  Каждая полоса пишет в свой срез выходного
массива, поэтому синхронизация не нужна.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from mosaicfx.core.luminance import cell_index, luminance
from mosaicfx.core.grid import ATLAS_CELLS
from mosaicfx.core.sampling import sample
from mosaicfx.graphics.backend import ComputeBackend
from mosaicfx.multithread.task_pool import TaskPool, split_rows
from mosaicfx.utils.logger import logger


def _band_uv(y0: int, y1: int, width: int, height: int):
    """UV центров пикселей для строк [y0, y1)."""
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(y0, y1, dtype=np.float64)
    u = ((xs + 0.5) / width)[None, :]
    v = ((ys + 0.5) / height)[:, None]
    return np.broadcast_arrays(u, v)


def _block_centers(u, v, columns: int, rows: int):
    bsx = 1.0 / columns
    bsy = 1.0 / rows
    bx = np.floor(u * columns)
    by = np.floor(v * rows)
    cu = bx * bsx + bsx * 0.5
    cv = by * bsy + bsy * 0.5
    return bx, by, cu, cv


class NumpyBackend(ComputeBackend):
    """CPU‑бекенд без JIT."""

    name = "numpy"

    def __init__(self, workers: Optional[int] = None):
        self.workers = workers if workers and workers > 0 else 1
        self.pool: Optional[TaskPool] = None

    # -----------------------------------------------------------------
    def init_device(self) -> None:
        if self.workers > 1 and self.pool is None:
            self.pool = TaskPool(max_workers=self.workers)
            logger.debug(f"[NumpyBackend] Task pool started ({self.workers} workers)")

    def shutdown(self) -> None:
        if self.pool is not None:
            self.pool.shutdown()
            self.pool = None
            logger.debug("[NumpyBackend] Task pool stopped")

    # -----------------------------------------------------------------
    def _run_bands(self, fn, out: np.ndarray) -> np.ndarray:
        height = out.shape[0]
        if self.pool is None:
            fn(0, height)
            return out
        # ждём только свои полосы: один бекенд могут звать несколько потоков
        self.pool.gather(fn, split_rows(height, self.workers))
        return out

    # -----------------------------------------------------------------
    def pixelate(self, src, columns, rows, src_filter="nearest", address="clamp"):
        height, width = src.shape[:2]
        out = np.empty((height, width, 4), dtype=np.float32)

        def band(y0, y1):
            u, v = _band_uv(y0, y1, width, height)
            _bx, _by, cu, cv = _block_centers(u, v, columns, rows)
            out[y0:y1] = sample(src, cu, cv, src_filter, address)

        return self._run_bands(band, out)

    def chunky(self, src, atlas, columns, rows, tint_offset,
               src_filter="nearest", atlas_filter="nearest", address="clamp"):
        height, width = src.shape[:2]
        out = np.empty((height, width, 4), dtype=np.float32)
        offset = np.asarray(tint_offset, dtype=np.float64)

        def band(y0, y1):
            u, v = _band_uv(y0, y1, width, height)
            bx, by, cu, cv = _block_centers(u, v, columns, rows)

            rgb = sample(src, cu, cv, src_filter, address)[..., :3] - offset[:3]
            idx = cell_index(luminance(rgb))

            au = ((u * columns - bx) + idx) / ATLAS_CELLS
            av = v * rows - by
            out[y0:y1] = sample(atlas, au, av, atlas_filter, address)

        return self._run_bands(band, out)
