"""
Бекенд на JIT‑ядрах Numba (``mosaicfx.native.kernels``).

Ядра компилируются при первом вызове; ``init_device`` делает «прогрев»
на крошечном кадре, чтобы компиляция не попадала во время первого кадра.
"""

from __future__ import annotations

import numpy as np

from mosaicfx.graphics.backend import ComputeBackend
from mosaicfx.native import kernels
from mosaicfx.utils.logger import logger

_FILTER_CODES = {"nearest": kernels.NEAREST, "bilinear": kernels.BILINEAR}
_ADDRESS_CODES = {"clamp": kernels.CLAMP, "wrap": kernels.WRAP}


class NumbaBackend(ComputeBackend):
    """CPU‑бекенд с параллельными JIT‑ядрами."""

    name = "numba"

    def __init__(self):
        self._warm = False

    # -----------------------------------------------------------------
    def init_device(self) -> None:
        if self._warm:
            return
        logger.debug("[NumbaBackend] Compiling kernels")
        tiny = np.zeros((1, 16, 4), dtype=np.float32)
        tiny.flags.writeable = False  # Image отдаёт массивы только для чтения
        self.pixelate(tiny, 1, 1)
        self.chunky(tiny, tiny, 1, 1, np.zeros(4))
        self._warm = True

    def shutdown(self) -> None:
        self._warm = False

    # -----------------------------------------------------------------
    def pixelate(self, src, columns, rows, src_filter="nearest", address="clamp"):
        height, width = src.shape[:2]
        out = np.empty((height, width, 4), dtype=np.float32)
        kernels.pixelate_kernel(
            src, int(columns), int(rows),
            _FILTER_CODES[src_filter], _ADDRESS_CODES[address],
            out,
        )
        return out

    def chunky(self, src, atlas, columns, rows, tint_offset,
               src_filter="nearest", atlas_filter="nearest", address="clamp"):
        height, width = src.shape[:2]
        out = np.empty((height, width, 4), dtype=np.float32)
        off = np.asarray(tint_offset, dtype=np.float64)
        kernels.chunky_kernel(
            src, atlas, int(columns), int(rows),
            float(off[0]), float(off[1]), float(off[2]),
            _FILTER_CODES[src_filter], _FILTER_CODES[atlas_filter],
            _ADDRESS_CODES[address],
            out,
        )
        return out
