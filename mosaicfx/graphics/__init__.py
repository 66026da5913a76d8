"""
Вычислительный слой – выбирает нужный бекенд (numpy или Numba).
"""

from mosaicfx.graphics.backend import ComputeBackend, select_backend
from mosaicfx.graphics.numpy_backend import NumpyBackend

__all__ = [
    "ComputeBackend",
    "NumpyBackend",
    "select_backend",
]
