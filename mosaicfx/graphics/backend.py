"""
Абстрактный интерфейс вычислительных бекендов.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from mosaicfx.errors import InvalidParameter


class ComputeBackend(ABC):
    """
    Base interface for compute backends.

    Бекенд получает «сырые» массивы (H, W, 4) float32 и уже проверенные
    параметры; валидация входа – забота фильтров.
    """

    name = "abstract"

    @abstractmethod
    def init_device(self) -> None:
        pass

    @abstractmethod
    def pixelate(
        self,
        src: np.ndarray,
        columns: int,
        rows: int,
        src_filter: str = "nearest",
        address: str = "clamp",
    ) -> np.ndarray:
        pass

    @abstractmethod
    def chunky(
        self,
        src: np.ndarray,
        atlas: np.ndarray,
        columns: int,
        rows: int,
        tint_offset: np.ndarray,
        src_filter: str = "nearest",
        atlas_filter: str = "nearest",
        address: str = "clamp",
    ) -> np.ndarray:
        pass

    @abstractmethod
    def shutdown(self) -> None:
        pass


def select_backend(name: str = "numpy", workers: Optional[int] = None) -> ComputeBackend:
    """Select compute backend by name."""
    name = str(name).lower()
    if name == "numpy":
        from .numpy_backend import NumpyBackend
        return NumpyBackend(workers=workers)
    elif name == "numba":
        from .numba_backend import NumbaBackend
        return NumbaBackend()
    else:
        raise InvalidParameter(f"Unknown compute backend: {name}")
