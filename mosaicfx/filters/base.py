"""
Общая часть фильтров: ленивое получение бекенда, режимы выборки,
проверка входных изображений и сетки.
"""

from __future__ import annotations

from typing import Optional, Union

from mosaicfx.core.grid import GridSpec
from mosaicfx.core.image import Image
from mosaicfx.core.sampling import check_address, check_filter
from mosaicfx.errors import InvalidParameter
from mosaicfx.graphics.backend import ComputeBackend, select_backend
from mosaicfx.utils.logger import logger


class BaseFilter:
    """
    Фильтр сам по себе не хранит состояния между вызовами, кроме
    «дескриптора» бекенда.  Бекенд создаётся при первом ``apply`` и
    освобождается в ``close()``; переданный снаружи бекенд фильтру
    не принадлежит и не закрывается.
    """

    name = "filter"

    def __init__(
        self,
        backend: Union[str, ComputeBackend] = "numpy",
        source_filter: str = "nearest",
        address: str = "clamp",
        workers: Optional[int] = None,
    ):
        self.source_filter = check_filter(source_filter)
        self.address = check_address(address)
        self._workers = workers
        if isinstance(backend, ComputeBackend):
            self._backend: Optional[ComputeBackend] = backend
            self._backend_name = backend.name
            self._owns_backend = False
        else:
            self._backend = None
            self._backend_name = str(backend).lower()
            self._owns_backend = True

    # -----------------------------------------------------------------
    @property
    def backend(self) -> ComputeBackend:
        if self._backend is None:
            self._backend = select_backend(self._backend_name, workers=self._workers)
            self._backend.init_device()
            logger.debug(f"[{self.name}] Acquired {self._backend_name} backend")
        return self._backend

    def close(self) -> None:
        if self._backend is not None and self._owns_backend:
            self._backend.shutdown()
            logger.debug(f"[{self.name}] Released {self._backend_name} backend")
            self._backend = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # -----------------------------------------------------------------
    def _check_image(self, image, role: str) -> Image:
        if image is None:
            raise InvalidParameter(f"[{self.name}] {role} image is missing")
        if not isinstance(image, Image):
            raise InvalidParameter(
                f"[{self.name}] {role} must be an Image, got {type(image).__name__}"
            )
        if image.width <= 0 or image.height <= 0:
            raise InvalidParameter(
                f"[{self.name}] {role} image must have positive size, got {image.width}x{image.height}"
            )
        return image

    def _check_grid(self, grid) -> GridSpec:
        if not isinstance(grid, GridSpec):
            raise InvalidParameter(
                f"[{self.name}] grid must be a GridSpec, got {type(grid).__name__}"
            )
        return grid
