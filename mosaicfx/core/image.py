# mosaicfx/core/image.py
"""
Неизменяемое RGBA‑изображение (float32, [0, 1]).

Пиксель ``(x, y)`` имеет UV‑координаты ``((x + 0.5) / W, (y + 0.5) / H)``:
``u`` растёт вместе с номером столбца, ``v`` – вместе с номером строки
(строка 0 – верхняя строка массива).
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from mosaicfx.errors import InvalidParameter, SampleOutOfRange


class Image:
    """Обёртка над ndarray формы (H, W, 4), доступным только для чтения."""

    __slots__ = ("_px",)

    def __init__(self, pixels):
        if pixels is None:
            raise InvalidParameter("[Image] Pixel data is missing")
        arr = np.asarray(pixels)

        if arr.ndim == 2:
            arr = arr[:, :, None].repeat(3, axis=2)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise InvalidParameter(
                f"[Image] Expected (H, W), (H, W, 3) or (H, W, 4) array, got shape {arr.shape}"
            )
        if arr.shape[0] <= 0 or arr.shape[1] <= 0:
            raise InvalidParameter(
                f"[Image] Image must have positive width and height, got {arr.shape[1]}x{arr.shape[0]}"
            )

        if arr.dtype == np.uint8:
            px = arr.astype(np.float32) / np.float32(255.0)
        elif np.issubdtype(arr.dtype, np.unsignedinteger):
            # uint16 и шире: нормализация по максимуму типа
            px = (arr.astype(np.float64) / np.iinfo(arr.dtype).max).astype(np.float32)
        elif np.issubdtype(arr.dtype, np.floating):
            px = arr.astype(np.float32)
        else:
            raise InvalidParameter(f"[Image] Unsupported pixel dtype: {arr.dtype}")

        if px.shape[2] == 3:
            alpha = np.ones(px.shape[:2] + (1,), dtype=np.float32)
            px = np.concatenate([px, alpha], axis=2)

        px = np.ascontiguousarray(px)
        px.flags.writeable = False
        self._px = px

    # -----------------------------------------------------------------
    # фабрики
    # -----------------------------------------------------------------
    @classmethod
    def blank(cls, width: int, height: int,
              color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)) -> "Image":
        """Изображение, залитое одним цветом."""
        if width <= 0 or height <= 0:
            raise InvalidParameter(
                f"[Image] Image must have positive width and height, got {width}x{height}"
            )
        px = np.empty((height, width, 4), dtype=np.float32)
        px[...] = np.asarray(color, dtype=np.float32)
        return cls(px)

    @classmethod
    def from_pil(cls, pil_image) -> "Image":
        """Pillow ``Image`` → ``Image`` (через RGBA8)."""
        return cls(np.array(pil_image.convert("RGBA"), dtype=np.uint8))

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self._px.shape[1])

    @property
    def height(self) -> int:
        return int(self._px.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) – как у Pillow."""
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """Массив (H, W, 4) float32 только для чтения."""
        return self._px

    # -----------------------------------------------------------------
    # доступ к данным
    # -----------------------------------------------------------------
    def texel(self, x: int, y: int) -> np.ndarray:
        """Прямое чтение текселя по целочисленным координатам."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise SampleOutOfRange(
                f"[Image] Texel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return self._px[y, x].copy()

    def uv(self, x: int, y: int) -> Tuple[float, float]:
        """UV‑координаты центра пикселя ``(x, y)``."""
        return (x + 0.5) / self.width, (y + 0.5) / self.height

    def to_uint8(self) -> np.ndarray:
        """Копия (H, W, 4) uint8 с округлением."""
        return np.round(np.clip(self._px, 0.0, 1.0) * 255.0).astype(np.uint8)

    def to_pil(self):
        from PIL import Image as PILImage
        return PILImage.fromarray(self.to_uint8())

    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return bool(np.array_equal(self._px, other._px))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"
