# mosaicfx/core/grid.py
"""
Сетка мозаики: количество блоков (GridSpec) и размер блока в UV (BlockSize).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
import numbers
from typing import Tuple

from mosaicfx.errors import InvalidParameter

# Атлас «chunky»-эффекта всегда состоит из 16 ячеек по горизонтали.
ATLAS_CELLS = 16


def _positive_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(f"[GridSpec] {name} must be an integer, got {value!r}")
    value = int(value)
    if value < 1:
        raise InvalidParameter(f"[GridSpec] {name} must be >= 1, got {value}")
    return value


@dataclass(frozen=True)
class BlockSize:
    """Размер одного блока в нормализованных UV‑единицах."""
    width: float
    height: float

    def origin(self, bx: int, by: int) -> Tuple[float, float]:
        """UV левого‑верхнего угла блока ``(bx, by)``."""
        return bx * self.width, by * self.height

    def center(self, bx: int, by: int) -> Tuple[float, float]:
        """UV репрезентативной точки блока (его центра)."""
        return (bx * self.width + self.width * 0.5,
                by * self.height + self.height * 0.5)


@dataclass(frozen=True)
class GridSpec:
    """Сколько блоков (columns × rows) покрывает выходное изображение."""
    columns: int
    rows: int

    def __post_init__(self):
        # numpy‑целые приводятся к int, чтобы сетки сравнивались и хешировались одинаково
        object.__setattr__(self, "columns", _positive_int("columns", self.columns))
        object.__setattr__(self, "rows", _positive_int("rows", self.rows))

    # -----------------------------------------------------------------
    @property
    def block_size(self) -> BlockSize:
        return BlockSize(1.0 / self.columns, 1.0 / self.rows)

    def block_of(self, u: float, v: float) -> Tuple[int, int]:
        """Целочисленные координаты блока, в который попадает UV."""
        return int(math.floor(u * self.columns)), int(math.floor(v * self.rows))

    # -----------------------------------------------------------------
    # производные сетки
    # -----------------------------------------------------------------
    @classmethod
    def from_atlas(cls, width: int, height: int, atlas) -> "GridSpec":
        """
        Сетка «chunky»-эффекта: один блок на одну ячейку атласа.

        ``columns = width // cell_width``, ``rows = height // atlas.height``,
        где ``cell_width = atlas.width / 16``.
        """
        if atlas is None:
            raise InvalidParameter("[GridSpec] Atlas image is missing")
        if atlas.width % ATLAS_CELLS != 0:
            raise InvalidParameter(
                f"[GridSpec] Atlas width {atlas.width} is not divisible by {ATLAS_CELLS}"
            )
        cell_w = atlas.width // ATLAS_CELLS
        columns = width // cell_w
        rows = height // atlas.height
        if columns < 1 or rows < 1:
            raise InvalidParameter(
                f"[GridSpec] {width}x{height} frame is smaller than one "
                f"{cell_w}x{atlas.height} atlas cell"
            )
        return cls(columns, rows)

    @classmethod
    def from_block_count(cls, block_count: float, width: int, height: int) -> "GridSpec":
        """
        Сетка пикселизации: ``block_count`` блоков по горизонтали,
        по вертикали – с учётом соотношения сторон кадра.
        """
        if not block_count > 0:
            raise InvalidParameter(f"[GridSpec] block_count must be > 0, got {block_count}")
        if width <= 0 or height <= 0:
            raise InvalidParameter(
                f"[GridSpec] Frame must have positive size, got {width}x{height}"
            )
        aspect = width / height
        columns = int(round(block_count))
        rows = int(round(block_count / aspect))
        if columns < 1 or rows < 1:
            raise InvalidParameter(
                f"[GridSpec] block_count {block_count} yields an empty grid for {width}x{height}"
            )
        return cls(columns, rows)
