"""
«Chunky»‑мозаика: каждый блок выхода заполняется одной из 16 ячеек
атласа спрайтов.

Алгоритм для пикселя с UV ``(u, v)``:

1. ``blockPos = floor((u, v) * (columns, rows))``;
2. ``blockCenter = blockPos * blockSize + blockSize / 2`` – одна
   выборка исходника на весь блок;
3. из выборки вычитается ``(1, 1, 1, 1) - tint``;
4. ``lum = clamp(0.3 R + 0.59 G + 0.11 B, 0, 1)``;
5. ``cell = clamp(floor(lum * 16), 0, 15)``;
6. локальная UV блока растягивается на ширину одной ячейки атласа
   и сдвигается на ``cell / 16``;
7. цвет атласа выводится как есть – tint и цвет исходника влияют
   только на выбор ячейки.
"""

from __future__ import annotations

from typing import Optional, Union

from mosaicfx.core.grid import ATLAS_CELLS, GridSpec
from mosaicfx.core.image import Image
from mosaicfx.core.sampling import check_filter
from mosaicfx.errors import InvalidParameter
from mosaicfx.filters.base import BaseFilter
from mosaicfx.graphics.backend import ComputeBackend
from mosaicfx.math.color import Color
from mosaicfx.utils.profiler import Profiler


class MosaicAtlasFilter(BaseFilter):
    """``apply(source, atlas, grid, tint) -> Image``"""

    name = "MosaicAtlasFilter"

    def __init__(
        self,
        backend: Union[str, ComputeBackend] = "numpy",
        source_filter: str = "nearest",
        atlas_filter: str = "nearest",
        address: str = "clamp",
        workers: Optional[int] = None,
    ):
        super().__init__(backend=backend, source_filter=source_filter,
                         address=address, workers=workers)
        self.atlas_filter = check_filter(atlas_filter)

    # -----------------------------------------------------------------
    def apply(self, source: Image, atlas: Image, grid: GridSpec,
              tint: Optional[Color] = None) -> Image:
        source = self._check_image(source, "source")
        atlas = self._check_image(atlas, "atlas")
        grid = self._check_grid(grid)
        if atlas.width % ATLAS_CELLS != 0:
            raise InvalidParameter(
                f"[{self.name}] Atlas width {atlas.width} is not divisible by {ATLAS_CELLS}"
            )
        if tint is None:
            tint = Color.white()
        elif not isinstance(tint, Color):
            raise InvalidParameter(
                f"[{self.name}] tint must be a Color, got {type(tint).__name__}"
            )

        with Profiler(f"{self.name} {source.width}x{source.height} / {grid.columns}x{grid.rows}"):
            out = self.backend.chunky(
                source.pixels, atlas.pixels, grid.columns, grid.rows,
                tint.complement(),
                src_filter=self.source_filter,
                atlas_filter=self.atlas_filter,
                address=self.address,
            )
        return Image(out)
