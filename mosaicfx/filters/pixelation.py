"""
Простая пикселизация: каждый блок заливается выборкой исходника
в центре блока.
"""

from __future__ import annotations

from mosaicfx.core.grid import GridSpec
from mosaicfx.core.image import Image
from mosaicfx.filters.base import BaseFilter
from mosaicfx.utils.profiler import Profiler


class PlainPixelationFilter(BaseFilter):
    """``apply(source, grid) -> Image``"""

    name = "PlainPixelationFilter"

    def apply(self, source: Image, grid: GridSpec) -> Image:
        source = self._check_image(source, "source")
        grid = self._check_grid(grid)

        with Profiler(f"{self.name} {source.width}x{source.height} / {grid.columns}x{grid.rows}"):
            out = self.backend.pixelate(
                source.pixels, grid.columns, grid.rows,
                src_filter=self.source_filter, address=self.address,
            )
        return Image(out)
