"""
Пакет фильтров: «chunky»‑мозаика по атласу и простая пикселизация.
"""

from mosaicfx.filters.base import BaseFilter
from mosaicfx.filters.mosaic_atlas import MosaicAtlasFilter
from mosaicfx.filters.pixelation import PlainPixelationFilter

__all__ = [
    "BaseFilter",
    "MosaicAtlasFilter",
    "PlainPixelationFilter",
]
