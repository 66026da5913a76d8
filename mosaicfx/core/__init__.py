"""
Ядро: изображение, сетка блоков, яркость и выборка.
"""

from mosaicfx.core.image import Image
from mosaicfx.core.grid import ATLAS_CELLS, BlockSize, GridSpec
from mosaicfx.core.luminance import cell_index, cell_offset, luminance
from mosaicfx.core.sampling import sample

__all__ = [
    "Image",
    "ATLAS_CELLS",
    "BlockSize",
    "GridSpec",
    "luminance",
    "cell_index",
    "cell_offset",
    "sample",
]
