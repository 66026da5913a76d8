"""
MosaicFX – пост‑эффекты пикселизации для Python.
«Chunky»‑мозаика по атласу спрайтов и простая пикселизация,
бекенды numpy и Numba.
"""

from mosaicfx.utils import logger
from mosaicfx.errors import MosaicFXError, InvalidParameter, SampleOutOfRange
from mosaicfx.math import Color
from mosaicfx.core import Image, GridSpec, BlockSize, ATLAS_CELLS
from mosaicfx.filters import MosaicAtlasFilter, PlainPixelationFilter
from mosaicfx.postproc import (
    PostProcessingPipeline,
    RenderPass,
    PixelationPass,
    ChunkyPass,
)
from mosaicfx.engine import Engine

__version__ = "1.0.0"

__all__ = [
    "Engine",
    "Image",
    "GridSpec",
    "BlockSize",
    "ATLAS_CELLS",
    "Color",
    "MosaicAtlasFilter",
    "PlainPixelationFilter",
    "PostProcessingPipeline",
    "RenderPass",
    "PixelationPass",
    "ChunkyPass",
    "MosaicFXError",
    "InvalidParameter",
    "SampleOutOfRange",
]
