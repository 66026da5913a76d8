"""
Пакет пост‑процессинга (Pixelation, Chunky).
"""

from mosaicfx.postproc.pas import RenderPass
from mosaicfx.postproc.pipeline import PostProcessingPipeline
from mosaicfx.postproc.pixelation import PixelationPass
from mosaicfx.postproc.chunky import ChunkyPass

PASSES = {
    "pixelation": PixelationPass,
    "chunky": ChunkyPass,
}

__all__ = [
    "RenderPass",
    "PostProcessingPipeline",
    "PixelationPass",
    "ChunkyPass",
    "PASSES",
]
