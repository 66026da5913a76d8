# mosaicfx/postproc/pixelation.py
from mosaicfx.core.grid import GridSpec
from mosaicfx.errors import InvalidParameter
from mosaicfx.filters.pixelation import PlainPixelationFilter
from mosaicfx.postproc.pas import RenderPass
from mosaicfx.utils.logger import logger


class PixelationPass(RenderPass):
    """
    Пикселизация кадра.  ``block_count`` – число блоков по горизонтали,
    по вертикали оно пересчитывается по соотношению сторон кадра.
    """
    def __init__(self, block_count=128.0, source_filter="nearest", address="clamp"):
        if not block_count > 0:
            raise InvalidParameter(f"[PixelationPass] block_count must be > 0, got {block_count}")
        self.block_count = float(block_count)
        self.source_filter = source_filter
        self.address = address
        self.filter = None
        self.grid = None

    def init(self, width, height, backend):
        self.filter = PlainPixelationFilter(backend=backend,
                                            source_filter=self.source_filter,
                                            address=self.address)
        self.resize(width, height, backend)
        logger.info(f"[PixelationPass] Enabled - BlockCount: {self.block_count}")

    def run(self, src, backend):
        if self.filter is None:
            raise RuntimeError("PixelationPass: init() was not called")
        return self.filter.apply(src, self.grid)

    def resize(self, w, h, backend):
        self.grid = GridSpec.from_block_count(self.block_count, w, h)
        self.width, self.height = w, h
        logger.debug(f"[PixelationPass] Grid {self.grid.columns}x{self.grid.rows} for {w}x{h}")

    def cleanup(self, backend):
        if self.filter is not None:
            self.filter.close()
            self.filter = None
        logger.info(f"[PixelationPass] Disabled - BlockCount: {self.block_count}")
