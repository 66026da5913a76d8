# mosaicfx/postproc/chunky.py
from mosaicfx.core.grid import GridSpec
from mosaicfx.errors import InvalidParameter
from mosaicfx.filters.mosaic_atlas import MosaicAtlasFilter
from mosaicfx.math.color import Color
from mosaicfx.postproc.pas import RenderPass
from mosaicfx.utils.logger import logger


class ChunkyPass(RenderPass):
    """
    Мозаика из ячеек атласа.  Сетка выводится из размера кадра и размера
    одной ячейки атласа и пересчитывается только при ``resize``.
    Без атласа проход просто пропускает кадр дальше.
    """
    def __init__(self, atlas=None, tint=None, source_filter="nearest",
                 atlas_filter="nearest", address="clamp"):
        self.atlas = atlas
        self.tint = tint if tint is not None else Color.white()
        self.source_filter = source_filter
        self.atlas_filter = atlas_filter
        self.address = address
        self.filter = None
        self.grid = None
        self.width = self.height = 0

    def init(self, width, height, backend):
        self.resize(width, height, backend)

    def run(self, src, backend):
        if self.atlas is None:
            return src
        if self.grid is None:
            raise RuntimeError("ChunkyPass: init() was not called")
        if self.filter is None:
            self.filter = MosaicAtlasFilter(backend=backend,
                                            source_filter=self.source_filter,
                                            atlas_filter=self.atlas_filter,
                                            address=self.address)
        return self.filter.apply(src, self.atlas, self.grid, self.tint)

    def set_atlas(self, atlas):
        """Смена атласа – сетку нужно пересчитать; неподходящий атлас не принимается."""
        previous, self.atlas = self.atlas, atlas
        if self.width and self.height:
            try:
                self.resize(self.width, self.height, None)
            except InvalidParameter:
                self.atlas = previous
                raise

    def resize(self, w, h, backend):
        if self.atlas is None:
            self.width, self.height = w, h
            self.grid = None
            logger.debug("[ChunkyPass] No atlas assigned - frames pass through")
            return
        # при ошибке сетка и размер остаются прежними
        grid = GridSpec.from_atlas(w, h, self.atlas)
        self.width, self.height = w, h
        self.grid = grid
        logger.debug(f"[ChunkyPass] Grid {self.grid.columns}x{self.grid.rows} for {w}x{h}")

    def cleanup(self, backend):
        if self.filter is not None:
            self.filter.close()
            self.filter = None
