"""
Контейнер для цепочки пост‑процессов.
Каждый Pass реализует интерфейс `RenderPass` (из postproc.pas).
"""

from typing import Optional

from mosaicfx.core.image import Image
from mosaicfx.errors import InvalidParameter
from mosaicfx.graphics.backend import ComputeBackend
from mosaicfx.postproc.pas import RenderPass
from mosaicfx.utils.logger import logger


class PostProcessingPipeline:
    """Контейнер для набора RenderPass‑ов."""

    def __init__(self, width: int, height: int, backend: Optional[ComputeBackend] = None):
        if width <= 0 or height <= 0:
            raise InvalidParameter(
                f"[PostProcessingPipeline] Frame must have positive size, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.passes: list[RenderPass] = []
        self.backend = backend  # устанавливается Engine при создании

    # -----------------------------------------------------------------
    def add_pass(self, rp: RenderPass) -> None:
        """Регистрация нового прохода (создаёт ресурсы)."""
        if self.backend is None:
            raise RuntimeError("PostProcessingPipeline: backend not set")
        rp.init(self.width, self.height, self.backend)
        self.passes.append(rp)

    # -----------------------------------------------------------------
    def run(self, src: Image) -> Image:
        """
        Прогоняет кадр через все проходы по порядку.
        Кадр другого размера сначала вызывает ``resize`` у всех проходов.
        Без проходов кадр возвращается как есть.
        """
        if src is None:
            raise InvalidParameter("[PostProcessingPipeline] Source frame is missing")
        if (src.width, src.height) != (self.width, self.height):
            logger.info(
                f"[PostProcessingPipeline] Frame size changed "
                f"{self.width}x{self.height} -> {src.width}x{src.height}"
            )
            self.resize(src.width, src.height)

        cur = src
        for rp in self.passes:
            cur = rp.run(cur, self.backend)
        return cur

    # -----------------------------------------------------------------
    def resize(self, w: int, h: int) -> None:
        # размер фиксируется только после успешного resize всех проходов;
        # при ошибке уже изменённые проходы возвращаются к прежнему размеру
        done = []
        try:
            for rp in self.passes:
                rp.resize(w, h, self.backend)
                done.append(rp)
        except Exception:
            logger.error(f"[PostProcessingPipeline] Resize to {w}x{h} failed, "
                         f"keeping {self.width}x{self.height}")
            for rp in done:
                rp.resize(self.width, self.height, self.backend)
            raise
        self.width, self.height = w, h

    # -----------------------------------------------------------------
    def cleanup(self) -> None:
        for rp in self.passes:
            rp.cleanup(self.backend)
        self.passes.clear()
