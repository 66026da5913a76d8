# mosaicfx/engine.py
# -*- coding: utf-8 -*-
"""
Обработчик кадров.

* Читает JSON‑конфиг и выбирает вычислительный бекенд.
* Строит цепочку проходов из ``cfg["passes"]`` под размер первого кадра.
* Обрабатывает кадры в памяти (``process``) или файлы (``process_file``).
"""

from pathlib import Path
from typing import Optional

from mosaicfx.core.image import Image
from mosaicfx.errors import InvalidParameter
from mosaicfx.graphics import select_backend
from mosaicfx.math.color import Color
from mosaicfx.postproc import PASSES, ChunkyPass, PixelationPass, PostProcessingPipeline
from mosaicfx.utils import Config, Profiler, load_image, logger, save_image


class Engine:
    """
    Связка Config → backend → PostProcessingPipeline.
    """
    # -----------------------------------------------------------------
    def __init__(self, config_path: str = "mosaicfx.json",
                 backend_name: Optional[str] = None):
        self.cfg = Config(config_path)
        name = backend_name or self.cfg["backend"]
        workers = self.cfg["workers"]
        self.backend = select_backend(name, workers=workers)
        self.backend.init_device()
        self.pipeline: Optional[PostProcessingPipeline] = None
        self._atlas_cache = {}
        logger.info(f"[Engine] Started ({self.backend.name} backend)")

    # -----------------------------------------------------------------
    # построение цепочки
    # -----------------------------------------------------------------
    def _load_atlas(self, path):
        if path is None:
            return None
        key = str(path)
        if key not in self._atlas_cache:
            self._atlas_cache[key] = load_image(path)
        return self._atlas_cache[key]

    def _make_pass(self, name: str):
        if name not in PASSES:
            raise InvalidParameter(f"[Engine] Unknown pass: {name}")
        sampling = self.cfg.section("sampling")
        if name == "pixelation":
            section = self.cfg.section("pixelation")
            return PixelationPass(
                block_count=section["block_count"],
                source_filter=sampling["source_filter"],
                address=sampling["address"],
            )
        section = self.cfg.section("chunky")
        return ChunkyPass(
            atlas=self._load_atlas(section["atlas"]),
            tint=Color.from_iterable(section["tint"]),
            source_filter=sampling["source_filter"],
            atlas_filter=sampling["atlas_filter"],
            address=sampling["address"],
        )

    def build_pipeline(self, width: int, height: int) -> PostProcessingPipeline:
        if self.pipeline is not None:
            self.pipeline.cleanup()
        pipeline = PostProcessingPipeline(width, height, backend=self.backend)
        for name in self.cfg["passes"]:
            pipeline.add_pass(self._make_pass(str(name).lower()))
        self.pipeline = pipeline
        logger.info(
            f"[Engine] Pipeline {width}x{height}: {', '.join(self.cfg['passes']) or '(empty)'}"
        )
        return pipeline

    # -----------------------------------------------------------------
    # обработка
    # -----------------------------------------------------------------
    def process(self, frame: Image) -> Image:
        if frame is None:
            raise InvalidParameter("[Engine] Frame is missing")
        if self.pipeline is None:
            self.build_pipeline(frame.width, frame.height)
        with Profiler(f"Engine frame {frame.width}x{frame.height}"):
            return self.pipeline.run(frame)

    def process_file(self, src_path, dst_path) -> Path:
        frame = load_image(src_path)
        result = self.process(frame)
        out = save_image(result, dst_path)
        logger.info(f"[Engine] {Path(src_path).name} -> {out}")
        return out

    # -----------------------------------------------------------------
    def shutdown(self) -> None:
        logger.info("[Engine] Shutting down")
        if self.pipeline is not None:
            self.pipeline.cleanup()
            self.pipeline = None
        self.backend.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
