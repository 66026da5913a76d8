# mosaicfx/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.  Конфигурируется один раз при импорте.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("MosaicFX")


logger = init_logger()
