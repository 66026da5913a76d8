# mosaicfx/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – готовый объект logging.Logger (с level INFO)
    * Config      – JSON‑конфигурация
    * Profiler    – замер времени блока кода
    * load_image / save_image – чтение и запись изображений через Pillow
"""

from .logger import logger
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler
from .texture_loader import load_image, save_image

__all__ = ["logger", "Config", "DEFAULT_CONFIG", "Profiler", "load_image", "save_image"]
