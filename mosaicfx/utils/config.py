"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from mosaicfx.utils.logger import logger

DEFAULT_CONFIG = {
    "backend": "numpy",
    "workers": 0,
    "sampling": {
        "source_filter": "nearest",
        "atlas_filter": "nearest",
        "address": "clamp",
    },
    "passes": ["pixelation"],
    "pixelation": {"block_count": 128.0},
    "chunky": {"atlas": None, "tint": [1.0, 1.0, 1.0, 1.0]},
}


class Config:
    """Singleton‑подобный объект конфигурации (один на путь к файлу)."""
    _instance = None

    def __new__(cls, path: str = "mosaicfx.json"):
        path = Path(path)
        if cls._instance is None or cls._instance.path != path:
            cls._instance = super().__new__(cls)
            cls._instance.path = path
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий ``Config()`` перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, copy.deepcopy(DEFAULT_CONFIG.get(key)))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    def section(self, key):
        """Секция‑словарь, дополненная значениями по‑умолчанию."""
        merged = copy.deepcopy(DEFAULT_CONFIG.get(key, {}))
        merged.update(self.data.get(key) or {})
        return merged
