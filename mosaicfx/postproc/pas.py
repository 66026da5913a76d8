"""
Базовый интерфейс для одиночного прохода пост‑процессинга.
"""

from abc import ABC, abstractmethod

from mosaicfx.core.image import Image


class RenderPass(ABC):
    """Один проход в цепочке пост‑процессинга."""
    @abstractmethod
    def init(self, width: int, height: int, backend) -> None:
        pass

    @abstractmethod
    def run(self, src: Image, backend) -> Image:
        pass

    @abstractmethod
    def resize(self, w: int, h: int, backend) -> None:
        pass

    @abstractmethod
    def cleanup(self, backend) -> None:
        pass
