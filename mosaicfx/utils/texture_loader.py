"""
Загружает PNG/JPG → ``Image`` и сохраняет ``Image`` обратно на диск (Pillow).
"""

from pathlib import Path
from PIL import Image as PILImage

from mosaicfx.core.image import Image
from mosaicfx.utils.logger import logger


def load_image(path) -> Image:
    """Читает файл изображения и возвращает RGBA ``Image``."""
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Image not found: {p}")

    with PILImage.open(p) as pil:
        img = Image.from_pil(pil)

    logger.debug(f"[TextureLoader] Loaded image {p} ({img.width}x{img.height})")
    return img


def save_image(image: Image, path) -> Path:
    """Сохраняет ``Image`` (RGBA8); каталог создаётся при необходимости."""
    p = Path(path).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    pil = image.to_pil()
    if p.suffix.lower() in (".jpg", ".jpeg", ".bmp"):
        pil = pil.convert("RGB")
    pil.save(p)
    logger.debug(f"[TextureLoader] Saved image {p} ({image.width}x{image.height})")
    return p
