"""
Математический суб‑пакет: Color.
"""

from mosaicfx.math.color import Color

__all__ = ["Color"]
