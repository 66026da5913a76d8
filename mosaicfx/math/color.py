# mosaicfx/math/color.py
"""
RGBA‑цвет (float64) в диапазоне [0, 1].  Используется как оттенок (tint)
для «chunky»‑фильтра.
"""

import numpy as np
from typing import Iterable, Tuple

from mosaicfx.errors import InvalidParameter


class Color:
    """Неизменяемый RGBA‑цвет, все компоненты в [0, 1]."""

    __slots__ = ("_v",)

    def __init__(self, r: float = 1.0, g: float = 1.0,
                 b: float = 1.0, a: float = 1.0):
        v = np.array([r, g, b, a], dtype=np.float64)
        if not np.all(np.isfinite(v)) or np.any(v < 0.0) or np.any(v > 1.0):
            raise InvalidParameter(
                f"[Color] Components must lie in [0, 1], got {tuple(v.tolist())}"
            )
        v.flags.writeable = False
        self._v = v

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def white(cls) -> "Color":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Color":
        """RGB или RGBA (альфа по‑умолчанию 1.0)."""
        vals = [float(x) for x in values]
        if len(vals) == 3:
            vals.append(1.0)
        if len(vals) != 4:
            raise InvalidParameter(
                f"[Color] Expected 3 or 4 components, got {len(vals)}"
            )
        return cls(*vals)

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """8‑битные компоненты 0…255."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def r(self) -> float:
        return float(self._v[0])

    @property
    def g(self) -> float:
        return float(self._v[1])

    @property
    def b(self) -> float:
        return float(self._v[2])

    @property
    def a(self) -> float:
        return float(self._v[3])

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def complement(self) -> np.ndarray:
        """``(1, 1, 1, 1) - color`` – смещение, вычитаемое из выборки."""
        return 1.0 - self._v

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())

    # -----------------------------------------------------------------
    # сравнение / представление
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"Color({self.r:.3f}, {self.g:.3f}, {self.b:.3f}, {self.a:.3f})"
