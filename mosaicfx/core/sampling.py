# mosaicfx/core/sampling.py
"""
Выборка из изображения по нормализованным UV (векторизовано на numpy).

Фильтры:  ``nearest`` | ``bilinear``
Адресация: ``clamp``  | ``wrap``

Формулы совпадают с ядрами из ``mosaicfx.native.kernels`` операция в
операцию, поэтому оба бекенда дают одинаковый результат.
"""

import numpy as np

from mosaicfx.errors import InvalidParameter

FILTERS = ("nearest", "bilinear")
ADDRESS_MODES = ("clamp", "wrap")


def check_filter(name: str) -> str:
    name = str(name).lower()
    if name not in FILTERS:
        raise InvalidParameter(f"[Sampler] Unknown filter mode: {name}")
    return name


def check_address(name: str) -> str:
    name = str(name).lower()
    if name not in ADDRESS_MODES:
        raise InvalidParameter(f"[Sampler] Unknown address mode: {name}")
    return name


def address(i: np.ndarray, n: int, mode: str) -> np.ndarray:
    """Приводит целочисленные индексы к диапазону [0, n)."""
    if mode == "wrap":
        return np.mod(i, n)
    return np.clip(i, 0, n - 1)


def sample(pixels: np.ndarray, u, v, filter_mode: str = "nearest",
           address_mode: str = "clamp") -> np.ndarray:
    """
    Выборка из массива (H, W, 4) в точках ``(u, v)``.

    ``u`` и ``v`` – скаляры или ndarray одинаковой формы; результат имеет
    форму ``u.shape + (4,)`` и тип float64.
    """
    filter_mode = check_filter(filter_mode)
    address_mode = check_address(address_mode)

    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    h, w = pixels.shape[:2]

    if filter_mode == "nearest":
        x = address(np.floor(u * w).astype(np.int64), w, address_mode)
        y = address(np.floor(v * h).astype(np.int64), h, address_mode)
        return pixels[y, x].astype(np.float64)

    tx = u * w - 0.5
    ty = v * h - 0.5
    fx0 = np.floor(tx)
    fy0 = np.floor(ty)
    fx = (tx - fx0)[..., None]
    fy = (ty - fy0)[..., None]
    ix = fx0.astype(np.int64)
    iy = fy0.astype(np.int64)
    x0 = address(ix, w, address_mode)
    x1 = address(ix + 1, w, address_mode)
    y0 = address(iy, h, address_mode)
    y1 = address(iy + 1, h, address_mode)

    top = pixels[y0, x0] * (1.0 - fx) + pixels[y0, x1] * fx
    bottom = pixels[y1, x0] * (1.0 - fx) + pixels[y1, x1] * fx
    return top * (1.0 - fy) + bottom * fy
