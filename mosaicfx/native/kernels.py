# -*- coding: utf-8 -*-
"""
mosaicfx/native/kernels.py

Попиксельные JIT‑ядра (Numba, CPU).  Внешний цикл по строкам идёт через
``prange``, поэтому кадр обрабатывается всеми ядрами процессора.

Коды режимов (числа, т.к. строки в nopython‑ядрах неудобны):
    фильтр:    NEAREST = 0, BILINEAR = 1
    адресация: CLAMP   = 0, WRAP     = 1

Арифметика повторяет ``mosaicfx.core.sampling`` / ``NumpyBackend``
операция в операцию.
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit, prange

NEAREST = 0
BILINEAR = 1
CLAMP = 0
WRAP = 1

# Должны совпадать с mosaicfx.core.luminance / mosaicfx.core.grid
LUMA_R = 0.3
LUMA_G = 0.59
LUMA_B = 0.11
ATLAS_CELLS = 16


# ----------------------------------------------------------------------
# Выборка
# ----------------------------------------------------------------------
@njit
def _address(i, n, mode):
    if mode == WRAP:
        return i % n
    if i < 0:
        return 0
    if i >= n:
        return n - 1
    return i


@njit
def _bilerp(img, x0, x1, y0, y1, fx, fy, c):
    top = img[y0, x0, c] * (1.0 - fx) + img[y0, x1, c] * fx
    bottom = img[y1, x0, c] * (1.0 - fx) + img[y1, x1, c] * fx
    return top * (1.0 - fy) + bottom * fy


@njit
def sample(img, u, v, filt, mode):
    """Одна выборка RGBA → кортеж из четырёх float64."""
    h = img.shape[0]
    w = img.shape[1]
    if filt == NEAREST:
        x = _address(int(math.floor(u * w)), w, mode)
        y = _address(int(math.floor(v * h)), h, mode)
        return (np.float64(img[y, x, 0]), np.float64(img[y, x, 1]),
                np.float64(img[y, x, 2]), np.float64(img[y, x, 3]))

    tx = u * w - 0.5
    ty = v * h - 0.5
    fx0 = math.floor(tx)
    fy0 = math.floor(ty)
    fx = tx - fx0
    fy = ty - fy0
    ix = int(fx0)
    iy = int(fy0)
    x0 = _address(ix, w, mode)
    x1 = _address(ix + 1, w, mode)
    y0 = _address(iy, h, mode)
    y1 = _address(iy + 1, h, mode)
    return (_bilerp(img, x0, x1, y0, y1, fx, fy, 0),
            _bilerp(img, x0, x1, y0, y1, fx, fy, 1),
            _bilerp(img, x0, x1, y0, y1, fx, fy, 2),
            _bilerp(img, x0, x1, y0, y1, fx, fy, 3))


# ----------------------------------------------------------------------
# Пикселизация
# ----------------------------------------------------------------------
@njit(parallel=True)
def pixelate_kernel(src, columns, rows, filt, mode, out):
    height = out.shape[0]
    width = out.shape[1]
    bsx = 1.0 / columns
    bsy = 1.0 / rows
    for y in prange(height):
        v = (y + 0.5) / height
        by = math.floor(v * rows)
        cv = by * bsy + bsy * 0.5
        for x in range(width):
            u = (x + 0.5) / width
            bx = math.floor(u * columns)
            cu = bx * bsx + bsx * 0.5
            r, g, b, a = sample(src, cu, cv, filt, mode)
            out[y, x, 0] = r
            out[y, x, 1] = g
            out[y, x, 2] = b
            out[y, x, 3] = a


# ----------------------------------------------------------------------
# «Chunky»: блок → ячейка атласа по яркости
# ----------------------------------------------------------------------
@njit(parallel=True)
def chunky_kernel(src, atlas, columns, rows, off_r, off_g, off_b,
                  src_filt, atlas_filt, mode, out):
    height = out.shape[0]
    width = out.shape[1]
    bsx = 1.0 / columns
    bsy = 1.0 / rows
    for y in prange(height):
        v = (y + 0.5) / height
        by = math.floor(v * rows)
        cv = by * bsy + bsy * 0.5
        av = v * rows - by
        for x in range(width):
            u = (x + 0.5) / width
            bx = math.floor(u * columns)
            cu = bx * bsx + bsx * 0.5

            r, g, b, _a = sample(src, cu, cv, src_filt, mode)
            r = r - off_r
            g = g - off_g
            b = b - off_b

            lum = LUMA_R * r + LUMA_G * g + LUMA_B * b
            if lum < 0.0:
                lum = 0.0
            elif lum > 1.0:
                lum = 1.0
            idx = int(math.floor(lum * ATLAS_CELLS))
            if idx > ATLAS_CELLS - 1:
                idx = ATLAS_CELLS - 1

            au = ((u * columns - bx) + idx) / ATLAS_CELLS
            r, g, b, a = sample(atlas, au, av, atlas_filt, mode)
            out[y, x, 0] = r
            out[y, x, 1] = g
            out[y, x, 2] = b
            out[y, x, 3] = a
