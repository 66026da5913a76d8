"""
Мини‑пример: процедурный атлас из 16 «глифов» возрастающей плотности
и его применение к градиенту.  Результат пишется в ./chunky_out.png.

    python examples/chunky_example.py [input.png] [output.png]
"""

import sys

import numpy as np

import mosaicfx as mfx
from mosaicfx.utils import load_image, logger, save_image


def make_density_atlas(cell: int = 8) -> mfx.Image:
    """Ячейка i: квадрат в центре, сторона растёт вместе с i."""
    px = np.zeros((cell, 16 * cell, 4), dtype=np.float32)
    px[..., 3] = 1.0
    for i in range(16):
        side = round(cell * i / 15)
        lo = (cell - side) // 2
        x0 = i * cell
        px[lo:lo + side, x0 + lo:x0 + lo + side, :3] = 1.0
    return mfx.Image(px)


def make_gradient(width: int = 320, height: int = 200) -> mfx.Image:
    xs = np.linspace(0.0, 1.0, width, dtype=np.float32)
    ys = np.linspace(0.0, 1.0, height, dtype=np.float32)[:, None]
    px = np.zeros((height, width, 3), dtype=np.float32)
    px[..., 0] = xs
    px[..., 1] = ys
    px[..., 2] = 0.5 * (xs + ys)
    return mfx.Image(px)


if __name__ == "__main__":
    src = load_image(sys.argv[1]) if len(sys.argv) > 1 else make_gradient()
    dst = sys.argv[2] if len(sys.argv) > 2 else "chunky_out.png"

    atlas = make_density_atlas()
    grid = mfx.GridSpec.from_atlas(src.width, src.height, atlas)
    logger.info(f"Grid {grid.columns}x{grid.rows} for {src.width}x{src.height}")

    with mfx.MosaicAtlasFilter(backend="numba") as chunky:
        out = chunky.apply(src, atlas, grid, mfx.Color(0.9, 0.95, 1.0, 1.0))

    with mfx.PlainPixelationFilter() as pixelate:
        preview = pixelate.apply(src, mfx.GridSpec.from_block_count(64, src.width, src.height))

    save_image(out, dst)
    save_image(preview, dst.replace(".png", "_pixelated.png"))
    logger.info(f"Saved {dst}")
