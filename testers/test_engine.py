# -*- coding: utf-8 -*-
import json

import numpy as np
import pytest

from mosaicfx import Engine
from mosaicfx.errors import InvalidParameter
from mosaicfx.utils import load_image, save_image
from conftest import cell_color, gray, make_solid_atlas


def _write_config(path, **overrides):
    data = {"backend": "numpy", "passes": ["pixelation"], "pixelation": {"block_count": 4}}
    data.update(overrides)
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_process_in_memory(tmp_path, noise_image):
    cfg = _write_config(tmp_path / "cfg.json")
    with Engine(cfg) as engine:
        out = engine.process(noise_image)
    assert out.size == noise_image.size
    assert np.all(out.pixels[0:4, 0:4] == out.pixels[0, 0])


def test_process_file_with_chunky(tmp_path):
    atlas_path = save_image(make_solid_atlas(), tmp_path / "atlas.png")
    src_path = save_image(gray(16, 16, 1.0), tmp_path / "in.png")
    cfg = _write_config(
        tmp_path / "cfg.json",
        passes=["chunky"],
        chunky={"atlas": str(atlas_path), "tint": [1.0, 0.0, 0.0]},
    )
    with Engine(cfg) as engine:
        out_path = engine.process_file(src_path, tmp_path / "out" / "result.png")

    result = load_image(out_path)
    assert result.size == (16, 16)
    expected = np.round(cell_color(4) * 255) / 255
    assert np.allclose(result.pixels[7, 7], expected, atol=1e-6)


def test_chunky_without_atlas_is_passthrough(tmp_path, noise_image):
    cfg = _write_config(tmp_path / "cfg.json", passes=["chunky"])
    with Engine(cfg) as engine:
        assert engine.process(noise_image) is noise_image


def test_backend_override(tmp_path, noise_image):
    cfg = _write_config(tmp_path / "cfg.json")
    with Engine(cfg, backend_name="numba") as engine:
        assert engine.backend.name == "numba"
        numba_out = engine.process(noise_image)
    with Engine(cfg) as engine:
        numpy_out = engine.process(noise_image)
    assert np.allclose(numba_out.pixels, numpy_out.pixels)


def test_unknown_pass(tmp_path, noise_image):
    cfg = _write_config(tmp_path / "cfg.json", passes=["bloom"])
    with Engine(cfg) as engine:
        with pytest.raises(InvalidParameter):
            engine.process(noise_image)


def test_missing_input_file(tmp_path):
    cfg = _write_config(tmp_path / "cfg.json")
    with Engine(cfg) as engine:
        with pytest.raises(FileNotFoundError):
            engine.process_file(tmp_path / "nope.png", tmp_path / "out.png")
