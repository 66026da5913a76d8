# -*- coding: utf-8 -*-
import numpy as np
import pytest

from mosaicfx.core.image import Image
from mosaicfx.errors import InvalidParameter, SampleOutOfRange


def test_uint8_is_normalised():
    img = Image(np.full((2, 3, 4), 255, dtype=np.uint8))
    assert img.pixels.dtype == np.float32
    assert np.all(img.pixels == 1.0)
    assert img.size == (3, 2)


def test_rgb_gets_opaque_alpha():
    img = Image(np.zeros((2, 2, 3), dtype=np.float32))
    assert img.pixels.shape == (2, 2, 4)
    assert np.all(img.pixels[..., 3] == 1.0)


def test_grayscale_is_expanded():
    img = Image(np.array([[0.25, 0.5]], dtype=np.float32))
    assert img.texel(1, 0).tolist() == [0.5, 0.5, 0.5, 1.0]


def test_pixels_are_read_only():
    src = np.zeros((2, 2, 4), dtype=np.float32)
    img = Image(src)
    with pytest.raises(ValueError):
        img.pixels[0, 0, 0] = 1.0
    # исходный массив копируется
    src[0, 0, 0] = 1.0
    assert img.pixels[0, 0, 0] == 0.0


@pytest.mark.parametrize("bad", [None, np.zeros((0, 4, 4)), np.zeros((4, 4, 2)), np.zeros(5)])
def test_invalid_pixels(bad):
    with pytest.raises(InvalidParameter):
        Image(bad)


def test_blank_rejects_empty_size():
    with pytest.raises(InvalidParameter):
        Image.blank(0, 3)


def test_texel_out_of_range():
    img = Image.blank(3, 2)
    with pytest.raises(SampleOutOfRange):
        img.texel(3, 0)
    with pytest.raises(IndexError):
        img.texel(0, -1)


def test_uv_of_pixel_center():
    img = Image.blank(4, 4)
    assert img.uv(0, 0) == (0.125, 0.125)
    assert img.uv(3, 1) == (0.875, 0.375)


def test_pil_round_trip():
    rng = np.random.default_rng(7)
    data = rng.integers(0, 256, size=(5, 6, 4), dtype=np.uint8)
    img = Image(data)
    assert np.array_equal(img.to_uint8(), data)
    back = Image.from_pil(img.to_pil())
    assert back == img


def test_uint16_is_normalised_by_type_max():
    data = np.array([[0, 65535], [32768, 65535]], dtype=np.uint16)
    img = Image(data)
    assert img.pixels[0, 1, 0] == 1.0
    assert img.pixels[0, 0, 0] == 0.0
    assert img.pixels.max() <= 1.0


@pytest.mark.parametrize("dtype", [np.int16, np.int64])
def test_signed_integer_pixels_rejected(dtype):
    with pytest.raises(InvalidParameter):
        Image(np.full((2, 2, 3), 128, dtype=dtype))
