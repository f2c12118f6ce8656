"""Tests for per-pixel tone operators."""

import numpy as np
import pytest
from models.pixel_buffer import PixelBuffer
from engines.tone_ops import grayscale, brightness, contrast, threshold, binarize_average


def test_grayscale_luma_weights():
    buf = PixelBuffer.filled(2, 2, (100, 150, 200, 77))
    out = grayscale(buf)
    expected = round(0.299 * 100 + 0.587 * 150 + 0.114 * 200)
    assert np.all(out.rgb == expected)
    assert np.all(out.alpha == 77)


def test_grayscale_idempotent(random_buffer):
    once = grayscale(random_buffer)
    assert grayscale(once) == once


def test_neutral_brightness_and_contrast(random_buffer):
    assert brightness(random_buffer, 50) == random_buffer
    assert contrast(random_buffer, 0) == random_buffer


def test_brightness_shift_clamps():
    buf = PixelBuffer.filled(1, 1, (250, 10, 128, 255))
    r, g, b, a = brightness(buf, 100).pixels[0, 0].astype(int)
    assert (r, b, a) == (255, 255, 255)
    assert g in (137, 138)
    r, g, b, a = brightness(buf, 0).pixels[0, 0].astype(int)
    assert r in (122, 123)
    assert g == 0
    assert b in (0, 1)


def test_contrast_pushes_away_from_mid():
    buf = PixelBuffer.filled(1, 1, (100, 128, 160, 255))
    out = contrast(buf, 50)
    r, g, b, _ = out.pixels[0, 0]
    assert r < 100 and g == 128 and b > 160


def test_contrast_out_of_range():
    with pytest.raises(ValueError):
        contrast(PixelBuffer.filled(1, 1, (0, 0, 0, 255)), 150)


def test_ops_do_not_mutate_input(random_buffer):
    before = random_buffer.copy()
    grayscale(random_buffer)
    brightness(random_buffer, 80)
    contrast(random_buffer, -40)
    threshold(random_buffer, 100)
    assert random_buffer == before


def test_threshold_uses_red_and_keeps_alpha():
    pixels = np.array([[[101, 0, 0, 10], [100, 255, 255, 20]]], dtype=np.uint8)
    out = threshold(PixelBuffer(2, 1, pixels), 100)
    assert tuple(out.pixels[0, 0]) == (255, 255, 255, 10)
    assert tuple(out.pixels[0, 1]) == (0, 0, 0, 20)


def test_binarize_average():
    pixels = np.array([[[200, 200, 200, 255], [100, 100, 100, 255]]], dtype=np.uint8)
    out = binarize_average(PixelBuffer(2, 1, pixels), 128)
    assert np.all(out.rgb[0, 0] == 255)
    assert np.all(out.rgb[0, 1] == 0)
