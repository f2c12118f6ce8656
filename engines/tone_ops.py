"""Per-pixel tone operators. Alpha is never touched."""

import numpy as np

from models.pixel_buffer import PixelBuffer

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])


def _to_bytes(values: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


def _with_rgb(buf: PixelBuffer, rgb: np.ndarray) -> PixelBuffer:
    pixels = buf.pixels.copy()
    pixels[:, :, :3] = rgb
    return buf.with_pixels(pixels)


def luma(buf: PixelBuffer) -> np.ndarray:
    """BT.601 luma as float64 (H, W)."""
    return buf.rgb.astype(np.float64) @ LUMA_WEIGHTS


def grayscale(buf: PixelBuffer) -> PixelBuffer:
    """Replace R, G, B with luma."""
    y = _to_bytes(luma(buf))
    return _with_rgb(buf, y[:, :, None])


def brightness(buf: PixelBuffer, level: int) -> PixelBuffer:
    """Shift R, G, B by (level - 50) * 2.55; 50 is neutral."""
    if not (0 <= level <= 100):
        raise ValueError(f"Brightness level must be 0-100, got {level}")
    adjustment = (level - 50) * 2.55
    return _with_rgb(buf, _to_bytes(buf.rgb.astype(np.float64) + adjustment))


def contrast_factor(amount: float) -> float:
    return 259.0 * (amount + 255.0) / (255.0 * (259.0 - amount))


def contrast(buf: PixelBuffer, amount: float) -> PixelBuffer:
    """Stretch R, G, B around 128; 0 is neutral, range -100..100."""
    if not (-100 <= amount <= 100):
        raise ValueError(f"Contrast amount must be -100..100, got {amount}")
    f = contrast_factor(amount)
    stretched = f * (buf.rgb.astype(np.float64) - 128.0) + 128.0
    return _with_rgb(buf, _to_bytes(stretched))


def threshold(buf: PixelBuffer, t: float) -> PixelBuffer:
    """Binarize on the red channel: 255 where R > t, else 0, mirrored to G and B."""
    binary = np.where(buf.luma > t, 255, 0).astype(np.uint8)
    return _with_rgb(buf, binary[:, :, None])


def binarize_average(buf: PixelBuffer, t: float) -> PixelBuffer:
    """Binarize on the plain R, G, B average: 255 where mean > t, else 0."""
    mean = buf.rgb.astype(np.float64).sum(axis=2) / 3.0
    binary = np.where(mean > t, 255, 0).astype(np.uint8)
    return _with_rgb(buf, binary[:, :, None])
