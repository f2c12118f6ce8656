"""Neighbourhood operators: separable blur, gradient edges, min-filter dilation.

Border policy for the 3x3 operators: interior pixels are computed from their
full neighbourhood and every border pixel takes the value of its nearest
interior pixel. Buffers without an interior (fewer than 3 rows or columns)
have no measurable gradient and are left unthickened.
"""

import cv2
import numpy as np

from models.pixel_buffer import PixelBuffer

_SQUARE_3X3 = np.ones((3, 3), dtype=np.uint8)


def _has_interior(buf: PixelBuffer) -> bool:
    return buf.width >= 3 and buf.height >= 3


def _replicate_border(values: np.ndarray) -> np.ndarray:
    """Overwrite the 1-pixel frame with the nearest interior value."""
    return np.pad(values[1:-1, 1:-1], 1, mode='edge')


def _gray_output(buf: PixelBuffer, values: np.ndarray) -> PixelBuffer:
    pixels = np.empty_like(buf.pixels)
    pixels[:, :, :3] = values[:, :, None]
    pixels[:, :, 3] = 255
    return buf.with_pixels(pixels)


def gaussian_kernel(radius: int) -> np.ndarray:
    """1D kernel over [-radius, radius] with sigma = radius / 3, summing to 1."""
    if radius < 1:
        raise ValueError(f"Blur radius must be >= 1, got {radius}")
    sigma = radius / 3.0
    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    kernel = np.exp(-(offsets ** 2) / (2.0 * sigma ** 2))
    return kernel / kernel.sum()


def gaussian_blur(buf: PixelBuffer, radius: int) -> PixelBuffer:
    """Separable blur of all four channels, rows first, edge-replicated sampling."""
    kernel = gaussian_kernel(radius)
    src = buf.pixels.astype(np.float64)
    blurred = cv2.sepFilter2D(
        src, cv2.CV_64F, kernel, kernel, borderType=cv2.BORDER_REPLICATE
    )
    return buf.with_pixels(np.clip(np.rint(blurred), 0, 255).astype(np.uint8))


def sobel_magnitude(buf: PixelBuffer) -> np.ndarray:
    """Gradient magnitude of the red channel, float64 (H, W)."""
    if not _has_interior(buf):
        return np.zeros(buf.shape, dtype=np.float64)
    red = buf.luma.astype(np.float64)
    gx = cv2.Sobel(red, cv2.CV_64F, 1, 0, ksize=3)
    gy = cv2.Sobel(red, cv2.CV_64F, 0, 1, ksize=3)
    return _replicate_border(np.sqrt(gx ** 2 + gy ** 2))


def sobel_edges(buf: PixelBuffer, intensity: float) -> PixelBuffer:
    """Dark strokes on white: 255 - magnitude * intensity / 50."""
    magnitude = sobel_magnitude(buf) * (intensity / 50.0)
    edge = np.clip(np.rint(255.0 - magnitude), 0, 255).astype(np.uint8)
    return _gray_output(buf, edge)


def canny_like_edges(buf: PixelBuffer, intensity: float) -> PixelBuffer:
    """Binary edge map: black where magnitude > (100 - intensity) * 2.

    Single global threshold on the Sobel magnitude, without non-maximum
    suppression or hysteresis. This gives the softer, even stroke width
    of the ink and coloring styles.
    """
    limit = (100.0 - intensity) * 2.0
    edge = np.where(sobel_magnitude(buf) > limit, 0, 255).astype(np.uint8)
    return _gray_output(buf, edge)


def dilate(buf: PixelBuffer, iterations: int) -> PixelBuffer:
    """Thicken dark strokes with a repeated 3x3 min filter on luma."""
    if iterations < 0:
        raise ValueError(f"Dilate iterations must be >= 0, got {iterations}")
    if iterations == 0 or not _has_interior(buf):
        return buf.copy()

    values = buf.luma.copy()
    for _ in range(iterations):
        values = _replicate_border(cv2.erode(values, _SQUARE_3X3))

    pixels = buf.pixels.copy()
    pixels[:, :, :3] = values[:, :, None]
    return buf.with_pixels(pixels)
