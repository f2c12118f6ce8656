"""Aspect-preserving scaling and source geometry edits."""

import cv2
import numpy as np

from utils.constants import MAX_SOURCE_DIMENSION


def compute_fit(w: int, h: int, tw: int, th: int) -> tuple[int, int]:
    """Compute dimensions to fit within target, preserving aspect ratio."""
    scale = compute_scale_factor(w, h, tw, th)
    return (max(1, round(w * scale)), max(1, round(h * scale)))


def compute_scale_factor(w: int, h: int, tw: int, th: int) -> float:
    """Uniform scale factor that fits (w, h) inside (tw, th)."""
    return min(tw / w, th / h)


def limit_dimensions(w: int, h: int, max_size: int = MAX_SOURCE_DIMENSION) -> tuple[int, int]:
    """Shrink (w, h) so neither side exceeds max_size; smaller sizes pass through."""
    if w <= max_size and h <= max_size:
        return (w, h)
    # Integer products keep the longer side at exactly max_size
    longer = max(w, h)
    return (max(1, w * max_size // longer), max(1, h * max_size // longer))


def resize(img: np.ndarray, new_w: int, new_h: int) -> np.ndarray:
    """Resize using area averaging when shrinking and cubic when enlarging."""
    h, w = img.shape[:2]
    if (new_w, new_h) == (w, h):
        return img.copy()
    interp = cv2.INTER_AREA if (new_w < w or new_h < h) else cv2.INTER_CUBIC
    return cv2.resize(img, (new_w, new_h), interpolation=interp)


def cap_source_size(img: np.ndarray, max_size: int = MAX_SOURCE_DIMENSION) -> np.ndarray:
    """Downscale so the longer side is at most max_size."""
    h, w = img.shape[:2]
    new_w, new_h = limit_dimensions(w, h, max_size)
    if (new_w, new_h) == (w, h):
        return img
    return cv2.resize(img, (new_w, new_h), interpolation=cv2.INTER_AREA)


_ROTATIONS = {
    90: cv2.ROTATE_90_CLOCKWISE,
    180: cv2.ROTATE_180,
    270: cv2.ROTATE_90_COUNTERCLOCKWISE,
}


def rotate_quarter(img: np.ndarray, degrees: int) -> np.ndarray:
    """Rotate by a multiple of 90 degrees; positive is clockwise."""
    if degrees % 90 != 0:
        raise ValueError(f"Rotation must be a multiple of 90 degrees, got {degrees}")
    degrees = degrees % 360
    if degrees == 0:
        return img.copy()
    return cv2.rotate(img, _ROTATIONS[degrees])


def crop(img: np.ndarray, x: int, y: int, w: int, h: int) -> np.ndarray:
    """Copy of the (x, y, w, h) rectangle, which must lie inside the image."""
    img_h, img_w = img.shape[:2]
    if w <= 0 or h <= 0:
        raise ValueError(f"Crop size must be positive, got {w}x{h}")
    if x < 0 or y < 0 or x + w > img_w or y + h > img_h:
        raise ValueError(f"Crop ({x}, {y}, {w}, {h}) exceeds image {img_w}x{img_h}")
    return img[y:y + h, x:x + w].copy()
