"""Image I/O using OpenCV."""

import cv2
import numpy as np

from models.export_format import ExportFormat
from models.pixel_buffer import PixelBuffer
from utils.constants import JPEG_QUALITY


def load_image(path: str) -> np.ndarray:
    """Load image as RGBA uint8."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise OSError(f"Could not load image from {path}")
    if img.dtype != np.uint8:
        img = cv2.convertScaleAbs(img, alpha=255.0 / np.iinfo(img.dtype).max)
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)


def encode_export(buf: PixelBuffer, fmt: ExportFormat) -> bytes:
    """Encode a finished export buffer; JPEG drops alpha, everything else is PNG."""
    fmt = ExportFormat(fmt)
    if fmt is ExportFormat.JPG:
        bgr = cv2.cvtColor(buf.pixels, cv2.COLOR_RGBA2BGR)
        ok, encoded = cv2.imencode('.jpg', bgr, [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY])
    else:
        bgra = cv2.cvtColor(buf.pixels, cv2.COLOR_RGBA2BGRA)
        ok, encoded = cv2.imencode('.png', bgra)
    if not ok:
        raise ValueError(f"Could not encode {fmt.value} image")
    return encoded.tobytes()


def save_export(buf: PixelBuffer, fmt: ExportFormat, path: str) -> None:
    """Encode and write to path."""
    data = encode_export(buf, fmt)
    with open(path, 'wb') as f:
        f.write(data)
