"""Export-time transforms applied to a finished sketch."""

import logging
from typing import Callable, Dict

import numpy as np

from models.errors import ProcessingError, SketchError
from models.export_format import ExportFormat
from models.pixel_buffer import PixelBuffer
from engines.tone_ops import binarize_average
from utils.constants import (
    A4_HEIGHT_PX,
    A4_MARGIN_PX,
    A4_WIDTH_PX,
    BW_PRINT_THRESHOLD,
    COLORING_BOOK_THRESHOLD,
)
from utils.scaling import compute_fit, resize

logger = logging.getLogger(__name__)


def alpha_matte_from_luma(buf: PixelBuffer) -> PixelBuffer:
    """Black strokes whose opacity is 255 - luma; white becomes fully transparent."""
    pixels = np.zeros_like(buf.pixels)
    pixels[:, :, 3] = 255 - buf.luma
    return buf.with_pixels(pixels)


def _over_white(rgba: np.ndarray) -> np.ndarray:
    alpha = rgba[:, :, 3:4].astype(np.float64) / 255.0
    rgb = rgba[:, :, :3].astype(np.float64) * alpha + 255.0 * (1.0 - alpha)
    return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)


def a4_print_layout(buf: PixelBuffer) -> PixelBuffer:
    """Scale buf to fit an A4 page at 300 DPI inside the margins, centred on white."""
    available_w = A4_WIDTH_PX - 2 * A4_MARGIN_PX
    available_h = A4_HEIGHT_PX - 2 * A4_MARGIN_PX
    scaled_w, scaled_h = compute_fit(buf.width, buf.height, available_w, available_h)
    scaled = resize(buf.pixels, scaled_w, scaled_h)

    page = np.full((A4_HEIGHT_PX, A4_WIDTH_PX, 4), 255, dtype=np.uint8)
    x = (A4_WIDTH_PX - scaled_w) // 2
    y = (A4_HEIGHT_PX - scaled_h) // 2
    page[y:y + scaled_h, x:x + scaled_w, :3] = _over_white(scaled)
    logger.debug("A4 layout: %dx%d at (%d, %d)", scaled_w, scaled_h, x, y)
    return PixelBuffer(A4_WIDTH_PX, A4_HEIGHT_PX, page)


def coloring_book_export(buf: PixelBuffer) -> PixelBuffer:
    """High threshold for clean outlines, then A4 page layout."""
    return a4_print_layout(binarize_average(buf, COLORING_BOOK_THRESHOLD))


def bw_print_export(buf: PixelBuffer) -> PixelBuffer:
    """Mid threshold at native resolution."""
    return binarize_average(buf, BW_PRINT_THRESHOLD)


EXPORT_TRANSFORMS: Dict[ExportFormat, Callable[[PixelBuffer], PixelBuffer]] = {
    ExportFormat.PNG: PixelBuffer.copy,
    ExportFormat.JPG: PixelBuffer.copy,
    ExportFormat.TRANSPARENT: alpha_matte_from_luma,
    ExportFormat.PRINT_A4: a4_print_layout,
    ExportFormat.COLORING_BOOK: coloring_book_export,
    ExportFormat.BW_PRINT: bw_print_export,
}


def apply_export(processed: PixelBuffer, fmt: ExportFormat) -> PixelBuffer:
    """Derive the deliverable for fmt without touching the processed buffer."""
    try:
        fmt = ExportFormat(fmt)
    except ValueError:
        raise ValueError(f"Unknown export format: {fmt!r}") from None
    transform = EXPORT_TRANSFORMS[fmt]
    try:
        return transform(processed)
    except SketchError:
        raise
    except Exception as e:
        raise ProcessingError(f"export:{fmt.value}", str(e) or type(e).__name__) from e
