"""Shared utilities."""

from .constants import (
    MAX_SOURCE_DIMENSION,
    DEBOUNCE_MS,
    A4_WIDTH_PX,
    A4_HEIGHT_PX,
    A4_MARGIN_PX,
)
from .metrics import StageTimer, compute_ink_coverage
from .scaling import (
    compute_fit,
    compute_scale_factor,
    limit_dimensions,
    resize,
    cap_source_size,
    rotate_quarter,
    crop,
)
from .test_images import (
    generate_uniform,
    generate_vertical_edge,
    generate_checkerboard,
    generate_portrait_disc,
)
from .image_io import load_image, encode_export, save_export

__all__ = [
    'MAX_SOURCE_DIMENSION',
    'DEBOUNCE_MS',
    'A4_WIDTH_PX',
    'A4_HEIGHT_PX',
    'A4_MARGIN_PX',
    'StageTimer',
    'compute_ink_coverage',
    'compute_fit',
    'compute_scale_factor',
    'limit_dimensions',
    'resize',
    'cap_source_size',
    'rotate_quarter',
    'crop',
    'generate_uniform',
    'generate_vertical_edge',
    'generate_checkerboard',
    'generate_portrait_disc',
    'load_image',
    'encode_export',
    'save_export',
]
