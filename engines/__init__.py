"""Sketch engines - pure computation, no GUI dependencies."""

from .tone_ops import grayscale, brightness, contrast, threshold, binarize_average, luma
from .convolution_ops import (
    gaussian_kernel,
    gaussian_blur,
    sobel_magnitude,
    sobel_edges,
    canny_like_edges,
    dilate,
)
from .pipeline import MODE_RECIPES, ModeRecipe, get_recipe, process_sketch, run_pipeline
from .export_transforms import (
    alpha_matte_from_luma,
    a4_print_layout,
    coloring_book_export,
    bw_print_export,
    apply_export,
)

__all__ = [
    'grayscale',
    'brightness',
    'contrast',
    'threshold',
    'binarize_average',
    'luma',
    'gaussian_kernel',
    'gaussian_blur',
    'sobel_magnitude',
    'sobel_edges',
    'canny_like_edges',
    'dilate',
    'MODE_RECIPES',
    'ModeRecipe',
    'get_recipe',
    'process_sketch',
    'run_pipeline',
    'alpha_matte_from_luma',
    'a4_print_layout',
    'coloring_book_export',
    'bw_print_export',
    'apply_export',
]
