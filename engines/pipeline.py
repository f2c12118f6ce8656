"""Mode pipelines: brightness -> grayscale -> blur -> edges -> post-edge -> dilate."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from models.errors import ProcessingError, SketchError, UnsupportedModeError
from models.pixel_buffer import PixelBuffer
from models.sketch_result import SketchResult
from models.sketch_settings import SketchMode, SketchSettings
from engines.tone_ops import brightness, contrast, grayscale, threshold
from engines.convolution_ops import canny_like_edges, dilate, gaussian_blur, sobel_edges
from utils.metrics import StageTimer, compute_ink_coverage

logger = logging.getLogger(__name__)

EdgeDetector = Callable[[PixelBuffer, float], PixelBuffer]


@dataclass(frozen=True)
class ModeRecipe:
    """Parameter derivations for one sketch mode."""

    blur_radius: Callable[[SketchSettings], int]
    edge_detector: EdgeDetector
    edge_intensity: Callable[[SketchSettings], float]
    post_edge: Optional[Callable[[PixelBuffer, SketchSettings], PixelBuffer]]
    dilate_iterations: Callable[[SketchSettings], int]


def _thickness_minus_one(s: SketchSettings) -> int:
    return s.line_thickness - 1 if s.line_thickness > 1 else 0


def _pencil_contrast(buf: PixelBuffer, s: SketchSettings) -> PixelBuffer:
    return contrast(buf, (s.contrast - 50) * 2)


def _line_art_threshold(buf: PixelBuffer, s: SketchSettings) -> PixelBuffer:
    return threshold(buf, 255 - s.contrast * 1.5)


MODE_RECIPES: Dict[SketchMode, ModeRecipe] = {
    SketchMode.PENCIL: ModeRecipe(
        blur_radius=lambda s: max(1, s.noise_reduction // 15),
        edge_detector=sobel_edges,
        edge_intensity=lambda s: s.edge_intensity,
        post_edge=_pencil_contrast,
        dilate_iterations=_thickness_minus_one,
    ),
    SketchMode.INK: ModeRecipe(
        blur_radius=lambda s: max(1, s.smoothing // 10),
        edge_detector=canny_like_edges,
        edge_intensity=lambda s: s.edge_intensity,
        post_edge=None,
        dilate_iterations=lambda s: s.line_thickness if s.line_thickness > 1 else 0,
    ),
    SketchMode.LINE_ART: ModeRecipe(
        blur_radius=lambda s: max(2, s.noise_reduction // 10),
        edge_detector=sobel_edges,
        edge_intensity=lambda s: s.edge_intensity * 0.7,
        post_edge=_line_art_threshold,
        dilate_iterations=_thickness_minus_one,
    ),
    SketchMode.COLORING: ModeRecipe(
        blur_radius=lambda s: max(3, s.smoothing // 8),
        edge_detector=canny_like_edges,
        edge_intensity=lambda s: s.edge_intensity * 1.2,
        post_edge=None,
        dilate_iterations=lambda s: max(2, s.line_thickness),
    ),
}

_missing = set(SketchMode) - set(MODE_RECIPES)
if _missing:
    raise RuntimeError(f"No pipeline recipe for modes: {sorted(m.value for m in _missing)}")


def get_recipe(mode: SketchMode) -> ModeRecipe:
    try:
        return MODE_RECIPES[mode]
    except KeyError:
        raise UnsupportedModeError(f"Unsupported sketch mode: {mode!r}") from None


def _run_stage(timer: StageTimer, stage: str, func, *args) -> PixelBuffer:
    try:
        result = timer.measure(stage, func, *args)
    except SketchError:
        raise
    except Exception as e:
        raise ProcessingError(stage, str(e) or type(e).__name__) from e
    logger.debug("Stage %s: %.2f ms", stage, timer.stage_times_ms[stage])
    return result


def process_sketch(source: PixelBuffer, settings: SketchSettings) -> SketchResult:
    """Run the mode pipeline on a private copy of source and time every stage."""
    if not isinstance(source, PixelBuffer):
        raise TypeError(f"source must be a PixelBuffer, got {type(source).__name__}")
    recipe = get_recipe(settings.mode)
    timer = StageTimer()
    logger.info("Processing %dx%d in %s mode", source.width, source.height, settings.mode.value)

    buf = _run_stage(timer, 'brightness', brightness, source, settings.brightness)
    buf = _run_stage(timer, 'grayscale', grayscale, buf)
    buf = _run_stage(timer, 'blur', gaussian_blur, buf, recipe.blur_radius(settings))
    buf = _run_stage(timer, 'edges', recipe.edge_detector, buf, recipe.edge_intensity(settings))

    if recipe.post_edge is not None:
        buf = _run_stage(timer, 'post_edge', recipe.post_edge, buf, settings)

    iterations = recipe.dilate_iterations(settings)
    if iterations > 0:
        buf = _run_stage(timer, 'dilate', dilate, buf, iterations)

    return SketchResult(
        source=source,
        processed=buf,
        settings=settings,
        stage_times_ms=dict(timer.stage_times_ms),
        total_time_ms=timer.total_ms,
        ink_coverage=compute_ink_coverage(buf),
    )


def run_pipeline(source: PixelBuffer, settings: SketchSettings) -> PixelBuffer:
    """Render source in the style chosen by settings; source is left untouched."""
    return process_sketch(source, settings).processed
