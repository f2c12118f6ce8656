"""Sketch result with timings."""

from dataclasses import dataclass, field
from typing import Dict

from models.pixel_buffer import PixelBuffer
from models.sketch_settings import SketchSettings


@dataclass
class SketchResult:
    """Output of one pipeline run."""
    
    source: PixelBuffer
    processed: PixelBuffer
    settings: SketchSettings
    
    # Runtime
    stage_times_ms: Dict[str, float] = field(default_factory=dict)
    total_time_ms: float = 0.0
    
    # Fraction of pixels darker than mid-gray
    ink_coverage: float = 0.0
