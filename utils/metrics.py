"""Stage timing and sketch statistics."""

import time
from typing import Dict

import numpy as np

from models.pixel_buffer import PixelBuffer


class StageTimer:
    """Records wall time per named pipeline stage."""
    
    def __init__(self):
        self.stage_times_ms: Dict[str, float] = {}
    
    def measure(self, stage: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.stage_times_ms[stage] = (time.perf_counter() - start) * 1000.0
        return result
    
    @property
    def total_ms(self) -> float:
        return float(sum(self.stage_times_ms.values()))


def compute_ink_coverage(buf: PixelBuffer, level: int = 128) -> float:
    """Fraction of pixels whose luma is below ``level``."""
    return float(np.count_nonzero(buf.luma < level) / buf.luma.size)
