"""Debounced processing controller between the preview UI and the pipeline."""

import logging
from typing import Optional, Union

import numpy as np
from PySide6.QtCore import QCoreApplication, QObject, QTimer, Signal

from models.export_format import ExportFormat
from models.pixel_buffer import PixelBuffer
from models.sketch_result import SketchResult
from models.sketch_settings import SketchSettings
from engines.export_transforms import apply_export
from gui.worker import SketchWorker
from utils.constants import DEBOUNCE_MS, MAX_SOURCE_DIMENSION
from utils.scaling import cap_source_size, crop, rotate_quarter

logger = logging.getLogger(__name__)


class SketchController(QObject):
    """Owns the source image, live settings and the latest sketch.

    Settings changes land in a single pending slot and (re)start a
    single-shot timer; when it fires the slot is drained and one run is
    made on this thread. A run already in progress always completes, and
    a timer that fires during a run is pushed back rather than starting a
    second one.
    """
    
    result_ready = Signal(object)
    processing_changed = Signal(bool)
    error = Signal(str)
    progress = Signal(str)
    
    def __init__(self, debounce_ms: int = DEBOUNCE_MS,
                 max_dimension: int = MAX_SOURCE_DIMENSION, parent=None):
        super().__init__(parent)
        self.max_dimension = max_dimension
        
        self._source: Optional[PixelBuffer] = None
        self._settings = SketchSettings()
        self._pending: Optional[SketchSettings] = None
        self._last_requested: Optional[SketchSettings] = None
        self._result: Optional[SketchResult] = None
        self._is_processing = False
        self._last_error: Optional[str] = None
        
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(debounce_ms)
        self._timer.timeout.connect(self._on_timeout)
    
    # --- state ---------------------------------------------------------
    
    @property
    def source(self) -> Optional[PixelBuffer]:
        return self._source
    
    @property
    def settings(self) -> SketchSettings:
        return self._settings
    
    @property
    def result(self) -> Optional[SketchResult]:
        return self._result
    
    @property
    def is_processing(self) -> bool:
        return self._is_processing
    
    @property
    def has_pending(self) -> bool:
        return self._pending is not None
    
    @property
    def last_error(self) -> Optional[str]:
        return self._last_error
    
    # --- inputs --------------------------------------------------------
    
    def load_source(self, image: Union[np.ndarray, PixelBuffer]):
        """Replace the source image (capped to max_dimension) and schedule a run."""
        if isinstance(image, PixelBuffer):
            image = image.pixels
        self._replace_source(image)
        logger.debug("Loaded source %dx%d", self._source.width, self._source.height)

    def rotate_source(self, degrees: int):
        """Rotate the source by a multiple of 90 degrees (clockwise positive)."""
        self._replace_source(rotate_quarter(self._require_source().pixels, degrees))
        logger.debug("Rotated source by %d degrees", degrees)

    def crop_source(self, x: int, y: int, w: int, h: int):
        """Crop the source to the given rectangle in source pixel coordinates."""
        self._replace_source(crop(self._require_source().pixels, x, y, w, h))
        logger.debug("Cropped source to %dx%d at (%d, %d)", w, h, x, y)

    def set_settings(self, settings: SketchSettings):
        self._settings = settings
        if self._source is not None:
            self._schedule(settings)
    
    def update_settings(self, **changes):
        self.set_settings(self._settings.with_changes(**changes))
    
    def flush(self):
        """Run a pending request now instead of waiting for the timer."""
        if self._pending is None:
            return
        self._timer.stop()
        self._on_timeout()
    
    def retry(self):
        """Schedule the last requested settings again, e.g. after an error."""
        if self._source is None or self._last_requested is None:
            return
        self._schedule(self._last_requested)
    
    def export(self, fmt: ExportFormat) -> PixelBuffer:
        """Derive an export buffer from the latest result."""
        if self._result is None:
            raise RuntimeError("No processed sketch to export")
        return apply_export(self._result.processed, fmt)
    
    def reset(self):
        self._timer.stop()
        self._source = None
        self._pending = None
        self._last_requested = None
        self._result = None
        self._last_error = None
        self._settings = SketchSettings()
    
    # --- source --------------------------------------------------------

    def _require_source(self) -> PixelBuffer:
        if self._source is None:
            raise RuntimeError("No source image loaded")
        return self._source

    def _replace_source(self, image: np.ndarray):
        capped = cap_source_size(image, self.max_dimension)
        self._source = PixelBuffer.from_array(capped)
        self._result = None
        self._schedule(self._settings)

    # --- scheduling ----------------------------------------------------

    def _schedule(self, settings: SketchSettings):
        if self._pending is not None:
            logger.debug("Dropping pending run for %s", self._pending.mode.value)
        self._pending = settings
        self._timer.start()
    
    def _on_timeout(self):
        if self._pending is None or self._source is None:
            return
        if self._is_processing:
            self._timer.start()
            return
        
        settings = self._pending
        self._pending = None
        self._run(settings)
    
    def _run(self, settings: SketchSettings):
        self._last_requested = settings
        self._last_error = None
        self._set_processing(True)
        # Let a busy indicator paint before the heavy work
        QCoreApplication.processEvents()
        
        worker = SketchWorker(self._source, settings)
        worker.progress.connect(self.progress)
        worker.finished.connect(self._on_finished)
        worker.error.connect(self._on_error)
        try:
            worker.run()
        finally:
            self._set_processing(False)
    
    def _set_processing(self, value: bool):
        self._is_processing = value
        self.processing_changed.emit(value)
    
    def _on_finished(self, result: SketchResult):
        self._result = result
        logger.debug("Sketch ready in %.1f ms", result.total_time_ms)
        self.result_ready.emit(result)
    
    def _on_error(self, error_msg: str):
        self._last_error = error_msg
        logger.error("Sketch processing failed: %s", error_msg)
        self.error.emit(error_msg)
