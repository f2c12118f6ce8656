"""Data models for pixel buffers, settings and results."""

from .errors import SketchError, InvalidBufferError, UnsupportedModeError, ProcessingError
from .pixel_buffer import PixelBuffer
from .sketch_settings import SketchMode, SketchSettings
from .export_format import ExportFormat
from .sketch_result import SketchResult

__all__ = [
    'SketchError',
    'InvalidBufferError',
    'UnsupportedModeError',
    'ProcessingError',
    'PixelBuffer',
    'SketchMode',
    'SketchSettings',
    'ExportFormat',
    'SketchResult',
]
