"""Worker that runs one sketch pipeline pass."""

from PySide6.QtCore import QObject, Signal

from models.pixel_buffer import PixelBuffer
from models.sketch_settings import SketchSettings
from engines.pipeline import process_sketch


class SketchWorker(QObject):
    """Runs the sketch pipeline once and reports through signals."""
    
    finished = Signal(object)
    error = Signal(str)
    progress = Signal(str)
    
    def __init__(self, source: PixelBuffer, settings: SketchSettings):
        super().__init__()
        self.source = source
        self.settings = settings
    
    def run(self):
        try:
            self.progress.emit(f"Processing ({self.source.width}×{self.source.height})...")
            self.progress.emit(f"{self.settings.mode.value.title()} mode...")
            
            result = process_sketch(self.source, self.settings)
            
            self.progress.emit(f"Done in {result.total_time_ms:.0f} ms")
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))
