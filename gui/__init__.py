"""Qt-side processing orchestration for the preview UI."""

from .worker import SketchWorker
from .controller import SketchController

__all__ = ['SketchWorker', 'SketchController']
