"""Export format catalogue."""

from enum import Enum


class ExportFormat(str, Enum):
    """Deliverables that can be derived from a finished sketch."""

    PNG = 'png'
    JPG = 'jpg'
    TRANSPARENT = 'transparent'
    PRINT_A4 = 'print-a4'
    COLORING_BOOK = 'coloring-book'
    BW_PRINT = 'bw-print'

    @property
    def extension(self) -> str:
        return '.jpg' if self is ExportFormat.JPG else '.png'

    @property
    def default_filename(self) -> str:
        if self in (ExportFormat.PNG, ExportFormat.JPG):
            return f"sketch{self.extension}"
        suffix = 'a4-print' if self is ExportFormat.PRINT_A4 else self.value
        return f"sketch-{suffix}{self.extension}"
