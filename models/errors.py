"""Error taxonomy for the sketch pipeline."""


class SketchError(Exception):
    """Base class for sketch pipeline failures."""


class InvalidBufferError(SketchError, ValueError):
    """Buffer has zero size or its payload does not match its dimensions."""


class UnsupportedModeError(SketchError, ValueError):
    """Sketch mode is not one of the known rendering modes."""


class ProcessingError(SketchError):
    """A pipeline or export stage failed; wraps the underlying exception."""

    def __init__(self, stage: str, message: str):
        super().__init__(f"{stage}: {message}")
        self.stage = stage
