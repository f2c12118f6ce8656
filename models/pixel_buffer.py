"""RGBA pixel buffer shared by every pipeline stage."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from models.errors import InvalidBufferError


@dataclass(eq=False)
class PixelBuffer:
    """Interleaved RGBA image: ``pixels`` has shape (height, width, 4), dtype uint8."""

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidBufferError(f"Buffer must be non-empty, got {self.width}x{self.height}")
        if not isinstance(self.pixels, np.ndarray) or self.pixels.dtype != np.uint8:
            raise InvalidBufferError("Pixel data must be a uint8 numpy array")
        if self.pixels.shape != (self.height, self.width, 4):
            raise InvalidBufferError(
                f"Pixel data shape {self.pixels.shape} does not match "
                f"{self.width}x{self.height} RGBA"
            )

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        """Build from raw row-major RGBA bytes."""
        expected = width * height * 4
        if width <= 0 or height <= 0:
            raise InvalidBufferError(f"Buffer must be non-empty, got {width}x{height}")
        if len(data) != expected:
            raise InvalidBufferError(
                f"Expected {expected} bytes for {width}x{height} RGBA, got {len(data)}"
            )
        pixels = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4).copy()
        return cls(width, height, pixels)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """Build from a gray (H,W), RGB (H,W,3) or RGBA (H,W,4) array."""
        array = np.asarray(array)
        if array.ndim == 2:
            array = np.repeat(array[:, :, None], 3, axis=2)
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise InvalidBufferError(f"Unsupported image shape {array.shape}")
        h, w = array.shape[:2]
        if h == 0 or w == 0:
            raise InvalidBufferError(f"Buffer must be non-empty, got {w}x{h}")

        pixels = np.empty((h, w, 4), dtype=np.uint8)
        pixels[:, :, :3] = np.clip(array[:, :, :3], 0, 255)
        if array.shape[2] == 4:
            pixels[:, :, 3] = np.clip(array[:, :, 3], 0, 255)
        else:
            pixels[:, :, 3] = 255
        return cls(w, h, pixels)

    @classmethod
    def filled(cls, width: int, height: int, rgba: Tuple[int, int, int, int]) -> "PixelBuffer":
        """Uniform buffer of one colour."""
        if width <= 0 or height <= 0:
            raise InvalidBufferError(f"Buffer must be non-empty, got {width}x{height}")
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = np.clip(rgba, 0, 255)
        return cls(width, height, pixels)

    def with_pixels(self, pixels: np.ndarray) -> "PixelBuffer":
        """New buffer of the same size holding ``pixels``."""
        return PixelBuffer(self.width, self.height, pixels)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.pixels.copy())

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    @property
    def rgb(self) -> np.ndarray:
        return self.pixels[:, :, :3]

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[:, :, 3]

    @property
    def luma(self) -> np.ndarray:
        # Red carries luma once the buffer has been through grayscale.
        return self.pixels[:, :, 0]

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height})"
