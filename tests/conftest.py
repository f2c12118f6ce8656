"""Shared fixtures."""

import numpy as np
import pytest

from models.pixel_buffer import PixelBuffer


@pytest.fixture(scope="session")
def qt_app():
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def random_buffer():
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, (24, 32, 4), dtype=np.uint8)
    return PixelBuffer(32, 24, pixels)
