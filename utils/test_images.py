"""Synthetic images for sketch demos and tests."""

import numpy as np


def generate_uniform(width: int = 64, height: int = 64, value: int = 128) -> np.ndarray:
    """Flat gray field - no edges at all."""
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[:, :, :3] = value
    img[:, :, 3] = 255
    return img


def generate_vertical_edge(width: int = 20, height: int = 20, split: int = None,
                           left: int = 0, right: int = 255) -> np.ndarray:
    """Sharp vertical boundary; columns before ``split`` are ``left``, the rest ``right``."""
    if split is None:
        split = width // 2
    img = np.empty((height, width, 4), dtype=np.uint8)
    img[:, :split, :3] = left
    img[:, split:, :3] = right
    img[:, :, 3] = 255
    return img


def generate_checkerboard(size: int = 256, block_size: int = 32) -> np.ndarray:
    """High-contrast checkerboard - edges in both directions."""
    img = np.zeros((size, size, 4), dtype=np.uint8)
    img[:, :, 3] = 255
    
    for i in range(0, size, block_size):
        for j in range(0, size, block_size):
            block_idx = (i // block_size + j // block_size) % 2
            if block_idx == 0:
                img[i:i+block_size, j:j+block_size, :3] = [30, 30, 30]
            else:
                img[i:i+block_size, j:j+block_size, :3] = [220, 220, 220]
    
    return img


def generate_portrait_disc(size: int = 256) -> np.ndarray:
    """Coloured disc on a soft gradient - stands in for a photo subject."""
    yy, xx = np.mgrid[0:size, 0:size].astype(np.float32)
    t = (xx + yy) / (2 * size - 2)
    
    img = np.zeros((size, size, 4), dtype=np.float32)
    img[:, :, 0] = 200 - t * 60
    img[:, :, 1] = 210 - t * 50
    img[:, :, 2] = 230 - t * 40
    img[:, :, 3] = 255
    
    center = size / 2
    inside = (xx - center) ** 2 + (yy - center) ** 2 <= (size * 0.3) ** 2
    img[inside, 0] = 180
    img[inside, 1] = 90
    img[inside, 2] = 60
    
    return np.clip(img, 0, 255).astype(np.uint8)
