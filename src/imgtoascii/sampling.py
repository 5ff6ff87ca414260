import math

import numpy as np


def pixel_brightness(red: int, green: int, blue: int) -> int:
    """Integer average of the three channels, truncated."""
    return (red + green + blue) // 3


def ramp_position(brightness: int, ramp_size: int) -> int:
    """Position in the ramp of the character drawn for a brightness value.

    Dark pixels land at the sparse end of the ramp and bright pixels at the
    dense end. At brightness 255 the bucket index can reach ``ramp_size``, so
    it is clamped before being flipped.
    """
    step = 256 / ramp_size
    index = min(max(math.floor(brightness / step), 0), ramp_size - 1)
    return min(max(ramp_size - 1 - index, 0), ramp_size - 1)


def brightness_grid(pixels: np.ndarray) -> np.ndarray:
    """Per-pixel brightness of an (H, W, 3) array. Returns (H, W) int64."""
    return pixels.astype(np.int64).sum(axis=2) // 3


def ramp_positions(brightness: np.ndarray, ramp_size: int) -> np.ndarray:
    """Vectorised ``ramp_position`` over a brightness array."""
    step = 256 / ramp_size
    index = np.clip(np.floor(brightness / step).astype(np.int64), 0, ramp_size - 1)
    return np.clip(ramp_size - 1 - index, 0, ramp_size - 1)
