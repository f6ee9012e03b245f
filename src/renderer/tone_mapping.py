# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

# Largest channel value before scaling, so that 256 * value truncates to 255.
CHANNEL_CLAMP_MAX = 0.999


def tone_map_channel(value: float, samples_per_pixel: int) -> int:
    """
    Averages an accumulated channel, applies gamma 2 and quantizes to [0, 255].
    """
    value = value * (1.0 / samples_per_pixel)
    if not value > 0.0:
        # Also catches NaN from a degenerate sample
        value = 0.0
    value = math.sqrt(value)
    return int(256 * min(max(value, 0.0), CHANNEL_CLAMP_MAX))


@njit
def tone_map_kernel(accumulation, samples_per_pixel, pixels):
    """
    Tone maps a (height, width, 3) accumulation buffer, top row first, into
    the flat RGBA byte buffer pixels. Alpha is always opaque.
    """
    height = accumulation.shape[0]
    width = accumulation.shape[1]
    scale = 1.0 / samples_per_pixel
    for row in range(height):
        for col in range(width):
            base = (row * width + col) * 4
            for ch in range(3):
                value = accumulation[row, col, ch] * scale
                if not value > 0.0:
                    value = 0.0
                value = math.sqrt(value)
                if value > CHANNEL_CLAMP_MAX:
                    value = CHANNEL_CLAMP_MAX
                pixels[base + ch] = int(256.0 * value)
            pixels[base + 3] = 255


def tone_map(accumulation: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Returns a new flat RGBA uint8 buffer for the given accumulation buffer.
    """
    height, width = accumulation.shape[:2]
    pixels = np.zeros(width * height * 4, dtype=np.uint8)
    tone_map_kernel(accumulation.astype(np.float64), samples_per_pixel, pixels)
    return pixels
