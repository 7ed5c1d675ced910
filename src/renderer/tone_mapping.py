# renderer/tone_mapping.py
import numpy as np


def to_8bit(pixels: np.ndarray) -> np.ndarray:
    """
    Scales linear colors from [0, 1] to [0, 255], clamping anything outside
    that range and rounding to the nearest integer.
    """
    return np.floor(np.clip(pixels, 0.0, 1.0) * 255 + 0.5).astype("uint8")


def from_8bit(values: np.ndarray, max_value: int = 255) -> np.ndarray:
    """Converts integer channels back to float colors in [0, 1]."""
    return values.astype(np.float32) / float(max_value)
