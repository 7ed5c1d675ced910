# renderer/canvas.py
import numpy as np
from core.vector import Vector4, color


class Canvas:
    """
    Row-major grid of RGB colors, black when created.
    The pixels array has shape (height, width, 3).
    """
    def __init__(self, width: int = 10, height: int = 10):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float32)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "Canvas":
        """Wraps an existing (height, width, 3) array of colors in [0, 1]."""
        height, width = pixels.shape[:2]
        canvas = cls(width, height)
        canvas.pixels[:] = pixels[:, :, :3]
        return canvas

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, c: Vector4) -> None:
        self._check(x, y)
        self.pixels[y, x] = (c.r, c.g, c.b)

    def pixel_at(self, x: int, y: int) -> Vector4:
        self._check(x, y)
        r, g, b = self.pixels[y, x].tolist()
        return color(r, g, b)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"


def write_pixel(canvas: Canvas, x: int, y: int, c: Vector4) -> None:
    canvas.write_pixel(x, y, c)


def pixel_at(canvas: Canvas, x: int, y: int) -> Vector4:
    return canvas.pixel_at(x, y)
