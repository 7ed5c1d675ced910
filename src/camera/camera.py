# camera/camera.py
import math
from core.matrix import Matrix, identity
from core.ray import Ray
from core.vector import point


class Camera:
    """
    Maps the canvas onto a plane one unit in front of the eye.

    half_width, half_height and pixel_size are derived from hsize, vsize and
    field_of_view and are recomputed whenever one of those changes.
    """
    def __init__(self, hsize: int = 160, vsize: int = 120, field_of_view: float = math.pi / 2,
                 transform: Matrix = None):
        _check_size(hsize, vsize)
        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self.transform = transform if transform is not None else identity()
        self.update_camera()

    @property
    def hsize(self) -> int:
        return self._hsize

    @hsize.setter
    def hsize(self, value: int) -> None:
        _check_size(value, self._vsize)
        self._hsize = value
        self.update_camera()

    @property
    def vsize(self) -> int:
        return self._vsize

    @vsize.setter
    def vsize(self, value: int) -> None:
        _check_size(self._hsize, value)
        self._vsize = value
        self.update_camera()

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, value: float) -> None:
        self._field_of_view = value
        self.update_camera()

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix) -> None:
        self._transform = m
        self._inverse = m.inverse()

    def update_camera(self):
        """Updates the viewport size from the canvas size and field of view."""
        half_view = math.tan(self._field_of_view / 2)
        aspect = self._hsize / self._vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / self._hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """
        Returns the ray from the eye through the center of pixel (px, py).
        """
        # Offset from the edge of the canvas to the pixel's center.
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size

        pixel = self._inverse * point(world_x, world_y, -1)
        origin = self._inverse * point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)


def _check_size(hsize: int, vsize: int) -> None:
    if hsize <= 0 or vsize <= 0:
        raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")


def ray_for_pixel(camera: Camera, px: int, py: int) -> Ray:
    return camera.ray_for_pixel(px, py)
