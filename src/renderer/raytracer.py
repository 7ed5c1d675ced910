# renderer/raytracer.py
import time
from typing import Callable, Optional
from camera.camera import Camera
from core.utils import get_logger
from geometry.world import World
from renderer.canvas import Canvas
from renderer.shading import color_at

logger = get_logger(__name__)


def render(camera: Camera, world: World,
           progress: Optional[Callable[[int, int], None]] = None) -> Canvas:
    """
    Renders the world as seen by the camera, one primary ray per pixel.

    The world and camera are only read. progress, when given, is called
    with (rows_done, total_rows) after each finished row.
    """
    logger.info("Rendering %dx%d, %d objects, %d lights",
                camera.hsize, camera.vsize, len(world.objects), len(world.lights))
    start = time.perf_counter()
    image = Canvas(camera.hsize, camera.vsize)

    for y in range(camera.vsize):
        for x in range(camera.hsize):
            ray = camera.ray_for_pixel(x, y)
            image.write_pixel(x, y, color_at(world, ray))
        logger.debug("Row %d/%d done", y + 1, camera.vsize)
        if progress is not None:
            progress(y + 1, camera.vsize)

    logger.info("Render finished in %.2fs", time.perf_counter() - start)
    return image
