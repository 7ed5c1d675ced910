# main.py
import argparse
import math
import sys
from typing import List, Optional
from camera.camera import Camera
from core.transform import rotate_x, rotate_y, scaling, translation, view_transform
from core.utils import get_logger, set_log_level
from core.vector import point, vector
from geometry.sphere import Sphere
from geometry.world import World, default_world
from materials.presets import ColorPresets, LightPresets, MaterialPresets
from renderer.canvas import Canvas
from renderer.config import QUALITY_LEVELS, SCENES, RenderConfig
from renderer.ppm import save_image
from renderer.raytracer import render
from renderer.tone_mapping import to_8bit

logger = get_logger("main")


def create_world(scene: str) -> World:
    if scene == "default":
        return default_world()

    world = World()
    wall = MaterialPresets.matte(ColorPresets.WALL)

    # Floor and walls are spheres flattened to thin discs.
    world.add_object(Sphere(scaling(10, 0.01, 10), wall))
    world.add_object(Sphere(
        translation(0, 0, 5) * rotate_y(-math.pi / 4) * rotate_x(math.pi / 2) * scaling(10, 0.01, 10),
        wall
    ))
    world.add_object(Sphere(
        translation(0, 0, 5) * rotate_y(math.pi / 4) * rotate_x(math.pi / 2) * scaling(10, 0.01, 10),
        wall
    ))

    world.add_object(Sphere(translation(-0.5, 1, 0.5), MaterialPresets.plastic(ColorPresets.GREEN)))
    world.add_object(Sphere(
        translation(1.5, 0.5, -0.5) * scaling(0.5, 0.5, 0.5),
        MaterialPresets.plastic(ColorPresets.YELLOW)
    ))
    world.add_object(Sphere(
        translation(-1.5, 0.33, -0.75) * scaling(0.33, 0.33, 0.33),
        MaterialPresets.plastic(ColorPresets.ORANGE)
    ))

    world.add_light(LightPresets.white_light(-10, 10, -10))
    logger.info("Created %r scene with %d objects", scene, len(world.objects))
    return world


def create_camera(config: RenderConfig) -> Camera:
    camera = Camera(config.width, config.height, config.field_of_view)
    if config.scene == "default":
        camera.transform = view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
    else:
        camera.transform = view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))
    return camera


def show_preview(canvas: Canvas, scale: int = 4) -> None:
    """Shows the finished canvas in a window until it is closed or ESC is pressed."""
    import pygame

    pygame.init()
    try:
        window_size = (canvas.width * scale, canvas.height * scale)
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption("Ray Tracer")
        # surfarray expects (width, height, 3).
        surf = pygame.surfarray.make_surface(to_8bit(canvas.pixels).transpose(1, 0, 2))
        surf = pygame.transform.scale(surf, window_size)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surf, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a Phong-shaded scene of spheres.")
    parser.add_argument("--width", type=int, default=None, help="canvas width in pixels")
    parser.add_argument("--height", type=int, default=None, help="canvas height in pixels")
    parser.add_argument("--fov", type=float, default=60.0, help="field of view in degrees")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="balanced")
    parser.add_argument("--scene", choices=SCENES, default="spheres")
    parser.add_argument("--output", default="render.ppm", help=".ppm is written as plain PPM, other suffixes via Pillow")
    parser.add_argument("--preview", action="store_true", help="show the result in a pygame window")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = RenderConfig.from_args(args)
    except ValueError as e:
        logger.error("%s", e)
        return 2
    set_log_level(config.log_level)

    world = create_world(config.scene)
    camera = create_camera(config)
    canvas = render(camera, world)

    if not save_image(canvas, config.output):
        return 1
    if config.preview:
        show_preview(canvas)
    return 0


if __name__ == "__main__":
    sys.exit(main())
