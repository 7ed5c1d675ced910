# renderer/config.py
import math
from dataclasses import dataclass

# Named canvas sizes selectable from the command line.
QUALITY_LEVELS = {
    "preview": {"width": 80, "height": 60},
    "balanced": {"width": 160, "height": 120},
    "high_quality": {"width": 640, "height": 480},
}

SCENES = ("default", "spheres")


@dataclass
class RenderConfig:
    """Settings for one render run."""
    width: int = 160
    height: int = 120
    field_of_view: float = math.pi / 3
    scene: str = "spheres"
    output: str = "render.ppm"
    preview: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0 < self.field_of_view < math.pi:
            raise ValueError(f"Field of view must be between 0 and pi radians, got {self.field_of_view}")
        if self.scene not in SCENES:
            raise ValueError(f"Unknown scene {self.scene!r}, expected one of {', '.join(SCENES)}")

    @classmethod
    def from_args(cls, args) -> "RenderConfig":
        """
        Builds a config from parsed command-line arguments. An explicit
        --width/--height wins over the size of the --quality level.
        """
        level = QUALITY_LEVELS[args.quality]
        return cls(
            width=args.width if args.width is not None else level["width"],
            height=args.height if args.height is not None else level["height"],
            field_of_view=math.radians(args.fov),
            scene=args.scene,
            output=args.output,
            preview=args.preview,
            log_level=args.log_level,
        )
