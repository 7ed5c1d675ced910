# renderer/ppm.py
"""
Persistence of a rendered canvas.

Canvases are written as plain-text PPM (P3) and read back through Pillow.
Failures are reported as return values and logged; nothing here raises for
an unreadable or unwritable file.
"""
import os
from typing import List, Optional
import numpy as np
from PIL import Image
from core.utils import get_logger
from renderer.canvas import Canvas
from renderer.tone_mapping import from_8bit, to_8bit

logger = get_logger(__name__)

MAX_COLOR_VALUE = 255
MAX_LINE_LENGTH = 70


def ppm_header(canvas: Canvas) -> str:
    return f"P3\n{canvas.width} {canvas.height}\n{MAX_COLOR_VALUE}\n"


def _wrap(values: List[str]) -> List[str]:
    """Joins values with spaces, starting a new line before MAX_LINE_LENGTH is exceeded."""
    lines = []
    current = ""
    for v in values:
        if not current:
            current = v
        elif len(current) + 1 + len(v) > MAX_LINE_LENGTH:
            lines.append(current)
            current = v
        else:
            current = current + " " + v
    if current:
        lines.append(current)
    return lines


def canvas_to_ppm(canvas: Canvas) -> str:
    """
    Full PPM text for the canvas. Every canvas row starts on a new line and
    the text ends with a newline.
    """
    data = to_8bit(canvas.pixels)
    lines = []
    for row in data:
        lines.extend(_wrap([str(v) for v in row.reshape(-1).tolist()]))
    return ppm_header(canvas) + "\n".join(lines) + "\n"


def write_ppm(canvas: Canvas, filename: str = "test.ppm") -> bool:
    try:
        with open(filename, "w", encoding="ascii") as fh:
            fh.write(canvas_to_ppm(canvas))
    except OSError as e:
        logger.error("Could not write %s: %s", filename, e)
        return False
    logger.info("Wrote %dx%d canvas to %s", canvas.width, canvas.height, filename)
    return True


def read_ppm(filename: str = "test.ppm") -> Optional[Canvas]:
    """
    Loads a PPM file into a canvas. Returns None if the file is missing or
    is not a readable image.
    """
    if not os.path.exists(filename):
        logger.error("Image file not found: %s", filename)
        return None
    try:
        with Image.open(filename) as img:
            data = np.asarray(img.convert("RGB"))
    except (OSError, ValueError) as e:
        logger.error("Error loading image %s: %s", filename, e)
        return None
    return Canvas.from_array(from_8bit(data, MAX_COLOR_VALUE))


def save_png(canvas: Canvas, filename: str) -> bool:
    try:
        Image.fromarray(to_8bit(canvas.pixels)).save(filename)
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", filename, e)
        return False
    logger.info("Wrote %dx%d canvas to %s", canvas.width, canvas.height, filename)
    return True


def save_image(canvas: Canvas, filename: str) -> bool:
    """Writes plain PPM for .ppm names and lets Pillow handle anything else."""
    if filename.lower().endswith(".ppm"):
        return write_ppm(canvas, filename)
    return save_png(canvas, filename)
