"""Tests for the canvas and the PPM persistence layer."""

import numpy as np
import pytest
from PIL import Image

from core.vector import color
from renderer.canvas import Canvas, pixel_at, write_pixel
from renderer.ppm import canvas_to_ppm, ppm_header, read_ppm, save_image, save_png, write_ppm
from renderer.tone_mapping import from_8bit, to_8bit


class TestCanvas:

    def test_new_canvas_is_black(self):
        c = Canvas(10, 20)
        assert c.width == 10
        assert c.height == 20
        assert c.pixels.shape == (20, 10, 3)
        assert all(c.pixel_at(x, y) == color(0, 0, 0) for x in range(10) for y in range(20))

    def test_write_pixel(self):
        c = Canvas(10, 20)
        red = color(1, 0, 0)
        write_pixel(c, 2, 3, red)
        assert pixel_at(c, 2, 3) == red
        assert c.pixels[3, 2].tolist() == [1.0, 0.0, 0.0]

    def test_out_of_bounds(self):
        c = Canvas(4, 4)
        with pytest.raises(IndexError):
            c.write_pixel(4, 0, color(1, 1, 1))
        with pytest.raises(IndexError):
            c.pixel_at(0, -1)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Canvas(0, 5)


class TestToneMapping:

    def test_clamps_and_rounds(self):
        values = np.array([-0.5, 0.0, 0.5, 1.0, 1.5], dtype=np.float32)
        assert to_8bit(values).tolist() == [0, 0, 128, 255, 255]

    def test_back_to_float(self):
        assert from_8bit(np.array([0, 255], dtype=np.uint8)).tolist() == [0.0, 1.0]


class TestPPM:

    def test_header(self):
        assert ppm_header(Canvas(5, 3)) == "P3\n5 3\n255\n"

    def test_pixel_data(self):
        c = Canvas(5, 3)
        c.write_pixel(0, 0, color(1.5, 0, 0))
        c.write_pixel(2, 1, color(0, 0.5, 0))
        c.write_pixel(4, 2, color(-0.5, 0, 1))
        lines = canvas_to_ppm(c).splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_split(self):
        c = Canvas(10, 2)
        c.pixels[:] = (1, 0.8, 0.6)
        lines = canvas_to_ppm(c).splitlines()
        assert lines[3:7] == [
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
            "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
            "153 255 204 153 255 204 153 255 204 153 255 204 153",
        ]
        assert all(len(line) <= 70 for line in lines)

    def test_ends_with_newline(self):
        assert canvas_to_ppm(Canvas(5, 3)).endswith("\n")

    def test_round_trip(self, temp_output_dir):
        rng = np.random.default_rng(7)
        c = Canvas.from_array(rng.random((6, 9, 3)).astype(np.float32))
        path = str(temp_output_dir / "roundtrip.ppm")
        assert write_ppm(c, path)
        back = read_ppm(path)
        assert back is not None
        assert (back.width, back.height) == (9, 6)
        assert np.allclose(back.pixels, c.pixels, atol=0.5 / 255 + 1e-6)

    def test_file_starts_with_header(self, temp_output_dir):
        path = temp_output_dir / "header.ppm"
        assert write_ppm(Canvas(5, 3), str(path))
        assert path.read_text().startswith("P3\n5 3\n255\n")

    def test_write_failure_is_reported(self, temp_output_dir):
        assert write_ppm(Canvas(2, 2), str(temp_output_dir / "missing" / "out.ppm")) is False

    def test_missing_file_reads_as_none(self, temp_output_dir):
        assert read_ppm(str(temp_output_dir / "nope.ppm")) is None

    def test_garbage_file_reads_as_none(self, temp_output_dir):
        path = temp_output_dir / "garbage.ppm"
        path.write_text("this is not an image\n")
        assert read_ppm(str(path)) is None


class TestPNG:

    def test_save_png(self, temp_output_dir):
        c = Canvas(4, 2)
        c.write_pixel(1, 0, color(1, 0, 0))
        path = temp_output_dir / "out.png"
        assert save_png(c, str(path))
        with Image.open(path) as img:
            assert img.size == (4, 2)
            assert img.convert("RGB").getpixel((1, 0)) == (255, 0, 0)

    def test_save_image_picks_format_by_suffix(self, temp_output_dir):
        c = Canvas(3, 3)
        ppm_path = temp_output_dir / "a.ppm"
        png_path = temp_output_dir / "a.png"
        assert save_image(c, str(ppm_path))
        assert save_image(c, str(png_path))
        assert ppm_path.read_text().startswith("P3")
        assert png_path.read_bytes().startswith(b"\x89PNG")

    def test_unknown_suffix_is_reported(self, temp_output_dir):
        assert save_image(Canvas(2, 2), str(temp_output_dir / "out.unknownext")) is False
