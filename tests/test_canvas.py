import math

import pytest

from py_raymath import Canvas, CanvasIndexError, Color, PPM_MAX_LINE_WIDTH, wrap_ppm_line

ROW_LINES = (
    "196 64 77 196 64 77 196 64 77 196 64 77 196 64 77 196 64 77 196 64 77\n"
    "196 64 77 196 64 77 196 64 77 196 64 77 196 64 77 196 64 77 196 64\n"
    "77 196 64 77\n"
)


class TestCanvas:

    def test_construction(self):
        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert len(canvas.buffer) == 200
        assert all(c == Color(0., 0., 0.) for c in canvas.buffer)

    def test_background(self):
        canvas = Canvas(3, 2, Color.white())
        assert all(c == Color.white() for c in canvas.buffer)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            Canvas(-1, 5)

    def test_set_get_pixel(self):
        canvas = Canvas(10, 20)
        canvas.set_pixel(2, 3, Color.red())
        assert canvas.get_pixel(2, 3) == Color.red()
        assert canvas.buffer[3 * 10 + 2] == Color.red()
        assert canvas.get_pixel(3, 2) == Color(0., 0., 0.)

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20), (100, 100)])
    def test_set_pixel_outside_is_ignored(self, x, y):
        canvas = Canvas(10, 20)
        before = list(canvas.buffer)
        canvas.set_pixel(x, y, Color.red())
        assert canvas.buffer == before

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_get_pixel_outside_raises(self, x, y):
        canvas = Canvas(10, 20)
        with pytest.raises(CanvasIndexError) as exc_info:
            canvas.get_pixel(x, y)
        assert (exc_info.value.x, exc_info.value.y) == (x, y)
        assert isinstance(exc_info.value, IndexError)

    @pytest.mark.parametrize("x, y, expected", [(1.5, 2.0, (1, 2)), (0.99, 4.7, (0, 4)), (-0.5, 0.0, (0, 0))])
    def test_set_pixel_truncates_float_coordinates(self, x, y, expected):
        canvas = Canvas(5, 5)
        canvas.set_pixel(x, y, Color.red())
        assert canvas.get_pixel(*expected) == Color.red()
        assert sum(1 for c in canvas.buffer if c == Color.red()) == 1

    @pytest.mark.parametrize("x, y", [(math.inf, 0.0), (0.0, -math.inf), (math.nan, 1.0), (5.0, 0.0)])
    def test_set_pixel_non_finite_or_outside_float_is_ignored(self, x, y):
        canvas = Canvas(5, 5)
        canvas.set_pixel(x, y, Color.red())
        assert all(c == Color(0., 0., 0.) for c in canvas.buffer)

    def test_fill(self):
        canvas = Canvas(4, 3)
        canvas.fill(Color(0.77, 0.25, 0.3))
        assert all(c == Color(0.77, 0.25, 0.3) for c in canvas.buffer)
        canvas.set_background(Color.blue())
        assert canvas.get_pixel(3, 2) == Color.blue()
        assert len(canvas.buffer) == 12


class TestPPM:

    def test_header(self):
        assert Canvas(5, 3).encode().startswith("P3\n5 3\n255\n")

    def test_small_canvas(self):
        canvas = Canvas(3, 2)
        canvas.set_pixel(0, 0, Color(1.5, 0., 0.))
        canvas.set_pixel(1, 1, Color(0., 0.5, 0.))
        canvas.set_pixel(2, 1, Color(-0.5, 0., 1.))
        assert canvas.to_ppm() == (
            "P3\n3 2\n255\n"
            "255 0 0 0 0 0 0 0 0\n"
            "0 0 0 0 128 0 0 0 255\n"
        )

    def test_wrapped_rows(self):
        canvas = Canvas(15, 2)
        canvas.fill(Color(0.77, 0.25, 0.3))
        assert canvas.encode() == "P3\n15 2\n255\n" + ROW_LINES + ROW_LINES

    def test_lines_fit_and_single_trailing_newline(self):
        canvas = Canvas(40, 3)
        canvas.fill(Color(1., 1., 1.))
        text = canvas.encode()
        assert text.endswith("\n")
        assert not text.endswith("\n\n")
        assert all(len(line) <= PPM_MAX_LINE_WIDTH for line in text.split("\n"))

    def test_zero_width_emits_header_only(self):
        assert Canvas(0, 4).encode() == "P3\n0 4\n255\n"
        assert Canvas(4, 0).encode() == "P3\n4 0\n255\n"

    def test_to_disk(self, tmp_path):
        canvas = Canvas(15, 2)
        canvas.fill(Color(0.77, 0.25, 0.3))
        path = tmp_path / "image.ppm"
        canvas.to_disk(path)
        assert path.read_text(encoding="ascii") == canvas.encode()

    def test_to_disk_overwrites(self, tmp_path):
        path = tmp_path / "image.ppm"
        path.write_text("stale content that is longer than the image\n" * 10)
        Canvas(1, 1).to_disk(str(path))
        assert path.read_text() == "P3\n1 1\n255\n0 0 0\n"


class TestWrapLine:

    def test_short_line_unchanged(self):
        line = " ".join(["255 255 255"] * 5)
        assert wrap_ppm_line(line) == line

    def test_exactly_max_width_unchanged(self):
        line = "1" * PPM_MAX_LINE_WIDTH
        assert wrap_ppm_line(line) == line

    def test_long_line_keeps_samples(self):
        line = " ".join(["0 128 255"] * 30)
        wrapped = wrap_ppm_line(line)
        assert "\n" in wrapped
        assert wrapped.replace("\n", " ") == line
        assert all(len(part) <= PPM_MAX_LINE_WIDTH for part in wrapped.split("\n"))
