"""Pixel canvas and plain-text PPM (P3) encoder.

A Canvas is a ``width x height`` row-major buffer of Color values with the origin
at the top-left corner. Writes outside the frame are silently dropped, which lets
callers plot points (e.g. a trajectory) without clipping them first; reading a
pixel outside the frame raises CanvasIndexError.

Output Format:
    ```
    P3
    <width> <height>
    255
    <row 1 samples, wrapped at 70 chars per line>
    ...
    <row H samples>
    ```
"""
from __future__ import annotations

import math
import operator
import os
from typing import Dict, List

from typing_extensions import Final, Union

from py_raymath.color import MAX_COLOR_VALUE, Color
from py_raymath.exceptions import CanvasIndexError
from py_raymath.logger import logger

__all__ = (
    'Canvas',
    'wrap_ppm_line',
    'PPM_MAGIC',
    'PPM_MAX_LINE_WIDTH',
    'PPM_WRAP_COLUMN',
)

PPM_MAGIC: Final[str] = "P3"
PPM_MAX_LINE_WIDTH: Final[int] = 70
# 70 - 3: a sample has at most three digits, so breaking at the first space
# after column 67 keeps every line within PPM_MAX_LINE_WIDTH
PPM_WRAP_COLUMN: Final[int] = PPM_MAX_LINE_WIDTH - 3


def wrap_ppm_line(line: str) -> str:
    """Re-wrap a space-separated sample row so no line exceeds 70 characters.

    Rows of at most PPM_MAX_LINE_WIDTH characters are returned unchanged. Longer
    rows are scanned from index 1; whenever the index within the row is a multiple
    of PPM_WRAP_COLUMN a break is armed, and the next space replaced by a newline.

    Args:
        line: One encoded pixel row, samples joined by single spaces.

    Returns:
        The row with some spaces turned into line breaks.

    Examples:
        ```python
        row = " ".join(["196 64 77"] * 15)
        wrapped = wrap_ppm_line(row)
        assert all(len(part) <= 70 for part in wrapped.split("\\n"))
        assert wrapped.replace("\\n", " ") == row
        ```
    """
    if len(line) <= PPM_MAX_LINE_WIDTH:
        return line

    out: List[str] = [line[0]]
    insert_newline = False
    for i in range(1, len(line)):
        ch = line[i]
        if i % PPM_WRAP_COLUMN == 0:
            insert_newline = True

        if insert_newline and ch == ' ':
            out.append('\n')
            insert_newline = False
        else:
            out.append(ch)
    return "".join(out)


class Canvas:
    """Fixed-size 2D buffer of colors.

    Attributes:
        width: Pixel columns (fixed at construction).
        height: Pixel rows (fixed at construction).
        buffer: Row-major pixel list, ``buffer[y * width + x]``.

    Examples:
        ```python
        canvas = Canvas(20, 10)
        canvas.set_pixel(2, 3, Color.red())
        canvas.set_pixel(99, 3, Color.red())  # outside, ignored
        assert canvas.get_pixel(2, 3) == Color.red()
        text = canvas.encode()
        ```
    """

    __slots__ = ('_width', '_height', '_buffer')

    def __init__(self, width: int, height: int, background: Color = Color(0.0, 0.0, 0.0)):
        width, height = operator.index(width), operator.index(height)
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must not be negative, got {width}x{height}")
        self._width: int = width
        self._height: int = height
        self._buffer: List[Color] = [background] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> List[Color]:
        return self._buffer

    def set_pixel(self, x: Union[int, float], y: Union[int, float], color: Color) -> None:
        """Write one pixel; coordinates outside the canvas are silently ignored.

        Float coordinates are truncated toward zero; ``inf`` and ``nan`` never hit
        the canvas.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            return
        x, y = int(x), int(y)
        if 0 <= x < self._width and 0 <= y < self._height:
            self._buffer[y * self._width + x] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Read one pixel.

        Raises:
            CanvasIndexError: If ``(x, y)`` lies outside the canvas.
        """
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise CanvasIndexError(x, y, self._width, self._height)
        return self._buffer[y * self._width + x]

    def fill(self, color: Color) -> None:
        """Overwrite every pixel with ``color``."""
        self._buffer[:] = [color] * len(self._buffer)

    set_background = fill

    def encode(self) -> str:
        """Encode the whole canvas as P3 PPM text.

        The header is ``P3``, ``<width> <height>`` and ``255``; each pixel row
        follows as space-joined samples passed through wrap_ppm_line. The result
        always ends with exactly one newline.
        """
        w = self._width
        parts: List[str] = [f"{PPM_MAGIC}\n{w} {self._height}\n{MAX_COLOR_VALUE}\n"]
        samples: Dict[Color, str] = {}
        wrapped = 0

        if w > 0:
            for y in range(self._height):
                row_pixels = self._buffer[y * w:(y + 1) * w]
                row = " ".join(
                    samples[c] if c in samples else samples.setdefault(c, c.to_display_string())
                    for c in row_pixels
                )
                if len(row) > PPM_MAX_LINE_WIDTH:
                    wrapped += 1
                parts.append(wrap_ppm_line(row))
                parts.append('\n')

        logger.debug(f"Encoded {w}x{self._height} canvas, {wrapped} rows wrapped")
        return "".join(parts)

    to_ppm = encode

    def to_disk(self, path: Union[str, os.PathLike]) -> None:
        """Write the encoded image to ``path``, replacing any existing file."""
        with open(path, "w", encoding="ascii", newline="\n") as fp:
            fp.write(self.encode())
        logger.debug(f"Canvas written to {os.fspath(path)}")
