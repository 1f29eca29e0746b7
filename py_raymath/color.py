"""RGB colors with unclamped arithmetic.

Components are plain floats where 0.0 is "none" and 1.0 is "full" intensity, but
arithmetic never clamps: intermediate values may be negative or exceed 1.0. Only
``to_display_string`` maps a color into the 0..255 integer range of the PPM format.
"""
from __future__ import annotations

import math
import random

from typing_extensions import NamedTuple, Optional, Union

from py_raymath.helpers import round_half_away

__all__ = ('Color', 'MAX_COLOR_VALUE')

MAX_COLOR_VALUE = 255


def _scale(x: float, mul: int = MAX_COLOR_VALUE) -> int:
    if math.isnan(x):
        return 0
    return int(min(max(round_half_away(x * mul), 0), mul))


class Color(NamedTuple):
    """Immutable RGB color.

    Attributes:
        r: Red component.
        g: Green component.
        b: Blue component.

    Examples:
        ```python
        orange = Color(1.0, 0.5, 0.0)
        darker = orange * 0.5                  # Color(0.5, 0.25, 0.0)
        tinted = orange * Color(1.0, 1.0, 0.5) # Hadamard product
        orange.to_display_string()             # '255 128 0'
        ```
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> Color:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> Color:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> Color:
        """Color with every channel drawn uniformly from the closed range [0, 1]."""
        rng = rng or random.Random()
        return cls(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))

    def add(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def subtract(self, other: Color) -> Color:
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def mul_by_color(self, other: Color) -> Color:
        """Componentwise (Hadamard) product, used to blend a light with a surface."""
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def mul_by_const(self, a: float) -> Color:
        return Color(self.r * a, self.g * a, self.b * a)

    def to_display_string(self) -> str:
        """Render as three space-separated integers in 0..255.

        Each component is mapped with ``clamp(round(c * 255), 0, 255)`` where halves
        round away from zero; ``nan`` renders as 0. The color itself is unchanged.
        """
        return f"{_scale(self.r)} {_scale(self.g)} {_scale(self.b)}"

    def __add__(self, other: Color) -> Color:  # type: ignore[override]
        if not isinstance(other, Color):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Union[int, float, Color]) -> Color:  # type: ignore[override]
        if isinstance(other, Color):
            return self.mul_by_color(other)
        if isinstance(other, (int, float)):
            return self.mul_by_const(other)
        return NotImplemented

    def __rmul__(self, other: Union[int, float, Color]) -> Color:  # type: ignore[override]
        return self.__mul__(other)
