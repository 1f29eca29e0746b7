"""Closed numeric intervals, used to bound ray parameters and color channels."""
from __future__ import annotations

import math

from typing_extensions import Final, NamedTuple

__all__ = ('Interval', 'EMPTY', 'UNIVERSE')


class Interval(NamedTuple):
    """Interval ``[min, max]`` on the real line.

    The default interval is the whole line ``(-inf, inf)``. An interval whose
    ``min`` exceeds its ``max`` contains nothing (see EMPTY).

    Examples:
        ```python
        unit = Interval(0.0, 1.0)
        unit.contains(1.0)    # True
        unit.surrounds(1.0)   # False
        unit.clamp(1.7)       # 1.0
        ```
    """

    min: float = -math.inf
    max: float = math.inf

    def contains(self, x: float) -> bool:
        """True if ``min <= x <= max``."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """True if ``min < x < max``."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        """Limit ``x`` to the interval.

        Raises:
            ValueError: If the interval is empty or a bound is ``nan``.
        """
        if not self.min <= self.max:
            raise ValueError(f"Cannot clamp to {self!r}")
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x


EMPTY: Final[Interval] = Interval(math.inf, -math.inf)
UNIVERSE: Final[Interval] = Interval(-math.inf, math.inf)
