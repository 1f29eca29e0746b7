"""Half-lines in 3D space: an origin point and a direction vector."""
from __future__ import annotations

from typing_extensions import NamedTuple

from py_raymath.vector import Point, Vector

__all__ = ('Ray',)


class Ray(NamedTuple):
    """Ray starting at ``position`` and travelling along ``direction``.

    The direction is not normalized, so ``at(1.0)`` lies one full direction
    length away from the origin.

    Examples:
        ```python
        ray = Ray(Point(5., 5., 0.), Vector(10., 0., 0.))
        ray.at(0.5)    # P(10, 5, 0)
        ray.at(-0.5)   # P(0, 5, 0)
        ```
    """

    position: Point
    direction: Vector

    def at(self, d: float) -> Point:
        """Point reached after travelling ``d`` direction lengths."""
        return self.position + self.direction * d
