"""Homogeneous 3D geometry: free vectors and affine points.

Both Vector and Point wrap a 4x1 Matrix (``xyzw``). The fourth, homogeneous
component is 0 for a Vector and 1 for a Point; it is derived from the kind of
the value, never supplied by the caller, so a 4x4 transform matrix moves points
but only rotates/scales vectors.

The arithmetic encodes the affine rules:

    Vector + Vector -> Vector        Vector - Vector -> Vector
    Vector + Point  -> Point         Point  - Point  -> Vector
    Point  + Vector -> Point         Point  - Vector -> Point

Anything else (``Point + Point``, ``Vector - Point``) raises TypeError.

Equality is exact over all four stored components, unlike Matrix equality.

Typical Usage:
    ```python
    from py_raymath import Point, Vector

    start = Point(0.0, 1.0, 0.0)
    velocity = Vector(1.0, 1.8, 0.0).normalize().multiply(11.25)

    position = start.add(velocity)         # Point
    offset = position.subtract(start)      # Vector
    speed = offset.magnitude()             # 11.25 (within rounding)
    ```
"""
from __future__ import annotations

import math
from typing import Iterable, Iterator

from typing_extensions import Union

from py_raymath.helpers import fdiv
from py_raymath.matrix import Matrix, MatrixCell

__all__ = ('Vector', 'Point')


class _Homogeneous:
    """Shared 4x1 storage and element access of Vector and Point."""

    __slots__ = ('xyzw',)

    W: float = 0.0

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.xyzw: Matrix = Matrix(4, 1, (x, y, z, self.W))

    @classmethod
    def _from_components(cls, components: Iterable[float]):
        obj = cls.__new__(cls)
        obj.xyzw = Matrix(4, 1, components)
        return obj

    @classmethod
    def _from_matrix(cls, xyzw: Matrix):
        obj = cls.__new__(cls)
        obj.xyzw = xyzw
        return obj

    def get(self, i: int) -> float:
        """Return component ``i`` (0..3, where 3 is the homogeneous component).

        Raises:
            MatrixIndexError: If ``i`` is out of range.
        """
        return self.xyzw[i]

    def set(self, i: int, x: float) -> None:
        """Assign component ``i`` (0..3).

        Raises:
            MatrixIndexError: If ``i`` is out of range.
        """
        self.xyzw[i] = x

    def get_ref(self, i: int) -> MatrixCell:
        """Return a live handle to component ``i`` (0..3).

        Raises:
            MatrixIndexError: If ``i`` is out of range.
        """
        return self.xyzw.get_ref(i, 0)

    @property
    def x(self) -> float:
        return self.xyzw[0]

    @property
    def y(self) -> float:
        return self.xyzw[1]

    @property
    def z(self) -> float:
        return self.xyzw[2]

    @property
    def w(self) -> float:
        return self.xyzw[3]

    def __iter__(self) -> Iterator[float]:
        return iter(self.xyzw)

    def _scaled(self, factor: float):
        return self.__class__(self.x * factor, self.y * factor, self.z * factor)

    def _divided(self, scalar: float):
        return self.__class__(fdiv(self.x, scalar), fdiv(self.y, scalar), fdiv(self.z, scalar))

    def __copy__(self):
        return self._from_matrix(self.xyzw.clone())

    def __deepcopy__(self, memo):
        return self._from_matrix(self.xyzw.clone())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(a == b for a, b in zip(self.xyzw, other.xyzw))  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__[0]}({self.x:g}, {self.y:g}, {self.z:g})"


class Vector(_Homogeneous):
    """Free 3D vector, homogeneous component 0.

    Examples:
        ```python
        a = Vector(1., 2., 3.)
        b = Vector(2., 3., 4.)

        a.add(b)        # V(3, 5, 7)
        a.dot(b)        # 20.0
        a.cross(b)      # V(-1, 2, -1)
        a.magnitude()   # sqrt(14)
        ```
    """

    __slots__ = ()

    W = 0.0

    @classmethod
    def zero(cls) -> Vector:
        return cls(0., 0., 0.)

    def add(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        """Add a vector (result is a Vector) or a point (result is a Point).

        All four components are summed, so the homogeneous component of the
        result is that of ``other``.

        Raises:
            TypeError: If ``other`` is neither a Vector nor a Point.
        """
        if isinstance(other, Vector):
            return Vector._from_matrix(self.xyzw.add(other.xyzw))
        if isinstance(other, Point):
            return Point._from_matrix(self.xyzw.add(other.xyzw))
        raise TypeError(other)

    def subtract(self, other: Vector) -> Vector:
        """Difference of two vectors.

        Raises:
            TypeError: If ``other`` is not a Vector (a vector minus a point is undefined).
        """
        if not isinstance(other, Vector):
            raise TypeError(other)
        return Vector._from_matrix(self.xyzw.subtract(other.xyzw))

    def negate(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def multiply(self, scalar: float) -> Vector:
        """Scale the three spatial components by ``scalar``."""
        return self._scaled(scalar)

    def divide(self, scalar: float) -> Vector:
        """Divide the three spatial components by ``scalar`` (IEEE-754 on zero)."""
        return self._divided(scalar)

    def dot(self, other: Vector) -> float:
        """Sum of the four componentwise products, homogeneous component included."""
        a, b = self.xyzw, other.xyzw
        return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]

    def cross(self, other: Vector) -> Vector:
        """Right-handed 3D cross product of the spatial components."""
        a, b = self.xyzw, other.xyzw
        return Vector(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def magnitude(self) -> float:
        """Euclidean norm over all four components.

        For a well-formed vector the homogeneous component is 0, so this is the
        ordinary 3D length.
        """
        x, y, z, w = self.xyzw
        return math.sqrt(x * x + y * y + z * z + w * w)

    def normalize(self) -> Vector:
        """Divide every component, homogeneous included, by the magnitude.

        A zero vector is not guarded against: its components become ``nan``.
        """
        m = self.magnitude()
        return Vector._from_components(fdiv(c, m) for c in self.xyzw)

    def __add__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        if not isinstance(other, (Vector, Point)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Vector:
        return self.negate()

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.divide(scalar)


class Point(_Homogeneous):
    """Affine 3D point, homogeneous component 1.

    Examples:
        ```python
        p = Point(1., 2., 3.)
        v = Vector(1., 2., 3.)

        p.add(v)                    # P(2, 4, 6)
        p.subtract(v)               # P(0, 0, 0)
        p.subtract(Point(1., 1., 1.))  # V(0, 1, 2)
        ```
    """

    __slots__ = ()

    W = 1.0

    @classmethod
    def origin(cls) -> Point:
        return cls(0., 0., 0.)

    def add(self, other: Vector) -> Point:
        """Translate the point by a vector.

        Raises:
            TypeError: If ``other`` is not a Vector (points cannot be summed).
        """
        if not isinstance(other, Vector):
            raise TypeError(other)
        return Point._from_matrix(self.xyzw.add(other.xyzw))

    def subtract(self, other: Union[Point, Vector]) -> Union[Vector, Point]:
        """Point minus point is the Vector between them; point minus vector is a Point.

        Raises:
            TypeError: If ``other`` is neither a Point nor a Vector.
        """
        if isinstance(other, Point):
            return Vector._from_matrix(self.xyzw.subtract(other.xyzw))
        if isinstance(other, Vector):
            return Point._from_matrix(self.xyzw.subtract(other.xyzw))
        raise TypeError(other)

    def negate(self) -> Point:
        return Point(-self.x, -self.y, -self.z)

    def multiply(self, scalar: float) -> Point:
        return self._scaled(scalar)

    def divide(self, scalar: float) -> Point:
        return self._divided(scalar)

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Union[Point, Vector]) -> Union[Vector, Point]:
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Point:
        return self.negate()

    def __mul__(self, scalar: float) -> Point:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> Point:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Point:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.divide(scalar)
