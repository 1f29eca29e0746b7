"""py_raymath exception types.

The library has three deliberately different failure policies:

1. Precondition violations (programmer errors) raise the exceptions defined here.
   They are never caught inside the library and callers are not expected to
   recover from them: indexing a matrix, vector or point out of range, reading a
   canvas pixel out of range, asking for an identity of a non-square shape, or
   combining matrices of incompatible shapes.
2. Canvas writes outside the frame are silently ignored (no exception).
3. Degenerate floating-point arithmetic (division by zero, normalizing a zero
   vector) follows IEEE-754 and yields ``inf``/``nan`` (no exception).

Exception Hierarchy
-------------------

Exception (built-in Python)
├── IndexError
│   └── OutOfBoundsError
│       ├── MatrixIndexError
│       └── CanvasIndexError
└── ValueError
    └── ShapeError
"""
from __future__ import annotations

from typing import Optional, Tuple

__all__ = (
    'OutOfBoundsError',
    'MatrixIndexError',
    'CanvasIndexError',
    'ShapeError',
)


class OutOfBoundsError(IndexError):
    """Index outside of a fixed-size container."""


class MatrixIndexError(OutOfBoundsError):
    """Element access outside of a matrix shape.

    Contains:
    - The offending index (flat index or (row, col) pair)
    - The shape of the matrix that was accessed
    """

    def __init__(self, index, shape: Tuple[int, int], note: str = ""):
        self.index = index
        self.shape: Tuple[int, int] = shape
        msg = f"Index {index} out of bounds for {shape[0]}x{shape[1]} matrix"
        if note:
            msg += f". {note}"
        super().__init__(msg)


class CanvasIndexError(OutOfBoundsError):
    """Pixel read outside of a canvas.

    Contains:
    - The offending x and y coordinates
    - The canvas width and height
    """

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x: int = x
        self.y: int = y
        self.width: int = width
        self.height: int = height
        super().__init__(f"Pixel ({x}, {y}) out of bounds for {width}x{height} canvas")


class ShapeError(ValueError):
    """Operation requested on matrices whose shapes do not allow it.

    Contains:
    - The shape of the left operand
    - Optionally, the shape of the right operand
    """

    def __init__(self, message: str, shape: Tuple[int, int],
                 other_shape: Optional[Tuple[int, int]] = None):
        self.shape: Tuple[int, int] = shape
        self.other_shape: Optional[Tuple[int, int]] = other_shape
        msg = f"{message}: {shape[0]}x{shape[1]}"
        if other_shape is not None:
            msg += f" and {other_shape[0]}x{other_shape[1]}"
        super().__init__(msg)
