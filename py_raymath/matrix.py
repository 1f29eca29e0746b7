"""Fixed-shape dense matrices.

A Matrix has a row count and a column count that are set once at construction and
never change afterwards, and holds ``rows * cols`` floats in row-major order.

Storage Policy:
    Small matrices keep their elements in an InlineStorage (a plain list owned by
    the matrix, cheap to copy). Matrices whose element count reaches the storage
    cutoff (``Settings.get_storage_cutoff()``, 128 * 128 = 16384 by default) get an
    IndirectStorage instead: a separately allocated, uniquely owned ``array('d')``
    buffer. Both expose the same element access contract, so callers never need
    to know which one they hold; ``Matrix.uses_indirect_storage`` reports it.

    An inline matrix can be duplicated with ``copy.copy``. An indirect matrix
    refuses implicit copies and must be duplicated explicitly with ``clone()``.

Failure Semantics:
    - Out-of-range element access raises MatrixIndexError.
    - Identity of a non-square shape and operands of incompatible shapes raise ShapeError.
    - Elementwise division follows IEEE-754 (``inf``/``nan``), it never raises.

Typical Usage:
    ```python
    from py_raymath import Matrix

    a = Matrix(2, 2, [1, 2,
                      3, 4])
    b = Matrix.identity(2)

    assert a.multiply(b) == a
    assert a.transpose().get(0, 1) == 3
    assert a.submatrix(0, 0) == Matrix(1, 1, [4])
    ```
"""
from __future__ import annotations

import operator
from array import array
from typing import Callable, Iterable, Iterator, List

from typing_extensions import Final, Optional, Tuple, Union

from py_raymath.exceptions import MatrixIndexError, ShapeError
from py_raymath.helpers import fdiv
from py_raymath.logger import logger
from py_raymath.settings import Settings

__all__ = (
    'Matrix',
    'MatrixCell',
    'InlineStorage',
    'IndirectStorage',
    'EQUALITY_EPSILON',
)

# Elements closer than this compare equal; effectively exact comparison
EQUALITY_EPSILON: Final[float] = 0.1 ** 40


class _Storage:
    """Row-major element buffer owned by exactly one Matrix."""

    __slots__ = ('_buf',)

    indirect: bool = False

    def __len__(self) -> int:
        return len(self._buf)

    def __getitem__(self, k: int) -> float:
        return self._buf[k]

    def __setitem__(self, k: int, x: float) -> None:
        self._buf[k] = x

    def __iter__(self) -> Iterator[float]:
        return iter(self._buf)

    def copy(self):
        """Return an independent storage of the same kind with the same elements."""
        dup = self.__class__.__new__(self.__class__)
        dup._buf = self._buf[:]
        return dup

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._buf)!r})"


class InlineStorage(_Storage):
    """Elements embedded in the matrix as a plain list."""

    __slots__ = ()

    indirect = False

    def __init__(self, size: int):
        self._buf: List[float] = [0.0] * size


class IndirectStorage(_Storage):
    """Elements held in a separately allocated ``array('d')`` buffer."""

    __slots__ = ()

    indirect = True

    def __init__(self, size: int):
        self._buf: array = array('d', [0.0]) * size


class MatrixCell:
    """Live handle to a single matrix element.

    Reading or assigning ``value`` reads or writes the element in the owning
    matrix storage, so accumulations can be written as ``cell.value += x``.
    """

    __slots__ = ('_storage', '_index')

    def __init__(self, storage: _Storage, index: int):
        self._storage = storage
        self._index = index

    @property
    def value(self) -> float:
        return self._storage[self._index]

    @value.setter
    def value(self, x: float) -> None:
        self._storage[self._index] = float(x)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"MatrixCell({self.value!r})"


class Matrix:
    """Dense ``rows x cols`` matrix of floats with a fixed shape.

    Attributes:
        rows: Number of rows (fixed at construction).
        cols: Number of columns (fixed at construction).

    Examples:
        ```python
        # Zero-filled 3x3
        m = Matrix(3, 3)

        # Literal values, row-major; the remainder is zero-padded
        m = Matrix(4, 4, [1., 2., 3., 4., 5.])
        assert m.get(1, 0) == 5.0
        assert m.get(3, 3) == 0.0

        # Large matrices transparently use indirect storage
        big = Matrix(130, 130)
        assert big.uses_indirect_storage
        ```
    """

    __slots__ = ('_rows', '_cols', '_data')

    def __init__(self, rows: int, cols: int, values: Optional[Iterable[float]] = None):
        """Create a zero-filled matrix, optionally seeded with row-major values.

        Args:
            rows: Row count, must be positive.
            cols: Column count, must be positive.
            values: Optional row-major elements. Fewer than ``rows * cols`` values
                leave the remaining elements at zero.

        Raises:
            ShapeError: If a dimension is not positive or too many values are given.
        """
        rows, cols = operator.index(rows), operator.index(cols)
        if rows <= 0 or cols <= 0:
            raise ShapeError("Matrix dimensions must be positive", (rows, cols))
        self._rows: int = rows
        self._cols: int = cols

        size = rows * cols
        self._data: _Storage
        if size >= Settings.get_storage_cutoff():
            logger.debug(f"Allocating indirect storage for {rows}x{cols} matrix")
            self._data = IndirectStorage(size)
        else:
            self._data = InlineStorage(size)

        if values is not None:
            items = [float(v) for v in values]
            if len(items) > size:
                raise ShapeError(f"Too many values ({len(items)}) for matrix", (rows, cols))
            for k, x in enumerate(items):
                self._data[k] = x

    @classmethod
    def identity(cls, rows: int, cols: Optional[int] = None) -> Matrix:
        """Return the identity matrix.

        Args:
            rows: Row count.
            cols: Column count, defaults to ``rows``. Must equal ``rows``.

        Raises:
            ShapeError: If the requested shape is not square.
        """
        if cols is None:
            cols = rows
        if rows != cols:
            raise ShapeError("Identity is defined only for square matrices", (rows, cols))
        result = cls(rows, cols)
        for i in range(rows):
            result.set(i, i, 1.)
        return result

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def size(self) -> int:
        return self._rows * self._cols

    @property
    def data(self) -> _Storage:
        """Mutable row-major element storage."""
        return self._data

    @property
    def uses_indirect_storage(self) -> bool:
        """True when the elements live in a separately allocated buffer."""
        return self._data.indirect

    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise MatrixIndexError((i, j), self.shape)
        return i * self._cols + j

    def get(self, i: int, j: int) -> float:
        """Return the element at row ``i``, column ``j``.

        Raises:
            MatrixIndexError: If ``i`` or ``j`` is out of range.
        """
        return self._data[self._offset(i, j)]

    def set(self, i: int, j: int, x: float) -> None:
        """Assign the element at row ``i``, column ``j``.

        Raises:
            MatrixIndexError: If ``i`` or ``j`` is out of range.
        """
        self._data[self._offset(i, j)] = float(x)

    def get_ref(self, i: int, j: int) -> MatrixCell:
        """Return a live handle to the element at row ``i``, column ``j``.

        Raises:
            MatrixIndexError: If ``i`` or ``j`` is out of range.
        """
        return MatrixCell(self._data, self._offset(i, j))

    def _flat(self, key) -> int:
        k = operator.index(key)
        if not 0 <= k < self.size:
            raise MatrixIndexError(k, self.shape, "flat index")
        return k

    def __getitem__(self, key: Union[int, Tuple[int, int]]) -> float:
        if isinstance(key, tuple):
            return self.get(*key)
        return self._data[self._flat(key)]

    def __setitem__(self, key: Union[int, Tuple[int, int]], x: float) -> None:
        if isinstance(key, tuple):
            self.set(key[0], key[1], x)
        else:
            self._data[self._flat(key)] = float(x)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def tolist(self) -> List[List[float]]:
        """Return the elements as a list of row lists."""
        c = self._cols
        flat = list(self._data)
        return [flat[i * c:(i + 1) * c] for i in range(self._rows)]

    def _elementwise(self, other: Matrix, op: Callable[[float, float], float], verb: str) -> Matrix:
        if self.shape != other.shape:
            raise ShapeError(f"Cannot {verb} matrices of different shapes", self.shape, other.shape)
        result = Matrix(self._rows, self._cols)
        dst = result._data
        for k, (a, b) in enumerate(zip(self._data, other._data)):
            dst[k] = op(a, b)
        return result

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum of two matrices of the same shape.

        Raises:
            ShapeError: If the shapes differ.
        """
        return self._elementwise(other, operator.add, "add")

    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference ``self - other`` of two matrices of the same shape.

        Raises:
            ShapeError: If the shapes differ.
        """
        return self._elementwise(other, operator.sub, "subtract")

    def divide(self, other: Matrix) -> Matrix:
        """Elementwise quotient ``self / other`` of two matrices of the same shape.

        Division by zero yields ``±inf`` or ``nan`` as in IEEE-754.

        Raises:
            ShapeError: If the shapes differ.
        """
        return self._elementwise(other, fdiv, "divide")

    def hadamard(self, other: Matrix) -> Matrix:
        """Elementwise (Hadamard) product of two matrices of the same shape.

        Raises:
            ShapeError: If the shapes differ.
        """
        return self._elementwise(other, operator.mul, "multiply elementwise")

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product of an ``N x M`` and an ``M x Q`` matrix.

        Every cell of the ``N x Q`` result starts at zero and accumulates
        ``self[i, k] * other[k, j]`` over ``k`` in ascending order; cells are filled
        row by row.

        Args:
            other: Right-hand operand whose row count equals ``self.cols``.

        Returns:
            New ``N x Q`` matrix.

        Raises:
            ShapeError: If ``self.cols != other.rows``.

        Examples:
            ```python
            m = Matrix(4, 4, [1.] * 16)
            column = Matrix(4, 1, [1., 2., 3., 0.])
            assert m.multiply(column) == Matrix(4, 1, [6., 6., 6., 6.])
            ```
        """
        if self._cols != other._rows:
            raise ShapeError("Cannot multiply matrices", self.shape, other.shape)
        n, m, q = self._rows, self._cols, other._cols
        result = Matrix(n, q)
        a, b, dst = self._data, other._data, result._data
        for i in range(n):
            for j in range(q):
                acc = 0.0
                for k in range(m):
                    acc += a[i * m + k] * b[k * q + j]
                dst[i * q + j] = acc
        return result

    def transpose(self) -> Matrix:
        """Return the ``cols x rows`` transpose.

        Square matrices are cloned and their symmetric off-diagonal pairs swapped;
        other shapes are remapped into a fresh matrix.
        """
        if self._rows == self._cols:
            n = self._rows
            result = self.clone()
            d = result._data
            for i in range(n):
                for j in range(i + 1, n):
                    d[i * n + j], d[j * n + i] = d[j * n + i], d[i * n + j]
            return result

        rows, cols = self._rows, self._cols
        result = Matrix(cols, rows)
        src, dst = self._data, result._data
        for i in range(rows):
            for j in range(cols):
                dst[j * rows + i] = src[i * cols + j]
        return result

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return the ``(rows-1) x (cols-1)`` matrix without ``row`` and ``col``.

        Remaining elements keep their relative row-major order.

        Raises:
            MatrixIndexError: If ``row`` or ``col`` is out of range.
            ShapeError: If the matrix has a single row or column.
        """
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise MatrixIndexError((row, col), self.shape, "submatrix")
        if self._rows == 1 or self._cols == 1:
            raise ShapeError("Submatrix of a single row or column is empty", self.shape)
        result = Matrix(self._rows - 1, self._cols - 1)
        dst = result._data
        p = 0
        for i in range(self._rows):
            if i == row:
                continue
            for j in range(self._cols):
                if j != col:
                    dst[p] = self._data[i * self._cols + j]
                    p += 1
        return result

    def clone(self) -> Matrix:
        """Return an independent deep copy, whatever the storage kind."""
        dup = Matrix.__new__(Matrix)
        dup._rows = self._rows
        dup._cols = self._cols
        dup._data = self._data.copy()
        return dup

    def __copy__(self) -> Matrix:
        if self.uses_indirect_storage:
            raise TypeError(f"{self._rows}x{self._cols} matrix uses indirect storage "
                            "and cannot be copied implicitly, use clone()")
        return self.clone()

    def __deepcopy__(self, memo) -> Matrix:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        """Shapes must match; elements compare equal within EQUALITY_EPSILON.

        Matrices of different shapes are never equal, their contents are not compared.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(abs(a - b) <= EQUALITY_EPSILON for a, b in zip(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __truediv__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.divide(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {list(self._data)!r})"

    def __str__(self) -> str:
        return "".join("".join(f"{x:g} " for x in row) + "\n" for row in self.tolist())
