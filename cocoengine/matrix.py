"""Two-component vectors and dense row-major matrices for 2D transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Real):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def _format_value(value) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.6f}"


class Matrix:
    """A rows x columns matrix stored in row-major order."""

    __slots__ = ("_rows", "_columns", "_values")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: Optional[int] = None, values: Optional[Iterable] = None):
        if columns is None:
            columns = rows
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must be non-negative")
        if values is None:
            data = [0.0] * (rows * columns)
        else:
            data = list(values)
            if len(data) != rows * columns:
                raise ValueError(
                    f"expected {rows * columns} values for a {rows}x{columns} matrix, got {len(data)}"
                )
        self._rows = rows
        self._columns = columns
        self._values: List = data

    # -- access -------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def values(self) -> Tuple:
        return tuple(self._values)

    def _offset(self, coords) -> int:
        row, column = coords
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError(f"({row}, {column}) is outside a {self._rows}x{self._columns} matrix")
        return row * self._columns + column

    def __getitem__(self, coords):
        return self._values[self._offset(coords)]

    def __setitem__(self, coords, value) -> None:
        self._values[self._offset(coords)] = value

    def _row(self, line: int) -> List:
        start = line * self._columns
        return self._values[start:start + self._columns]

    def _row_lists(self) -> List[List]:
        return [self._row(line) for line in range(self._rows)]

    def _check_row(self, line: int) -> None:
        if not 0 <= line < self._rows:
            raise IndexError(f"row {line} is outside a matrix with {self._rows} rows")

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._columns:
            raise IndexError(f"column {column} is outside a matrix with {self._columns} columns")

    def _check_same_shape(self, other: "Matrix") -> None:
        if (self._rows, self._columns) != (other._rows, other._columns):
            raise ValueError("matrices must have the same shape")

    # -- arithmetic ---------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self._rows, self._columns, [a + b for a, b in zip(self._values, other._values)])

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self._rows, self._columns, [a - b for a, b in zip(self._values, other._values)])

    def _matmul(self, other: "Matrix") -> "Matrix":
        if other._rows != self._columns:
            raise ValueError(
                f"cannot multiply {self._rows}x{self._columns} by {other._rows}x{other._columns}"
            )
        other_columns = list(zip(*other._row_lists())) if other._rows else [()] * other._columns
        values = [
            sum(a * b for a, b in zip(row, column))
            for row in self._row_lists()
            for column in other_columns
        ]
        return Matrix(self._rows, other._columns, values)

    def _apply(self, vector: Vector2) -> Vector2:
        if self._rows < 2 or self._columns < 3:
            raise ValueError("transforming a point requires at least a 2x3 matrix")
        first, second = self._row(0), self._row(1)
        return Vector2(
            first[0] * vector.x + first[1] * vector.y + first[2],
            second[0] * vector.x + second[1] * vector.y + second[2],
        )

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector2):
            return self._apply(other)
        if isinstance(other, Real):
            return Matrix(self._rows, self._columns, [value * other for value in self._values])
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._values = [a + b for a, b in zip(self._values, other._values)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        self._values = [a - b for a, b in zip(self._values, other._values)]
        return self

    def __imul__(self, other):
        if isinstance(other, Matrix):
            product = self._matmul(other)
            self._columns = product._columns
            self._values = product._values
            return self
        if isinstance(other, Real):
            self._values = [value * other for value in self._values]
            return self
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and self._values == other._values
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._columns}, {self._values!r})"

    def __str__(self) -> str:
        return "".join(
            "| " + "".join(f"{_format_value(value)} " for value in row) + " |\n"
            for row in self._row_lists()
        )

    # -- derived matrices ---------------------------------------------------

    def vector2(self) -> Vector2:
        """The translation part of a 3x3 transform."""
        if (self._rows, self._columns) != (3, 3):
            raise ValueError("vector2 requires a 3x3 matrix")
        return Vector2(self[0, 2], self[1, 2])

    def identity_like(self) -> "Matrix":
        """An identity matrix of this (square) matrix's size."""
        if self._rows != self._columns:
            raise ValueError("identity requires a square matrix")
        return Matrix.identity(self._rows)

    def split(self, column: int) -> "Matrix":
        """Keep columns up to and including ``column``; return the rest."""
        if not 0 <= column < self._columns:
            raise IndexError(f"cannot split a {self._columns}-column matrix at column {column}")
        left_width = column + 1
        rows = self._row_lists()
        left = [value for row in rows for value in row[:left_width]]
        right = [value for row in rows for value in row[left_width:]]
        remainder = Matrix(self._rows, self._columns - left_width, right)
        self._columns = left_width
        self._values = left
        return remainder

    def augmented(self, other: "Matrix") -> "Matrix":
        """This matrix with ``other``'s columns appended on the right."""
        if self._rows != other._rows:
            raise ValueError("augmented matrices must have the same number of rows")
        values = [
            value
            for left, right in zip(self._row_lists(), other._row_lists())
            for value in left + right
        ]
        return Matrix(self._rows, self._columns + other._columns, values)

    def invert_by_row_reduction(self) -> "Matrix":
        """Gauss-Jordan reduce [self | I].

        The result is the n x 2n augmented matrix; for an invertible matrix
        its right half is the inverse. Reduction stops at the first column
        without a usable pivot.
        """
        if self._rows != self._columns:
            raise ValueError("only square matrices can be inverted")
        size = self._rows
        reduced = self.augmented(self.identity_like())
        for line in range(size):
            pivot = max(range(line, size), key=lambda row: abs(reduced[row, line]))
            if reduced[pivot, line] == 0:
                break
            reduced.swap_lines(line, pivot)
            reduced.multiply_line(line, 1 / reduced[line, line])
            for other in range(size):
                if other != line:
                    reduced.add_line_to_another(line, other, -reduced[other, line])
        return reduced

    # -- elementary operations ----------------------------------------------

    def swap_lines(self, line1: int, line2: int) -> None:
        self._check_row(line1)
        self._check_row(line2)
        width = self._columns
        first = slice(line1 * width, (line1 + 1) * width)
        second = slice(line2 * width, (line2 + 1) * width)
        self._values[first], self._values[second] = self._values[second], self._values[first]

    def swap_columns(self, column1: int, column2: int) -> None:
        self._check_column(column1)
        self._check_column(column2)
        for row in range(self._rows):
            self[row, column1], self[row, column2] = self[row, column2], self[row, column1]

    def multiply_line(self, line: int, scalar) -> None:
        if scalar == 0:
            raise ValueError("cannot multiply a row by zero")
        self._check_row(line)
        start = line * self._columns
        self._values[start:start + self._columns] = [value * scalar for value in self._row(line)]

    def multiply_column(self, column: int, scalar) -> None:
        if scalar == 0:
            raise ValueError("cannot multiply a column by zero")
        self._check_column(column)
        for row in range(self._rows):
            self[row, column] *= scalar

    def add_line_to_another(self, line1: int, line2: int, scalar) -> None:
        """Add ``scalar`` times row ``line1`` to row ``line2``."""
        self._check_row(line1)
        self._check_row(line2)
        start = line2 * self._columns
        self._values[start:start + self._columns] = [
            target + source * scalar for source, target in zip(self._row(line1), self._row(line2))
        ]

    def add_column_to_another(self, column1: int, column2: int, scalar) -> None:
        """Add ``scalar`` times column ``column1`` to column ``column2``."""
        self._check_column(column1)
        self._check_column(column2)
        for row in range(self._rows):
            self[row, column2] += self[row, column1] * scalar

    # -- constructors -------------------------------------------------------

    @staticmethod
    def identity(depth: int) -> "Matrix":
        return Matrix(depth, depth, [1.0 if row == col else 0.0 for row in range(depth) for col in range(depth)])

    @staticmethod
    def from_position(position) -> "Matrix":
        x, y = position
        return Matrix(3, 3, [1.0, 0.0, x, 0.0, 1.0, y, 0.0, 0.0, 1.0])

    @staticmethod
    def make_transform(position, rotation: float, scale) -> "Matrix":
        """Translation * rotation (degrees) * scale as a 3x3 matrix."""
        px, py = position
        sx, sy = scale
        angle = math.radians(rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        translation = Matrix(3, 3, [1.0, 0.0, px, 0.0, 1.0, py, 0.0, 0.0, 1.0])
        rotation_matrix = Matrix(3, 3, [cos, -sin, 0.0, sin, cos, 0.0, 0.0, 0.0, 1.0])
        scaling = Matrix(3, 3, [sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0])
        return translation * rotation_matrix * scaling