"""Dense matrices of floats with the few operations the battles need."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

_NEWTON_STEPS = 10


def _newton_sqrt(x: float) -> float:
    """Square root by a fixed number of Newton steps; 0 for non-positive input."""
    if x <= 0:
        return 0.0
    z = x
    for _ in range(_NEWTON_STEPS):
        z -= (z * z - x) / (2 * z)
    return z


class Matrix:
    """A matrix whose shape is taken from its rows and its first row."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Optional[Iterable[Iterable[float]]] = None) -> None:
        self.data: list[list[float]] = [[float(v) for v in row] for row in (data or [])]

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def cols(self) -> int:
        return len(self.data[0]) if self.data else 0

    @property
    def _empty(self) -> bool:
        return self.rows == 0 or self.cols == 0

    def _cells(self) -> Iterable[float]:
        for row in self.data:
            yield from row

    def subtract(self, other: Matrix) -> Matrix:
        """Element-wise difference; both matrices must be non-empty and alike in shape."""
        if other is None or self._empty or other._empty:
            raise ValueError("cannot subtract empty matrices")
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"shape mismatch: {self.rows}x{self.cols} - {other.rows}x{other.cols}"
            )
        return Matrix(
            [a - b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self.data, other.data)
        )

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product; the inner dimensions must agree and neither may be empty."""
        if other is None or self._empty or other._empty:
            raise ValueError("cannot multiply empty matrices")
        if self.cols != other.rows:
            raise ValueError(
                f"shape mismatch: {self.rows}x{self.cols} * {other.rows}x{other.cols}"
            )
        columns = list(zip(*other.data))
        return Matrix(
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self.data
        )

    def scalar_value(self) -> float:
        """The mean of all elements, or 0 for an empty matrix."""
        cells = list(self._cells())
        if not cells:
            return 0.0
        return sum(cells) / len(cells)

    def normalize(self) -> None:
        """Scale in place to unit L2 norm; empty and all-zero matrices are left alone."""
        if self._empty:
            return
        sum_squares = sum(v * v for v in self._cells())
        if sum_squares == 0:
            return
        norm = _newton_sqrt(sum_squares)
        self.data = [[v / norm for v in row] for row in self.data]

    def copy(self) -> Matrix:
        """A deep copy."""
        return Matrix(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix({self.data!r})"