"""Square matrices over an arbitrary field."""

from __future__ import annotations

from typing import Any, Sequence

from fieldmatrix.fields import Field


class MatrixError(ValueError):
    """Raised when a matrix cannot be built or an operation's operands do not fit."""


class Matrix:
    """A square matrix whose elements and arithmetic come from a field."""

    def __init__(self, size: int, field: Field) -> None:
        if field is None:
            raise MatrixError("a matrix needs a field")
        if not isinstance(size, int) or size <= 0:
            raise MatrixError(f"invalid matrix size: {size!r}")
        self.size = size
        self.field = field
        self._rows: list[list[Any]] = [
            [field.zero() for _ in range(size)] for _ in range(size)
        ]

    def _check_index(self, index: Any) -> tuple[int, int]:
        try:
            i, j = index
        except (TypeError, ValueError) as exc:
            raise IndexError(f"expected a (row, column) pair, got {index!r}") from exc
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError(f"index {index!r} out of range for size {self.size}")
        return i, j

    def __getitem__(self, index: tuple[int, int]) -> Any:
        i, j = self._check_index(index)
        return self._rows[i][j]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        i, j = self._check_index(index)
        if value is None:
            raise MatrixError("cannot store None in a matrix")
        self._rows[i][j] = value

    def _check_operands(self, other: Matrix, out: Matrix) -> None:
        if other is None or out is None:
            raise MatrixError("missing operand")
        if self.size != other.size or self.size != out.size:
            raise MatrixError("matrices have different sizes")
        if self.field is not other.field or self.field is not out.field:
            raise MatrixError("matrices are over different fields")

    def add(self, other: Matrix, out: Matrix) -> Matrix:
        """Write ``self + other`` into ``out`` and return it."""
        self._check_operands(other, out)
        field = out.field
        for out_row, row_a, row_b in zip(out._rows, self._rows, other._rows):
            for j, (a, b) in enumerate(zip(row_a, row_b)):
                out_row[j] = field.add(a, b)
        return out

    def multiply(self, other: Matrix, out: Matrix) -> Matrix:
        """Write ``self * other`` into ``out`` and return it."""
        self._check_operands(other, out)
        field = out.field
        for i, row_a in enumerate(self._rows):
            for j in range(self.size):
                total = field.zero()
                for a, row_b in zip(row_a, other._rows):
                    total = field.add(total, field.multiply(a, row_b[j]))
                out._rows[i][j] = total
        return out

    def scale(self, scalar: Any, field: Field) -> Matrix:
        """Multiply every element by ``scalar``, which must belong to this matrix's field."""
        if scalar is None:
            raise MatrixError("missing scalar")
        if field is None or field is not self.field:
            raise MatrixError("scalar is from a different field")
        for row in self._rows:
            row[:] = [self.field.multiply(element, scalar) for element in row]
        return self

    def add_linear_combination(self, row: int, coefficients: Sequence[Any]) -> Matrix:
        """Add to ``row`` the other rows weighted by ``coefficients``.

        The coefficient at position ``row`` itself is ignored.
        """
        if coefficients is None:
            raise MatrixError("missing coefficients")
        if not 0 <= row < self.size:
            raise IndexError(f"row {row!r} out of range for size {self.size}")
        coefficients = list(coefficients)
        if len(coefficients) != self.size:
            raise MatrixError(
                f"expected {self.size} coefficients, got {len(coefficients)}"
            )
        field = self.field
        target = self._rows[row]
        for j in range(self.size):
            total = field.zero()
            for k, (coeff, source) in enumerate(zip(coefficients, self._rows)):
                if k == row:
                    continue
                total = field.add(total, field.multiply(coeff, source[j]))
            target[j] = field.add(target[j], total)
        return self

    def format(self) -> str:
        """Render the matrix one row per line, elements separated by spaces."""
        return "".join(
            " ".join(self.field.format(element) for element in row) + "\n"
            for row in self._rows
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix(size={self.size}, field={self.field!r})"