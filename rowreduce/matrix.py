from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, Union

from .errors import DimensionMismatch, IndexOutOfRange
from .fraction import Fraction

Scalar = Union[int, Fraction]
Row = Tuple[Fraction, ...]


@dataclass(frozen=True)
class Matrix:
    rows: int
    columns: int
    data: Tuple[Row, ...]

    def __post_init__(self):
        if not isinstance(self.data, (list, tuple)):
            raise DimensionMismatch(
                f"Expected a sequence of rows, got {type(self.data).__name__}"
            )
        for i, row in enumerate(self.data):
            if not isinstance(row, (list, tuple)):
                raise DimensionMismatch(
                    f"Row {i} is a {type(row).__name__}, expected a sequence of entries"
                )
        if self.rows <= 0 or self.columns <= 0:
            raise DimensionMismatch(
                f"Matrix dimensions must be positive, got {self.rows}x{self.columns}"
            )
        if len(self.data) != self.rows:
            raise DimensionMismatch(
                f"Expected {self.rows} rows, got {len(self.data)}"
            )
        for i, row in enumerate(self.data):
            if len(row) != self.columns:
                raise DimensionMismatch(
                    f"Row {i} has {len(row)} entries, expected {self.columns}"
                )
        frozen = tuple(tuple(Fraction(x) for x in row) for row in self.data)
        object.__setattr__(self, "data", frozen)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Scalar]]) -> "Matrix":
        """Build a matrix, inferring its shape from ``rows``."""
        nrows = len(rows) if isinstance(rows, (list, tuple)) else 0
        ncols = 0
        if nrows and isinstance(rows[0], (list, tuple)):
            ncols = len(rows[0])
        return cls(nrows, ncols, rows)

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        return cls(rows, columns, [[0] * columns for _ in range(rows)])

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        data = [[1 if i == j else 0 for j in range(n)] for i in range(n)]
        return cls(n, n, data)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def __iter__(self) -> Iterator[Row]:
        return iter(self.data)

    # -- access -------------------------------------------------------------

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise IndexOutOfRange(f"Row {row} out of range for {self.rows} rows")

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.columns:
            raise IndexOutOfRange(
                f"Column {column} out of range for {self.columns} columns"
            )

    def get_row(self, row: int) -> Row:
        self._check_row(row)
        return self.data[row]

    def get_column(self, column: int) -> Row:
        self._check_column(column)
        return tuple(row[column] for row in self.data)

    def at(self, row: int, column: int) -> Fraction:
        self._check_row(row)
        self._check_column(column)
        return self.data[row][column]

    # -- elementary row operations -----------------------------------------

    def _with_row(self, index: int, new_row: Sequence[Fraction]) -> "Matrix":
        data = list(self.data)
        data[index] = tuple(new_row)
        return Matrix(self.rows, self.columns, data)

    def row_swap(self, a: int, b: int) -> "Matrix":
        """Return a copy with rows ``a`` and ``b`` exchanged."""
        self._check_row(a)
        self._check_row(b)
        data = list(self.data)
        data[a], data[b] = data[b], data[a]
        return Matrix(self.rows, self.columns, data)

    def row_multiply(self, row: int, scalar: Scalar) -> "Matrix":
        """Return a copy with every entry of ``row`` multiplied by ``scalar``.

        A zero scalar is accepted, although it discards the row.
        """
        self._check_row(row)
        return self._with_row(row, [x.multiply(scalar) for x in self.data[row]])

    def row_replace(self, target: int, actor: int, scalar: Scalar) -> "Matrix":
        """Return a copy where ``target <- target + scalar * actor``."""
        self._check_row(target)
        self._check_row(actor)
        new_row = [
            x.add(y.multiply(scalar))
            for x, y in zip(self.data[target], self.data[actor])
        ]
        return self._with_row(target, new_row)

    # -- display ------------------------------------------------------------

    def render(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(x.render() for x in row) for row in self.data)

    def __str__(self) -> str:
        cells = self.render()
        width = max(len(s) for row in cells for s in row)
        return "\n".join(
            "[" + " ".join(s.rjust(width) for s in row) + "]" for row in cells
        )

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(
            [[sp.Rational(x.numerator, x.denominator) for x in row] for row in self.data]
        )

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())
