import random
import re

import numpy as np

from rowreduce.fraction import Fraction
from rowreduce.matrix import Matrix

_FRACTION = r"-?\d+(?:/\d+)?"
_SWAP = re.compile(r"^Swap row (\d+) with row (\d+)$")
_MULTIPLY = re.compile(rf"^Multiply row (\d+) by ({_FRACTION})$")
_ADD = re.compile(rf"^Add ({_FRACTION}) times row (\d+) to row (\d+)$")


def to_numpy(M: Matrix) -> np.ndarray:
    """Object-dtype array of Fractions, for elementwise comparisons."""
    return np.array([list(row) for row in M], dtype=object)


def parse_fraction(text: str) -> Fraction:
    num, _, den = text.partition("/")
    return Fraction(int(num), int(den) if den else 1)


def replay(M: Matrix, description: str) -> Matrix:
    """
    Apply the row operation named by a step description to M.
    Row numbers in descriptions are 1-indexed.
    """
    m = _SWAP.match(description)
    if m:
        return M.row_swap(int(m.group(1)) - 1, int(m.group(2)) - 1)
    m = _MULTIPLY.match(description)
    if m:
        return M.row_multiply(int(m.group(1)) - 1, parse_fraction(m.group(2)))
    m = _ADD.match(description)
    if m:
        scalar = parse_fraction(m.group(1))
        return M.row_replace(int(m.group(3)) - 1, int(m.group(2)) - 1, scalar)
    raise AssertionError(f"Unrecognised step description: {description!r}")


def verify_echelon_structure(T: Matrix) -> bool:
    """
    Check:
    - For each non-zero row, the first non-zero column index strictly increases.
    - Once a zero row appears, all later rows are zero.
    """
    nrows, ncols = T.shape
    last_pivot_col = -1
    zero_row_seen = False

    for r in range(nrows):
        row = T.get_row(r)
        pivot_col = -1
        for c in range(ncols):
            if not row[c].is_zero():
                pivot_col = c
                break

        if pivot_col == -1:
            zero_row_seen = True
            if any(not all(x.is_zero() for x in T.get_row(rr)) for rr in range(r + 1, nrows)):
                return False
        else:
            if zero_row_seen:
                return False
            if pivot_col <= last_pivot_col:
                return False
            last_pivot_col = pivot_col

    return True


def verify_reduced_structure(T: Matrix) -> bool:
    """Echelon structure plus unit pivots alone in their columns."""
    if not verify_echelon_structure(T):
        return False
    A = to_numpy(T)
    for r in range(T.rows):
        nonzero = [c for c in range(T.columns) if A[r, c] != 0]
        if not nonzero:
            continue
        c = nonzero[0]
        if A[r, c] != 1:
            return False
        if sum(1 for x in A[:, c] if x != 0) != 1:
            return False
    return True


def make_random_matrix(
    nrows: int,
    ncols: int,
    bound: int = 9,
    zero_weight: float = 0.0,
) -> Matrix:
    """Generate a random integer matrix with entries in ``[-bound, bound]``.

    ``zero_weight`` is the probability of forcing an entry to zero, which
    makes rank-deficient inputs more likely.
    """
    data = [
        [
            0 if random.random() < zero_weight else random.randint(-bound, bound)
            for _ in range(ncols)
        ]
        for _ in range(nrows)
    ]
    return Matrix.from_rows(data)
