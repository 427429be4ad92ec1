"""Row-echelon and reduced row-echelon reduction over the rationals.

The routines here drive Gaussian elimination one elementary row operation at a
time and record every intermediate matrix in a :class:`StepList`:

* ``ref`` walks the columns left to right, selects a pivot by partial pivoting,
  scales it to one and clears the entries below it.
* ``rref`` runs ``ref`` and then clears the entries above every pivot.

Every operation reads ``steps.last()``, so operations compose on the latest
state rather than on the input matrix.
"""

import logging
from typing import List, NamedTuple, Sequence

from .fraction import Fraction
from .matrix import Matrix
from .steps import StepList

logger = logging.getLogger(__name__)

PIVOTING_STRATEGIES = ("max_abs", "first_nonzero")


class PivotLocation(NamedTuple):
    row: int
    col: int


def _record(steps: StepList, matrix: Matrix, description: str) -> None:
    logger.debug("step %d: %s", len(steps), description)
    steps.add_step(matrix, description)


def _select_pivot(column: Sequence[Fraction], start: int, pivoting: str) -> int:
    """Index of the pivot entry in ``column[start:]``, as an absolute index.

    ``max_abs`` takes the first entry of largest magnitude; ``first_nonzero``
    takes the first nonzero entry.
    """
    if pivoting == "first_nonzero":
        for i in range(start, len(column)):
            if not column[i].is_zero():
                return i
        return start

    best = start
    for i in range(start + 1, len(column)):
        if column[i].absolute().compare(column[best].absolute()) > 0:
            best = i
    return best


def _swap_to_pivot(steps: StepList, col: int, row: int, pivoting: str) -> None:
    pivot_row = _select_pivot(steps.last().get_column(col), row, pivoting)
    if pivot_row != row:
        _record(
            steps,
            steps.last().row_swap(row, pivot_row),
            f"Swap row {row + 1} with row {pivot_row + 1}",
        )


def _scale_to_one(steps: StepList, row: int, col: int) -> None:
    entry = steps.last().at(row, col)
    if not entry.equals(1):
        scalar = entry.invert()
        _record(
            steps,
            steps.last().row_multiply(row, scalar),
            f"Multiply row {row + 1} by {scalar.render()}",
        )


def _eliminate(steps: StepList, pivot_row: int, pivot_col: int, row: int) -> None:
    entry = steps.last().at(row, pivot_col)
    if not entry.is_zero():
        coefficient = entry.negate()
        _record(
            steps,
            steps.last().row_replace(row, pivot_row, coefficient),
            f"Add {coefficient.render()} times row {pivot_row + 1} to row {row + 1}",
        )


def _has_nonzero_from(column: Sequence[Fraction], start: int) -> bool:
    return any(not x.is_zero() for x in column[start:])


def _check_pivoting(pivoting: str) -> None:
    if pivoting not in PIVOTING_STRATEGIES:
        raise ValueError(
            f"Unknown pivoting strategy {pivoting!r}; "
            f"expected one of {', '.join(PIVOTING_STRATEGIES)}"
        )


def ref(matrix: Matrix, pivoting: str = "max_abs") -> StepList:
    """Reduce ``matrix`` to row-echelon form, recording every step.

    Args:
        matrix: Matrix to reduce. It is never modified.
        pivoting: ``"max_abs"`` (partial pivoting, the default) or
            ``"first_nonzero"``.

    Returns:
        A ``StepList`` whose first record is ``matrix`` and whose last record
        is in row-echelon form with every pivot equal to one.
    """
    _check_pivoting(pivoting)
    steps = StepList(matrix)
    n_rows, n_cols = matrix.shape
    col = 0

    for row in range(n_rows):
        # Find the next column with a nonzero entry at or below this row.
        while not _has_nonzero_from(steps.last().get_column(col), row):
            col += 1
            if col >= n_cols:
                logger.debug("ref finished after %d operations", len(steps) - 1)
                return steps

        _swap_to_pivot(steps, col, row, pivoting)
        _scale_to_one(steps, row, col)
        for below in range(row + 1, n_rows):
            _eliminate(steps, row, col, below)

        col += 1
        if col >= n_cols:
            break

    logger.debug("ref finished after %d operations", len(steps) - 1)
    return steps


def find_pivots(echelon: Matrix) -> List[PivotLocation]:
    """Locate the pivot of each nonzero row of an echelon-form matrix.

    Columns are scanned only to the right of the previous pivot, so the
    returned columns are strictly increasing.
    """
    pivots = []
    min_col = 0
    for row in range(echelon.rows):
        for col in range(min_col, echelon.columns):
            if not echelon.at(row, col).is_zero():
                pivots.append(PivotLocation(row, col))
                min_col = col + 1
                break
    return pivots


def rref(matrix: Matrix, pivoting: str = "max_abs") -> StepList:
    """Reduce ``matrix`` to reduced row-echelon form, recording every step.

    The forward pass is :func:`ref`; the backward pass clears each pivot
    column above its pivot, working upward from the pivot row.
    """
    steps = ref(matrix, pivoting)
    forward = len(steps)
    for pivot in find_pivots(steps.last()):
        for above in range(pivot.row - 1, -1, -1):
            _eliminate(steps, pivot.row, pivot.col, above)

    logger.debug(
        "rref finished: %d forward and %d backward operations",
        forward - 1, len(steps) - forward,
    )
    return steps


def _leading_column(row: Sequence[Fraction]) -> int:
    for j, x in enumerate(row):
        if not x.is_zero():
            return j
    return -1


def is_row_echelon(matrix: Matrix) -> bool:
    """Check that pivots move strictly right and zero rows sit at the bottom."""
    last_pivot = -1
    zero_row_seen = False
    for row in matrix:
        lead = _leading_column(row)
        if lead == -1:
            zero_row_seen = True
            continue
        if zero_row_seen or lead <= last_pivot:
            return False
        last_pivot = lead
    return True


def is_reduced_row_echelon(matrix: Matrix) -> bool:
    """Row-echelon form with unit pivots that are alone in their columns."""
    if not is_row_echelon(matrix):
        return False
    for pivot in find_pivots(matrix):
        if not matrix.at(pivot.row, pivot.col).equals(1):
            return False
        for i, x in enumerate(matrix.get_column(pivot.col)):
            if i != pivot.row and not x.is_zero():
                return False
    return True
