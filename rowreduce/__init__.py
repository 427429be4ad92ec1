from .echelon import PivotLocation, find_pivots, ref, rref
from .errors import DimensionMismatch, DivisionByZero, IndexOutOfRange, RowReduceError
from .fraction import Fraction
from .matrix import Matrix
from .steps import Step, StepList

__all__ = [
    "DimensionMismatch",
    "DivisionByZero",
    "Fraction",
    "IndexOutOfRange",
    "Matrix",
    "PivotLocation",
    "RowReduceError",
    "Step",
    "StepList",
    "find_pivots",
    "ref",
    "rref",
]
