"""Exception types raised by the row-reduction core."""


class RowReduceError(Exception):
    """Base class for every error raised by ``rowreduce``."""


class DimensionMismatch(RowReduceError, ValueError):
    """Matrix input is not rectangular or does not match its declared shape."""


class IndexOutOfRange(RowReduceError, IndexError):
    """A row or column index lies outside the matrix."""


class DivisionByZero(RowReduceError, ZeroDivisionError):
    """A fraction with a zero denominator was requested."""
