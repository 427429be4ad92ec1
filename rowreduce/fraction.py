"""Exact rational numbers for row reduction.

Entries are kept as a pair of Python integers in lowest terms with a positive
denominator, so every operation performed during elimination is exact and
numerators may grow without bound.
"""

from math import gcd
from typing import Union

from .errors import DivisionByZero


class Fraction:
    """Immutable rational number ``numerator / denominator``."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, value: Union[int, "Fraction"] = 0,
                 denominator: Union[int, "Fraction"] = 1):
        num, den = _as_pair(value)
        d_num, d_den = _as_pair(denominator)

        # value / denominator == (num * d_den) / (den * d_num)
        num, den = num * d_den, den * d_num
        if den == 0:
            raise DivisionByZero(f"Fraction with zero denominator: {value}/{denominator}")

        g = gcd(num, den)
        if den < 0:
            g = -g
        self._numerator = num // g
        self._denominator = den // g

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # -- arithmetic ---------------------------------------------------------

    def add(self, other: Union[int, "Fraction"]) -> "Fraction":
        b_num, b_den = _as_pair(other)
        return Fraction(self._numerator * b_den + b_num * self._denominator,
                        self._denominator * b_den)

    def multiply(self, other: Union[int, "Fraction"]) -> "Fraction":
        b_num, b_den = _as_pair(other)
        return Fraction(self._numerator * b_num, self._denominator * b_den)

    def negate(self) -> "Fraction":
        return Fraction(-self._numerator, self._denominator)

    def invert(self) -> "Fraction":
        """Return the multiplicative inverse; zero has none."""
        if self._numerator == 0:
            raise DivisionByZero("Cannot invert a zero fraction")
        return Fraction(self._denominator, self._numerator)

    def absolute(self) -> "Fraction":
        return Fraction(abs(self._numerator), self._denominator)

    def simplify(self) -> "Fraction":
        # Instances are normalised on construction.
        return Fraction(self._numerator, self._denominator)

    # -- comparison ---------------------------------------------------------

    def compare(self, other: Union[int, "Fraction"]) -> int:
        """Three-way comparison by cross-multiplication: -1, 0 or 1."""
        b_num, b_den = _as_pair(other)
        diff = self._numerator * b_den - b_num * self._denominator
        return (diff > 0) - (diff < 0)

    def equals(self, value: Union[int, "Fraction"]) -> bool:
        b_num, b_den = _as_pair(value)
        g = gcd(b_num, b_den)
        if b_den < 0:
            g = -g
        return self._numerator == b_num // g and self._denominator == b_den // g

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    # -- display ------------------------------------------------------------

    def render(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    # -- operator protocol --------------------------------------------------

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(Fraction(other).negate())

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.negate().add(other)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(Fraction(other).invert())

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.invert().multiply(other)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.absolute()

    def __bool__(self):
        return self._numerator != 0

    def __eq__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) >= 0


def _is_operand(value) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, Fraction))


def _as_pair(value):
    """Split an int or Fraction into ``(numerator, denominator)``."""
    if isinstance(value, Fraction):
        return value.numerator, value.denominator
    if isinstance(value, int) and not isinstance(value, bool):
        return value, 1
    raise TypeError(f"Expected an int or Fraction, got {type(value).__name__}")
