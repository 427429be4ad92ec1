"""Append-only trace of a row reduction.

A :class:`StepList` starts with the input matrix and grows by one record per
elementary row operation. The last record always holds the current working
matrix, which the reduction routines read before every operation.
"""

import sys
from typing import Iterator, List, NamedTuple, Tuple

from .errors import DimensionMismatch
from .matrix import Matrix


class Step(NamedTuple):
    matrix: Matrix
    description: str


class StepList:
    def __init__(self, initial: Matrix):
        self._steps: List[Step] = [Step(initial, "")]

    def add_step(self, matrix: Matrix, description: str) -> None:
        if matrix.shape != self._steps[0].matrix.shape:
            raise DimensionMismatch(
                f"Step matrix has shape {matrix.shape}, "
                f"expected {self._steps[0].matrix.shape}"
            )
        self._steps.append(Step(matrix, description))

    def last(self) -> Matrix:
        return self._steps[-1].matrix

    def first(self) -> Matrix:
        return self._steps[0].matrix

    def descriptions(self) -> List[str]:
        """Descriptions of the recorded operations, initial record excluded."""
        return [step.description for step in self._steps[1:]]

    def render(self) -> List[Tuple[str, Tuple[Tuple[str, ...], ...]]]:
        return [(step.description, step.matrix.render()) for step in self._steps]

    def log(self, stream=None) -> None:
        """Write the trace, one pretty-printed matrix per step."""
        from sympy import pretty

        if stream is None:
            stream = sys.stdout
        for index, step in enumerate(self._steps):
            title = step.description or "Initial matrix"
            stream.write(f"Step {index}: {title}\n")
            stream.write(pretty(step.matrix.to_sympy()) + "\n\n")

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __getitem__(self, index: int) -> Step:
        return self._steps[index]

    def __repr__(self) -> str:
        return f"StepList({len(self._steps)} steps, shape={self.first().shape})"
