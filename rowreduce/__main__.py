"""Command-line front end: reduce a matrix and print every step.

Usage::

    python -m rowreduce "3,-3,-2,-1" "0,2,-3,-3" "3,3,2,-3"
"""

import argparse
import logging
import sys

from .echelon import PIVOTING_STRATEGIES, is_reduced_row_echelon, ref, rref
from .errors import RowReduceError
from .matrix import Matrix

logger = logging.getLogger(__name__)

SAMPLE_ROWS = [
    [3, -3, -2, -1],
    [0, 2, -3, -3],
    [3, 3, 2, -3],
]


def parse_row(text):
    try:
        return [int(x) for x in text.replace(" ", "").split(",") if x]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a comma-separated integer row: {text!r}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rowreduce",
        description="Row-reduce an integer matrix with exact fractions.",
        epilog="Put -- before the rows when the first one starts with a minus sign.",
    )
    parser.add_argument(
        "rows", nargs="*", type=parse_row,
        help="one comma-separated row per argument (default: a 3x4 sample)",
    )
    parser.add_argument(
        "--ref", action="store_true",
        help="stop at row-echelon form instead of reduced row-echelon form",
    )
    parser.add_argument(
        "--pivoting", choices=PIVOTING_STRATEGIES, default="max_abs",
        help="pivot selection policy (default: max_abs)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None, stream=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        matrix = Matrix.from_rows(args.rows or SAMPLE_ROWS)
    except RowReduceError as exc:
        parser.error(str(exc))

    reduce = ref if args.ref else rref
    steps = reduce(matrix, pivoting=args.pivoting)
    steps.log(stream if stream is not None else sys.stdout)
    logger.info(
        "%d row operations; reduced row-echelon form: %s",
        len(steps) - 1, is_reduced_row_echelon(steps.last()),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
