"""
Sequential column sort.

The input is laid out column-major in an R x S grid and put through five
phases: sort columns, transpose, sort columns, transpose back, sort columns.
Each column is sorted with heap sort.

Run with something like:
    python sequential_columnsort.py --input numbers.txt --print
    python sequential_columnsort.py --n 100000 --cols 4 --verify
"""

from __future__ import annotations

import argparse
import random
import re
import time
from typing import List, NamedTuple, Optional, Sequence

Grid = List[List[int]]

# Tokens the input reader accepts: optional sign, decimal digits, 32-bit range.
INT_TOKEN = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -2**31, 2**31 - 1


class ParameterError(ValueError):
    """No (R, S) pair satisfies the column-sort constraints."""


class DimensionError(ValueError):
    """A grid does not have the shape it is supposed to have."""


class Dimensions(NamedTuple):
    rows: int
    cols: int


class ShapeResult(NamedTuple):
    rows: int
    cols: int
    valid: bool
    sorted_trials: int
    trials: int

    @property
    def always_sorted(self) -> bool:
        return self.sorted_trials == self.trials


# ------------------ PARAMETER SELECTION ------------------ #

def is_valid_dimensions(n: int, rows: int, cols: int) -> bool:
    """R * S = n, R mod S = 0 and R >= 2(S - 1)^2."""
    if rows < 1 or cols < 1:
        return False
    return rows * cols == n and rows % cols == 0 and rows >= 2 * (cols - 1) ** 2


def select_dimensions(n: int) -> Dimensions:
    """Return the valid (R, S) with the smallest S.

    S = 1 always qualifies, so for any n >= 1 the result is at worst (n, 1).
    """
    for s in range(1, n + 1):
        if n % s:
            continue
        r = n // s
        if r % s == 0 and r >= 2 * (s - 1) ** 2:
            return Dimensions(r, s)
    raise ParameterError(f"no valid (R, S) for n={n}")


# ------------------ MATRIX MAPPING ------------------ #

def to_grid(flat: Sequence[int], rows: int, cols: int) -> Grid:
    """Fill an R x S grid column by column."""
    if rows < 0 or cols < 0 or len(flat) != rows * cols:
        raise DimensionError(f"{len(flat)} values do not fill a {rows}x{cols} grid")
    return [[flat[j * rows + i] for j in range(cols)] for i in range(rows)]


def to_flat(grid: Grid) -> List[int]:
    """Read a grid back out in column-major order."""
    rows, cols = grid_shape(grid)
    return [grid[i][j] for j in range(cols) for i in range(rows)]


def grid_shape(grid: Grid) -> Dimensions:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for row in grid:
        if len(row) != cols:
            raise DimensionError(f"ragged grid: expected rows of {cols}, got {len(row)}")
    return Dimensions(rows, cols)


# ------------------ COLUMN SORTING ------------------ #

def max_heapify(A: List[int], n: int, i: int) -> None:
    """Sift A[i] down until the first n items form a max-heap below i."""
    while True:
        largest = i
        left = 2 * i + 1
        right = left + 1

        if left < n and A[left] > A[largest]:
            largest = left
        if right < n and A[right] > A[largest]:
            largest = right
        if largest == i:
            return

        A[i], A[largest] = A[largest], A[i]
        i = largest


def heap_sort(A: List[int]) -> List[int]:
    n = len(A)

    # Build max heap
    for i in range(n // 2 - 1, -1, -1):
        max_heapify(A, n, i)

    # Move the current max to the end of the unsorted region
    for end in range(n - 1, 0, -1):
        A[0], A[end] = A[end], A[0]
        max_heapify(A, end, 0)
    return A


def get_column(grid: Grid, col: int) -> List[int]:
    cols = len(grid[0]) if grid else 0
    if not 0 <= col < cols:
        raise IndexError(f"column {col} out of range for {cols} columns")
    return [row[col] for row in grid]


def set_column(grid: Grid, col: int, values: Sequence[int]) -> None:
    for row, v in zip(grid, values):
        row[col] = v


def sort_column(grid: Grid, col: int) -> None:
    """Heap sort one column of the grid in place."""
    buf = get_column(grid, col)
    heap_sort(buf)
    set_column(grid, col, buf)


# ------------------ TRANSPOSE ------------------ #

def transpose(grid: Grid, rows: int, cols: int) -> Grid:
    """Return a new cols x rows grid with result[j][i] == grid[i][j]."""
    actual = grid_shape(grid)
    if actual != (rows, cols):
        raise DimensionError(f"grid is {actual.rows}x{actual.cols}, declared {rows}x{cols}")
    return [[grid[i][j] for i in range(rows)] for j in range(cols)]


# ------------------ ORCHESTRATION ------------------ #

def column_sort_pipeline(grid: Grid, verbose: bool = False) -> None:
    """Run the five column-sort phases over an R x S grid, in place."""
    R, S = grid_shape(grid)
    if R == 0 or S == 0:
        return

    for j in range(S):
        sort_column(grid, j)  # 1) sort each column

    transposed = transpose(grid, R, S)  # 2) S x R

    for j in range(R):
        sort_column(transposed, j)  # 3) sort columns of the transpose

    reshaped = transpose(transposed, S, R)  # 4) back to R x S

    for j in range(S):
        sort_column(reshaped, j)  # 5) final column sort

    for row, sorted_row in zip(grid, reshaped):
        row[:] = sorted_row

    if verbose:
        print(f"Column sorted grid ({R}x{S}): {grid}")


def resolve_dimensions(n: int, dims: Optional[Dimensions] = None) -> Dimensions:
    if dims is None:
        return select_dimensions(n)
    rows, cols = dims
    if rows < 1 or cols < 1 or rows * cols != n:
        raise DimensionError(f"{rows}x{cols} grid cannot hold {n} values")
    return Dimensions(rows, cols)


def column_sort(A: List[int], dims: Optional[Dimensions] = None, verbose: bool = False) -> List[int]:
    """Column sort A in place and return it.

    Without dims the shape comes from select_dimensions(len(A)). An explicit
    shape only has to hold exactly len(A) values.
    """
    if not A:
        return A

    R, S = resolve_dimensions(len(A), dims)
    grid = to_grid(A, R, S)
    column_sort_pipeline(grid, verbose=verbose)
    A[:] = to_flat(grid)
    return A


# ------------------ SHAPE SWEEP ------------------ #

def is_sorted(xs: Sequence[int]) -> bool:
    return all(xs[i] <= xs[i + 1] for i in range(len(xs) - 1))


def sweep_shapes(max_n: int, trials: int = 20, seed: Optional[int] = None) -> List[ShapeResult]:
    """Measure, for every R x S with R * S <= max_n, how often the five
    phases leave a fully sorted sequence.

    Each shape gets one reverse-ordered input plus `trials` random ones.
    """
    rng = random.Random(seed)
    results: List[ShapeResult] = []

    for n in range(1, max_n + 1):
        for cols in range(1, n + 1):
            if n % cols:
                continue
            rows = n // cols
            inputs = [list(range(n, 0, -1))]
            inputs += [[rng.randint(0, 2 * n) for _ in range(n)] for _ in range(trials)]

            ok = sum(1 for A in inputs if is_sorted(column_sort(A, dims=Dimensions(rows, cols))))
            results.append(ShapeResult(rows, cols, is_valid_dimensions(n, rows, cols), ok, len(inputs)))
    return results


# ------------------ I/O + CLI ------------------ #

def parse_file(path: str) -> List[int]:
    """Read whitespace-separated integers, stopping at the first token that
    is not a plain signed decimal within the 32-bit range (so `1_000`,
    `0x10` and `3000000000` all end the input).
    """
    numbers: List[int] = []
    with open(path) as f:
        for token in f.read().split():
            if not INT_TOKEN.fullmatch(token):
                break
            value = int(token)
            if not INT_MIN <= value <= INT_MAX:
                break
            numbers.append(value)
    return numbers


def load_data(args: argparse.Namespace) -> Optional[List[int]]:
    """Integers from --input, or --n random ones. None if the file is missing."""
    if args.input is not None:
        try:
            return parse_file(args.input)
        except FileNotFoundError:
            print("Unable to find input file!")
            return None

    if args.seed is not None:
        random.seed(args.seed)
    return [random.randint(-10**9, 10**9) for _ in range(args.n)]


def dims_from_args(n: int, args: argparse.Namespace) -> Optional[Dimensions]:
    """Shape forced by --cols. Not validated here: a non-positive S gives
    zero rows, which resolve_dimensions rejects with DimensionError.
    """
    if args.cols is None or n == 0:
        return None
    rows = n // args.cols if args.cols > 0 else 0
    return Dimensions(rows, args.cols)


def add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument("--input", type=str, default=None, help="File of whitespace-separated integers to sort.")
    parser.add_argument("--n", type=int, default=100_000, help="Number of random integers to sort when no --input is given.")
    parser.add_argument("--cols", type=int, default=None, help="Force S columns (R = n / S) instead of choosing them.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--verify", action="store_true", help="Check the result against sorted().")
    parser.add_argument("--print", dest="print_values", action="store_true", help="Print every sorted value.")
    return parser


def report(A: List[int], original: List[int], dims: Dimensions, elapsed: float, args: argparse.Namespace) -> None:
    print(f"Rows (R): {dims.rows}, Columns (S): {dims.cols}")
    print(f"Elapsed time = {elapsed:.3f} seconds.")
    if args.print_values:
        for v in A:
            print(v)
    if args.verify and A != sorted(original):
        raise AssertionError("Result is not sorted correctly")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sequential column sort")
    return add_common_args(parser).parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    data = load_data(args)
    if data is None:
        return 1

    dims = dims_from_args(len(data), args)
    shape = resolve_dimensions(len(data), dims) if data else Dimensions(0, 0)
    A = list(data)

    start = time.time()
    column_sort(A, dims=dims)
    end = time.time()

    report(A, data, shape, end - start, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
