import argparse
import multiprocessing as mp
import random
import time

from sequential_columnsort import (
    Dimensions,
    add_common_args,
    dims_from_args,
    get_column,
    grid_shape,
    heap_sort,
    load_data,
    report,
    resolve_dimensions,
    set_column,
    to_flat,
    to_grid,
    transpose,
)

# ------------------ PARALLEL VERSION (MULTIPROCESSING) ------------------ #
# Strategy: within one phase every column sort is independent, so the columns
# are handed to a pool of workers. pool.map only returns once every column is
# sorted, which is the barrier before the next transpose.

def sort_columns(pool, grid):
    cols = len(grid[0]) if grid else 0
    columns = [get_column(grid, j) for j in range(cols)]

    sorted_columns = pool.map(heap_sort, columns)

    for j, column in enumerate(sorted_columns):
        set_column(grid, j, column)


def parallel_column_sort(A, processes=4, dims=None, verbose=False):
    if not A:
        return A

    R, S = resolve_dimensions(len(A), dims)
    grid = to_grid(A, R, S)

    with mp.Pool(processes=processes) as pool:
        sort_columns(pool, grid)  # 1) S columns
        transposed = transpose(grid, R, S)  # 2) S x R
        sort_columns(pool, transposed)  # 3) R columns
        reshaped = transpose(transposed, S, R)  # 4) R x S
        sort_columns(pool, reshaped)  # 5) S columns

    A[:] = to_flat(reshaped)

    if verbose:
        print(f"Parallel column sorted array ({processes} processes, {grid_shape(reshaped)}): {A}")

    return A


def benchmark_parallel(processes=4):
    """Performance profiling of parallel column sort using multiprocessing."""
    print("\n=== Parallel Column Sort Performance (multiprocessing) ===")
    sizes = [10_000, 100_000, 1_000_000]

    for n in sizes:
        A = [random.randint(0, 10**9) for _ in range(n)]
        start = time.time()
        parallel_column_sort(A, processes=processes)
        end = time.time()
        print(f"n = {n:>10,}  →  time = {end - start:.3f} s")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Column sort with a multiprocessing pool per phase")
    add_common_args(parser)
    parser.add_argument("--processes", type=int, default=4, help="Worker processes per phase.")
    parser.add_argument("--benchmark", action="store_true", help="Time fixed input sizes instead of sorting one input.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.benchmark:
        benchmark_parallel(args.processes)
        return 0

    data = load_data(args)
    if data is None:
        return 1

    dims = dims_from_args(len(data), args)
    shape = resolve_dimensions(len(data), dims) if data else Dimensions(0, 0)
    A = list(data)

    start = time.time()
    parallel_column_sort(A, processes=args.processes, dims=dims)
    end = time.time()

    report(A, data, shape, end - start, args)
    return 0


if __name__ == "__main__":
	raise SystemExit(main())
