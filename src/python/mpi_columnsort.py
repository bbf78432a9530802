"""
MPI-based column sort using mpi4py.

Rank 0 owns the grid. In each of the three sort phases the columns are
scattered across ranks, heap sorted locally and gathered back on rank 0
before the next transpose.

Run with something like:
    mpiexec -n 4 python mpi_columnsort.py --n 100000 --verify
"""

from __future__ import annotations

import argparse
import time
from typing import List, Optional

from mpi4py import MPI

from sequential_columnsort import (
    Dimensions,
    Grid,
    add_common_args,
    dims_from_args,
    get_column,
    heap_sort,
    load_data,
    report,
    resolve_dimensions,
    set_column,
    to_flat,
    to_grid,
    transpose,
)


def chunkify(data: List[List[int]], chunks: int) -> List[List[List[int]]]:
    """Split data into exactly `chunks` contiguous, nearly equal pieces (some may be empty)."""
    size, extra = divmod(len(data), chunks)
    out = []
    start = 0
    for i in range(chunks):
        end = start + size + (1 if i < extra else 0)
        out.append(data[start:end])
        start = end
    return out


def mpi_sort_columns(grid: Optional[Grid], comm: MPI.Comm) -> None:
    """One sort phase: scatter columns → heap sort → gather into grid on rank 0."""
    rank = comm.Get_rank()

    chunks = None
    if rank == 0:
        cols = len(grid[0]) if grid else 0
        chunks = chunkify([get_column(grid, j) for j in range(cols)], comm.Get_size())
    local_columns: List[List[int]] = comm.scatter(chunks, root=0)

    for column in local_columns:
        heap_sort(column)

    gathered = comm.gather(local_columns, root=0)
    if rank != 0:
        return

    j = 0
    for chunk in gathered:
        for column in chunk:
            set_column(grid, j, column)
            j += 1


def mpi_column_sort(
    data: Optional[List[int]],
    dims: Optional[Dimensions] = None,
    comm: MPI.Comm = MPI.COMM_WORLD,
) -> Optional[List[int]]:
    """Distributed column sort; must be called on every rank. Result on rank 0 only."""
    rank = comm.Get_rank()

    # Every rank has to learn about a bad shape, otherwise the others block in scatter.
    shape, error = None, None
    if rank == 0 and data:
        try:
            shape = resolve_dimensions(len(data), dims)
        except ValueError as e:
            error = e
    shape, error = comm.bcast((shape, error), root=0)
    if error is not None:
        raise error

    if shape is None:
        return list(data or []) if rank == 0 else None

    R, S = shape
    grid = to_grid(data, R, S) if rank == 0 else None

    mpi_sort_columns(grid, comm)
    transposed = transpose(grid, R, S) if rank == 0 else None
    mpi_sort_columns(transposed, comm)
    reshaped = transpose(transposed, S, R) if rank == 0 else None
    mpi_sort_columns(reshaped, comm)

    if rank != 0:
        return None
    return to_flat(reshaped)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MPI column sort demo")
    return add_common_args(parser).parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()
    args = parse_args(argv)

    data: Optional[List[int]] = None
    missing = False
    if rank == 0:
        data = load_data(args)
        missing = data is None
    if comm.bcast(missing, root=0):
        return 1

    comm.barrier()
    t0 = time.time()
    dims = dims_from_args(len(data), args) if rank == 0 else None
    sorted_data = mpi_column_sort(data, dims=dims, comm=comm)
    comm.barrier()
    t1 = time.time()

    if rank == 0:
        shape = resolve_dimensions(len(data), dims) if data else Dimensions(0, 0)
        report(sorted_data, data, shape, t1 - t0, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
