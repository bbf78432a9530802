"""
The pool-per-phase variant must agree with the sequential pipeline on every
shape, including shapes where the pipeline does not fully sort.
"""

import pytest

from multiprocessing_columnsort import main, parallel_column_sort
from sequential_columnsort import DimensionError, Dimensions, column_sort


@pytest.mark.parametrize("rows,cols", [(16, 1), (2, 2), (8, 2), (6, 3), (3, 5), (18, 3)])
def test_matches_sequential(rng, rows, cols):
    x = [rng.randint(-500, 500) for _ in range(rows * cols)]
    expected = column_sort(list(x), dims=Dimensions(rows, cols))
    assert parallel_column_sort(list(x), processes=2, dims=Dimensions(rows, cols)) == expected


def test_default_dimensions_sort_fully(rng):
    x = [rng.randint(0, 10**6) for _ in range(500)]
    A = list(x)
    assert parallel_column_sort(A, processes=2) is A
    assert A == sorted(x)


def test_empty_and_single():
    assert parallel_column_sort([], processes=2) == []
    assert parallel_column_sort([42], processes=2) == [42]


def test_bad_shape():
    with pytest.raises(DimensionError):
        parallel_column_sort([1, 2, 3], processes=2, dims=Dimensions(2, 2))


def test_main(write_ints, capsys):
    path = write_ints([9, 8, 7, 6, 5, 4, 3, 2])
    assert main(["--input", path, "--processes", "2", "--cols", "2", "--verify", "--print"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Rows (R): 4, Columns (S): 2"
    assert out[2:] == [str(v) for v in range(2, 10)]


def test_main_zero_columns(write_ints):
    path = write_ints([4, 3, 2, 1])
    with pytest.raises(DimensionError):
        main(["--input", path, "--processes", "2", "--cols", "0"])
