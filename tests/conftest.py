"""
Pytest configuration and shared fixtures for the column sort tests.
"""

import random

import pytest


@pytest.fixture
def rng():
    """Seeded random source so failures are reproducible."""
    return random.Random(1234)


@pytest.fixture
def write_ints(tmp_path):
    """Write integers to a whitespace-separated file and return its path."""
    def _write(values, name="numbers.txt", extra=""):
        path = tmp_path / name
        path.write_text(" ".join(str(v) for v in values) + extra + "\n")
        return str(path)
    return _write
