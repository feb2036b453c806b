# -*- coding: utf-8 -*-
"""
Shared fixtures - Synthetic intensity grids for integral table tests.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

import numpy as np
import pytest


@pytest.fixture
def row_grid():
    """3x1 grid with intensities 10, 20, 30."""
    return np.array([[10, 20, 30]], dtype=np.uint16)


@pytest.fixture
def square_grid():
    """2x2 grid [[1, 2], [3, 4]]."""
    return np.array([[1, 2], [3, 4]], dtype=np.uint16)


@pytest.fixture
def ramp_grid():
    """5x5 grid holding 0..24 in row-major order."""
    return np.arange(25, dtype=np.uint16).reshape(5, 5)


@pytest.fixture
def random_grid():
    """Seeded 16-bit grid, 17 rows by 23 columns."""
    rng = np.random.default_rng(20261018)
    return rng.integers(0, 65536, size=(17, 23), dtype=np.uint16)


@pytest.fixture
def flat_grid():
    """Constant 16-bit grid at full scale."""
    return np.full((9, 11), 65535, dtype=np.uint16)


@pytest.fixture
def binary_grid():
    """8x8 binarised 8-bit grid with the left half on."""
    grid = np.zeros((8, 8), dtype=np.uint8)
    grid[:, :4] = 255
    return grid
