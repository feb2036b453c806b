# -*- coding: utf-8 -*-
"""
Local Statistics - Per-pixel window mean and standard deviation.

Evaluates the centred window of :func:`integral.window.get_window` at every
pixel at once with numpy fancy indexing, giving the local mean and local
standard deviation maps used by adaptive thresholding and local contrast
operators. Results match the per-pixel ``Window`` computations exactly for
the mean, and to floating-point rounding for the standard deviation.

Dependencies
------------
numpy

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

# Standard library
import logging
from typing import Tuple

# Third-party
import numpy as np

# Integral internal
from integral.exceptions import DegenerateQueryError, NegativeVarianceError
from integral.stats import check_table_pair
from integral.table import IntegralTable, SquaredTable
from integral.vocabulary import VariancePolicy

logger = logging.getLogger(__name__)


def _spans(n: int, step: int) -> Tuple[np.ndarray, np.ndarray]:
    centres = np.arange(n)
    lo = np.where(centres > step + 1, centres - step - 1, 0)
    hi = np.minimum(n - 1, centres + step)
    return lo, hi


def _window_sums(table: IntegralTable, size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return per-pixel window sums (uint64) and window areas (int64)."""
    if size < 1:
        raise DegenerateQueryError(f"window size must be >= 1, got {size}")
    step = size // 2
    min_x, max_x = _spans(table.width, step)
    min_y, max_y = _spans(table.height, step)
    cells = table.cells
    # uint64 arithmetic wraps; the final sum is non-negative so it is exact
    sums = (cells[np.ix_(max_y, max_x)] + cells[np.ix_(min_y, min_x)]
            - cells[np.ix_(min_y, max_x)] - cells[np.ix_(max_y, min_x)])
    areas = np.outer(max_y - min_y, max_x - min_x)
    if not areas.all():
        rows, cols = np.nonzero(areas == 0)
        raise DegenerateQueryError(
            f"window of size {size} has zero area at {rows.size} pixel(s), "
            f"first at (x={cols[0]}, y={rows[0]})"
        )
    return sums, areas


def local_mean(table: IntegralTable, size: int) -> np.ndarray:
    """Mean of the centred window at every pixel.

    Parameters
    ----------
    table : IntegralTable
        Plain or squared table.
    size : int
        Window side length, ``>= 1``.

    Returns
    -------
    np.ndarray
        float64 array, shape ``(height, width)``.

    Raises
    ------
    DegenerateQueryError
        If *size* is less than 1 or any pixel's window has zero area.
    """
    sums, areas = _window_sums(table, size)
    return sums.astype(np.float64) / areas


def local_mean_stddev(
    table: IntegralTable,
    squared: SquaredTable,
    size: int,
    policy: VariancePolicy = VariancePolicy.CLAMP,
    tolerance: float = 1e-9,
) -> Tuple[np.ndarray, np.ndarray]:
    """Mean and standard deviation of the centred window at every pixel.

    Parameters
    ----------
    table : IntegralTable
        Plain table of the image.
    squared : SquaredTable
        Squared table of the same image.
    size : int
        Window side length, ``>= 1``.
    policy : VariancePolicy
        Negative-variance handling, as in :func:`integral.stats.combine`.
    tolerance : float
        Relative tolerance used by ``STRICT``.

    Returns
    -------
    mean : np.ndarray
        float64 local means, shape ``(height, width)``.
    stddev : np.ndarray
        float64 local standard deviations, same shape.

    Raises
    ------
    ValidationError
        If the tables cannot be combined.
    DegenerateQueryError
        If *size* is less than 1 or any window has zero area.
    NegativeVarianceError
        Under ``STRICT``, when any variance is negative beyond tolerance.
    """
    check_table_pair(table, squared)
    policy = VariancePolicy(policy)
    mean = local_mean(table, size)
    mean_sq = local_mean(squared, size)
    variance = mean_sq - mean * mean

    negative = variance < 0.0
    if policy is VariancePolicy.UNGUARDED:
        with np.errstate(invalid='ignore'):
            return mean, np.sqrt(variance)
    if policy is VariancePolicy.STRICT:
        beyond = negative & (-variance > tolerance * mean_sq)
        if beyond.any():
            raise NegativeVarianceError(
                f"{int(beyond.sum())} window variance(s) below zero beyond "
                f"tolerance; minimum {variance.min()!r}"
            )
    if negative.any():
        logger.debug("Clamping %d negative window variance(s) to 0",
                     int(negative.sum()))
    np.maximum(variance, 0.0, out=variance)
    return mean, np.sqrt(variance)
