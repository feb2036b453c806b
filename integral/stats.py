# -*- coding: utf-8 -*-
"""
Region Statistics - Mean, variance and standard deviation from table pairs.

Combines a plain ``IntegralTable`` and a co-registered ``SquaredTable``
through the identity ``Var(X) = E[X^2] - E[X]^2``, so the population
statistics of any rectangle or centred window cost eight lookups.

Rounding in the subtraction can leave a slightly negative variance over
near-constant regions. ``VariancePolicy`` chooses what happens next; the
default ``CLAMP`` sets it to zero so the standard deviation is always a
real number.

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
import math
from typing import NamedTuple

# Integral internal
from integral.exceptions import NegativeVarianceError, ValidationError
from integral.table import IntegralTable, RectLike, SquaredTable
from integral.vocabulary import IntensityTransform, VariancePolicy

logger = logging.getLogger(__name__)


class MeanStdDev(NamedTuple):
    """Population statistics of one region.

    Attributes
    ----------
    mean : float
    variance : float
        After the variance policy has been applied.
    stddev : float
        ``sqrt(variance)``; NaN only under ``VariancePolicy.UNGUARDED``.
    """

    mean: float
    variance: float
    stddev: float


def check_table_pair(table: IntegralTable, squared: SquaredTable) -> None:
    """Check that *table* and *squared* can be combined.

    Raises
    ------
    ValidationError
        If *table* is not an identity table, *squared* is not a squared
        table, or their shapes differ.
    """
    if table.transform is not IntensityTransform.IDENTITY:
        raise ValidationError(
            f"table must accumulate raw intensities, got {table!r}"
        )
    if squared.transform is not IntensityTransform.SQUARE:
        raise ValidationError(
            f"squared must accumulate squared intensities, got {squared!r}"
        )
    if table.shape != squared.shape:
        raise ValidationError(
            f"table shape {table.shape} does not match squared shape "
            f"{squared.shape}"
        )


def combine(
    mean: float,
    mean_sq: float,
    policy: VariancePolicy = VariancePolicy.CLAMP,
    tolerance: float = 1e-9,
) -> MeanStdDev:
    """Derive variance and standard deviation from ``E[X]`` and ``E[X^2]``.

    Parameters
    ----------
    mean : float
        Mean intensity.
    mean_sq : float
        Mean squared intensity.
    policy : VariancePolicy
        Negative-variance handling. Default ``CLAMP``.
    tolerance : float
        Relative tolerance for ``STRICT``: a negative variance no larger in
        magnitude than ``tolerance * mean_sq`` is clamped. Default
        ``1e-9``.

    Returns
    -------
    MeanStdDev

    Raises
    ------
    NegativeVarianceError
        Under ``STRICT``, when the variance is negative beyond tolerance.
    """
    policy = VariancePolicy(policy)
    variance = mean_sq - mean * mean
    if variance < 0.0:
        if policy is VariancePolicy.UNGUARDED:
            return MeanStdDev(mean, variance, math.nan)
        if policy is VariancePolicy.STRICT and -variance > tolerance * mean_sq:
            raise NegativeVarianceError(
                f"variance {variance!r} is below zero beyond tolerance "
                f"(mean={mean!r}, mean_sq={mean_sq!r})"
            )
        logger.debug("Clamping negative variance %r to 0", variance)
        variance = 0.0
    return MeanStdDev(mean, variance, math.sqrt(variance))


def mean_stddev(
    table: IntegralTable,
    squared: SquaredTable,
    rect: RectLike,
    policy: VariancePolicy = VariancePolicy.CLAMP,
    tolerance: float = 1e-9,
) -> MeanStdDev:
    """Mean and standard deviation of the pixels inside *rect*.

    Parameters
    ----------
    table : IntegralTable
        Plain table of the image.
    squared : SquaredTable
        Squared table of the same image.
    rect : Rect or Sequence[int]
        Half-open query rectangle; clamped to the table.
    policy : VariancePolicy
        Negative-variance handling. Default ``CLAMP``.
    tolerance : float
        Relative tolerance used by ``STRICT``.

    Returns
    -------
    MeanStdDev

    Raises
    ------
    ValidationError
        If the tables cannot be combined.
    DegenerateQueryError
        If *rect* does not overlap the table.

    Examples
    --------
    >>> from integral import build_tables
    >>> table, squared = build_tables([[1, 2], [3, 4]])
    >>> mean_stddev(table, squared, (0, 0, 2, 2)).variance
    1.25
    """
    check_table_pair(table, squared)
    return combine(table.mean(rect), squared.mean(rect), policy, tolerance)


def mean_stddev_window(
    table: IntegralTable,
    squared: SquaredTable,
    x: int,
    y: int,
    size: int,
    policy: VariancePolicy = VariancePolicy.CLAMP,
    tolerance: float = 1e-9,
) -> MeanStdDev:
    """Mean and standard deviation over the centred window at ``(x, y)``.

    Uses :func:`integral.window.get_window` on both tables, so the region
    has the same shape as ``table.window(x, y, size)``.

    Raises
    ------
    ValidationError
        If the tables cannot be combined or ``(x, y)`` is off the table.
    DegenerateQueryError
        If *size* is less than 1 or the window has zero area.
    """
    check_table_pair(table, squared)
    mean = table.window(x, y, size).mean()
    mean_sq = squared.window(x, y, size).mean()
    return combine(mean, mean_sq, policy, tolerance)
