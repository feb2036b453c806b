# -*- coding: utf-8 -*-
"""
Validation Helpers - Shared argument checks for builders and queries.

Provides reusable validation functions for table dimensions, intensity
grids, and binarisation ceilings. Builders and query helpers call these to
enforce consistent constraints and error messages.

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
from typing import Any, Union

# Third-party
import numpy as np

# Integral internal
from integral.exceptions import InvalidDimensionsError, ValidationError
from integral.vocabulary import BitDepth


def validate_dimensions(width: int, height: int) -> None:
    """Validate that table dimensions are positive integers.

    Parameters
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.

    Raises
    ------
    InvalidDimensionsError
        If either dimension is not an integer or is not positive.
    """
    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensionsError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        if value <= 0:
            raise InvalidDimensionsError(
                f"{name} must be positive, got {value}"
            )


def as_intensity_grid(grid: Any) -> np.ndarray:
    """Convert an array-like of intensities to a validated ``uint64`` array.

    Parameters
    ----------
    grid : array-like
        2D grid of non-negative integer intensities, shape
        ``(height, width)``. Boolean grids are accepted as 0/1.

    Returns
    -------
    np.ndarray
        ``uint64`` copy of *grid*, shape ``(height, width)``.

    Raises
    ------
    ValidationError
        If *grid* is not 2D, has a non-integer dtype, or holds negative
        values.
    InvalidDimensionsError
        If either dimension is zero.
    """
    arr = np.asarray(grid)
    if arr.ndim != 2:
        raise ValidationError(
            f"intensity grid must be 2D (height, width), got {arr.ndim}D"
        )
    validate_dimensions(arr.shape[1], arr.shape[0])
    if arr.dtype == np.bool_:
        return arr.astype(np.uint64)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValidationError(
            f"intensity grid must have an integer dtype, got {arr.dtype}"
        )
    if np.issubdtype(arr.dtype, np.signedinteger) and arr.min() < 0:
        raise ValidationError(
            f"intensities must be non-negative, got minimum {arr.min()}"
        )
    return arr.astype(np.uint64)


def validate_intensity(value: Any) -> int:
    """Validate a single intensity and return it as a Python ``int``.

    Raises
    ------
    ValidationError
        If *value* is not a non-negative integer.
    """
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"intensity must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"intensity must be non-negative, got {value}")
    return int(value)


def validate_ceiling(ceiling: Union[int, BitDepth]) -> int:
    """Resolve a binarisation ceiling to a positive ``int``.

    Parameters
    ----------
    ceiling : int or BitDepth
        Intensity of a fully "on" pixel.

    Returns
    -------
    int

    Raises
    ------
    ValidationError
        If *ceiling* is not an integer or ``BitDepth``, or is not positive.
    """
    if isinstance(ceiling, BitDepth):
        return ceiling.value
    if isinstance(ceiling, bool) or not isinstance(ceiling, (int, np.integer)):
        raise ValidationError(
            f"ceiling must be an int or BitDepth, got {type(ceiling).__name__}"
        )
    if ceiling <= 0:
        raise ValidationError(f"ceiling must be positive, got {ceiling}")
    return int(ceiling)
