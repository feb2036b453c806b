# -*- coding: utf-8 -*-
"""
Integral Tables - Summed-area table storage and rectangle queries.

Defines ``IntegralTable``, a read-only 2D grid of ``uint64`` inclusive
prefix sums, and ``SquaredTable``, the same structure accumulated over
squared intensities. Both share one implementation of the clamped
inclusion-exclusion query, so any rectangle sum or mean costs four lookups
regardless of its area.

Tables are produced by the builders in :mod:`integral.builders`; the
constructor here wraps an already-accumulated cell array.

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
import math
from typing import Sequence, Tuple, Union

# Third-party
import numpy as np

# Integral internal
from integral._validation import validate_dimensions
from integral.exceptions import DegenerateQueryError, ValidationError
from integral.geometry import Rect, as_rect
from integral.vocabulary import IntensityTransform
from integral.window import (
    Window,
    get_horizontal_window,
    get_vertical_window,
    get_window,
)

RectLike = Union[Rect, Sequence[int]]


def _isqrt(terms: np.ndarray) -> np.ndarray:
    """Elementwise ``math.isqrt`` over a ``uint64`` array."""
    limit = np.uint64(2 ** 32 - 1)
    root = np.floor(np.sqrt(terms.astype(np.float64)))
    root = np.minimum(root, float(limit)).astype(np.uint64)
    # float64 sqrt can land one off for large terms; step to the exact floor.
    # Squares of roots up to 2**32 - 1 fit in uint64.
    root -= (root * root > terms).astype(np.uint64)
    below = root < limit
    step = root + below.astype(np.uint64)
    root += (below & (step * step <= terms)).astype(np.uint64)
    return root


class IntegralTable:
    """Summed-area table over single-channel pixel intensities.

    ``cells[y, x]`` holds the sum of the (transformed) intensities of every
    pixel ``(x', y')`` with ``x' <= x`` and ``y' <= y``. The cell array is
    exposed read-only; tables never change after construction.

    Parameters
    ----------
    cells : np.ndarray
        Accumulated prefix sums, shape ``(height, width)``. Converted to
        ``uint64``.
    transform : IntensityTransform
        Per-pixel transform the sums were accumulated over. Default
        ``IntensityTransform.IDENTITY``.

    Raises
    ------
    ValidationError
        If *cells* is not a 2D integer array or holds negative values.
    InvalidDimensionsError
        If either dimension is zero.

    Examples
    --------
    >>> from integral import build_table
    >>> table = build_table([[1, 2], [3, 4]])
    >>> table.sum((0, 0, 2, 2))
    10
    >>> table.mean((0, 1, 2, 2))
    3.5
    """

    def __init__(
        self,
        cells: np.ndarray,
        transform: IntensityTransform = IntensityTransform.IDENTITY,
    ) -> None:
        arr = np.asarray(cells)
        if arr.ndim != 2:
            raise ValidationError(
                f"cells must be 2D (height, width), got {arr.ndim}D"
            )
        validate_dimensions(arr.shape[1], arr.shape[0])
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValidationError(
                f"cells must have an integer dtype, got {arr.dtype}"
            )
        if np.issubdtype(arr.dtype, np.signedinteger) and arr.min() < 0:
            raise ValidationError(
                f"cells must be non-negative, got minimum {arr.min()}"
            )
        # Private copy so no caller-held array aliases the table
        owned = np.array(arr, dtype=np.uint64, copy=True)
        owned.flags.writeable = False
        self._cells = owned
        self._transform = IntensityTransform(transform)

    # -----------------------------------------------------------------
    # Shape and storage
    # -----------------------------------------------------------------
    @property
    def cells(self) -> np.ndarray:
        """Read-only ``uint64`` prefix-sum array, shape ``(height, width)``."""
        return self._cells

    @property
    def transform(self) -> IntensityTransform:
        return self._transform

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """Table dimensions as ``(height, width)``."""
        return self._cells.shape

    @property
    def bounds(self) -> Rect:
        """The table's domain, ``Rect(0, 0, width, height)``."""
        return Rect(0, 0, self.width, self.height)

    # -----------------------------------------------------------------
    # Rectangle queries
    # -----------------------------------------------------------------
    def prefix(self, x: int, y: int) -> int:
        """Return the prefix sum at ``(x, y)`` with edge clamping.

        A coordinate below zero contributes an implicit prefix of ``0``.
        A coordinate at or past the far edge is clamped to the last valid
        index, whose prefix already covers that whole edge.

        Parameters
        ----------
        x : int
            Column index, any integer.
        y : int
            Row index, any integer.

        Returns
        -------
        int
        """
        x = min(x, self.width - 1)
        y = min(y, self.height - 1)
        if x < 0 or y < 0:
            return 0
        return int(self._cells[y, x])

    def sum(self, rect: RectLike) -> int:
        """Sum of intensities over the part of *rect* inside the table.

        Parameters
        ----------
        rect : Rect or Sequence[int]
            Half-open rectangle ``(min_x, min_y, max_x, max_y)``. May
            extend past any edge.

        Returns
        -------
        int
            Exact sum. ``0`` for empty rectangles and rectangles entirely
            outside the table.
        """
        r = as_rect(rect)
        if r.empty:
            return 0
        left, top = r.min_x - 1, r.min_y - 1
        right, bottom = r.max_x - 1, r.max_y - 1
        return (
            self.prefix(right, bottom) + self.prefix(left, top)
            - self.prefix(right, top) - self.prefix(left, bottom)
        )

    def mean(self, rect: RectLike) -> float:
        """Mean intensity over the part of *rect* inside the table.

        Raises
        ------
        DegenerateQueryError
            If *rect* does not overlap the table.
        """
        r = as_rect(rect)
        area = r.intersect(self.bounds).area
        if area == 0:
            raise DegenerateQueryError(
                f"{r} does not overlap table bounds {self.bounds}"
            )
        return self.sum(r) / area

    def total(self) -> int:
        """Sum over the whole table."""
        return int(self._cells[-1, -1])

    # -----------------------------------------------------------------
    # Windows
    # -----------------------------------------------------------------
    def window(self, x: int, y: int, size: int) -> Window:
        """Centred square window; see :func:`integral.window.get_window`."""
        return get_window(self, x, y, size)

    def vertical_window(self, x: int, width: int) -> Window:
        """Full-height strip; see :func:`integral.window.get_vertical_window`."""
        return get_vertical_window(self, x, width)

    def horizontal_window(self, y: int, height: int) -> Window:
        """Full-width strip; see :func:`integral.window.get_horizontal_window`."""
        return get_horizontal_window(self, y, height)

    # -----------------------------------------------------------------
    # Read-back
    # -----------------------------------------------------------------
    def value(self, x: int, y: int) -> int:
        """Recover the accumulated per-pixel term at ``(x, y)``.

        Inverts the construction recurrence,
        ``cells[y, x] + upleft - left - up``, with out-of-range neighbours
        read as ``0``. For a ``SquaredTable`` this is the squared
        intensity.

        Returns
        -------
        int
            The term, or ``0`` when ``(x, y)`` is outside the table.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        left = int(self._cells[y, x - 1]) if x > 0 else 0
        up = int(self._cells[y - 1, x]) if y > 0 else 0
        upleft = int(self._cells[y - 1, x - 1]) if x > 0 and y > 0 else 0
        return int(self._cells[y, x]) + upleft - left - up

    def intensity(self, x: int, y: int) -> int:
        """Recover the original pixel intensity at ``(x, y)``.

        For a ``SquaredTable`` the square root is rounded down, matching
        :meth:`to_array`.
        """
        v = self.value(x, y)
        if self._transform is IntensityTransform.SQUARE:
            return math.isqrt(v)
        return v

    def values(self) -> np.ndarray:
        """Recover every accumulated per-pixel term as a ``uint64`` array."""
        zero_row = np.zeros((1, self.width), dtype=np.uint64)
        zero_col = np.zeros((self.height, 1), dtype=np.uint64)
        # uint64 differences wrap, and the wrapped result is exact
        rows = np.diff(self._cells, axis=0, prepend=zero_row)
        return np.diff(rows, axis=1, prepend=zero_col)

    def to_array(self) -> np.ndarray:
        """Recover the original intensity grid, shape ``(height, width)``.

        For a ``SquaredTable`` each element is the integer square root
        (rounded down) of the recovered term, as in :meth:`intensity`.
        """
        terms = self.values()
        if self._transform is IntensityTransform.SQUARE:
            return _isqrt(terms)
        return terms

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(width={self.width}, "
            f"height={self.height}, transform={self._transform.value!r})"
        )


class SquaredTable(IntegralTable):
    """Summed-area table of squared intensities.

    Identical storage and queries to ``IntegralTable``; ``sum`` and
    ``mean`` return sums and means of ``p**2``. Pair with an
    ``IntegralTable`` over the same image in
    :func:`integral.stats.mean_stddev` to obtain variance.

    Parameters
    ----------
    cells : np.ndarray
        Accumulated prefix sums of squared intensities, shape
        ``(height, width)``.
    """

    def __init__(self, cells: np.ndarray) -> None:
        super().__init__(cells, transform=IntensityTransform.SQUARE)
