# -*- coding: utf-8 -*-
"""
Table Builders - Batch and incremental construction of integral tables.

Both builders implement the same recurrence for cell ``(x, y)``::

    cells[y, x] = t(p(x, y)) + left + up - upleft

where ``left``, ``up`` and ``upleft`` are the neighbouring prefix sums
(``0`` off the table) and ``t`` is the table's intensity transform.

- ``build_table`` / ``build_squared_table`` / ``build_tables`` consume a
  complete intensity grid in one pass.
- ``TableBuilder`` is filled one pixel at a time through the narrow
  ``IntensityCanvas`` capability, which is how an external pixel source
  (a decoder, a compositor, ``draw``) feeds a table without the core
  depending on any concrete image type. Writes must arrive in row-major
  order; rewriting a cell before its right and lower neighbours are
  written replaces the earlier value rather than adding to it.

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
from typing import (
    Any,
    Iterable,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

# Third-party
import numpy as np

# Integral internal
from integral._validation import (
    as_intensity_grid,
    validate_dimensions,
    validate_intensity,
)
from integral.exceptions import (
    BuilderStateError,
    OutOfRangeWriteError,
    ValidationError,
)
from integral.table import IntegralTable, SquaredTable
from integral.vocabulary import IntensityTransform

logger = logging.getLogger(__name__)


# =====================================================================
# Batch builders
# =====================================================================

def _accumulate(terms: np.ndarray) -> np.ndarray:
    # Row-major recurrence expressed as two cumulative sums; uint64 wraps
    # on overflow.
    return np.cumsum(np.cumsum(terms, axis=0, dtype=np.uint64),
                     axis=1, dtype=np.uint64)


def build_table(grid: Any) -> IntegralTable:
    """Build an integral table from a complete intensity grid.

    Parameters
    ----------
    grid : array-like
        2D grid of non-negative integer intensities, shape
        ``(height, width)``.

    Returns
    -------
    IntegralTable

    Raises
    ------
    ValidationError
        If *grid* is not a 2D non-negative integer grid.
    InvalidDimensionsError
        If *grid* has a zero-length axis.

    Examples
    --------
    >>> build_table([[10, 20, 30]]).cells
    array([[10, 30, 60]], dtype=uint64)
    """
    pixels = as_intensity_grid(grid)
    table = IntegralTable(_accumulate(pixels))
    logger.debug("Built %dx%d integral table", table.width, table.height)
    return table


def build_squared_table(grid: Any) -> SquaredTable:
    """Build a squared integral table from a complete intensity grid.

    Identical to :func:`build_table` with every intensity squared before
    accumulation.
    """
    pixels = as_intensity_grid(grid)
    table = SquaredTable(_accumulate(pixels * pixels))
    logger.debug("Built %dx%d squared integral table",
                 table.width, table.height)
    return table


def build_tables(grid: Any) -> Tuple[IntegralTable, SquaredTable]:
    """Build the plain and squared tables for one grid.

    Returns
    -------
    Tuple[IntegralTable, SquaredTable]
        Co-registered tables ready for :func:`integral.stats.mean_stddev`.
    """
    pixels = as_intensity_grid(grid)
    table = IntegralTable(_accumulate(pixels))
    squared = SquaredTable(_accumulate(pixels * pixels))
    logger.debug("Built %dx%d integral and squared tables",
                 table.width, table.height)
    return table, squared


# =====================================================================
# Incremental builder
# =====================================================================

@runtime_checkable
class IntensityCanvas(Protocol):
    """Anything that accepts single-pixel intensity writes."""

    def write_intensity(self, x: int, y: int, value: int) -> None:
        ...


class TableBuilder:
    """Fill an integral table pixel by pixel.

    Implements ``IntensityCanvas``. Writes are expected in row-major order
    (left to right, top to bottom) so that the left, upper and upper-left
    prefix sums are final when each cell is computed. Each write is a
    replacement: the cell is recomputed from its neighbours, so writing
    the same pixel twice keeps only the second value.

    Once :meth:`finish` has returned the table, the builder rejects
    further writes.

    Parameters
    ----------
    width : int
        Number of columns. Must be positive.
    height : int
        Number of rows. Must be positive.
    transform : IntensityTransform
        ``IDENTITY`` for a plain table, ``SQUARE`` for a squared table.
        Default ``IDENTITY``.

    Raises
    ------
    InvalidDimensionsError
        If *width* or *height* is not a positive integer.

    Examples
    --------
    >>> builder = TableBuilder(3, 1)
    >>> builder.write_many([(0, 0, 10), (1, 0, 20), (2, 0, 30)])
    >>> builder.finish().sum((0, 0, 3, 1))
    60
    """

    def __init__(
        self,
        width: int,
        height: int,
        transform: IntensityTransform = IntensityTransform.IDENTITY,
    ) -> None:
        validate_dimensions(width, height)
        self._transform = IntensityTransform(transform)
        self._cells = np.zeros((height, width), dtype=np.uint64)
        self._finished = False

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def transform(self) -> IntensityTransform:
        return self._transform

    @property
    def finished(self) -> bool:
        """Whether :meth:`finish` has been called."""
        return self._finished

    def write_intensity(self, x: int, y: int, value: int) -> None:
        """Set the intensity of pixel ``(x, y)``.

        Parameters
        ----------
        x : int
            Column, ``0 <= x < width``.
        y : int
            Row, ``0 <= y < height``.
        value : int
            Non-negative intensity. Squared first for ``SQUARE`` builders.

        Raises
        ------
        BuilderStateError
            If the builder has already been finished.
        OutOfRangeWriteError
            If ``(x, y)`` is outside the table.
        ValidationError
            If *value* is not a non-negative integer.
        """
        if self._finished:
            raise BuilderStateError(
                "table already finished; builders accept no writes after "
                "finish()"
            )
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRangeWriteError(
                f"write at ({x}, {y}) outside {self.width}x{self.height} table"
            )
        term = validate_intensity(value)
        if self._transform is IntensityTransform.SQUARE:
            term = term * term

        cells = self._cells
        left = int(cells[y, x - 1]) if x > 0 else 0
        up = int(cells[y - 1, x]) if y > 0 else 0
        upleft = int(cells[y - 1, x - 1]) if x > 0 and y > 0 else 0
        cells[y, x] = (term + left + up - upleft) & 0xFFFFFFFFFFFFFFFF

    def write_many(self, writes: Iterable[Tuple[int, int, int]]) -> None:
        """Apply a stream of ``(x, y, value)`` writes in order."""
        for x, y, value in writes:
            self.write_intensity(x, y, value)

    def finish(self) -> Union[IntegralTable, SquaredTable]:
        """Freeze the builder and return its read-only table.

        Returns
        -------
        IntegralTable or SquaredTable
            ``SquaredTable`` when the builder's transform is ``SQUARE``.

        Raises
        ------
        BuilderStateError
            If called twice.
        """
        if self._finished:
            raise BuilderStateError("finish() already called")
        self._finished = True
        if self._transform is IntensityTransform.SQUARE:
            table = SquaredTable(self._cells)
        else:
            table = IntegralTable(self._cells)
        logger.debug("Finished incremental %r", table)
        return table

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(width={self.width}, "
            f"height={self.height}, transform={self._transform.value!r}, "
            f"finished={self._finished})"
        )


def draw(
    canvases: Union[IntensityCanvas, Sequence[IntensityCanvas]],
    source: Any,
    origin: Tuple[int, int] = (0, 0),
) -> None:
    """Blit a 2D intensity array into one or more canvases, row-major.

    Parameters
    ----------
    canvases : IntensityCanvas or Sequence[IntensityCanvas]
        Destination(s). Each receives every pixel of *source*.
    source : array-like
        2D grid of non-negative integer intensities, shape
        ``(rows, cols)``.
    origin : Tuple[int, int]
        Canvas ``(x, y)`` of the source's top-left pixel. Default
        ``(0, 0)``.

    Raises
    ------
    ValidationError
        If *source* is not a valid intensity grid or a destination is not
        an ``IntensityCanvas``.
    OutOfRangeWriteError
        If the placed source extends past a canvas edge. Canvases that
        expose ``width`` and ``height`` are checked before any pixel is
        written, so none of them is left partially drawn.

    Examples
    --------
    >>> plain = TableBuilder(2, 2)
    >>> squared = TableBuilder(2, 2, IntensityTransform.SQUARE)
    >>> draw([plain, squared], [[1, 2], [3, 4]])
    >>> squared.finish().total()
    30
    """
    if isinstance(canvases, (list, tuple)):
        targets = list(canvases)
    else:
        targets = [canvases]
    for target in targets:
        if not isinstance(target, IntensityCanvas):
            raise ValidationError(
                f"{type(target).__name__} does not implement write_intensity"
            )
    pixels = as_intensity_grid(source)
    ox, oy = origin
    rows, cols = pixels.shape
    # Bounds are checked up front so no canvas receives a partial blit
    for target in targets:
        width = getattr(target, "width", None)
        height = getattr(target, "height", None)
        if width is None or height is None:
            continue
        if ox < 0 or oy < 0 or ox + cols > width or oy + rows > height:
            raise OutOfRangeWriteError(
                f"{cols}x{rows} source at ({ox}, {oy}) does not fit "
                f"{width}x{height} canvas"
            )
    logger.debug("Drawing %dx%d source at (%d, %d) into %d canvas(es)",
                 cols, rows, ox, oy, len(targets))
    for target in targets:
        for row in range(rows):
            for col in range(cols):
                target.write_intensity(ox + col, oy + row,
                                       int(pixels[row, col]))
