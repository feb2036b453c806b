# -*- coding: utf-8 -*-
"""
Windows - Cached corner sums for repeated local queries.

A ``Window`` captures the four corner prefix sums and the dimensions of one
rectangle of an integral table, so sliding local-statistics algorithms can
call ``sum``, ``mean`` and ``proportion`` without repeating clamped
lookups. Three constructors are provided:

- ``get_window``: square window centred on a pixel
- ``get_vertical_window``: full-height strip starting at a column
- ``get_horizontal_window``: full-width strip starting at a row

Corners are read directly at the clamped window edges, so the window sums
the cells strictly below and right of its top-left corner. When a centred
window is not clamped this covers ``size`` rows and columns for odd sizes;
at the low edge the window is one row or column narrower than at the high
edge. Local-statistics callers depend on exactly this shape.

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
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Union

# Integral internal
from integral._validation import validate_ceiling
from integral.exceptions import DegenerateQueryError, ValidationError
from integral.vocabulary import BitDepth

if TYPE_CHECKING:
    from integral.table import IntegralTable


@dataclass(frozen=True)
class Window:
    """Four corner prefix sums plus the dimensions they bound.

    A pure value: it keeps no reference to the table it was read from.

    Attributes
    ----------
    top_left : int
    top_right : int
    bottom_left : int
    bottom_right : int
        Prefix sums at the window corners.
    width : int
        Number of columns summed.
    height : int
        Number of rows summed.
    """

    top_left: int
    top_right: int
    bottom_left: int
    bottom_right: int
    width: int
    height: int

    def sum(self) -> int:
        """Sum of intensities inside the window."""
        return (self.bottom_right + self.top_left
                - self.top_right - self.bottom_left)

    def size(self) -> int:
        """Number of pixels inside the window."""
        return self.width * self.height

    def mean(self) -> float:
        """Mean intensity inside the window.

        Raises
        ------
        DegenerateQueryError
            If the window has zero area.
        """
        size = self.size()
        if size == 0:
            raise DegenerateQueryError(
                f"window has zero area ({self.width}x{self.height})"
            )
        return self.sum() / size

    def proportion(self, ceiling: Union[int, BitDepth]) -> float:
        """Area-to-on-pixel ratio of a binarised window, minus one.

        Assumes every "on" pixel holds *ceiling* and every other pixel is
        zero, and returns ``area / (sum / ceiling) - 1``. A window that is
        entirely "on" gives ``0.0``; half "on" gives ``1.0``.

        Parameters
        ----------
        ceiling : int or BitDepth
            Intensity of an "on" pixel, e.g. ``BitDepth.GRAY16`` (65535)
            for 16-bit grey images or ``BitDepth.GRAY8`` (255) for 8-bit.

        Returns
        -------
        float

        Raises
        ------
        ValidationError
            If *ceiling* is not a positive integer.
        DegenerateQueryError
            If the window contains no "on" pixels.
        """
        ceiling = validate_ceiling(ceiling)
        on = self.sum() / ceiling
        if on == 0:
            raise DegenerateQueryError(
                "window contains no on pixels; proportion is undefined"
            )
        return self.size() / on - 1


def _check_column(table: 'IntegralTable', x: int, name: str = 'x') -> None:
    if not 0 <= x < table.width:
        raise ValidationError(
            f"{name} must be in [0, {table.width - 1}], got {x}"
        )


def _check_row(table: 'IntegralTable', y: int, name: str = 'y') -> None:
    if not 0 <= y < table.height:
        raise ValidationError(
            f"{name} must be in [0, {table.height - 1}], got {y}"
        )


def _centred_span(centre: int, step: int, last: int) -> Tuple[int, int]:
    lo = centre - step - 1 if centre > step + 1 else 0
    hi = min(last, centre + step)
    return lo, hi


def _corners(
    table: 'IntegralTable', min_x: int, min_y: int, max_x: int, max_y: int,
) -> Window:
    cells = table.cells
    return Window(
        int(cells[min_y, min_x]),
        int(cells[min_y, max_x]),
        int(cells[max_y, min_x]),
        int(cells[max_y, max_x]),
        max_x - min_x,
        max_y - min_y,
    )


def get_window(table: 'IntegralTable', x: int, y: int, size: int) -> Window:
    """Read the window of side *size* centred on pixel ``(x, y)``.

    With ``step = size // 2`` the low edge is ``x - step - 1`` (used only
    when ``x > step + 1``, otherwise ``0``) and the high edge is
    ``min(width - 1, x + step)``; rows are treated the same way.

    Parameters
    ----------
    table : IntegralTable
        Source table (plain or squared).
    x : int
        Centre column, ``0 <= x < width``.
    y : int
        Centre row, ``0 <= y < height``.
    size : int
        Nominal window side length, ``>= 1``.

    Returns
    -------
    Window

    Raises
    ------
    DegenerateQueryError
        If *size* is less than 1.
    ValidationError
        If ``(x, y)`` is outside the table.
    """
    if size < 1:
        raise DegenerateQueryError(f"window size must be >= 1, got {size}")
    _check_column(table, x)
    _check_row(table, y)
    step = size // 2
    min_x, max_x = _centred_span(x, step, table.width - 1)
    min_y, max_y = _centred_span(y, step, table.height - 1)
    return _corners(table, min_x, min_y, max_x, max_y)


def get_vertical_window(table: 'IntegralTable', x: int, width: int) -> Window:
    """Read a full-height strip of *width* columns starting at column *x*.

    The far edge is clamped to the last column and the reported width
    shrinks with it. The strip spans rows ``0`` to ``height - 1`` of
    corners, so its height is ``height - 1``.

    Raises
    ------
    ValidationError
        If *x* is outside the table or *width* is negative.
    """
    _check_column(table, x)
    if width < 0:
        raise ValidationError(f"width must be non-negative, got {width}")
    max_x = min(x + width, table.width - 1)
    return _corners(table, x, 0, max_x, table.height - 1)


def get_horizontal_window(table: 'IntegralTable', y: int, height: int) -> Window:
    """Read a full-width strip of *height* rows starting at row *y*.

    Mirror image of :func:`get_vertical_window`: the far edge is clamped to
    the last row and the width is ``width - 1``.

    Raises
    ------
    ValidationError
        If *y* is outside the table or *height* is negative.
    """
    _check_row(table, y)
    if height < 0:
        raise ValidationError(f"height must be non-negative, got {height}")
    max_y = min(y + height, table.height - 1)
    return _corners(table, 0, y, table.width - 1, max_y)
