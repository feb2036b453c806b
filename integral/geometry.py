# -*- coding: utf-8 -*-
"""
Geometry - Half-open rectangle type used by every table query.

Defines the ``Rect`` named tuple and ``as_rect`` coercion helper. Rectangles
follow numpy slicing conventions: minimum coordinates are inclusive and
maximum coordinates are exclusive, so ``Rect(0, 0, w, h)`` covers a whole
``w x h`` table.

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
from typing import NamedTuple, Sequence, Union

# Integral internal
from integral.exceptions import ValidationError


class Rect(NamedTuple):
    """Axis-aligned rectangle in pixel coordinates, possibly off-table.

    Coordinates may be negative or extend past the table edge; queries
    clamp them. Use directly for numpy slicing of an in-bounds rectangle::

        patch = image[r.min_y:r.max_y, r.min_x:r.max_x]

    Attributes
    ----------
    min_x : int
        First column (inclusive).
    min_y : int
        First row (inclusive).
    max_x : int
        Last column (exclusive).
    max_y : int
        Last row (exclusive).
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> 'Rect':
        """Build a rectangle from its top-left corner and dimensions."""
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        """Number of columns covered; an inverted rectangle has width 0."""
        return max(0, self.max_x - self.min_x)

    @property
    def height(self) -> int:
        """Number of rows covered; an inverted rectangle has height 0."""
        return max(0, self.max_y - self.min_y)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def intersect(self, other: 'Rect') -> 'Rect':
        """Return the overlap of two rectangles.

        Returns
        -------
        Rect
            The common region, or ``Rect(0, 0, 0, 0)`` when they do not
            overlap.
        """
        r = Rect(
            max(self.min_x, other.min_x),
            max(self.min_y, other.min_y),
            min(self.max_x, other.max_x),
            min(self.max_y, other.max_y),
        )
        if r.empty:
            return Rect(0, 0, 0, 0)
        return r


def as_rect(rect: Union[Rect, Sequence[int]]) -> Rect:
    """Coerce a ``Rect`` or a 4-sequence ``(min_x, min_y, max_x, max_y)``.

    Raises
    ------
    ValidationError
        If *rect* does not have exactly four integer components.
    """
    if isinstance(rect, Rect):
        return rect
    try:
        values = tuple(rect)
    except TypeError:
        raise ValidationError(
            f"rect must be a Rect or 4-sequence, got {type(rect).__name__}"
        ) from None
    if len(values) != 4:
        raise ValidationError(
            f"rect must have 4 components (min_x, min_y, max_x, max_y), "
            f"got {len(values)}"
        )
    if any(isinstance(v, float) for v in values):
        raise ValidationError(f"rect components must be integers, got {values}")
    try:
        return Rect(*(int(v) for v in values))
    except (TypeError, ValueError):
        raise ValidationError(
            f"rect components must be integers, got {values}"
        ) from None
