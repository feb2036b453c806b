# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the integral package.

Defines the controlled vocabularies used across table construction and
querying: which per-pixel transform a table accumulates, how a negative
variance is treated, and the binarisation ceilings of common grey-level
bit depths.

Author
------
Steven Siebert

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

from enum import Enum


class IntensityTransform(Enum):
    """Per-pixel transform applied once, before accumulation.

    ``IDENTITY`` tables answer sum and mean queries. ``SQUARE`` tables hold
    prefix sums of squared intensities and are combined with an
    ``IDENTITY`` table to derive variance.
    """

    IDENTITY = "identity"
    SQUARE = "square"


class VariancePolicy(Enum):
    """Treatment of ``E[X^2] - E[X]^2 < 0`` caused by rounding.

    ``CLAMP`` sets the variance to zero before the square root.
    ``STRICT`` clamps values within tolerance and raises beyond it.
    ``UNGUARDED`` passes the negative variance through, so the standard
    deviation comes out as NaN.
    """

    CLAMP = "clamp"
    STRICT = "strict"
    UNGUARDED = "unguarded"


class BitDepth(Enum):
    """Intensity of a fully "on" pixel for common grey-level bit depths."""

    GRAY8 = 255
    GRAY16 = 65535
