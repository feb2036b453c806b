# -*- coding: utf-8 -*-
"""
integral - Summed-area tables for single-channel imagery.

Builds integral images (summed-area tables) from grids of non-negative
integer pixel intensities and answers rectangle sum, mean, variance and
standard deviation queries in constant time. A window layer caches corner
sums for the sliding local statistics used by adaptive thresholding and
local contrast operators.

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from integral.exceptions import (
    IntegralError,
    ValidationError,
    InvalidDimensionsError,
    OutOfRangeWriteError,
    DegenerateQueryError,
    NegativeVarianceError,
    BuilderStateError,
)
from integral.vocabulary import (
    IntensityTransform,
    VariancePolicy,
    BitDepth,
)
from integral.geometry import Rect
from integral.table import IntegralTable, SquaredTable
from integral.window import (
    Window,
    get_window,
    get_vertical_window,
    get_horizontal_window,
)
from integral.builders import (
    IntensityCanvas,
    TableBuilder,
    build_table,
    build_squared_table,
    build_tables,
    draw,
)
from integral.stats import MeanStdDev, mean_stddev, mean_stddev_window
from integral.local import local_mean, local_mean_stddev

__all__ = [
    'IntegralError',
    'ValidationError',
    'InvalidDimensionsError',
    'OutOfRangeWriteError',
    'DegenerateQueryError',
    'NegativeVarianceError',
    'BuilderStateError',
    'IntensityTransform',
    'VariancePolicy',
    'BitDepth',
    'Rect',
    'IntegralTable',
    'SquaredTable',
    'Window',
    'get_window',
    'get_vertical_window',
    'get_horizontal_window',
    'IntensityCanvas',
    'TableBuilder',
    'build_table',
    'build_squared_table',
    'build_tables',
    'draw',
    'MeanStdDev',
    'mean_stddev',
    'mean_stddev_window',
    'local_mean',
    'local_mean_stddev',
]
