# -*- coding: utf-8 -*-
"""
Integral Exception Hierarchy - Domain-specific exceptions for table operations.

Provides a small exception hierarchy that lets callers catch summed-area
table errors distinctly from Python built-in exceptions. Every exception
subclasses both ``IntegralError`` and the closest built-in exception, so
code written against ``ValueError`` or ``ZeroDivisionError`` keeps working.

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


class IntegralError(Exception):
    """Base exception for all integral table errors."""


class ValidationError(IntegralError, ValueError):
    """Invalid input data, parameters, or query arguments.

    Raised for non-2D grids, negative intensities, non-integer dtypes,
    mismatched table shapes, and out-of-domain window centres.
    """


class InvalidDimensionsError(ValidationError):
    """Zero or negative width/height requested at construction."""


class OutOfRangeWriteError(IntegralError, IndexError):
    """Incremental write to a coordinate outside the table's domain.

    Signals caller misuse of an ``IntensityCanvas``; the write is rejected
    and the table is left unchanged.
    """


class DegenerateQueryError(IntegralError, ZeroDivisionError):
    """Query region intersects the domain in zero area.

    Raised instead of returning ``0``, ``inf`` or ``NaN`` when a mean or
    proportion would divide by zero.
    """


class NegativeVarianceError(IntegralError, ArithmeticError):
    """``E[X^2] - E[X]^2`` fell below zero beyond the allowed tolerance.

    Only raised under ``VariancePolicy.STRICT``.
    """


class BuilderStateError(IntegralError, RuntimeError):
    """Incremental builder used after its table was finished."""
