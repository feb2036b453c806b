# -*- coding: utf-8 -*-
"""
Tests for integral.exceptions - hierarchy and built-in compatibility.

Author
------
Steven Siebert

Created
-------
2026-10-18
"""

import pytest

from integral.exceptions import (
    BuilderStateError,
    DegenerateQueryError,
    IntegralError,
    InvalidDimensionsError,
    NegativeVarianceError,
    OutOfRangeWriteError,
    ValidationError,
)


@pytest.mark.parametrize('exc, builtin', [
    (ValidationError, ValueError),
    (InvalidDimensionsError, ValueError),
    (OutOfRangeWriteError, IndexError),
    (DegenerateQueryError, ZeroDivisionError),
    (NegativeVarianceError, ArithmeticError),
    (BuilderStateError, RuntimeError),
])
def test_subclasses_base_and_builtin(exc, builtin):
    assert issubclass(exc, IntegralError)
    assert issubclass(exc, builtin)


def test_invalid_dimensions_is_validation_error():
    assert issubclass(InvalidDimensionsError, ValidationError)


def test_caught_as_builtin():
    with pytest.raises(ZeroDivisionError):
        raise DegenerateQueryError("empty")
