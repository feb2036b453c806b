# -*- coding: utf-8 -*-
"""
Tests for integral.geometry - Rect properties, intersection and coercion.

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

import pytest

from integral.exceptions import ValidationError
from integral.geometry import Rect, as_rect


class TestRect:
    """Test Rect dimensions and intersection."""

    def test_dimensions(self):
        r = Rect(1, 2, 4, 7)
        assert r.width == 3
        assert r.height == 5
        assert r.area == 15
        assert not r.empty

    def test_from_size(self):
        assert Rect.from_size(2, 3, 4, 5) == Rect(2, 3, 6, 8)

    def test_inverted_is_empty(self):
        r = Rect(5, 5, 2, 8)
        assert r.width == 0
        assert r.area == 0
        assert r.empty

    def test_intersect_overlap(self):
        a = Rect(-3, -3, 4, 4)
        b = Rect(0, 0, 10, 2)
        assert a.intersect(b) == Rect(0, 0, 4, 2)

    def test_intersect_disjoint(self):
        assert Rect(0, 0, 2, 2).intersect(Rect(5, 5, 8, 8)) == Rect(0, 0, 0, 0)

    def test_intersect_touching_edges_is_empty(self):
        assert Rect(0, 0, 2, 2).intersect(Rect(2, 0, 4, 2)).empty


class TestAsRect:
    """Test coercion of query arguments."""

    def test_rect_passthrough(self):
        r = Rect(0, 0, 1, 1)
        assert as_rect(r) is r

    def test_tuple(self):
        assert as_rect((1, 2, 3, 4)) == Rect(1, 2, 3, 4)

    def test_list(self):
        assert as_rect([0, 0, 5, 5]) == Rect(0, 0, 5, 5)

    def test_wrong_length_raises(self):
        with pytest.raises(ValidationError, match="4 components"):
            as_rect((0, 0, 1))

    def test_float_component_raises(self):
        with pytest.raises(ValidationError, match="integers"):
            as_rect((0, 0, 1.5, 2))

    @pytest.mark.parametrize("bad", ["a", None, object()])
    def test_non_numeric_component_raises(self, bad):
        with pytest.raises(ValidationError, match="integers"):
            as_rect((0, 0, bad, 2))

    def test_non_sequence_raises(self):
        with pytest.raises(ValidationError, match="Rect or 4-sequence"):
            as_rect(7)
