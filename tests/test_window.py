# -*- coding: utf-8 -*-
"""
Window Tests - Centred and strip windows, window statistics, proportion.

Dependencies
------------
pytest

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

import dataclasses

import numpy as np
import pytest

from integral import (
    BitDepth,
    Window,
    build_table,
    get_horizontal_window,
    get_vertical_window,
    get_window,
)
from integral.exceptions import DegenerateQueryError, ValidationError


# ---------------------------------------------------------------------------
# Window value type
# ---------------------------------------------------------------------------

class TestWindowValue:
    """Test Window arithmetic on hand-built corner values."""

    def test_sum_size_mean(self):
        w = Window(top_left=1, top_right=3, bottom_left=4, bottom_right=10,
                   width=1, height=1)
        assert w.sum() == 4
        assert w.size() == 1
        assert w.mean() == pytest.approx(4.0)

    def test_zero_size_mean_raises(self):
        w = Window(0, 0, 0, 0, 0, 3)
        assert w.sum() == 0
        assert w.size() == 0
        with pytest.raises(DegenerateQueryError, match="zero area"):
            w.mean()

    def test_frozen(self):
        w = Window(0, 0, 0, 0, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            w.width = 2

    def test_proportion_half_on(self):
        w = Window(0, 0, 0, 2 * 255, 2, 2)
        assert w.proportion(BitDepth.GRAY8) == pytest.approx(1.0)

    def test_proportion_all_on(self):
        w = Window(0, 0, 0, 4 * 65535, 2, 2)
        assert w.proportion(65535) == pytest.approx(0.0)

    def test_proportion_formula_order(self):
        # area / (sum / ceiling) - 1 with a sum that is not a whole
        # number of on pixels
        w = Window(0, 0, 0, 300, 3, 2)
        assert w.proportion(200) == pytest.approx(6 / 1.5 - 1)

    def test_proportion_no_on_pixels_raises(self):
        w = Window(0, 0, 0, 0, 2, 2)
        with pytest.raises(DegenerateQueryError, match="no on pixels"):
            w.proportion(BitDepth.GRAY16)

    @pytest.mark.parametrize('ceiling', [0, -255, 2.5, True])
    def test_proportion_bad_ceiling_raises(self, ceiling):
        w = Window(0, 0, 0, 255, 1, 1)
        with pytest.raises(ValidationError, match="ceiling"):
            w.proportion(ceiling)


# ---------------------------------------------------------------------------
# Centred windows
# ---------------------------------------------------------------------------

class TestGetWindow:
    """Test centred square windows and their low-edge convention."""

    def test_interior_window(self, ramp_grid):
        table = build_table(ramp_grid)
        w = get_window(table, 2, 2, 3)
        assert (w.width, w.height) == (3, 3)
        assert w.sum() == int(ramp_grid[1:4, 1:4].sum())

    def test_interior_window_unclamped_low_edge(self, ramp_grid):
        table = build_table(ramp_grid)
        w = get_window(table, 3, 3, 3)
        assert (w.width, w.height) == (3, 3)
        assert w.sum() == int(ramp_grid[2:5, 2:5].sum())

    def test_origin_window_excludes_first_row_and_column(self, ramp_grid):
        table = build_table(ramp_grid)
        w = get_window(table, 0, 0, 3)
        assert (w.width, w.height) == (1, 1)
        assert w.sum() == int(ramp_grid[1, 1])

    def test_high_edge_clamped(self, ramp_grid):
        table = build_table(ramp_grid)
        w = get_window(table, 4, 4, 3)
        assert (w.width, w.height) == (2, 2)
        assert w.sum() == int(ramp_grid[3:5, 3:5].sum())

    def test_square_grid_window(self, square_grid):
        table = build_table(square_grid)
        w = get_window(table, 1, 1, 3)
        assert w == Window(1, 3, 4, 10, 1, 1)
        assert w.mean() == pytest.approx(4.0)

    def test_matches_corner_rule_everywhere(self, random_grid):
        table = build_table(random_grid)
        h, w = random_grid.shape
        size = 5
        step = size // 2
        for y in range(h):
            for x in range(w):
                min_x = x - step - 1 if x > step + 1 else 0
                min_y = y - step - 1 if y > step + 1 else 0
                max_x = min(w - 1, x + step)
                max_y = min(h - 1, y + step)
                expected = int(random_grid[min_y + 1:max_y + 1,
                                           min_x + 1:max_x + 1]
                               .astype(np.uint64).sum())
                window = get_window(table, x, y, size)
                assert window.sum() == expected
                assert window.size() == (max_x - min_x) * (max_y - min_y)

    def test_method_form(self, ramp_grid):
        table = build_table(ramp_grid)
        assert table.window(2, 2, 3) == get_window(table, 2, 2, 3)

    def test_size_zero_raises(self, ramp_grid):
        table = build_table(ramp_grid)
        with pytest.raises(DegenerateQueryError, match=">= 1"):
            get_window(table, 2, 2, 0)

    def test_negative_size_raises(self, ramp_grid):
        table = build_table(ramp_grid)
        with pytest.raises(DegenerateQueryError):
            table.window(2, 2, -3)

    def test_size_one_at_origin_is_degenerate(self, ramp_grid):
        table = build_table(ramp_grid)
        w = get_window(table, 0, 0, 1)
        assert w.size() == 0
        with pytest.raises(DegenerateQueryError):
            w.mean()

    def test_single_pixel_table_is_degenerate(self):
        table = build_table([[42]])
        w = table.window(0, 0, 3)
        assert w.size() == 0
        with pytest.raises(DegenerateQueryError):
            w.mean()

    @pytest.mark.parametrize('x, y', [(-1, 0), (0, -1), (5, 0), (0, 5)])
    def test_centre_outside_raises(self, ramp_grid, x, y):
        table = build_table(ramp_grid)
        with pytest.raises(ValidationError, match="must be in"):
            get_window(table, x, y, 3)


# ---------------------------------------------------------------------------
# Strip windows
# ---------------------------------------------------------------------------

class TestStripWindows:
    """Test full-height and full-width strip windows."""

    def test_vertical(self, ramp_grid):
        table = build_table(ramp_grid)
        w = get_vertical_window(table, 1, 2)
        assert (w.width, w.height) == (2, 4)
        assert w.sum() == int(ramp_grid[1:5, 2:4].sum())

    def test_vertical_clamped_far_edge(self, ramp_grid):
        table = build_table(ramp_grid)
        w = table.vertical_window(3, 5)
        assert (w.width, w.height) == (1, 4)
        assert w.sum() == int(ramp_grid[1:5, 4:5].sum())

    def test_horizontal(self, ramp_grid):
        table = build_table(ramp_grid)
        w = get_horizontal_window(table, 0, 2)
        assert (w.width, w.height) == (4, 2)
        assert w.sum() == int(ramp_grid[1:3, 1:5].sum())

    def test_horizontal_clamped_far_edge(self, ramp_grid):
        table = build_table(ramp_grid)
        w = table.horizontal_window(2, 10)
        assert (w.width, w.height) == (4, 2)
        assert w.sum() == int(ramp_grid[3:5, 1:5].sum())

    def test_strip_proportion(self, binary_grid):
        table = build_table(binary_grid)
        # Columns 1..4: columns 1-3 on, column 4 off
        w = table.vertical_window(0, 4)
        assert w.proportion(BitDepth.GRAY8) == pytest.approx(4 / 3 - 1)

    def test_zero_width_strip_is_degenerate(self, ramp_grid):
        table = build_table(ramp_grid)
        w = table.vertical_window(2, 0)
        assert w.sum() == 0
        with pytest.raises(DegenerateQueryError):
            w.mean()

    def test_start_outside_raises(self, ramp_grid):
        table = build_table(ramp_grid)
        with pytest.raises(ValidationError):
            table.vertical_window(5, 1)
        with pytest.raises(ValidationError):
            table.horizontal_window(-1, 1)

    def test_negative_thickness_raises(self, ramp_grid):
        table = build_table(ramp_grid)
        with pytest.raises(ValidationError, match="non-negative"):
            table.vertical_window(0, -1)
        with pytest.raises(ValidationError, match="non-negative"):
            table.horizontal_window(0, -2)
