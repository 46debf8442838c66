# File: tests/unit/test_geometry.py
"""
Unit tests for normalized geometry.
"""

import pytest

from weekplanner.layout.geometry import GeometryMapper
from weekplanner.models import Assignment


class TestToRect:
    """Tests for slot/column to fraction mapping."""

    def test_single_column(self, make_event):
        rect = GeometryMapper.to_rect(Assignment(make_event("a", "09:00", "10:00"), 6, 8, 0, 1))

        assert rect.top == pytest.approx(6 / 36)
        assert rect.height == pytest.approx(2 / 36)
        assert rect.left == 0
        assert rect.width == 1

    def test_second_of_three_columns(self, make_event):
        rect = GeometryMapper.to_rect(Assignment(make_event("a", "09:00", "10:00"), 6, 8, 1, 3))

        assert rect.left == pytest.approx(1 / 3)
        assert rect.width == pytest.approx(1 / 3)

    def test_zero_span_keeps_one_slot(self, make_event):
        rect = GeometryMapper.to_rect(Assignment(make_event("a", "10:00", "10:00"), 8, 8, 0, 1))

        assert rect.height == pytest.approx(1 / 36)

    def test_full_grid(self, make_event):
        rect = GeometryMapper.to_rect(Assignment(make_event("a", "06:00", "23:59"), 0, 36, 0, 1))

        assert rect.top == 0
        assert rect.height == pytest.approx(1.0)


class TestScaled:
    """Tests for renderer-side scaling."""

    def test_scaled_to_pixels(self, make_event):
        rect = GeometryMapper.to_rect(Assignment(make_event("a", "09:00", "10:00"), 6, 8, 1, 2))

        x, y, w, h = rect.scaled(200, 720, x=80, y=40)

        assert x == pytest.approx(180)
        assert y == pytest.approx(160)
        assert w == pytest.approx(100)
        assert h == pytest.approx(40)
