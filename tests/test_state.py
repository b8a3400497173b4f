"""Tests for viewer movement helpers."""

import pytest

from word_space.ui.state import arrival_point, centroid


def test_arrival_stops_short_of_target():
    assert arrival_point((0, 0, 100), (0, 0, 0), standoff=20) == pytest.approx((0, 0, 20))


def test_arrival_on_approach_side():
    point = arrival_point((-50, 0, 0), (100, 0, 0))
    assert point == pytest.approx((80, 0, 0))


def test_arrival_when_already_there():
    assert arrival_point((1, 2, 3), (1, 2, 3)) == (1.0, 2.0, 3.0)


def test_centroid():
    assert centroid([(0, 0, 0), (10, 20, -30)]) == pytest.approx((5, 10, -15))
    assert centroid([(1, 2, 3)]) == (1.0, 2.0, 3.0)
