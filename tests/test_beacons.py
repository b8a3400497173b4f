"""Tests for beacon placement."""

import pytest

from word_space.core.axes import ROLE_ORDER, AxisRole, AxisWords
from word_space.core.beacons import place_beacons

from conftest import make_space

AXIS_WORDS = AxisWords.from_mapping({
    "x+": "hot", "x-": "cold", "y+": "good", "y-": "evil", "z+": "old", "z-": "new",
})


def test_six_beacons_in_role_order():
    space = make_space([[1, 1, 1], [-1, -1, -1]])
    beacons = place_beacons(AXIS_WORDS, space.words)
    assert [b.axis_role for b in beacons] == list(ROLE_ORDER)
    assert [b.word for b in beacons] == ["cold", "hot", "good", "evil", "old", "new"]


def test_beacons_padded_beyond_extrema():
    space = make_space([[10, -4, 2], [-5, 8, -6], [3, 0, 1]])
    by_role = {b.axis_role: b for b in place_beacons(AXIS_WORDS, space.words)}

    assert by_role[AxisRole.X_POS].position == pytest.approx((12.0, 0.0, 0.0))
    assert by_role[AxisRole.X_NEG].position == pytest.approx((-6.0, 0.0, 0.0))
    assert by_role[AxisRole.Y_POS].position == pytest.approx((0.0, 9.6, 0.0))
    assert by_role[AxisRole.Y_NEG].position == pytest.approx((0.0, -4.8, 0.0))
    assert by_role[AxisRole.Z_POS].position == pytest.approx((0.0, 0.0, 2.4))
    assert by_role[AxisRole.Z_NEG].position == pytest.approx((0.0, 0.0, -7.2))


def test_beacons_lie_outside_cloud():
    space = make_space([[10, -4, 2], [-5, 8, -6], [3, 0, 1]])
    for beacon in place_beacons(AXIS_WORDS, space.words):
        axis = beacon.axis_role.axis
        values = [w.position[axis] for w in space.words]
        if beacon.axis_role.is_positive:
            assert beacon.position[axis] >= max(values)
        else:
            assert beacon.position[axis] <= min(values)


def test_one_sided_cloud_keeps_beacon_at_origin():
    """If no word reaches the negative side the x- beacon sits at 0."""
    space = make_space([[2, 1, 1], [5, 3, 2]])
    by_role = {b.axis_role: b for b in place_beacons(AXIS_WORDS, space.words)}
    assert by_role[AxisRole.X_NEG].position == (0.0, 0.0, 0.0)
    assert by_role[AxisRole.X_POS].x == pytest.approx(6.0)


def test_custom_padding():
    space = make_space([[10, 0, 0]])
    beacons = place_beacons(AXIS_WORDS, space.words, padding=2.0)
    assert beacons[1].x == pytest.approx(20.0)


def test_empty_cloud():
    beacons = place_beacons(AXIS_WORDS, [])
    assert all(b.position == (0.0, 0.0, 0.0) for b in beacons)
