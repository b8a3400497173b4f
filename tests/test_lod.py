"""Tests for distance-based LOD and nearest-word queries."""

import numpy as np
import pytest

from word_space.core.lod import (
    LODThresholds,
    ProximityIndex,
    VisibilityBand,
    band_for_distance,
    base_opacities,
    emphasis_weights,
    opacity_for_distance,
)

from conftest import make_space

DEFAULTS = LODThresholds()


def test_default_thresholds():
    assert (DEFAULTS.inner_fade, DEFAULTS.near_distance) == (5, 15)
    assert (DEFAULTS.far_distance, DEFAULTS.cull_distance) == (150, 250)


@pytest.mark.parametrize("values", [
    (0, 15, 150, 250),
    (5, 5, 150, 250),
    (5, 15, 300, 250),
    (20, 15, 150, 250),
])
def test_thresholds_must_increase(values):
    with pytest.raises(ValueError, match="LOD thresholds"):
        LODThresholds(*values)


def test_culled_beyond_cull_distance():
    assert opacity_for_distance(300, 0.8) == 0.0
    assert band_for_distance(300) is VisibilityBand.CULLED


def test_full_opacity_in_middle_band():
    assert opacity_for_distance(100, 0.8) == 0.8
    assert opacity_for_distance(15, 0.8) == 0.8
    assert opacity_for_distance(150, 0.8) == 0.8


def test_too_close_is_see_through():
    assert opacity_for_distance(2, 0.8) < 0.5 * 0.8
    assert opacity_for_distance(2, 0.8) == pytest.approx(0.8 * (2 / 5) * 0.5)
    assert band_for_distance(2) is VisibilityBand.TOO_CLOSE


def test_band_formulas():
    assert opacity_for_distance(10, 1.0) == pytest.approx(0.75)
    assert opacity_for_distance(200, 1.0) == pytest.approx(0.5)
    assert opacity_for_distance(250, 1.0) == pytest.approx(0.0)
    assert band_for_distance(250) is VisibilityBand.FADE_OUT


def test_opacity_monotonic_per_band():
    """Opacity rises up to near, is flat until far, then falls until cull."""
    base = 0.7
    rising = [opacity_for_distance(d, base) for d in np.linspace(0, 15, 61)]
    flat = [opacity_for_distance(d, base) for d in np.linspace(15, 150, 40)]
    falling = [opacity_for_distance(d, base) for d in np.linspace(150, 250, 41)]
    assert all(a <= b + 1e-12 for a, b in zip(rising, rising[1:]))
    assert all(v == base for v in flat)
    assert all(a >= b - 1e-12 for a, b in zip(falling, falling[1:]))


def test_opacity_never_exceeds_base():
    for d in np.linspace(0, 400, 401):
        assert 0.0 <= opacity_for_distance(d, 0.6) <= 0.6


def test_custom_thresholds():
    t = LODThresholds(inner_fade=1, near_distance=2, far_distance=3, cull_distance=4)
    assert opacity_for_distance(3.5, 1.0, t) == pytest.approx(0.5)
    assert opacity_for_distance(5, 1.0, t) == 0.0


def test_emphasis_small_session_uses_max():
    weights = emphasis_weights(np.array([1.0, 2.0, 4.0]))
    np.testing.assert_allclose(weights, [0.25, 0.5, 1.0])


def test_emphasis_large_session_uses_percentile():
    magnitudes = np.arange(200, dtype=np.float64)
    weights = emphasis_weights(magnitudes)
    # Descending rank 20 of 0..199 is 179
    assert weights[179] == 1.0
    assert weights[199] == 1.0
    assert weights[100] == pytest.approx(100 / 179)
    assert np.all((weights >= 0) & (weights <= 1))


def test_emphasis_edge_cases():
    assert emphasis_weights(np.array([])).shape == (0,)
    np.testing.assert_array_equal(emphasis_weights(np.zeros(4)), np.zeros(4))


def test_base_opacity_range():
    opacities = base_opacities(np.array([0.0, 1.0, 2.0]))
    np.testing.assert_allclose(opacities, [0.35, 0.35 + 0.55 * 0.5, 0.9])


@pytest.fixture
def line_space():
    """Words strung along x at distances 0..300 from the origin."""
    xs = [0, 2, 5, 10, 15, 100, 150, 200, 250, 251, 300]
    return make_space([[x, 0, 0] for x in xs], magnitudes=np.linspace(0.1, 1.0, len(xs)))


def test_update_matches_scalar_rule(line_space):
    index = ProximityIndex(line_space)
    frame = index.update((0, 0, 0))
    for i, (x, _, _) in enumerate(line_space.positions):
        assert frame.distances[i] == pytest.approx(x)
        assert frame.opacities[i] == pytest.approx(
            opacity_for_distance(x, index.base_opacity[i])
        )
        assert frame.bands[i] == band_for_distance(x)
    assert frame.n_visible == 9
    assert frame.visible.tolist() == [True] * 9 + [False, False]
    assert frame.position == (0.0, 0.0, 0.0)


def test_update_from_another_position(line_space):
    index = ProximityIndex(line_space)
    frame = index.update((300, 0, 0))
    assert frame.opacities[-1] == 0.0  # distance 0
    assert not frame.visible[0]


def test_nearest_sorted_and_bounded():
    rng = np.random.default_rng(3)
    space = make_space(rng.uniform(-100, 100, size=(400, 3)))
    index = ProximityIndex(space)
    position = (10.0, -5.0, 3.0)

    nearby = index.nearest(position, k=5)
    assert len(nearby) == 5
    distances = [w.distance for w in nearby]
    assert distances == sorted(distances)

    expected = np.argsort(np.linalg.norm(space.positions - np.array(position), axis=1))[:5]
    assert [w.index for w in nearby] == expected.tolist()
    assert [w.word for w in nearby] == [space.words[i].word for i in expected]


def test_nearest_tie_break_by_index():
    space = make_space([[0, 0, 10], [10, 0, 0], [0, 10, 0], [0, 0, 1]])
    nearby = ProximityIndex(space).nearest((0, 0, 0), k=3)
    assert [w.index for w in nearby] == [3, 0, 1]


def test_nearest_only_visible_words():
    space = make_space([[0, 0, 300], [0, 0, 400]])
    assert ProximityIndex(space).nearest((0, 0, 0), k=5) == []


def test_nearest_fewer_than_k():
    space = make_space([[1, 0, 0], [2, 0, 0], [900, 0, 0]])
    nearby = ProximityIndex(space).nearest((0, 0, 0), k=5)
    assert [w.index for w in nearby] == [0, 1]


def test_nearest_degenerate_inputs():
    space = make_space([[1, 0, 0]])
    assert ProximityIndex(space).nearest((0, 0, 0), k=0) == []
    empty = make_space(np.zeros((0, 3)))
    index = ProximityIndex(empty)
    assert len(index) == 0
    assert index.nearest((0, 0, 0)) == []
    assert index.update((0, 0, 0)).n_visible == 0
