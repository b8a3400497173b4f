"""
Proximity/LOD index: distance-based visibility and nearest-word queries
against one session's projected words.

Words fade in as the viewer approaches and fade out as it moves away.
Very close words also get slightly transparent so the viewer can see
through the cluster.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

import numpy as np

from word_space.core.normalizer import ProjectedSpace
import config


class VisibilityBand(IntEnum):
    TOO_CLOSE = 0   # d < inner_fade
    FADE_IN = 1     # inner_fade <= d < near
    FULL = 2        # near <= d <= far
    FADE_OUT = 3    # far < d <= cull
    CULLED = 4      # d > cull


@dataclass(frozen=True)
class LODThresholds:
    """Distance thresholds in world units; must be strictly increasing."""
    inner_fade: float = config.LOD_INNER_FADE
    near_distance: float = config.LOD_NEAR_DISTANCE
    far_distance: float = config.LOD_FAR_DISTANCE
    cull_distance: float = config.LOD_CULL_DISTANCE

    def __post_init__(self):
        if not 0 < self.inner_fade < self.near_distance < self.far_distance < self.cull_distance:
            raise ValueError(
                "LOD thresholds must satisfy 0 < inner_fade < near_distance "
                f"< far_distance < cull_distance, got {self}"
            )


@dataclass(frozen=True)
class NearbyWord:
    word: str
    distance: float
    index: int


@dataclass(frozen=True)
class VisibilityFrame:
    """
    Result of one LOD pass.

    The arrays are the index's reusable buffers and are overwritten by the
    next update(); copy them to keep a frame around.
    """
    position: tuple[float, float, float]
    distances: np.ndarray
    bands: np.ndarray
    opacities: np.ndarray
    visible: np.ndarray

    @property
    def n_visible(self) -> int:
        return int(np.count_nonzero(self.visible))


def band_for_distance(distance: float, thresholds: LODThresholds = LODThresholds()) -> VisibilityBand:
    """Classify a single distance."""
    t = thresholds
    if distance > t.cull_distance:
        return VisibilityBand.CULLED
    if distance > t.far_distance:
        return VisibilityBand.FADE_OUT
    if distance < t.inner_fade:
        return VisibilityBand.TOO_CLOSE
    if distance < t.near_distance:
        return VisibilityBand.FADE_IN
    return VisibilityBand.FULL


def opacity_for_distance(
    distance: float,
    base_opacity: float,
    thresholds: LODThresholds = LODThresholds()
) -> float:
    """
    Opacity of a word at a given distance from the viewer.

    Args:
        distance: Euclidean distance from the viewer
        base_opacity: The word's opacity in the fully visible band
        thresholds: LOD thresholds

    Returns:
        Opacity in [0, base_opacity]; 0 when culled
    """
    t = thresholds
    band = band_for_distance(distance, t)
    if band is VisibilityBand.CULLED:
        return 0.0
    if band is VisibilityBand.FADE_OUT:
        fade = 1 - (distance - t.far_distance) / (t.cull_distance - t.far_distance)
        return base_opacity * fade
    if band is VisibilityBand.TOO_CLOSE:
        return base_opacity * (distance / t.inner_fade) * 0.5
    if band is VisibilityBand.FADE_IN:
        fade = (distance - t.inner_fade) / (t.near_distance - t.inner_fade)
        return base_opacity * (0.5 + fade * 0.5)
    return base_opacity


def emphasis_weights(magnitudes: np.ndarray) -> np.ndarray:
    """
    Visual emphasis in [0, 1] for each word, from its magnitude.

    Magnitudes are divided by the 90th-percentile magnitude (the one at rank
    floor(0.1 * n) in descending order) once there are more than 100 words,
    otherwise by the maximum, and clipped at 1.
    """
    magnitudes = np.asarray(magnitudes, dtype=np.float64)
    n = len(magnitudes)
    if n == 0:
        return np.zeros(0, dtype=np.float64)

    ranked = np.sort(magnitudes)[::-1]
    reference = ranked[0]
    if n > config.EMPHASIS_PERCENTILE_MIN_WORDS:
        reference = ranked[int(n * 0.1)]
    if reference <= 0:
        return np.zeros(n, dtype=np.float64)
    return np.minimum(magnitudes / reference, 1.0)


def base_opacities(magnitudes: np.ndarray) -> np.ndarray:
    """Opacity of each word in the fully visible band."""
    return config.BASE_OPACITY_MIN + config.BASE_OPACITY_SPAN * emphasis_weights(magnitudes)


class ProximityIndex:
    """
    Answers per-frame visibility and nearby-word queries for one session.

    A full linear scan per query; at a few thousand words this is well under
    a millisecond. The index is built once per session and never updated
    incrementally. All per-frame work writes into buffers allocated here.
    """

    def __init__(
        self,
        space: ProjectedSpace,
        thresholds: LODThresholds = LODThresholds()
    ):
        """
        Build the index.

        Args:
            space: Normalized words of the session
            thresholds: LOD distance thresholds
        """
        self.thresholds = thresholds
        self._words = [w.word for w in space.words]
        self._positions = np.asarray(space.positions, dtype=np.float64).reshape(-1, 3)
        self.emphasis = emphasis_weights(space.magnitudes)
        self.base_opacity = config.BASE_OPACITY_MIN + config.BASE_OPACITY_SPAN * self.emphasis

        n = len(self._words)
        self._delta = np.empty((n, 3), dtype=np.float64)
        self._distances = np.empty(n, dtype=np.float64)
        self._scratch = np.empty(n, dtype=np.float64)
        self._mask = np.empty(n, dtype=bool)
        self._bands = np.empty(n, dtype=np.int8)
        self._opacities = np.empty(n, dtype=np.float64)
        self._visible = np.zeros(n, dtype=bool)

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> list[str]:
        return list(self._words)

    def _distances_to(self, position: Sequence[float], out: np.ndarray) -> np.ndarray:
        point = np.asarray(position, dtype=np.float64).reshape(3)
        np.subtract(self._positions, point, out=self._delta)
        np.multiply(self._delta, self._delta, out=self._delta)
        np.sum(self._delta, axis=1, out=out)
        np.sqrt(out, out=out)
        return out

    def update(self, position: Sequence[float]) -> VisibilityFrame:
        """
        Classify every word against a viewer position.

        Args:
            position: Viewer (x, y, z) snapshot

        Returns:
            VisibilityFrame with distances, bands, opacities and visibility
        """
        t = self.thresholds
        dist = self._distances_to(position, self._distances)
        tmp = self._scratch
        mask = self._mask
        bands = self._bands
        opac = self._opacities
        base = self.base_opacity

        bands.fill(VisibilityBand.FULL)
        np.copyto(opac, base)

        # Fade out with distance
        np.greater(dist, t.far_distance, out=mask)
        np.subtract(dist, t.far_distance, out=tmp)
        np.divide(tmp, t.cull_distance - t.far_distance, out=tmp)
        np.subtract(1.0, tmp, out=tmp)
        np.multiply(base, tmp, out=opac, where=mask)
        np.copyto(bands, VisibilityBand.FADE_OUT, where=mask)

        # Culled
        np.greater(dist, t.cull_distance, out=mask)
        np.copyto(opac, 0.0, where=mask)
        np.copyto(bands, VisibilityBand.CULLED, where=mask)
        np.logical_not(mask, out=self._visible)

        # Fading in as the viewer approaches
        np.less(dist, t.near_distance, out=mask)
        np.subtract(dist, t.inner_fade, out=tmp)
        np.divide(tmp, t.near_distance - t.inner_fade, out=tmp)
        np.multiply(tmp, 0.5, out=tmp)
        np.add(tmp, 0.5, out=tmp)
        np.multiply(base, tmp, out=opac, where=mask)
        np.copyto(bands, VisibilityBand.FADE_IN, where=mask)

        # Too close: fade so the viewer can see through
        np.less(dist, t.inner_fade, out=mask)
        np.divide(dist, t.inner_fade, out=tmp)
        np.multiply(tmp, 0.5, out=tmp)
        np.multiply(base, tmp, out=opac, where=mask)
        np.copyto(bands, VisibilityBand.TOO_CLOSE, where=mask)

        point = np.asarray(position, dtype=np.float64).reshape(3)
        return VisibilityFrame(
            position=(float(point[0]), float(point[1]), float(point[2])),
            distances=dist,
            bands=bands,
            opacities=opac,
            visible=self._visible,
        )

    def nearest(self, position: Sequence[float], k: int = config.NEARBY_COUNT) -> list[NearbyWord]:
        """
        Find the k nearest visible words to a position.

        Visibility is judged from the same position (within cull distance).

        Args:
            position: Query (x, y, z)
            k: Number of words to return

        Returns:
            Up to k NearbyWord entries, ascending by distance (ties by index)
        """
        if k <= 0 or not self._words:
            return []

        dist = self._distances_to(position, np.empty(len(self._words), dtype=np.float64))
        candidates = np.flatnonzero(dist <= self.thresholds.cull_distance)
        if len(candidates) == 0:
            return []

        if len(candidates) > k:
            cand_dist = dist[candidates]
            # Keep everything tied with the k-th distance so the final
            # (distance, index) ordering is exact
            kth = np.partition(cand_dist, k - 1)[k - 1]
            candidates = candidates[cand_dist <= kth]

        order = np.lexsort((candidates, dist[candidates]))[:k]
        return [
            NearbyWord(
                word=self._words[idx],
                distance=float(dist[idx]),
                index=int(idx),
            )
            for idx in candidates[order]
        ]
