"""
Space normalization: rescales raw axis coordinates so all three axes
occupy a comparable range, and records session bounds.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from word_space.errors import DataIntegrityError
import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectedWord:
    """A word placed in the session's 3D space."""
    word: str
    x: float
    y: float
    z: float
    magnitude: float  # Norm in standard-deviation units (scale independent)

    @property
    def position(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z


@dataclass(frozen=True)
class SessionBounds:
    """Axis-aligned bounding box of one session's projected words."""
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0

    @classmethod
    def from_positions(cls, positions: np.ndarray) -> "SessionBounds":
        if len(positions) == 0:
            return cls()
        mins = positions.min(axis=0)
        maxs = positions.max(axis=0)
        return cls(
            min_x=float(mins[0]), max_x=float(maxs[0]),
            min_y=float(mins[1]), max_y=float(maxs[1]),
            min_z=float(mins[2]), max_z=float(maxs[2]),
        )

    def axis_range(self, axis: int) -> tuple[float, float]:
        return (
            (self.min_x, self.max_x),
            (self.min_y, self.max_y),
            (self.min_z, self.max_z),
        )[axis]

    def fraction(self, position: Sequence[float]) -> tuple[float, float, float]:
        """
        Where a position sits inside the box, per axis, clamped to [0, 1].

        Degenerate axes (min == max) report 0.5.
        """
        out = []
        for axis in range(3):
            lo, hi = self.axis_range(axis)
            if hi == lo:
                out.append(0.5)
            else:
                out.append(min(max((position[axis] - lo) / (hi - lo), 0.0), 1.0))
        return tuple(out)


@dataclass(frozen=True)
class ProjectedSpace:
    """Normalized word positions for one session."""
    words: tuple[ProjectedWord, ...]
    positions: np.ndarray    # (n, 3) scaled positions, read-only
    magnitudes: np.ndarray   # (n,) standard-deviation-unit magnitudes, read-only
    std_devs: tuple[float, float, float]
    scale: float
    bounds: SessionBounds

    def __len__(self) -> int:
        return len(self.words)

    def to_dataframe(self) -> pd.DataFrame:
        """Projected words as a DataFrame with columns word, x, y, z, magnitude."""
        return pd.DataFrame({
            "word": [w.word for w in self.words],
            "x": self.positions[:, 0],
            "y": self.positions[:, 1],
            "z": self.positions[:, 2],
            "magnitude": self.magnitudes,
        })


def axis_std(values: np.ndarray) -> float:
    """
    Population standard deviation, two-pass in float64.

    Returns 1.0 when the spread is zero so it can be used as a divisor.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return 1.0
    mean = values.sum() / values.size
    variance = ((values - mean) ** 2).sum() / values.size
    std = float(np.sqrt(variance))
    return std or 1.0


def normalize_space(
    words: Sequence[str],
    raw_coords: np.ndarray,
    scale: float = config.WORLD_SCALE
) -> ProjectedSpace:
    """
    Normalize raw axis coordinates so each axis has similar spread, then scale.

    Args:
        words: Selected words, aligned with raw_coords rows
        raw_coords: Array of shape (n, 3) of raw cosine-difference coordinates
        scale: World-unit multiplier for final positions

    Returns:
        ProjectedSpace with positions = raw / std * scale and
        magnitudes = |raw / std|

    Raises:
        DataIntegrityError: If any input or output coordinate is not finite
    """
    raw = np.asarray(raw_coords, dtype=np.float64).reshape(-1, 3)
    if len(words) != len(raw):
        raise ValueError(f"Got {len(words)} words but {len(raw)} coordinate rows")
    if not np.all(np.isfinite(raw)):
        raise DataIntegrityError("Raw axis coordinates contain non-finite values")

    std_devs = tuple(axis_std(raw[:, axis]) for axis in range(3))
    units = raw / np.array(std_devs)
    positions = units * scale
    magnitudes = np.sqrt((units ** 2).sum(axis=1))

    if not (np.all(np.isfinite(positions)) and np.all(np.isfinite(magnitudes))):
        raise DataIntegrityError("Normalized positions contain non-finite values")

    positions.flags.writeable = False
    magnitudes.flags.writeable = False

    projected = tuple(
        ProjectedWord(
            word=word,
            x=float(pos[0]),
            y=float(pos[1]),
            z=float(pos[2]),
            magnitude=float(mag),
        )
        for word, pos, mag in zip(words, positions, magnitudes)
    )

    logger.info(
        f"Axis spread (stddev): x={std_devs[0]:.4f} y={std_devs[1]:.4f} z={std_devs[2]:.4f}"
    )

    return ProjectedSpace(
        words=projected,
        positions=positions,
        magnitudes=magnitudes,
        std_devs=std_devs,
        scale=float(scale),
        bounds=SessionBounds.from_positions(positions),
    )
