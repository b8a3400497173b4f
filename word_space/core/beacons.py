"""
Beacon placement: six labelled landmarks just beyond the word cloud.
"""

from dataclasses import dataclass
from typing import Iterable

from word_space.core.axes import ROLE_ORDER, AxisRole, AxisWords
from word_space.core.normalizer import ProjectedWord
import config


@dataclass(frozen=True)
class Beacon:
    """Landmark for one axis endpoint."""
    word: str
    x: float
    y: float
    z: float
    axis_role: AxisRole

    @property
    def position(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z


def place_beacons(
    axis_words: AxisWords,
    projected_words: Iterable[ProjectedWord],
    padding: float = config.BEACON_PADDING
) -> list[Beacon]:
    """
    Place beacons based on the actual extent of the projected words.

    Extrema start at 0, so a side the cloud never reaches keeps its beacon
    at the origin on that axis.

    Args:
        axis_words: The six axis words (beacon labels)
        projected_words: Normalized words of the session
        padding: Multiplier applied to each extremum

    Returns:
        Six beacons in front-end order: x-, x+, y+, y-, z+, z-
    """
    lows = [0.0, 0.0, 0.0]
    highs = [0.0, 0.0, 0.0]
    for w in projected_words:
        for axis, value in enumerate(w.position):
            if value > highs[axis]:
                highs[axis] = value
            if value < lows[axis]:
                lows[axis] = value

    beacons = []
    for role in ROLE_ORDER:
        coords = [0.0, 0.0, 0.0]
        extreme = highs[role.axis] if role.is_positive else lows[role.axis]
        coords[role.axis] = extreme * padding
        beacons.append(Beacon(
            word=axis_words.for_role(role),
            x=coords[0],
            y=coords[1],
            z=coords[2],
            axis_role=role,
        ))
    return beacons
