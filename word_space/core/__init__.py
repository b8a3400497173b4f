"""
Core components for Word Space.
"""

from .vector_store import VectorStore, cosine_similarity
from .axes import AxisRole, AxisSet, AxisWords, ROLE_ORDER
from .projector import AxisProjector
from .selector import Selection, is_quality_word, select_words_for_axes
from .normalizer import ProjectedSpace, ProjectedWord, SessionBounds, normalize_space
from .beacons import Beacon, place_beacons
from .lod import LODThresholds, NearbyWord, ProximityIndex, VisibilityBand, opacity_for_distance
from .session import SessionManager, WordSpaceSession, build_session

__all__ = [
    "VectorStore",
    "cosine_similarity",
    "AxisRole",
    "AxisSet",
    "AxisWords",
    "ROLE_ORDER",
    "AxisProjector",
    "Selection",
    "is_quality_word",
    "select_words_for_axes",
    "ProjectedSpace",
    "ProjectedWord",
    "SessionBounds",
    "normalize_space",
    "Beacon",
    "place_beacons",
    "LODThresholds",
    "NearbyWord",
    "ProximityIndex",
    "VisibilityBand",
    "opacity_for_distance",
    "SessionManager",
    "WordSpaceSession",
    "build_session",
]
