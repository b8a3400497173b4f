"""
Word-space sessions: one explicit context per launched axis set.

build_session() runs the whole projection pipeline synchronously:
    select -> project -> normalize -> beacons -> proximity index
SessionManager owns the current session and replaces it wholesale on
every launch.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Union

from word_space.core.axes import AxisSet, AxisWords
from word_space.core.beacons import Beacon, place_beacons
from word_space.core.lod import LODThresholds, ProximityIndex
from word_space.core.normalizer import ProjectedSpace, SessionBounds, normalize_space
from word_space.core.projector import AxisProjector
from word_space.core.selector import Selection, select_words_for_axes
from word_space.core.vector_store import VectorStore
import config

if TYPE_CHECKING:
    from word_space.embedders.base import BaseEmbedder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordSpaceSession:
    """Everything derived from one axis set. Read-only once built."""
    axis_words: AxisWords
    selection: Selection
    space: ProjectedSpace
    beacons: tuple[Beacon, ...]
    index: ProximityIndex
    generation: int = 0

    @property
    def bounds(self) -> SessionBounds:
        return self.space.bounds

    @property
    def projected_words(self):
        return self.space.words

    def beacon_for(self, role) -> Beacon:
        for beacon in self.beacons:
            if beacon.axis_role == role:
                return beacon
        raise KeyError(role)


def build_session(
    store: VectorStore,
    axis_words: AxisWords,
    axis_set: AxisSet,
    top_k: int = config.DEFAULT_TOP_K,
    scale: float = config.WORLD_SCALE,
    thresholds: LODThresholds = LODThresholds(),
    observer: Optional[Callable[[str], None]] = None,
    generation: int = 0
) -> WordSpaceSession:
    """
    Run the projection pipeline for one axis set.

    Args:
        store: Vocabulary embeddings
        axis_words: The six literal words (excluded from selection, beacon labels)
        axis_set: Their embeddings
        top_k: Maximum number of words to place
        scale: World-unit scale for positions
        thresholds: LOD thresholds for the proximity index
        observer: Optional callable(message: str) for progress updates
        generation: Launch number stamped on the session

    Returns:
        A complete WordSpaceSession

    Raises:
        DataIntegrityError: If the axis vectors don't fit the vocabulary
    """
    def log(msg: str):
        if observer:
            observer(msg)
        logger.info(msg)

    axis_set.check_dims(store.dims)

    log("Selecting words for your axes...")
    selection = select_words_for_axes(
        store, axis_set, axis_words.as_set(), top_k=top_k, observer=observer
    )

    log("Building your word space...")
    t0 = time.perf_counter()
    indices = selection.indices
    raw = AxisProjector(axis_set).project_rows(
        store.vectors[indices], store.row_norms[indices]
    )
    space = normalize_space([store.word(int(i)) for i in indices], raw, scale=scale)
    beacons = tuple(place_beacons(axis_words, space.words))
    index = ProximityIndex(space, thresholds)

    b = space.bounds
    log(f"Projected {len(space)} words into 3D space in {(time.perf_counter() - t0) * 1000:.1f}ms")
    logger.debug(
        f"Position ranges: x=[{b.min_x:.1f}, {b.max_x:.1f}] "
        f"y=[{b.min_y:.1f}, {b.max_y:.1f}] z=[{b.min_z:.1f}, {b.max_z:.1f}]"
    )

    return WordSpaceSession(
        axis_words=axis_words,
        selection=selection,
        space=space,
        beacons=beacons,
        index=index,
        generation=generation,
    )


class SessionManager:
    """
    Owns the active word-space session.

    Each launch gets a new generation number. A launch that finishes after
    a newer one has started is discarded and never becomes current; there
    is no reuse between axis sets.
    """

    def __init__(
        self,
        store: VectorStore,
        embedder: "BaseEmbedder",
        top_k: int = config.DEFAULT_TOP_K,
        scale: float = config.WORLD_SCALE,
        thresholds: LODThresholds = LODThresholds()
    ):
        """
        Initialize the manager.

        Args:
            store: Vocabulary embeddings
            embedder: Backend used to embed the six axis words
            top_k: Maximum number of words per session
            scale: World-unit scale for positions
            thresholds: LOD thresholds
        """
        self.store = store
        self.embedder = embedder
        self.top_k = top_k
        self.scale = scale
        self.thresholds = thresholds

        self._lock = threading.Lock()
        self._generation = 0
        self._current: Optional[WordSpaceSession] = None

    @property
    def current(self) -> Optional[WordSpaceSession]:
        """The active session, or None before the first launch."""
        return self._current

    @property
    def generation(self) -> int:
        return self._generation

    def reset(self) -> None:
        """Drop the active session and invalidate any launch in flight."""
        with self._lock:
            self._generation += 1
            self._current = None

    def launch(
        self,
        words: Union[AxisWords, Mapping],
        progress_callback: Optional[Callable[[str], None]] = None,
        top_k: Optional[int] = None
    ) -> Optional[WordSpaceSession]:
        """
        Validate, embed and project a new axis set.

        Args:
            words: AxisWords or a role -> word mapping
            progress_callback: Optional callable(message: str) for progress updates
            top_k: Word cap for this launch only (defaults to the manager's)

        Returns:
            The new session, or None if a newer launch superseded this one

        Raises:
            AxisValidationError: If the words are missing/empty (before any embedding)
            DataIntegrityError: If the embeddings are unusable
        """
        axis_words = words if isinstance(words, AxisWords) else AxisWords.from_mapping(words)

        with self._lock:
            self._generation += 1
            generation = self._generation

        def log(msg: str):
            if progress_callback:
                progress_callback(msg)
            logger.info(msg)

        log("Embedding your axis words...")
        vectors = self.embedder.embed(axis_words.as_list())
        axis_set = AxisSet.from_vectors(axis_words, vectors)

        if self._superseded(generation):
            logger.info(f"Launch {generation} superseded before projection; discarding")
            return None

        session = build_session(
            self.store,
            axis_words,
            axis_set,
            top_k=self.top_k if top_k is None else top_k,
            scale=self.scale,
            thresholds=self.thresholds,
            observer=progress_callback,
            generation=generation,
        )

        with self._lock:
            if generation != self._generation:
                logger.info(f"Launch {generation} superseded; discarding result")
                return None
            self._current = session
        return session

    def _superseded(self, generation: int) -> bool:
        with self._lock:
            return generation != self._generation
