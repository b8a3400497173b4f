"""
Relevance selection: ranks the vocabulary by how strongly each word
aligns with the chosen axes and keeps a bounded top-K working set.
"""

import logging
import re
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import numpy as np

from word_space.core.axes import AxisSet
from word_space.core.projector import AxisProjector
from word_space.core.vector_store import VectorStore
import config

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(config.WORD_PATTERN)

# Score for filtered words; never selected since real magnitudes are >= 0
EXCLUDED_SCORE = -1.0


def is_quality_word(word: str) -> bool:
    """
    Quick quality check: 3-15 lowercase ASCII letters.

    Filters out proper nouns, abbreviations, hyphenated tokens,
    numbers, and very short/long words.
    """
    return _WORD_RE.fullmatch(word) is not None


def eligibility_mask(words: Iterable[str], excluded_words: Iterable[str]) -> np.ndarray:
    """
    Boolean mask of words that pass the quality filter and are not axis words.
    """
    excluded = set(excluded_words)
    return np.array(
        [word not in excluded and is_quality_word(word) for word in words],
        dtype=bool,
    )


@dataclass(frozen=True)
class Selection:
    """Result of one selection run."""
    indices: np.ndarray        # Vocabulary indices, descending relevance
    magnitudes: np.ndarray     # Relevance for every vocabulary word (EXCLUDED_SCORE if filtered)
    eligible_count: int
    vocabulary_size: int
    top_k: int

    def __len__(self) -> int:
        return len(self.indices)

    @property
    def selected_magnitudes(self) -> np.ndarray:
        """Relevance magnitudes of the selected words, in selection order."""
        return self.magnitudes[self.indices]

    @property
    def is_degenerate(self) -> bool:
        """True when fewer than top_k words passed the filter."""
        return self.eligible_count < self.top_k

    @property
    def filtered_count(self) -> int:
        return self.vocabulary_size - self.eligible_count


def score_vocabulary(
    store: VectorStore,
    axis_set: AxisSet,
    excluded_words: Iterable[str]
) -> tuple[np.ndarray, np.ndarray]:
    """
    Relevance magnitude of every vocabulary word.

    Relevance is the Euclidean norm of the raw axis-projected coordinate.
    Words failing the quality filter, or equal to an axis word, score
    EXCLUDED_SCORE regardless of their geometry.

    Args:
        store: Vocabulary embeddings
        axis_set: Six axis vectors (same dims as the store)
        excluded_words: Literal axis words

    Returns:
        Tuple of (magnitudes of shape (N,), eligibility mask of shape (N,))
    """
    axis_set.check_dims(store.dims)

    eligible = eligibility_mask(store.words, excluded_words)
    coords = AxisProjector(axis_set).project_rows(store.vectors, store.row_norms)

    magnitudes = np.sqrt(np.einsum("ij,ij->i", coords, coords))
    magnitudes[~eligible] = EXCLUDED_SCORE
    return magnitudes, eligible


def select_words_for_axes(
    store: VectorStore,
    axis_set: AxisSet,
    excluded_words: Iterable[str],
    top_k: int = config.DEFAULT_TOP_K,
    observer: Optional[Callable[[str], None]] = None
) -> Selection:
    """
    Select the words most relevant to a set of axes.

    Every eligible word gets a relevance magnitude; the top_k largest are
    returned, so different axis choices surface different words. Ties are
    broken by ascending vocabulary index.

    Args:
        store: Vocabulary embeddings
        axis_set: Six axis vectors
        excluded_words: Literal axis words to exclude
        top_k: Maximum number of words to keep
        observer: Optional callable(message: str) for progress reports

    Returns:
        Selection with exactly min(top_k, eligible_count) indices
    """
    if isinstance(top_k, bool) or not isinstance(top_k, (int, np.integer)) or top_k <= 0:
        raise ValueError(f"top_k must be a positive integer, got {top_k!r}")

    def log(msg: str):
        if observer:
            observer(msg)
        logger.info(msg)

    t0 = time.perf_counter()
    magnitudes, eligible = score_vocabulary(store, axis_set, excluded_words)
    eligible_count = int(eligible.sum())
    log(f"Quality filter: kept {eligible_count} of {len(store)} words")

    # Stable sort on negated scores keeps equal magnitudes in index order
    order = np.argsort(-magnitudes, kind="stable")
    n_selected = min(int(top_k), eligible_count)
    indices = order[:n_selected].astype(np.int64)

    elapsed_ms = (time.perf_counter() - t0) * 1000
    log(f"Selected {n_selected} words in {elapsed_ms:.1f}ms")

    if eligible_count < top_k:
        msg = f"Only {eligible_count} words passed the quality filter (top_k={top_k})"
        if observer:
            observer(msg)
        logger.warning(msg)

    magnitudes.flags.writeable = False
    indices.flags.writeable = False
    return Selection(
        indices=indices,
        magnitudes=magnitudes,
        eligible_count=eligible_count,
        vocabulary_size=len(store),
        top_k=int(top_k),
    )
