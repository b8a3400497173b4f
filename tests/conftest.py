"""Shared fixtures for word-space tests."""

import string

import numpy as np
import pytest

from word_space.core.axes import AxisSet, AxisWords
from word_space.core.normalizer import ProjectedSpace, ProjectedWord, SessionBounds
from word_space.core.vector_store import VectorStore

JUNK_WORDS = ["ok", "don't", "PARIS", "abc123", "well-known", "extraordinarilylong"]


def synthetic_word(i: int) -> str:
    """Unique lowercase-alpha word for index i."""
    letters = []
    i += 1
    while i:
        i, rem = divmod(i - 1, 26)
        letters.append(string.ascii_lowercase[rem])
    return "wrd" + "".join(reversed(letters))


def make_space(points, words=None, magnitudes=None) -> ProjectedSpace:
    """ProjectedSpace with positions given directly (no normalization)."""
    positions = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    if words is None:
        words = [synthetic_word(i) for i in range(len(positions))]
    if magnitudes is None:
        magnitudes = np.linalg.norm(positions, axis=1)
    return ProjectedSpace(
        words=tuple(
            ProjectedWord(word=w, x=float(p[0]), y=float(p[1]), z=float(p[2]), magnitude=float(m))
            for w, p, m in zip(words, positions, magnitudes)
        ),
        positions=positions,
        magnitudes=np.asarray(magnitudes, dtype=np.float64),
        std_devs=(1.0, 1.0, 1.0),
        scale=1.0,
        bounds=SessionBounds.from_positions(positions),
    )


@pytest.fixture
def toy_store():
    """The five-word 2D vocabulary used for end-to-end checks."""
    words = ["love", "hate", "big", "small", "cat"]
    vectors = np.array([
        [1.0, 1.0],    # love
        [1.0, -1.0],   # hate
        [1.0, 0.0],    # big
        [0.0, 1.0],    # small
        [0.9, 0.3],    # cat (closer to big)
    ], dtype=np.float32)
    return VectorStore(words, vectors)


@pytest.fixture
def toy_axis_words():
    """big/small on x; y and z are neutral (same word on both ends)."""
    return AxisWords.from_mapping({
        "x+": "big",
        "x-": "small",
        "y+": "love",
        "y-": "love",
        "z+": "hate",
        "z-": "hate",
    })


@pytest.fixture(scope="session")
def random_store():
    """Deterministic 600-word, 16-dim vocabulary plus some junk tokens."""
    rng = np.random.default_rng(42)
    words = [synthetic_word(i) for i in range(600)] + JUNK_WORDS
    vectors = rng.normal(size=(len(words), 16)).astype(np.float32)
    return VectorStore(words, vectors)


@pytest.fixture(scope="session")
def random_axis_words():
    return AxisWords.from_mapping({
        "x+": synthetic_word(0),
        "x-": synthetic_word(1),
        "y+": synthetic_word(2),
        "y-": synthetic_word(3),
        "z+": synthetic_word(4),
        "z-": synthetic_word(5),
    })


@pytest.fixture(scope="session")
def random_axis_set(random_store, random_axis_words):
    vectors = [random_store.row(random_store.index_of(w)) for w in random_axis_words.as_list()]
    return AxisSet.from_vectors(random_axis_words, vectors)
