"""
VectorStore: Read-only holder of the vocabulary embedding matrix.
Provides zero-copy row access and cosine similarity.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from word_space.errors import DataIntegrityError

logger = logging.getLogger(__name__)


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """
    Cosine similarity between two vectors.

    Args:
        a: Vector of shape (dim,)
        b: Vector of shape (dim,)

    Returns:
        dot(a, b) / (|a| * |b|), or 0.0 if either magnitude is zero
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    mag_a = np.sqrt(np.dot(a, a))
    mag_b = np.sqrt(np.dot(b, b))
    if mag_a == 0 or mag_b == 0:
        return 0.0
    return float(np.dot(a, b) / (mag_a * mag_b))


class VectorStore:
    """
    Flat N x D embedding matrix keyed by an ordered vocabulary.

    The store owns a single contiguous float32 buffer. Row access returns
    read-only views into it; nothing is copied and nothing is ever written
    after construction.
    """

    def __init__(
        self,
        words: Sequence[str],
        buffer: np.ndarray,
        dims: Optional[int] = None
    ):
        """
        Initialize the store from a flat buffer.

        Args:
            words: Vocabulary in frequency-rank order (row i = words[i])
            buffer: Flat or (N, D) float32 array with exactly N * D values
            dims: Explicit dimensionality, if known (checked against the buffer)

        Raises:
            DataIntegrityError: If the buffer does not hold exactly N rows of
                finite values
        """
        words = list(words)
        if not words:
            raise DataIntegrityError("Vocabulary is empty")

        flat = np.ascontiguousarray(buffer, dtype=np.float32).reshape(-1)
        n_words = len(words)

        if flat.size % n_words != 0:
            raise DataIntegrityError(
                f"Dimension mismatch: {flat.size} floats / {n_words} words = "
                f"{flat.size / n_words} (not an integer). "
                "The vocabulary and embedding files may be out of sync."
            )
        derived_dims = flat.size // n_words
        if derived_dims == 0:
            raise DataIntegrityError("Embedding buffer is empty")
        if dims is not None and dims != derived_dims:
            raise DataIntegrityError(
                f"Declared dimensionality {dims} does not match buffer "
                f"({flat.size} floats / {n_words} words = {derived_dims})"
            )
        finite = np.isfinite(flat)
        if not finite.all():
            first = int(np.flatnonzero(~finite)[0]) // derived_dims
            raise DataIntegrityError(
                "Embedding buffer contains non-finite values "
                f"(first in row {first}, word {words[first]!r})"
            )

        self._words = words
        self._word_to_idx: dict[str, int] = {}
        for idx, word in enumerate(words):
            if word in self._word_to_idx:
                raise DataIntegrityError(f"Duplicate vocabulary word: {word!r}")
            self._word_to_idx[word] = idx

        self._vectors = flat.reshape(n_words, derived_dims)
        self._vectors.flags.writeable = False
        self._dims = derived_dims
        self._row_norms: Optional[np.ndarray] = None

        logger.info(f"Loaded vocabulary: {n_words} words, {derived_dims} dimensions")

    @classmethod
    def from_buffer(
        cls,
        words: Sequence[str],
        buffer: bytes,
        dims: Optional[int] = None
    ) -> "VectorStore":
        """
        Build a store from raw little-endian float32 bytes.

        Raises:
            DataIntegrityError: If the byte length is not a whole number of floats
        """
        if len(buffer) % 4 != 0:
            raise DataIntegrityError(
                f"Embedding buffer has {len(buffer)} bytes, not a multiple of 4"
            )
        return cls(words, np.frombuffer(buffer, dtype="<f4"), dims=dims)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def words(self) -> list[str]:
        """Vocabulary words (copy)."""
        return list(self._words)

    @property
    def vectors(self) -> np.ndarray:
        """Read-only (N, D) view of the embedding matrix."""
        return self._vectors

    @property
    def dims(self) -> int:
        """Embedding dimensionality D."""
        return self._dims

    @property
    def n_words(self) -> int:
        """Number of vocabulary words N."""
        return len(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._word_to_idx

    def word(self, index: int) -> str:
        """Word at a vocabulary index."""
        return self._words[index]

    def index_of(self, word: str) -> int:
        """
        Get the vocabulary index of a word.

        Raises:
            KeyError: If the word is not in the vocabulary
        """
        return self._word_to_idx[word]

    def row(self, index: int) -> np.ndarray:
        """
        Get the embedding of one word without copying.

        Args:
            index: Vocabulary index

        Returns:
            Read-only view of shape (D,) into the backing buffer
        """
        if not 0 <= index < len(self._words):
            raise IndexError(f"Word index out of range: {index}")
        return self._vectors[index]

    # -------------------------------------------------------------------------
    # Similarity
    # -------------------------------------------------------------------------

    @property
    def row_norms(self) -> np.ndarray:
        """L2 norm of every row (computed once, float64)."""
        if self._row_norms is None:
            norms = np.linalg.norm(self._vectors, axis=1).astype(np.float64)
            norms.flags.writeable = False
            self._row_norms = norms
        return self._row_norms

    def similarities(self, vector: np.ndarray) -> np.ndarray:
        """
        Cosine similarity of every vocabulary row against one vector.

        Rows with zero magnitude (or a zero query) score 0.

        Args:
            vector: Array of shape (D,)

        Returns:
            Array of shape (N,) in float64
        """
        vector = np.asarray(vector, dtype=np.float32)
        if vector.shape != (self._dims,):
            raise DataIntegrityError(
                f"Vector has shape {vector.shape}, expected ({self._dims},)"
            )
        query_norm = float(np.linalg.norm(vector.astype(np.float64)))
        if query_norm == 0:
            return np.zeros(len(self._words), dtype=np.float64)

        dots = (self._vectors @ vector).astype(np.float64)
        norms = self.row_norms
        out = np.zeros_like(dots)
        nonzero = norms > 0
        out[nonzero] = dots[nonzero] / (norms[nonzero] * query_norm)
        return out

    def cosine_similarity(self, a: np.ndarray, b: np.ndarray) -> float:
        """Cosine similarity between two vectors (rows or dense)."""
        return cosine_similarity(a, b)
