"""
Vocabulary lookup embedder.
Reuses the precomputed vocabulary rows for axis words, so no model is
needed at session time.
"""

import numpy as np

from word_space.core.vector_store import VectorStore
from word_space.errors import AxisValidationError
from .base import BaseEmbedder, register_embedder


@register_embedder("vocabulary")
class VocabularyEmbedder(BaseEmbedder):
    """
    Embeds axis words by looking them up in the loaded vocabulary.

    Only words present in the vocabulary can be used as axes.
    """

    def __init__(self, store: VectorStore):
        """
        Args:
            store: Loaded vocabulary embeddings
        """
        self.store = store

    @property
    def name(self) -> str:
        return "vocabulary"

    @property
    def dimension(self) -> int:
        return self.store.dims

    def embed(self, words: list[str]) -> np.ndarray:
        """
        Look up each word's row.

        Raises:
            AxisValidationError: If a word is not in the vocabulary
        """
        if not words:
            return np.array([], dtype=np.float32).reshape(0, self.dimension)

        unknown = [w for w in words if w not in self.store]
        if unknown:
            raise AxisValidationError(
                f"Not in vocabulary: {', '.join(unknown)}. "
                "Pick other words or use a model-backed embedder."
            )

        rows = np.stack([self.store.row(self.store.index_of(w)) for w in words])
        return self.normalize(rows.astype(np.float32))
