"""
Base class for axis-word embedding backends.
Defines the interface all embedders must implement.
"""

from abc import ABC, abstractmethod

import numpy as np


class BaseEmbedder(ABC):
    """
    Abstract base class for word embedding backends.

    All embedders must:
    - Accept a list of words and return normalized embeddings
    - Report their embedding dimension
    - Provide a unique name (shown in the UI and logs)

    The vectors must live in the same space as the vocabulary matrix,
    i.e. come from the model that produced embeddings.bin.
    """

    @abstractmethod
    def embed(self, words: list[str]) -> np.ndarray:
        """
        Embed a list of words into vectors.

        Args:
            words: List of words to embed

        Returns:
            np.ndarray of shape (len(words), dimension) with L2-normalized vectors
        """
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """
        Return the dimensionality of the embeddings.

        Returns:
            Integer dimension of embedding vectors
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Unique name for this embedder.

        Returns:
            String identifier for the embedder
        """
        pass

    def embed_single(self, word: str) -> np.ndarray:
        """Embed one word; returns shape (dimension,)."""
        return self.embed([word])[0]

    @staticmethod
    def normalize(vectors: np.ndarray) -> np.ndarray:
        """
        L2-normalize vectors for cosine similarity.

        Args:
            vectors: Array of shape (n, dim)

        Returns:
            Normalized array of same shape
        """
        norms = np.linalg.norm(vectors, axis=1, keepdims=True)
        # Zero rows stay zero; AxisSet rejects them downstream
        norms = np.where(norms == 0, 1, norms)
        return vectors / norms


# Registry for available embedders
_EMBEDDER_REGISTRY: dict[str, type[BaseEmbedder]] = {}


def register_embedder(name: str):
    """
    Decorator to register an embedder class.

    Usage:
        @register_embedder("openai")
        class OpenAIEmbedder(BaseEmbedder):
            ...
    """
    def decorator(cls: type[BaseEmbedder]):
        _EMBEDDER_REGISTRY[name] = cls
        return cls
    return decorator


def get_embedder(name: str, **kwargs) -> BaseEmbedder:
    """
    Get an embedder instance by name.

    Args:
        name: Registered embedder name
        **kwargs: Arguments passed to embedder constructor

    Returns:
        Embedder instance

    Raises:
        ValueError: If embedder name not found
    """
    if name not in _EMBEDDER_REGISTRY:
        available = list(_EMBEDDER_REGISTRY.keys())
        raise ValueError(f"Unknown embedder '{name}'. Available: {available}")

    return _EMBEDDER_REGISTRY[name](**kwargs)


def list_embedders() -> list[str]:
    """Return list of registered embedder names."""
    return list(_EMBEDDER_REGISTRY.keys())
