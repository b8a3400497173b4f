"""
Axis-word embedding backends for Word Space.
"""

from .base import BaseEmbedder, get_embedder, list_embedders, register_embedder
from .vocabulary_embedder import VocabularyEmbedder
from .openai_embedder import OpenAIEmbedder

__all__ = [
    "BaseEmbedder",
    "get_embedder",
    "list_embedders",
    "register_embedder",
    "VocabularyEmbedder",
    "OpenAIEmbedder",
]
