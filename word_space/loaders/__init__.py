"""
Vocabulary loaders for Word Space.
"""

from .vocabulary import VocabularyLoader, load_vocabulary, save_vocabulary

__all__ = ["VocabularyLoader", "load_vocabulary", "save_vocabulary"]
