"""
Word Space: fly through a vocabulary arranged by six axis words.
"""

from word_space.errors import AxisValidationError, DataIntegrityError, WordSpaceError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AxisValidationError",
    "DataIntegrityError",
    "WordSpaceError",
]
