"""
Error types for Word Space.
"""


class WordSpaceError(Exception):
    """Base error for all word-space failures."""


class DataIntegrityError(WordSpaceError):
    """Embedding data or axis vectors violate a structural invariant."""


class AxisValidationError(WordSpaceError):
    """The six axis words supplied by the user are unusable."""
