"""
Visualization for Word Space.
"""

from .scatter import WordSpacePlotBuilder

__all__ = ["WordSpacePlotBuilder"]
