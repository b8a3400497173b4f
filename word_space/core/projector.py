"""
Axis projection: maps embeddings to raw 3D coordinates.
Each coordinate is a cosine-similarity difference against one axis pair.
"""

from typing import Optional

import numpy as np

from word_space.core.axes import AxisSet
from word_space.core.vector_store import cosine_similarity


class AxisProjector:
    """
    Projects word vectors onto the three axes defined by an AxisSet.

    For a word vector w:
        x = cos(w, x_pos) - cos(w, x_neg)
        y = cos(w, y_pos) - cos(w, y_neg)
        z = cos(w, z_pos) - cos(w, z_neg)

    The projector holds only the (immutable) axis set, so project() and
    project_rows() are pure and safe to call from several threads.
    """

    def __init__(self, axis_set: AxisSet):
        """
        Initialize the projector.

        Args:
            axis_set: Validated six-vector axis set
        """
        self.axis_set = axis_set

        # (D, 6) matrix so a whole block of rows projects in one matmul
        self._axis_matrix = axis_set.as_matrix()
        self._axis_norms = np.linalg.norm(self._axis_matrix.astype(np.float64), axis=0)

    @property
    def dims(self) -> int:
        return self.axis_set.dims

    def project(self, vector: np.ndarray) -> tuple[float, float, float]:
        """
        Project a single embedding to raw (x, y, z).

        Args:
            vector: Array of shape (D,)

        Returns:
            Tuple of three floats, each in [-2, 2]
        """
        axes = self.axis_set
        x = cosine_similarity(vector, axes.x_pos) - cosine_similarity(vector, axes.x_neg)
        y = cosine_similarity(vector, axes.y_pos) - cosine_similarity(vector, axes.y_neg)
        z = cosine_similarity(vector, axes.z_pos) - cosine_similarity(vector, axes.z_neg)
        return x, y, z

    def project_rows(
        self,
        vectors: np.ndarray,
        row_norms: Optional[np.ndarray] = None
    ) -> np.ndarray:
        """
        Project many embeddings at once.

        Args:
            vectors: Array of shape (n, D)
            row_norms: Optional precomputed L2 norms of shape (n,)

        Returns:
            Array of shape (n, 3) in float64. Rows with zero magnitude map to
            the origin (every similarity falls back to 0).
        """
        vectors = np.asarray(vectors, dtype=np.float32)
        if vectors.ndim != 2 or vectors.shape[1] != self.dims:
            raise ValueError(
                f"Expected array of shape (n, {self.dims}), got {vectors.shape}"
            )

        if row_norms is None:
            row_norms = np.linalg.norm(vectors, axis=1)
        row_norms = np.asarray(row_norms, dtype=np.float64)

        dots = (vectors @ self._axis_matrix).astype(np.float64)  # (n, 6)
        denom = row_norms[:, None] * self._axis_norms[None, :]
        sims = np.zeros_like(dots)
        np.divide(dots, denom, out=sims, where=denom > 0)

        # Columns are x+, x-, y+, y-, z+, z-
        return sims[:, 0::2] - sims[:, 1::2]
