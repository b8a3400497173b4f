"""
Vocabulary blob loader.
Reads the precomputed vocabulary (vocab.json), the flat float32 embedding
matrix (embeddings.bin) and, when present, manifest.json with the explicit
dimensionality.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from word_space.core.vector_store import VectorStore
from word_space.errors import DataIntegrityError
import config

logger = logging.getLogger(__name__)


class VocabularyLoader:
    """
    Loader for the vocabulary + embedding blob.

    Expected files in data_dir:
    - vocab.json: JSON array of N distinct words (frequency order)
    - embeddings.bin: N x D little-endian float32 values, row-major
    - manifest.json (optional): {"count": N, "dims": D, "model": "..."}

    Without a manifest the dimensionality is derived from the file size.
    """

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the loader.

        Args:
            data_dir: Directory holding the blob files (defaults to config.DATA_DIR)
        """
        self.data_dir = Path(data_dir) if data_dir else config.DATA_DIR

    @property
    def name(self) -> str:
        return "vocabulary"

    @property
    def vocab_path(self) -> Path:
        return self.data_dir / config.VOCAB_FILENAME

    @property
    def embeddings_path(self) -> Path:
        return self.data_dir / config.EMBEDDINGS_FILENAME

    @property
    def manifest_path(self) -> Path:
        return self.data_dir / config.MANIFEST_FILENAME

    def exists(self) -> bool:
        """Check if the required blob files exist."""
        return self.vocab_path.exists() and self.embeddings_path.exists()

    def read_manifest(self) -> dict:
        """Manifest contents, or {} if there is no manifest."""
        if not self.manifest_path.exists():
            return {}
        with open(self.manifest_path) as f:
            manifest = json.load(f)
        if not isinstance(manifest, dict):
            raise DataIntegrityError(f"{self.manifest_path} must contain a JSON object")
        return manifest

    def load(self) -> VectorStore:
        """
        Load the blob into a VectorStore.

        Returns:
            VectorStore over the embedding matrix

        Raises:
            FileNotFoundError: If vocab.json or embeddings.bin is missing
            DataIntegrityError: If the files disagree with each other
        """
        if not self.vocab_path.exists():
            raise FileNotFoundError(
                f"Could not load {self.vocab_path}. "
                "The precomputed vocabulary has not been generated yet."
            )
        if not self.embeddings_path.exists():
            raise FileNotFoundError(
                f"Could not load {self.embeddings_path}. "
                "The precomputed embeddings have not been generated yet."
            )

        with open(self.vocab_path, encoding="utf-8") as f:
            words = json.load(f)
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise DataIntegrityError(f"{self.vocab_path} must be a JSON array of strings")

        manifest = self.read_manifest()
        count = manifest.get("count")
        if count is not None and count != len(words):
            raise DataIntegrityError(
                f"Manifest lists {count} words but {self.vocab_path.name} has {len(words)}"
            )

        buffer = self.embeddings_path.read_bytes()
        store = VectorStore.from_buffer(words, buffer, dims=manifest.get("dims"))

        model = manifest.get("model")
        if model:
            logger.info(f"Vocabulary embedded with {model}")
        return store


def load_vocabulary(data_dir: Optional[Union[str, Path]] = None) -> VectorStore:
    """Load the vocabulary blob from data_dir (defaults to config.DATA_DIR)."""
    return VocabularyLoader(data_dir).load()


def save_vocabulary(
    data_dir: Union[str, Path],
    words: Sequence[str],
    vectors: np.ndarray,
    model: Optional[str] = None
) -> Path:
    """
    Write a vocabulary blob (vocab.json, embeddings.bin, manifest.json).

    Args:
        data_dir: Output directory (created if missing)
        words: N distinct words
        vectors: Array of shape (N, D)
        model: Name of the model that produced the vectors

    Returns:
        The output directory
    """
    data_dir = Path(data_dir)
    vectors = np.ascontiguousarray(vectors, dtype="<f4")
    if vectors.ndim != 2 or vectors.shape[0] != len(words):
        raise DataIntegrityError(
            f"Expected vectors of shape ({len(words)}, D), got {vectors.shape}"
        )

    data_dir.mkdir(parents=True, exist_ok=True)
    with open(data_dir / config.VOCAB_FILENAME, "w", encoding="utf-8") as f:
        json.dump(list(words), f)
    (data_dir / config.EMBEDDINGS_FILENAME).write_bytes(vectors.tobytes())

    manifest = {"count": len(words), "dims": int(vectors.shape[1])}
    if model:
        manifest["model"] = model
    with open(data_dir / config.MANIFEST_FILENAME, "w") as f:
        json.dump(manifest, f, indent=2)

    logger.info(f"Saved {len(words)} words x {vectors.shape[1]} dims to {data_dir}")
    return data_dir
