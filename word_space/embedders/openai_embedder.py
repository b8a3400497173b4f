"""
OpenAI embedding backend.
Embeds the six axis words live with text-embedding-3-small.
"""

import logging
import os
import time
from typing import Optional

import numpy as np
from dotenv import load_dotenv
from openai import OpenAI, RateLimitError

from .base import BaseEmbedder, register_embedder
import config

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


@register_embedder("openai")
class OpenAIEmbedder(BaseEmbedder):
    """
    OpenAI embedding backend.

    The vocabulary blob must have been built with the same model, or every
    similarity against it is meaningless (the session rejects mismatched
    dimensionality).
    """

    def __init__(
        self,
        model: str = config.OPENAI_MODEL,
        dimension: int = config.OPENAI_EMBEDDING_DIM,
        api_key: Optional[str] = None,
        client: Optional[OpenAI] = None
    ):
        """
        Initialize the OpenAI embedder.

        Args:
            model: OpenAI model name (default: text-embedding-3-small)
            dimension: Expected embedding dimension
            api_key: Optional API key (defaults to OPENAI_API_KEY env var)
            client: Optional preconfigured client
        """
        self.model = model
        self._dimension = dimension

        if client is None:
            # Get API key from env if not provided
            api_key = api_key or os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ValueError(
                    "OpenAI API key not found. "
                    "Set OPENAI_API_KEY in .env file or pass api_key parameter."
                )
            client = OpenAI(api_key=api_key)
        self.client = client

    @property
    def name(self) -> str:
        return f"openai_{self.model}"

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, words: list[str]) -> np.ndarray:
        """
        Embed words using the OpenAI API (one request for all words).

        Returns:
            np.ndarray of shape (len(words), dimension), L2-normalized
        """
        if not words:
            return np.array([], dtype=np.float32).reshape(0, self.dimension)

        embeddings = self._embed_with_retry([w.strip() or " " for w in words])
        embeddings_array = np.array(embeddings, dtype=np.float32)
        return self.normalize(embeddings_array)

    def _embed_with_retry(
        self,
        words: list[str],
        max_retries: int = 5,
        base_delay: float = 2.0
    ) -> list[list[float]]:
        """
        Embed a batch with retry logic for rate limits.

        Args:
            words: Words to embed
            max_retries: Maximum retry attempts
            base_delay: Base delay in seconds (doubled each retry)

        Returns:
            List of embedding vectors
        """
        for attempt in range(max_retries):
            try:
                response = self.client.embeddings.create(
                    model=self.model,
                    input=words
                )
                # Sort by index to ensure order matches input
                sorted_data = sorted(response.data, key=lambda x: x.index)
                return [item.embedding for item in sorted_data]

            except RateLimitError:
                if attempt == max_retries - 1:
                    raise
                delay = base_delay * (2 ** attempt)
                logger.warning(f"Rate limited. Waiting {delay}s before retry...")
                time.sleep(delay)

        raise RuntimeError(f"Failed to embed words after {max_retries} attempts")
