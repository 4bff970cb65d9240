"""
EmbeddingClient abstraction layer.

This module defines the EmbeddingClient class, which gives the rest of the
codebase (CLI, session controller, HTTP API, tests) one interface for turning
text into a vector, regardless of which provider does the work:

    • "sentence-transformers"
        Real semantic embeddings from a pre-trained model
        (sentence-transformers/all-MiniLM-L6-v2 by default, 384 dimensions),
        mean-pooled and L2-normalized.

    • "placeholder"
        The character-code stand-in from `placeholder.py`. Output length
        equals the input's character count.

Usage:

    from embedgen.embedding import EmbeddingClient

    client = EmbeddingClient(provider="sentence-transformers")
    vector = client.generate("some text")
"""

from typing import List, Optional

from embedgen.config import DEFAULT_MODEL
from embedgen.errors import InferenceError

from .placeholder import compute_placeholder_embedding
from .sentence_transformer import encode_text

PLACEHOLDER = "placeholder"
SENTENCE_TRANSFORMERS = "sentence-transformers"

SUPPORTED_PROVIDERS = (PLACEHOLDER, SENTENCE_TRANSFORMERS)


class EmbeddingClient:
    """
    Provider-agnostic embedding client.

    Parameters
    ----------
    provider : str, optional
        Either "placeholder" or "sentence-transformers".
    model_name : str, optional
        Model to load for the sentence-transformers provider. Ignored by
        the placeholder provider.

    Raises
    ------
    ValueError
        If the provider is unknown.
    """

    def __init__(self, provider: str = PLACEHOLDER, model_name: Optional[str] = None) -> None:
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(
                f"Unknown embedding provider '{provider}'. "
                f"Supported: {', '.join(SUPPORTED_PROVIDERS)}."
            )
        self.provider = provider
        self.model_name = model_name or DEFAULT_MODEL

    # ------------------------------------------------------------------
    # Canonical embedding method
    # ------------------------------------------------------------------
    def generate(self, text: str) -> List[float]:
        """
        Generate an embedding vector for the given text.

        Raises
        ------
        ModelLoadError
            The sentence-transformers model could not be initialized.
        InferenceError
            The provider failed on this input.
        """
        if self.provider == SENTENCE_TRANSFORMERS:
            return encode_text(text, self.model_name)

        try:
            return compute_placeholder_embedding(text)
        except (TypeError, ValueError) as e:
            raise InferenceError(f"Placeholder vectorization failed: {e}") from e

    def embed(self, text: str) -> List[float]:
        """Alias for generate()."""
        return self.generate(text)
