"""
Public API for the embedding subsystem.

Callers can rely on:

    from embedgen.embedding import EmbeddingClient
    from embedgen.embedding import compute_placeholder_embedding

without needing to know the internal module layout.
"""

from .embedding_client import (
    PLACEHOLDER,
    SENTENCE_TRANSFORMERS,
    SUPPORTED_PROVIDERS,
    EmbeddingClient,
)
from .placeholder import compute_placeholder_embedding
from .sentence_transformer import EMBEDDING_DIMENSIONS, encode_text, load_model

__all__ = [
    "EmbeddingClient",
    "PLACEHOLDER",
    "SENTENCE_TRANSFORMERS",
    "SUPPORTED_PROVIDERS",
    "compute_placeholder_embedding",
    "encode_text",
    "load_model",
    "EMBEDDING_DIMENSIONS",
]
