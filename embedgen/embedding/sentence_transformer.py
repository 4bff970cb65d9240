"""Text embedding generation using sentence-transformers."""

from typing import Any, Dict, List

import numpy as np

from embedgen.errors import InferenceError, ModelLoadError
from embedgen.types import EncodeOptions

# Lazy import to avoid loading torch at module import time
_SentenceTransformer = None

# Mean pooling is part of the MiniLM model's own pooling config; the call
# below adds L2 normalization. No other pooling policy is offered.
ENCODE_OPTIONS: EncodeOptions = {
    "normalize_embeddings": True,
    "convert_to_numpy": True,
    "show_progress_bar": False,
}

# Known models and their output dimensionality
EMBEDDING_DIMENSIONS = {
    "sentence-transformers/all-MiniLM-L6-v2": 384,
    "all-MiniLM-L6-v2": 384,
}

# Model cache (lazy loading), keyed by model name
_model_cache: Dict[str, Any] = {}


def _get_sentence_transformer_class():
    """Lazy import of SentenceTransformer."""
    global _SentenceTransformer
    if _SentenceTransformer is None:
        from sentence_transformers import SentenceTransformer

        _SentenceTransformer = SentenceTransformer
    return _SentenceTransformer


def load_model(model_name: str) -> Any:
    """
    Get or load a sentence-transformer model.

    Raises
    ------
    ModelLoadError
        If the library cannot be imported or the weights cannot be fetched.
    """
    if model_name not in _model_cache:
        try:
            SentenceTransformer = _get_sentence_transformer_class()
            _model_cache[model_name] = SentenceTransformer(model_name)
        except Exception as e:
            raise ModelLoadError(f"Failed to load embedding model '{model_name}': {e}") from e
    return _model_cache[model_name]


def clear_model_cache() -> None:
    _model_cache.clear()


def encode_text(text: str, model_name: str) -> List[float]:
    """
    Embed one string and return the pooled, normalized vector as floats.

    Raises
    ------
    ModelLoadError
        If the model cannot be initialized.
    InferenceError
        If the input is not a string or the model fails to encode it.
    """
    if not isinstance(text, str):
        raise InferenceError(f"Expected text to embed, got {type(text).__name__}")

    model = load_model(model_name)

    try:
        output = model.encode(text, **ENCODE_OPTIONS)
        values = np.asarray(output, dtype=np.float64).reshape(-1).tolist()
    except Exception as e:
        raise InferenceError(f"Embedding generation failed: {e}") from e

    if not values:
        raise InferenceError("Embedding model returned an empty vector")
    return values
