"""Direct text input and the final text-normalization check."""

from embedgen.errors import ValidationError


def acquire_text(text: str) -> str:
    """
    Pass direct text input through unchanged.

    Raises
    ------
    ValidationError
        If the text is empty or whitespace-only.
    """
    if not text or not text.strip():
        raise ValidationError("Please enter some text to process.")
    return text


def normalize_text(text: str) -> str:
    """
    Final check applied to every acquired text blob before vectorization.

    The blob is returned as-is; only blobs with no visible characters are
    rejected, so a successful run always produces a non-empty vector.
    """
    if not text or not text.strip():
        raise ValidationError("No text could be extracted from the input.")
    return text
