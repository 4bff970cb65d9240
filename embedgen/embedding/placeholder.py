"""
Placeholder vectorizer used by the interactive app.

This is not a semantic embedding. Each character of the input is mapped to
its code point divided by 255, producing a vector whose length equals the
number of characters. It exists so the acquisition pipeline can be exercised
end to end without downloading a model:

    • no network access
    • no model weights
    • deterministic output for identical inputs

Code points above 255 are clamped to 255, so every value lies in [0, 1].
"""

from typing import List

import numpy as np

# Largest code point that maps below 1.0 before clamping.
SCALE = 255.0


def compute_placeholder_embedding(text: str) -> List[float]:
    """
    Map each character of `text` to `min(ord(ch), 255) / 255`.

    Parameters
    ----------
    text : str
        The already-normalized text blob.

    Returns
    -------
    List[float]
        One value per character, each in [0, 1]. Empty input yields an
        empty list; callers reject empty text before reaching this point.
    """
    codes = np.fromiter((ord(ch) for ch in text), dtype=np.float64, count=len(text))
    normalized = np.clip(codes, 0.0, SCALE) / SCALE
    return normalized.tolist()
