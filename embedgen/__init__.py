"""Text embedding demos: a model-backed embedding script and an input-to-vector app."""

__version__ = "0.1.0"
