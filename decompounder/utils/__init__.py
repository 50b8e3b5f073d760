"""Utility functions."""

from .text_normalizer import GermanTextNormalizer, normalize_german_text

__all__ = [
    "GermanTextNormalizer",
    "normalize_german_text",
]
