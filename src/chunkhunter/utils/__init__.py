"""Utility functions for Chunk Hunter."""

from chunkhunter.utils.text import (
    count_occurrences,
    count_words,
    lowercase,
    lowercase_offsets,
    normalize_chunk,
    prepare_text,
)

__all__ = [
    "count_occurrences",
    "count_words",
    "lowercase",
    "lowercase_offsets",
    "normalize_chunk",
    "prepare_text",
]
