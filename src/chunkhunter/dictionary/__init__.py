"""Chunk dictionary loading."""

from chunkhunter.dictionary.loader import load_dictionary, parse_chunks

__all__ = ["load_dictionary", "parse_chunks"]
