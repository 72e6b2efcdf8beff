"""Chunk matching strategies."""

from chunkhunter.matchers.substring_matcher import SubstringMatcher

__all__ = ["SubstringMatcher"]
