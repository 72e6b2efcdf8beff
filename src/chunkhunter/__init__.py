"""Chunk Hunter - scan text files for predefined multi-word chunks."""

from chunkhunter.pipeline import ChunkHunt, HuntConfig, HuntOutcome

__version__ = "1.0.0"
__all__ = ["ChunkHunt", "HuntConfig", "HuntOutcome"]
