"""Data models for Chunk Hunter."""

from chunkhunter.models.chunk import Chunk, ChunkDictionary
from chunkhunter.models.document import (
    Document,
    DocumentReport,
    DocumentStats,
    MatchRecord,
)

__all__ = [
    "Chunk",
    "ChunkDictionary",
    "Document",
    "DocumentReport",
    "DocumentStats",
    "MatchRecord",
]
