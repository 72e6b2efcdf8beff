"""Data models for dictionary chunks."""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Chunk:
    """A dictionary phrase in its normalized, guard-prefixed form."""

    text: str  # lowercased, trimmed, with one leading guard space
    raw: str  # first spelling seen in the dictionary source

    @property
    def phrase(self) -> str:
        """The chunk without its guard space."""
        return self.text.strip()

    @property
    def length(self) -> int:
        """Character count of the guard-prefixed text (not a word count)."""
        return len(self.text)

    @property
    def word_count(self) -> int:
        return len(self.phrase.split())


@dataclass(frozen=True)
class ChunkDictionary:
    """Immutable set of unique chunks loaded from a dictionary source."""

    chunks: tuple[Chunk, ...] = ()
    source: str = "<memory>"

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def __len__(self) -> int:
        return len(self.chunks)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Chunk):
            item = item.text
        return any(chunk.text == item for chunk in self.chunks)
