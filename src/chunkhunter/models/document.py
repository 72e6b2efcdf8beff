"""Core data models for documents and match results."""

from dataclasses import dataclass, field

from chunkhunter.utils.text import count_words, prepare_text


@dataclass(frozen=True)
class Document:
    """A text document read from an input source."""

    path: str
    text: str  # original content with the leading guard space
    lowered: str  # lowercased copy, used only for detection
    word_count: int
    readable: bool = True

    @classmethod
    def from_bytes(cls, path: str, raw: bytes, readable: bool = True) -> "Document":
        text, lowered = prepare_text(raw)
        return cls(
            path=path,
            text=text,
            lowered=lowered,
            word_count=count_words(text),
            readable=readable,
        )


@dataclass(frozen=True)
class MatchRecord:
    """One dictionary chunk found in one document."""

    chunk: str
    length: int
    frequency: int

    def as_row(self) -> list[str]:
        return [self.chunk, str(self.length), str(self.frequency)]


@dataclass(frozen=True)
class DocumentStats:
    """Chunk density of a single document."""

    chunkwords: int
    words: int
    checked: int

    @property
    def percentage(self) -> float:
        if self.words == 0:
            return 0.0
        return self.chunkwords / self.words * 100

    @property
    def percentage_text(self) -> str:
        return f"{self.percentage:.2f}"


@dataclass
class DocumentReport:
    """Everything the matcher learned about a document."""

    document: Document
    annotated: str
    records: list[MatchRecord] = field(default_factory=list)
    stats: DocumentStats = field(default_factory=lambda: DocumentStats(0, 0, 0))
