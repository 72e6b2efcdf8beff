"""Protocol for chunk matching strategies."""

from typing import Protocol, runtime_checkable

from chunkhunter.models import ChunkDictionary, Document, DocumentReport


@runtime_checkable
class MatchingStrategy(Protocol):
    """Protocol for chunk matching strategies."""

    def match(self, document: Document, dictionary: ChunkDictionary) -> DocumentReport:
        """Find dictionary chunks in a document and highlight them."""
        ...
