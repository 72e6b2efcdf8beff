"""Substring-based chunk matching strategy."""

import logging

from chunkhunter.models import (
    Chunk,
    ChunkDictionary,
    Document,
    DocumentReport,
    DocumentStats,
    MatchRecord,
)
from chunkhunter.utils.text import count_occurrences, lowercase_offsets

logger = logging.getLogger(__name__)


class SubstringMatcher:
    """Default matching: guarded substring search with inline highlighting.

    For every chunk in the dictionary:
    - Detect it as a substring of the lowercased document
    - Count every (possibly overlapping) occurrence as its frequency
    - Wrap each case-insensitive occurrence in the original text in a
      highlight span

    Highlighting runs chunk by chunk over the already annotated text, so a later
    chunk may wrap text that sits inside an earlier chunk's markup.
    """

    HIGHLIGHT_OPEN = '<span style="background-color: #FFFF00">'
    HIGHLIGHT_CLOSE = "</span>"

    def highlight(self, text: str, chunk: Chunk) -> str:
        """Wrap every case-insensitive occurrence of chunk in text.

        Occurrences are found in the lowercased text, left to right without
        overlap, and wrapped at the matching characters of the original.
        """
        lowered, boundaries = lowercase_offsets(text)
        parts = []
        last = 0
        start = lowered.find(chunk.text)
        while start != -1:
            end = start + len(chunk.text)
            if start in boundaries and end in boundaries:
                first, stop = boundaries[start], boundaries[end]
                parts.append(text[last:first])
                parts.append(self.HIGHLIGHT_OPEN + text[first:stop] + self.HIGHLIGHT_CLOSE)
                last = stop
                start = lowered.find(chunk.text, end)
            else:
                # Match starts or ends inside a character that grew when lowered
                start = lowered.find(chunk.text, start + 1)
        parts.append(text[last:])
        return "".join(parts)

    def match(self, document: Document, dictionary: ChunkDictionary) -> DocumentReport:
        """Match all dictionary chunks against a document.

        Args:
            document: The document to scan
            dictionary: Chunks to look for

        Returns:
            DocumentReport with highlighted text, one record per matched chunk,
            and density statistics
        """
        annotated = document.text
        records: list[MatchRecord] = []
        chunkwords = 0

        for chunk in dictionary:
            if chunk.text not in document.lowered:
                continue

            frequency = count_occurrences(document.lowered, chunk.text)
            annotated = self.highlight(annotated, chunk)
            records.append(
                MatchRecord(chunk=chunk.phrase, length=chunk.length, frequency=frequency)
            )
            chunkwords += chunk.word_count * frequency
            logger.debug(f"  {chunk.raw!r} x{frequency} in {document.path}")

        stats = DocumentStats(
            chunkwords=chunkwords,
            words=document.word_count,
            checked=len(dictionary),
        )
        return DocumentReport(
            document=document,
            annotated=annotated,
            records=records,
            stats=stats,
        )
