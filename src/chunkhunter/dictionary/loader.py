"""Loader for the chunk dictionary file."""

import logging
from pathlib import Path
from typing import Iterable

from chunkhunter.errors import DictionaryError
from chunkhunter.models import Chunk, ChunkDictionary
from chunkhunter.utils.text import normalize_chunk

logger = logging.getLogger(__name__)


def parse_chunks(lines: Iterable[str], source: str = "<memory>") -> ChunkDictionary:
    """Normalize dictionary lines into a set of unique chunks.

    Blank lines are skipped. Later spellings of an already seen chunk are
    dropped, so iteration follows first-seen order.

    Args:
        lines: Raw dictionary lines, one phrase each
        source: Label recorded on the dictionary (usually the file path)

    Returns:
        ChunkDictionary without duplicates
    """
    seen: dict[str, Chunk] = {}
    for line in lines:
        # Blank lines are dropped: kept, they would form a " " chunk matching every space
        if not line.strip():
            continue
        text = normalize_chunk(line)
        if text not in seen:
            seen[text] = Chunk(text=text, raw=line.strip())
    return ChunkDictionary(chunks=tuple(seen.values()), source=source)


def load_dictionary(path: Path | str) -> ChunkDictionary:
    """Read a dictionary file with one chunk per line.

    Raises:
        DictionaryError: If the file cannot be opened or read
    """
    dict_path = Path(path)
    try:
        with dict_path.open("r", encoding="utf-8", errors="replace") as f:
            dictionary = parse_chunks(f, source=str(dict_path))
    except OSError as e:
        raise DictionaryError(
            f"Unable to open the chunks database {dict_path}: {e}"
        ) from e

    logger.info(f"Loaded {len(dictionary)} chunks from {dict_path}")
    return dictionary
