"""Text normalization utilities.

Both chunks and documents get a single leading space (the guard space) so a
chunk can only start matching at the beginning of a word. Only the left edge
is guarded; chunks carry no trailing space.

Lowercasing is done one character at a time so that every lowered offset maps
back to a character of the original text. A few characters grow when
lowercased ('İ' becomes two), which is why the offsets are needed.
"""

GUARD = " "


def lowercase(text: str) -> str:
    """Lowercase text character by character."""
    return "".join(ch.lower() for ch in text)


def lowercase_offsets(text: str) -> tuple[str, dict[int, int]]:
    """Lowercase text and map lowered offsets back to original indices.

    Returns:
        (lowered text, {lowered offset: original index}) for every character
        boundary, including the end of the text
    """
    pieces = []
    boundaries = {}
    offset = 0
    for index, ch in enumerate(text):
        boundaries[offset] = index
        piece = ch.lower()
        pieces.append(piece)
        offset += len(piece)
    boundaries[offset] = len(text)
    return "".join(pieces), boundaries


def normalize_chunk(line: str) -> str:
    """Trim, lowercase and guard a dictionary line."""
    return GUARD + lowercase(line.strip())


def prepare_text(raw: bytes) -> tuple[str, str]:
    """Decode raw document bytes.

    Bytes that are not valid UTF-8 decode to surrogate escapes, so writing the
    text back with errors="surrogateescape" reproduces them unchanged.

    Args:
        raw: File content as read from disk

    Returns:
        (guarded original text, lowercased copy used for matching)
    """
    text = GUARD + raw.decode("utf-8", errors="surrogateescape")
    return text, lowercase(text)


def count_words(text: str) -> int:
    """Count whitespace-separated fields."""
    return len(text.split())


def count_occurrences(haystack: str, needle: str) -> int:
    """Count every position where needle starts in haystack, overlaps included."""
    if not needle:
        return 0

    count = 0
    start = haystack.find(needle)
    while start != -1:
        count += 1
        start = haystack.find(needle, start + 1)
    return count
