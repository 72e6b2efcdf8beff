"""Ingester for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from chunkhunter.errors import InputError
from chunkhunter.models import Document

logger = logging.getLogger(__name__)


def _walk_error(error: OSError) -> None:
    raise InputError(f"Unable to open the input folder {error.filename}: {error}") from error


class FolderIngester:
    """Ingester for local filesystem folders."""

    source_type = "folder"
    SUFFIX = ".txt"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def discover(self, source: Path) -> list[str]:
        """List .txt files under a folder recursively.

        Directory entries are visited in sorted order so repeated runs produce
        the same report order.

        Args:
            source: Path to the folder

        Returns:
            Paths joined onto the folder as given

        Raises:
            InputError: If any directory cannot be read, or no files are found
        """
        docs = []
        for root, dirs, files in os.walk(source, onerror=_walk_error):
            dirs.sort()
            for filename in sorted(files):
                # Suffix match is case-sensitive: notes.TXT is ignored
                if filename.endswith(self.SUFFIX):
                    docs.append(os.path.join(root, filename))

        if not docs:
            raise InputError(f"No files found in input folder: {source}")
        return docs

    def read(self, source: Path, path: str) -> Document:
        """Read one document from disk.

        An unreadable file is logged and returned with empty content.
        """
        try:
            raw_content = Path(path).read_bytes()
        except OSError as e:
            logger.warning(f"Unable to open the file {path}: {e}")
            return Document.from_bytes(path, b"", readable=False)

        return Document.from_bytes(path, raw_content)

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield documents from a folder recursively.

        Args:
            source: Path to the folder

        Yields:
            Document objects for each .txt file in the folder
        """
        for path in self.discover(source):
            yield self.read(source, path)
