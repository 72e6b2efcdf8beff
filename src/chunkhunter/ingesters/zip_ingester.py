"""Ingester for ZIP archive files."""

import logging
import zipfile
from pathlib import Path
from typing import Iterator

from chunkhunter.errors import InputError
from chunkhunter.models import Document

logger = logging.getLogger(__name__)


class ZipIngester:
    """Ingester for ZIP archive files."""

    source_type = "zip"
    SUFFIX = ".txt"

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.is_file()

    def discover(self, source: Path) -> list[str]:
        """List .txt members of a ZIP archive in archive order.

        Document paths are the archive path joined with the member name.

        Raises:
            InputError: If the archive cannot be opened, or holds no .txt files
        """
        try:
            with zipfile.ZipFile(source, "r") as zf:
                names = [
                    info.filename
                    for info in zf.infolist()
                    if not info.is_dir() and info.filename.endswith(self.SUFFIX)
                ]
        except (OSError, zipfile.BadZipFile) as e:
            raise InputError(f"Unable to open the input archive {source}: {e}") from e

        if not names:
            raise InputError(f"No files found in input archive: {source}")
        return [f"{source}/{name}" for name in names]

    def read(self, source: Path, path: str) -> Document:
        """Read one archive member.

        An unreadable member is logged and returned with empty content.
        """
        member = path[len(f"{source}/"):]
        try:
            with zipfile.ZipFile(source, "r") as zf:
                raw_content = zf.read(member)
        except (OSError, KeyError, zipfile.BadZipFile) as e:
            logger.warning(f"Unable to open the file {path}: {e}")
            return Document.from_bytes(path, b"", readable=False)

        return Document.from_bytes(path, raw_content)

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield documents from a ZIP archive.

        Args:
            source: Path to the ZIP file

        Yields:
            Document objects for each .txt member of the archive
        """
        for path in self.discover(source):
            yield self.read(source, path)
