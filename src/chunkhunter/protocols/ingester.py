"""Protocol for input source handlers."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from chunkhunter.models import Document


@runtime_checkable
class Ingester(Protocol):
    """Protocol for input source handlers.

    Implementations handle different input formats (folder, zip).
    Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def discover(self, source: Path) -> list[str]:
        """List document paths in the source.

        Raises InputError when the source cannot be walked or holds no documents.
        """
        ...

    def read(self, source: Path, path: str) -> Document:
        """Read one discovered document.

        Unreadable documents come back empty with readable=False.
        """
        ...

    def ingest(self, source: Path) -> Iterator[Document]:
        """Discover and read every document in the source."""
        ...
