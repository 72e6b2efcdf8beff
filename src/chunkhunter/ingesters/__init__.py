"""Input source handlers (ingesters) for Chunk Hunter."""

from pathlib import Path
from typing import Optional

from chunkhunter.ingesters.folder_ingester import FolderIngester
from chunkhunter.ingesters.zip_ingester import ZipIngester
from chunkhunter.protocols import Ingester

# Registry of available ingesters
_INGESTERS: list[Ingester] = [
    ZipIngester(),
    FolderIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to the input source (folder or zip file)

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


__all__ = ["get_ingester", "ZipIngester", "FolderIngester"]
