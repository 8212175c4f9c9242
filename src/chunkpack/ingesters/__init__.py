"""Input source handlers (ingesters) for chunkpack."""

from pathlib import Path
from typing import Optional

from chunkpack.ingesters.file_ingester import FileIngester
from chunkpack.ingesters.folder_ingester import FolderIngester
from chunkpack.ingesters.records import DEFAULT_MAX_FILE_SIZE, EntryFilter
from chunkpack.ingesters.zip_ingester import ZipIngester
from chunkpack.protocols import Ingester


def default_ingesters(
    max_file_size: int = DEFAULT_MAX_FILE_SIZE, supported_only: bool = True
) -> list[Ingester]:
    """Build the standard ingesters, most specific first."""
    return [
        ZipIngester(max_file_size, supported_only),
        FolderIngester(max_file_size, supported_only),
        FileIngester(max_file_size, supported_only),
    ]


# Registry of available ingesters
_INGESTERS: list[Ingester] = default_ingesters()


def get_ingester(
    source: Path | str,
    max_file_size: Optional[int] = None,
    supported_only: bool = True,
) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to the input source (file, folder or zip file)
        max_file_size: Size ceiling override; builds fresh ingesters when set
        supported_only: Apply the extension allow-list (only with an override)

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    candidates = _INGESTERS
    if max_file_size is not None or not supported_only:
        candidates = default_ingesters(
            max_file_size if max_file_size is not None else DEFAULT_MAX_FILE_SIZE,
            supported_only,
        )
    for ingester in candidates:
        if ingester.can_handle(source_path):
            return ingester
    return None


__all__ = [
    "get_ingester",
    "default_ingesters",
    "DEFAULT_MAX_FILE_SIZE",
    "EntryFilter",
    "FileIngester",
    "FolderIngester",
    "ZipIngester",
]
