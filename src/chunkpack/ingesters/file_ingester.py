"""Ingester for a single selected file."""

import logging
from pathlib import Path
from typing import Iterator

from chunkpack.ingesters.records import DEFAULT_MAX_FILE_SIZE, EntryFilter, build_document
from chunkpack.models import Document

logger = logging.getLogger(__name__)


class FileIngester:
    """Ingester for one regular file (anything but a zip archive)."""

    source_type = "file"

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE, supported_only: bool = True):
        self.filter = EntryFilter(max_file_size, supported_only)

    def can_handle(self, source: Path) -> bool:
        return source.is_file() and source.suffix.lower() != ".zip"

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield the file as a single document, unless it is filtered out."""
        try:
            if not self.filter.accepts(source.name, source.stat().st_size):
                return
            raw_content = source.read_bytes()
        except (PermissionError, OSError) as e:
            logger.debug(f"skip unreadable: {source} ({e})")
            return

        yield build_document(source.name, raw_content)
