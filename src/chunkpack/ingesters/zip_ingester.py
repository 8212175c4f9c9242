"""Ingester for ZIP archive files."""

import zipfile
from pathlib import Path
from typing import Iterator

from chunkpack.ingesters.records import DEFAULT_MAX_FILE_SIZE, EntryFilter, build_document
from chunkpack.models import Document


class ZipIngester:
    """Ingester for ZIP archive files."""

    source_type = "zip"

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE, supported_only: bool = True):
        self.filter = EntryFilter(max_file_size, supported_only)

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.is_file()

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield documents from a ZIP archive.

        Args:
            source: Path to the ZIP file

        Yields:
            Document objects for each accepted member, in archive order
        """
        with zipfile.ZipFile(source, "r") as zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                # Members inside hidden folders are skipped like hidden files
                if any(part.startswith(".") for part in Path(info.filename).parts[:-1]):
                    continue
                # Check the declared size before inflating anything
                if not self.filter.accepts(info.filename, info.file_size):
                    continue

                yield build_document(info.filename, zf.read(info.filename))
