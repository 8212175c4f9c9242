"""Ingester for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from chunkpack.ingesters.records import DEFAULT_MAX_FILE_SIZE, EntryFilter, build_document
from chunkpack.models import Document

logger = logging.getLogger(__name__)


class FolderIngester:
    """Ingester for local filesystem folders."""

    source_type = "folder"

    SKIP_DIRS = {
        "__pycache__",
        "node_modules",
        "venv",
        "env",
        "dist",
        "build",
        "bin",
        "obj",
        "target",
    }

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE, supported_only: bool = True):
        self.filter = EntryFilter(max_file_size, supported_only)

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield documents from a folder recursively, in sorted order.

        Args:
            source: Path to the folder

        Yields:
            Document objects for each accepted file in the folder
        """
        for root, dirs, files in os.walk(source):
            # Prune in place so os.walk never descends into skipped folders
            dirs[:] = sorted(d for d in dirs if not self._should_skip_dir(d))

            for filename in sorted(files):
                full_path = Path(root) / filename
                rel_path = full_path.relative_to(source).as_posix()

                try:
                    size = full_path.stat().st_size
                    if not self.filter.accepts(rel_path, size):
                        continue
                    raw_content = full_path.read_bytes()
                except (PermissionError, OSError) as e:
                    logger.debug(f"skip unreadable: {rel_path} ({e})")
                    continue

                yield build_document(rel_path, raw_content)

    def _should_skip_dir(self, name: str) -> bool:
        """Hidden folders, version control and build output are skipped."""
        return name.startswith(".") or name in self.SKIP_DIRS or name.endswith(".egg-info")
