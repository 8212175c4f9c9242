"""Filtering and record building shared by the ingesters."""

import logging
from pathlib import PurePosixPath

from chunkpack.models import Document, FileMetadata
from chunkpack.utils.binary import decode_text, is_binary_content
from chunkpack.utils.extensions import extension_of, is_supported_extension

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


class EntryFilter:
    """Decides which entries of a source become documents.

    Args:
        max_file_size: Entries larger than this many bytes are skipped
        supported_only: Skip names outside the extension allow-list
    """

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE, supported_only: bool = True):
        self.max_file_size = max_file_size
        self.supported_only = supported_only

    def accepts(self, path: str, size_bytes: int) -> bool:
        name = PurePosixPath(path.replace("\\", "/")).name
        if name.startswith("."):
            logger.debug(f"skip hidden: {path}")
            return False
        if size_bytes > self.max_file_size:
            logger.debug(f"skip oversized ({size_bytes} bytes): {path}")
            return False
        if self.supported_only and not is_supported_extension(name):
            logger.debug(f"skip unsupported extension: {path}")
            return False
        return True


def build_document(path: str, raw_content: bytes) -> Document:
    """Wrap raw bytes in a Document, decoding them unless they are binary."""
    is_binary = is_binary_content(raw_content)
    metadata = FileMetadata(
        path=path,
        size_bytes=len(raw_content),
        extension=extension_of(path),
        is_binary=is_binary,
    )
    content = None if is_binary else decode_text(raw_content)
    return Document(metadata=metadata, content=content)
