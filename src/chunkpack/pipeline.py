"""End-to-end splitting: classify, split into blocks, pack into chunks."""

import logging
from dataclasses import dataclass, field

from chunkpack.classifier import KindClassifier
from chunkpack.models import Block, Chunk, Document, Kind
from chunkpack.packer import SizePacker
from chunkpack.splitters import get_splitter
from chunkpack.utils.lines import split_lines

logger = logging.getLogger(__name__)


@dataclass
class SplitResult:
    """Everything produced for one file."""

    file_path: str
    kind: Kind
    blocks: list[Block] = field(default_factory=list)
    chunks: list[Chunk] = field(default_factory=list)


def split_file(
    content: str,
    name: str,
    max_bytes: int = SizePacker.DEFAULT_MAX_BYTES,
    classifier: KindClassifier | None = None,
) -> SplitResult:
    """Split one file's text into byte-bounded chunks.

    Args:
        content: Full text of the file, any line-ending convention
        name: File name or path; only the extension drives classification
        max_bytes: UTF-8 byte ceiling per chunk
        classifier: Optional classifier override

    Returns:
        SplitResult with the detected kind, the blocks and the chunks

    Raises:
        ValueError: If max_bytes is not a positive integer
    """
    # Validate before doing any work so a bad budget yields nothing.
    packer = SizePacker(max_bytes)

    lines = split_lines(content)
    kind = (classifier or KindClassifier()).classify(name, lines)
    blocks = get_splitter(kind).split(lines)
    chunks = packer.pack(blocks, file_path=name)

    logger.debug(
        f"{name}: kind={kind.value} lines={len(lines)} "
        f"blocks={len(blocks)} chunks={len(chunks)}"
    )
    return SplitResult(file_path=name, kind=kind, blocks=blocks, chunks=chunks)


def split_document(doc: Document, max_bytes: int = SizePacker.DEFAULT_MAX_BYTES) -> SplitResult | None:
    """Split an ingested document; binary documents are skipped."""
    if doc.content is None:
        logger.debug(f"{doc.name}: binary, skipped")
        return None
    return split_file(doc.content, doc.name, max_bytes)
