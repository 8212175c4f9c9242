"""Output targets (exporters) for chunk payloads."""

from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

from chunkpack.exporters.folder_exporter import FolderExporter
from chunkpack.exporters.zip_exporter import ZipExporter
from chunkpack.models import Chunk, Payload
from chunkpack.protocols import Exporter

# Registry of available exporters, zip first since folder accepts anything else
_EXPORTERS: list[Exporter] = [
    ZipExporter(),
    FolderExporter(),
]


def get_exporter(target: Path | str) -> Optional[Exporter]:
    """Find an exporter for the given output path."""
    target_path = Path(target)
    for exporter in _EXPORTERS:
        if exporter.can_handle(target_path):
            return exporter
    return None


def chunk_payload_name(file_path: str, index: int) -> str:
    """Name of a chunk file: ``<stem>_partNN.txt`` next to the source path.

    ``index`` is the 0-based chunk index; part numbers start at 1.
    """
    path = PurePosixPath(file_path.replace("\\", "/"))
    name = f"{path.stem or 'chunk'}_part{index + 1:02d}.txt"
    if path.parent == PurePosixPath("."):
        return name
    return str(path.parent / name)


def chunk_payloads(chunks: Iterable[Chunk]) -> list[Payload]:
    """Turn chunks into named payloads ready for an exporter."""
    return [
        Payload(name=chunk_payload_name(chunk.file_path, chunk.chunk_index), content=chunk.text)
        for chunk in chunks
    ]


__all__ = [
    "get_exporter",
    "chunk_payload_name",
    "chunk_payloads",
    "FolderExporter",
    "ZipExporter",
]
