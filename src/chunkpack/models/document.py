"""Data models for ingested documents and exported payloads."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FileMetadata:
    """Metadata for any file (text or binary)."""

    path: str
    size_bytes: int
    extension: str
    is_binary: bool


@dataclass
class Document:
    """A document read from an input source."""

    metadata: FileMetadata
    content: Optional[str] = None  # None for binary files

    @property
    def name(self) -> str:
        return self.metadata.path


@dataclass(frozen=True)
class Payload:
    """A named text payload handed to an exporter."""

    name: str
    content: str
