"""Data models for chunkpack."""

from chunkpack.models.chunk import Block, Chunk, Kind
from chunkpack.models.document import Document, FileMetadata, Payload

__all__ = ["Kind", "Block", "Chunk", "Document", "FileMetadata", "Payload"]
