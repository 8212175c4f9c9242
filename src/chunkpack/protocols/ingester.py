"""Protocol for input source handlers."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from chunkpack.models import Document


@runtime_checkable
class Ingester(Protocol):
    """Protocol for input source handlers.

    Implementations read a single file, a folder or an archive into
    in-memory documents. Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, source: Path) -> bool:
        """Check if this ingester can process the given source."""
        ...

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield documents from the source.

        Entries over the size ceiling or with hidden names are never yielded.
        For binary files, yield Document with content=None.
        """
        ...
