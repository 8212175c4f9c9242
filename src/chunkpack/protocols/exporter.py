"""Protocol for output targets."""

from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from chunkpack.models import Payload


@runtime_checkable
class Exporter(Protocol):
    """Protocol for writing named text payloads somewhere.

    Mirrors :class:`Ingester` on the way out: a folder of files or a
    single compressed archive.
    """

    @property
    def target_type(self) -> str:
        """Return identifier for this target type (e.g., 'zip', 'folder')."""
        ...

    def can_handle(self, target: Path) -> bool:
        """Check if this exporter writes to the given target."""
        ...

    def export(self, payloads: Iterable[Payload], target: Path) -> int:
        """Write payloads to the target and return how many were written."""
        ...
