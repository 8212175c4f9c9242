"""Protocol for block splitting strategies."""

from typing import Protocol, Sequence, runtime_checkable

from chunkpack.models import Block


@runtime_checkable
class BlockSplitter(Protocol):
    """Protocol for block splitting strategies.

    Different strategies are used for different content kinds.
    """

    def split(self, lines: Sequence[str]) -> list[Block]:
        """Split the full line sequence into ordered, non-overlapping blocks."""
        ...
