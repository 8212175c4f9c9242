"""Shared building blocks for the splitting strategies."""

from typing import Sequence

from chunkpack.models import Block


class BlockBuilder:
    """Accumulates consecutive source lines into the block being built."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self._lines: list[str] = []
        self._start = 0

    def __bool__(self) -> bool:
        return bool(self._lines)

    @property
    def pending(self) -> Sequence[str]:
        return self._lines

    def add(self, index: int, line: str) -> None:
        if not self._lines:
            self._start = index
        self._lines.append(line)

    def flush(self) -> None:
        """Close the open block, if any."""
        if self._lines:
            self.blocks.append(Block(lines=tuple(self._lines), start_line=self._start))
            self._lines = []

    def finish(self) -> list[Block]:
        self.flush()
        return self.blocks


class BoundarySplitter:
    """Starts a new block at every line that looks like a unit boundary.

    Subclasses only decide what a boundary is. No line is ever dropped.
    """

    def is_boundary(self, line: str) -> bool:
        raise NotImplementedError

    def split(self, lines: Sequence[str]) -> list[Block]:
        builder = BlockBuilder()
        for index, line in enumerate(lines):
            if builder and self.is_boundary(line):
                builder.flush()
            builder.add(index, line)
        return builder.finish()
