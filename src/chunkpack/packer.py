"""Greedy packing of blocks into byte-bounded chunks."""

from typing import Iterable

from chunkpack.models import Block, Chunk
from chunkpack.utils.lines import byte_size, joined_size


class SizePacker:
    """Packs blocks left to right into chunks of at most ``max_bytes``.

    Blocks are appended to the open chunk while the joined text still fits.
    A block that is too large on its own is cut at line boundaries instead;
    a single line larger than the budget becomes a chunk by itself, since
    lines are never split.
    """

    DEFAULT_MAX_BYTES = 12_000

    def __init__(self, max_bytes: int = DEFAULT_MAX_BYTES):
        """Initialize the packer.

        Args:
            max_bytes: UTF-8 byte ceiling per chunk. Must be a positive int.

        Raises:
            ValueError: If max_bytes is not a positive integer
        """
        if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes <= 0:
            raise ValueError(f"max_bytes must be a positive integer, got {max_bytes!r}")
        self.max_bytes = max_bytes

    def pack(self, blocks: Iterable[Block], file_path: str = "") -> list[Chunk]:
        """Pack blocks into chunks.

        Args:
            blocks: Ordered blocks from a splitter
            file_path: Source path recorded on every chunk

        Returns:
            Ordered chunks covering every block line exactly once
        """
        pieces: list[list[Block]] = []
        current: list[Block] = []
        current_bytes = 0

        for block in blocks:
            block_bytes = joined_size(block.lines)

            if block_bytes > self.max_bytes:
                if current:
                    pieces.append(current)
                    current, current_bytes = [], 0
                pieces.extend([piece] for piece in self._split_lines(block))
                continue

            # Blocks are joined by one newline in the materialized chunk.
            combined = current_bytes + 1 + block_bytes if current else block_bytes
            if combined <= self.max_bytes:
                current.append(block)
                current_bytes = combined
            else:
                if current:
                    pieces.append(current)
                current, current_bytes = [block], block_bytes

        if current:
            pieces.append(current)

        return [self._to_chunk(piece, file_path, index) for index, piece in enumerate(pieces)]

    def _split_lines(self, block: Block) -> list[Block]:
        """Cut an oversized block into line runs that fit the budget."""
        parts: list[Block] = []
        lines: list[str] = []
        start = block.start_line
        pending_bytes = 0

        for offset, line in enumerate(block.lines):
            line_bytes = byte_size(line) + 1  # plus its newline
            if lines and pending_bytes + line_bytes > self.max_bytes:
                parts.append(Block(lines=tuple(lines), start_line=start))
                lines, pending_bytes = [], 0
            if not lines:
                start = block.start_line + offset
            lines.append(line)
            pending_bytes += line_bytes

        if lines:
            parts.append(Block(lines=tuple(lines), start_line=start))
        return parts

    @staticmethod
    def _to_chunk(blocks: list[Block], file_path: str, index: int) -> Chunk:
        lines = tuple(line for block in blocks for line in block.lines)
        return Chunk(
            lines=lines,
            file_path=file_path,
            chunk_index=index,
            start_line=blocks[0].start_line,
            end_line=blocks[-1].end_line,
        )


def pack_blocks(blocks: Iterable[Block], max_bytes: int, file_path: str = "") -> list[Chunk]:
    """Convenience wrapper around :class:`SizePacker`."""
    return SizePacker(max_bytes).pack(blocks, file_path)
