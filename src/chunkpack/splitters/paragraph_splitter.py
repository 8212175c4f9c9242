"""Paragraph strategy for prose, markup and anything unrecognized."""

from typing import Sequence

from chunkpack.models import Block
from chunkpack.splitters.base import BlockBuilder
from chunkpack.utils.lines import is_blank


class ParagraphSplitter:
    """Default splitting: runs of non-blank lines form blocks.

    Whitespace-only lines separate paragraphs and are dropped; they are
    not part of any block.
    """

    def split(self, lines: Sequence[str]) -> list[Block]:
        builder = BlockBuilder()
        for index, line in enumerate(lines):
            if is_blank(line):
                builder.flush()
                continue
            builder.add(index, line)
        return builder.finish()
