"""Strategy for JSON documents and newline-delimited JSON."""

from dataclasses import dataclass
from typing import Sequence

from chunkpack.classifier import looks_like_ndjson
from chunkpack.models import Block
from chunkpack.splitters.base import BlockBuilder
from chunkpack.utils.lines import is_blank

_BRACKET_DELTA = {"{": 1, "[": 1, "}": -1, "]": -1}


@dataclass
class BracketScanner:
    """Counts bracket depth while skipping over double-quoted strings.

    Two flags make up the whole state: ``inside_string`` flips on every
    unescaped quote, and ``escape_next`` swallows exactly one character
    after a backslash.
    """

    inside_string: bool = False
    escape_next: bool = False

    def step(self, ch: str) -> int:
        """Consume one character and return its depth contribution."""
        if self.escape_next:
            self.escape_next = False
            return 0
        if ch == "\\":
            self.escape_next = True
            return 0
        if ch == '"':
            self.inside_string = not self.inside_string
            return 0
        if self.inside_string:
            return 0
        return _BRACKET_DELTA.get(ch, 0)

    def scan(self, line: str) -> int:
        """Net depth change of a line. State starts fresh for every line."""
        self.inside_string = False
        self.escape_next = False
        return sum(self.step(ch) for ch in line)


class JsonSplitter:
    """One block per JSON value.

    Newline-delimited input gets one block per non-blank line. Anything
    else is cut wherever the running bracket depth returns to zero.
    """

    def split(self, lines: Sequence[str]) -> list[Block]:
        indexed = [(i, line) for i, line in enumerate(lines) if not is_blank(line)]
        if looks_like_ndjson([line for _, line in indexed]):
            return [Block(lines=(line,), start_line=i) for i, line in indexed]
        return self._split_by_depth(lines)

    def _split_by_depth(self, lines: Sequence[str]) -> list[Block]:
        builder = BlockBuilder()
        scanner = BracketScanner()
        depth = 0

        for index, line in enumerate(lines):
            builder.add(index, line)
            depth += scanner.scan(line)
            if depth <= 0:
                builder.flush()
                depth = 0

        return builder.finish()
