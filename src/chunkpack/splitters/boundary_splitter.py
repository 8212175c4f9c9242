"""Line-prefix strategies: script definitions, markdown headings, log entries."""

import re

from chunkpack.classifier import BRACKETED_DATE, starts_with_timestamp
from chunkpack.splitters.base import BoundarySplitter


class PrefixSplitter(BoundarySplitter):
    """Python, PowerShell and Ruby: a top-level definition opens a block.

    Only unindented ``def``/``class``/``function`` lines count, so methods
    stay with their class.
    """

    DEFINITION = re.compile(r"^(def|class|function)\s")

    def is_boundary(self, line: str) -> bool:
        return bool(self.DEFINITION.match(line))


class HeadingSplitter(BoundarySplitter):
    """Markdown: each heading opens a section block."""

    HEADING = re.compile(r"^\s*#")

    def is_boundary(self, line: str) -> bool:
        return bool(self.HEADING.match(line))


class LogSplitter(BoundarySplitter):
    """Logs: a timestamped line opens an entry; continuation lines follow it."""

    def is_boundary(self, line: str) -> bool:
        return starts_with_timestamp(line) or bool(BRACKETED_DATE.match(line))
