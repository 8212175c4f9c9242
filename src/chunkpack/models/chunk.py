"""Core data models for kinds, blocks and chunks."""

from dataclasses import dataclass
from enum import Enum


class Kind(str, Enum):
    """Coarse content family of a file, selects the splitting strategy."""

    POWERSHELL = "powershell"
    PYTHON = "python"
    JS = "js"
    JSON = "json"
    NDJSON = "ndjson"
    CSTYLE = "cstyle"
    RUBY = "ruby"
    MARKDOWN = "markdown"
    LOG = "log"
    YAML = "yaml"
    XML = "xml"
    HTML = "html"
    TEXT = "text"


@dataclass(frozen=True)
class Block:
    """A contiguous run of source lines forming one semantic unit."""

    lines: tuple[str, ...]
    start_line: int  # 0-based index of the first line in the source

    @property
    def end_line(self) -> int:
        return self.start_line + len(self.lines)


@dataclass(frozen=True)
class Chunk:
    """A byte-bounded run of lines, the final output unit."""

    lines: tuple[str, ...]
    file_path: str
    chunk_index: int
    start_line: int
    end_line: int

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def size_bytes(self) -> int:
        return len(self.text.encode("utf-8"))
