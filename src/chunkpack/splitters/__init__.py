"""Block splitting strategies, one per content kind."""

from chunkpack.models import Kind
from chunkpack.protocols import BlockSplitter
from chunkpack.splitters.boundary_splitter import HeadingSplitter, LogSplitter, PrefixSplitter
from chunkpack.splitters.brace_splitter import BraceSplitter
from chunkpack.splitters.json_splitter import BracketScanner, JsonSplitter
from chunkpack.splitters.paragraph_splitter import ParagraphSplitter

_brace = BraceSplitter()
_prefix = PrefixSplitter()
_json = JsonSplitter()
_paragraph = ParagraphSplitter()

# Closed table: every Kind has exactly one strategy.
STRATEGIES: dict[Kind, BlockSplitter] = {
    Kind.CSTYLE: _brace,
    Kind.JS: _brace,
    Kind.PYTHON: _prefix,
    Kind.POWERSHELL: _prefix,
    Kind.RUBY: _prefix,
    Kind.MARKDOWN: HeadingSplitter(),
    Kind.JSON: _json,
    Kind.NDJSON: _json,
    Kind.LOG: LogSplitter(),
    Kind.YAML: _paragraph,
    Kind.XML: _paragraph,
    Kind.HTML: _paragraph,
    Kind.TEXT: _paragraph,
}


def get_splitter(kind: Kind) -> BlockSplitter:
    """Return the splitting strategy for a content kind."""
    return STRATEGIES[kind]


__all__ = [
    "STRATEGIES",
    "get_splitter",
    "BraceSplitter",
    "BracketScanner",
    "HeadingSplitter",
    "JsonSplitter",
    "LogSplitter",
    "ParagraphSplitter",
    "PrefixSplitter",
]
