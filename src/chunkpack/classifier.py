"""Heuristic content-kind detection from a file name and a content sample."""

import re
from typing import Callable, Sequence

from chunkpack.models import Kind
from chunkpack.utils.extensions import extension_of
from chunkpack.utils.lines import is_blank, meets_ratio, split_lines

# One bracketed JSON value per line, optionally followed by a comma.
NDJSON_LINE = re.compile(r"^\s*[\{\[].*[\}\]]\s*,?\s*$")

MARKDOWN_HEADING = re.compile(r"^\s*#")
PYTHON_DEFINITION = re.compile(r"^\s*(def|class)\s")
CSTYLE_HINT = re.compile(r"\bfunction\b|\bclass\b|\binterface\b|\{\s*$")

ISO_TIMESTAMP = re.compile(r"^\s*[0-9]{4}-[0-9]{2}-[0-9]{2}[ T][0-9]{2}:[0-9]{2}:[0-9]{2}")
CLOCK_TIMESTAMP = re.compile(r"^\s*[0-9]{2}:[0-9]{2}:[0-9]{2}")
BRACKETED_DATE = re.compile(r"^\s*\[[0-9]{4}-[0-9]{2}-[0-9]{2}")

# (sample, non_empty) -> matched?
Rule = Callable[[Sequence[str], Sequence[str]], bool]


def _count(pattern: re.Pattern[str], lines: Sequence[str]) -> int:
    return sum(1 for line in lines if pattern.search(line))


def starts_with_timestamp(line: str) -> bool:
    """ISO date-time or bare ``HH:MM:SS`` at the start of a line."""
    return bool(ISO_TIMESTAMP.match(line) or CLOCK_TIMESTAMP.match(line))


def looks_like_ndjson(non_empty: Sequence[str]) -> bool:
    """At least 60% of the non-blank lines each hold one bracketed value."""
    if not non_empty:
        return False
    return meets_ratio(_count(NDJSON_LINE, non_empty), len(non_empty), 3, 5)


def _is_ndjson(sample: Sequence[str], non_empty: Sequence[str]) -> bool:
    return looks_like_ndjson(non_empty)


def _is_json(sample: Sequence[str], non_empty: Sequence[str]) -> bool:
    return non_empty[0].lstrip().startswith(("{", "["))


def _is_markdown(sample: Sequence[str], non_empty: Sequence[str]) -> bool:
    return _count(MARKDOWN_HEADING, sample) >= 3


def _is_python(sample: Sequence[str], non_empty: Sequence[str]) -> bool:
    return _count(PYTHON_DEFINITION, sample) >= 2


def _is_cstyle(sample: Sequence[str], non_empty: Sequence[str]) -> bool:
    return _count(CSTYLE_HINT, sample) >= 2


def _is_log(sample: Sequence[str], non_empty: Sequence[str]) -> bool:
    stamped = sum(1 for line in sample if starts_with_timestamp(line))
    return meets_ratio(stamped, len(sample), 3, 10)


class KindClassifier:
    """Maps a file name and content sample to a :class:`Kind`.

    The extension table is consulted first; only unmapped extensions reach
    the content rules, which are tried in order and the first match wins.
    """

    SAMPLE_SIZE = 200

    EXTENSION_KINDS: dict[str, Kind] = {
        ".ps1": Kind.POWERSHELL,
        ".py": Kind.PYTHON,
        ".pyw": Kind.PYTHON,
        ".js": Kind.JS,
        ".jsx": Kind.JS,
        ".ts": Kind.JS,
        ".tsx": Kind.JS,
        ".json": Kind.JSON,
        ".jsonl": Kind.NDJSON,
        ".ndjson": Kind.NDJSON,
        ".cs": Kind.CSTYLE,
        ".java": Kind.CSTYLE,
        ".cpp": Kind.CSTYLE,
        ".c": Kind.CSTYLE,
        ".h": Kind.CSTYLE,
        ".go": Kind.CSTYLE,
        ".rb": Kind.RUBY,
        ".md": Kind.MARKDOWN,
        ".log": Kind.LOG,
        ".yaml": Kind.YAML,
        ".yml": Kind.YAML,
        ".xml": Kind.XML,
        ".html": Kind.HTML,
        ".htm": Kind.HTML,
    }

    RULES: list[tuple[Rule, Kind]] = [
        (_is_ndjson, Kind.NDJSON),
        (_is_json, Kind.JSON),
        (_is_markdown, Kind.MARKDOWN),
        (_is_python, Kind.PYTHON),
        (_is_cstyle, Kind.CSTYLE),
        (_is_log, Kind.LOG),
    ]

    def classify(self, name: str, lines: Sequence[str]) -> Kind:
        """Classify a file from its name and its line sequence.

        Args:
            name: File name; only its extension is used
            lines: The file's lines; at most SAMPLE_SIZE are inspected

        Returns:
            The detected Kind
        """
        kind = self.EXTENSION_KINDS.get(extension_of(name))
        if kind is not None:
            return kind
        return self.detect(lines[: self.SAMPLE_SIZE])

    def detect(self, sample: Sequence[str]) -> Kind:
        """Content-only detection over an already-truncated sample."""
        non_empty = [line for line in sample if not is_blank(line)]
        if not non_empty:
            return Kind.TEXT

        for rule, kind in self.RULES:
            if rule(sample, non_empty):
                return kind
        return Kind.TEXT


_default_classifier = KindClassifier()


def classify(name: str, content: str) -> Kind:
    """Classify raw file content. Pure and deterministic."""
    return _default_classifier.classify(name, split_lines(content))
