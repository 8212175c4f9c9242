"""Line and byte helpers shared by the splitters and the packer."""

import re
from typing import Sequence

_LINE_BREAK = re.compile(r"\r\n|\n")


def split_lines(content: str) -> list[str]:
    """Split content into its canonical line sequence.

    Both ``\\r\\n`` and ``\\n`` end a line. Empty content has no lines; a
    trailing newline leaves a trailing empty line so that joining with
    ``\\n`` gives back the normalized content.
    """
    if not content:
        return []
    return _LINE_BREAK.split(content)


def is_blank(line: str) -> bool:
    return not line.strip()


def byte_size(text: str) -> int:
    """UTF-8 encoded length of ``text``."""
    return len(text.encode("utf-8"))


def joined_size(lines: Sequence[str]) -> int:
    """Size of ``lines`` joined by single newlines, without a trailing one."""
    if not lines:
        return 0
    return sum(byte_size(line) for line in lines) + len(lines) - 1


def meets_ratio(count: int, total: int, numerator: int, denominator: int) -> bool:
    """True if ``count >= ceil(total * numerator / denominator)``.

    Kept in integer arithmetic so thresholds such as 60% of 5 land exactly.
    """
    return count * denominator >= total * numerator
