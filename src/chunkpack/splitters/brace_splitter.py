"""Brace-depth strategy for C-style languages and JavaScript/TypeScript."""

import re
from typing import Sequence

from chunkpack.models import Block
from chunkpack.splitters.base import BlockBuilder
from chunkpack.utils.lines import is_blank

DECLARATION = re.compile(r"^(class|struct|enum|interface)\b")

CONTROL_KEYWORDS = (
    "if", "for", "foreach", "while", "switch", "catch",
    "else", "do", "using", "lock", "return",
)

# modifiers / return type tokens, identifier, parameter list, optional "{"
SIGNATURE = re.compile(
    r"^(?!(?:%s)\b)(?:[\w<>\[\],.?*&:]+\s+)*\w+\s*\([^;]*\)\s*\{?$" % "|".join(CONTROL_KEYWORDS)
)


def opens_declaration(trimmed: str) -> bool:
    """Whether a stripped line starts a type or function declaration."""
    return bool(DECLARATION.match(trimmed) or SIGNATURE.match(trimmed))


class BraceSplitter:
    """One block per declaration.

    Any declaration line starts a new block, nested ones included, so each
    method of a class gets its own block. A running brace depth is kept for
    the open block only; it closes as soon as depth falls back to zero on a
    line holding a ``}``. Control statements such as ``if (x) {`` are not
    declarations and never cut a body.
    """

    def split(self, lines: Sequence[str]) -> list[Block]:
        builder = BlockBuilder()
        depth = 0

        for index, line in enumerate(lines):
            trimmed = line.strip()

            if builder and opens_declaration(trimmed):
                # Blank lines left over from the previous declaration lead
                # into this one rather than forming a block of their own.
                if not all(is_blank(pending) for pending in builder.pending):
                    builder.flush()
                depth = 0

            builder.add(index, line)
            depth += line.count("{") - line.count("}")

            if depth <= 0 and "}" in trimmed:
                builder.flush()
                depth = 0

        return builder.finish()
