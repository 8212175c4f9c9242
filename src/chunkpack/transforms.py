"""Whole-file transforms: merging several files and renaming to .txt."""

from pathlib import PurePosixPath
from typing import Iterable

from chunkpack.models import Payload


def file_header(name: str) -> str:
    return f"----- {name} -----"


def merge_files(files: Iterable[Payload], add_headers: bool = True) -> str:
    """Concatenate files in order, each followed by a newline.

    Args:
        files: Named contents to merge
        add_headers: Put a ``----- name -----`` line before each file

    Returns:
        The merged text
    """
    parts: list[str] = []
    for payload in files:
        if add_headers:
            parts.append(file_header(payload.name) + "\n")
        parts.append(payload.content + "\n")
    return "".join(parts)


def convert_to_text(name: str, content: str) -> Payload:
    """Rename a file to the ``.txt`` extension, keeping its folder and content."""
    path = PurePosixPath(name.replace("\\", "/"))
    return Payload(name=str(path.with_suffix(".txt")), content=content)
