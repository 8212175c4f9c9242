"""Exporter writing each payload as its own file."""

import logging
from pathlib import Path
from typing import Iterable

from chunkpack.models import Payload

logger = logging.getLogger(__name__)


class FolderExporter:
    """Writes payloads as UTF-8 text files under a folder.

    Payload names may contain ``/`` to place files in subfolders.
    """

    target_type = "folder"

    def can_handle(self, target: Path) -> bool:
        """Anything that is not an archive path is treated as a folder."""
        return target.suffix.lower() != ".zip"

    def export(self, payloads: Iterable[Payload], target: Path) -> int:
        """Write payloads into ``target``, creating it if needed.

        Returns:
            Number of files written
        """
        target.mkdir(parents=True, exist_ok=True)
        root = target.resolve()
        count = 0
        for payload in payloads:
            path = (root / payload.name).resolve()
            if not path.is_relative_to(root):
                raise ValueError(f"Payload name escapes export folder: {payload.name}")
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload.content, encoding="utf-8", newline="")
            logger.debug(f"wrote {path}")
            count += 1
        return count
