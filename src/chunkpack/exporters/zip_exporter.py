"""Exporter bundling payloads into one compressed ZIP archive."""

import zipfile
from pathlib import Path
from typing import Iterable

from chunkpack.models import Payload


class ZipExporter:
    """Bundles payloads into a DEFLATE-compressed ZIP archive."""

    target_type = "zip"

    DEFAULT_NAME = "converted_files.zip"
    COMPRESS_LEVEL = 6

    def can_handle(self, target: Path) -> bool:
        """Check if the target names a zip file."""
        return target.suffix.lower() == ".zip"

    def export(self, payloads: Iterable[Payload], target: Path) -> int:
        """Write every payload as a member of the archive at ``target``.

        Returns:
            Number of members written
        """
        target.parent.mkdir(parents=True, exist_ok=True)
        count = 0
        with zipfile.ZipFile(
            target,
            "w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=self.COMPRESS_LEVEL,
        ) as zf:
            for payload in payloads:
                zf.writestr(payload.name, payload.content.encode("utf-8"))
                count += 1
        return count
