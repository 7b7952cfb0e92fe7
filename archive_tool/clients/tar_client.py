"""Thin wrapper around tarfile for writing gzip-compressed archives."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List
import os
import tarfile

from archive_tool.exceptions.custom_exceptions import IOFailure
from archive_tool.utils.logger import get_logger

log = get_logger(__name__)

@dataclass
class TarClient:
    """Creates .tar.gz files with consistent member naming and errors."""
    compression: str = "gz"

    def create(self, archive_path: Path, inputs: Iterable[Path]) -> Path:
        """Write inputs into archive_path.

        Each input is stored relative to its own parent directory, so members
        carry the entry name only. The archive is written under a temporary
        name first and moved into place once complete.
        """
        archive_path = Path(archive_path)
        tmp = archive_path.with_name(archive_path.name + ".tmp")
        members: List[str] = []
        try:
            with tarfile.open(tmp, f"w:{self.compression}") as tar:
                for p in inputs:
                    full = Path(p).resolve()
                    log.debug("Adding %s as %s", full, full.name)
                    tar.add(str(full), arcname=full.name)
                    members.append(full.name)
            os.replace(tmp, archive_path)
        except (OSError, tarfile.TarError) as e:
            tmp.unlink(missing_ok=True)
            raise IOFailure(f"Failed to create archive {archive_path}: {e}") from e
        log.info("Created %s (%s)", archive_path, ", ".join(members))
        return archive_path
