"""Promote the newest backup of a series into a separate rotation directory."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from archive_tool.exceptions.custom_exceptions import NotFoundError, ValidationError
from archive_tool.services.name_codec import Generation, iter_generations
from archive_tool.services.rotation_service import RotationService
from archive_tool.utils.logger import get_logger
from archive_tool.utils.utils import copy_file, ensure_dir

log = get_logger(__name__)

def find_newest(name: str, directory: Path) -> Optional[Generation]:
    """Return the generation-0 file of a series, or None."""
    newest = [g for g in iter_generations(name, directory) if g.index == 0]
    if not newest:
        return None
    if len(newest) > 1:
        log.warning("Several generation-0 files for %s in %s; using the latest timestamp", name, directory)
    return max(newest, key=lambda g: g.timestamp)

@dataclass
class ArchiveService:
    """Copies a series' generation 0 from a backup directory into an archive directory."""
    name: str
    source_dir: Path
    target_dir: Path
    max_backups: int

    def promote(self) -> Path:
        """Rotate the archive directory and copy the newest backup in as its generation 0."""
        source = Path(self.source_dir)
        if not source.is_dir():
            raise ValidationError(f"Source directory does not exist: {source}")

        gen = find_newest(self.name, source)
        if gen is None:
            raise NotFoundError(f"A backup could not be found for {self.name} in {source}")

        target = ensure_dir(self.target_dir)
        # Same timestamp means this backup was already promoted; duplicates are not filtered.
        current = find_newest(self.name, target)
        if current is not None and current.timestamp == gen.timestamp:
            log.warning("%s was already archived in %s; archiving it again", gen.filename, target)

        RotationService(name=self.name, directory=target, capacity=self.max_backups).rotate()
        dest = copy_file(source / gen.filename, target)
        log.info("Archived %s into %s", gen.filename, target)
        return dest
