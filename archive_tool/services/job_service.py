"""Runs the mode selected in settings: backup or archive."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from archive_tool.config.settings import Settings
from archive_tool.services.archive_service import ArchiveService
from archive_tool.services.backup_service import BackupService
from archive_tool.exceptions.custom_exceptions import ValidationError
from archive_tool.utils.constants import ARCHIVE_MODE, MANUAL_TRIGGER, SOURCE_REQUIRED
from archive_tool.utils.logger import get_logger

log = get_logger(__name__)

@dataclass
class JobResult:
    """Outcome of a run."""
    mode: str
    output_path: Path
    message: str

@dataclass
class JobService:
    """High-level orchestration."""
    settings: Settings

    def run(self, trigger: str = MANUAL_TRIGGER) -> JobResult:
        """Run one backup or one archive promotion."""
        s = self.settings
        if s.mode == ARCHIVE_MODE:
            if s.source_dir is None:
                raise ValidationError(SOURCE_REQUIRED)
            out = ArchiveService(
                name=s.name,
                source_dir=s.source_dir,
                target_dir=s.target_dir,
                max_backups=s.capacity,
            ).promote()
            msg = f"Archived {out.name} into {s.target_dir}."
        else:
            out = BackupService(
                name=s.name,
                target_dir=s.target_dir,
                max_backups=s.capacity,
            ).backup(s.inputs)
            msg = f"Created {out.name} in {s.target_dir}."
        log.info("Trigger=%s %s", trigger, msg)
        return JobResult(mode=s.mode, output_path=out, message=msg)
