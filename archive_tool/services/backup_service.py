"""Create a new generation-0 archive for a series, rotating older ones."""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable
import datetime

from archive_tool.clients.tar_client import TarClient
from archive_tool.exceptions.custom_exceptions import NotFoundError, ValidationError
from archive_tool.services.name_codec import encode
from archive_tool.services.rotation_service import RotationService
from archive_tool.utils.constants import INPUTS_REQUIRED
from archive_tool.utils.logger import get_logger
from archive_tool.utils.utils import ensure_dir

log = get_logger(__name__)

@dataclass
class BackupService:
    """Handles rotation and creation of backups for one series."""
    name: str
    target_dir: Path
    max_backups: int
    tar: TarClient = field(default_factory=TarClient)
    clock: Callable[[], datetime.datetime] = datetime.datetime.now

    def backup(self, inputs: Iterable[Path]) -> Path:
        """Archive inputs as the new generation 0 and return its path."""
        paths = [Path(p) for p in inputs]
        if not paths:
            raise ValidationError(INPUTS_REQUIRED)
        # Nothing on disk changes until every input is known to exist.
        for p in paths:
            if not (p.is_file() or p.is_dir()):
                raise NotFoundError(f"File/directory not found: {p}")

        log.info("Backing up: %s", " ".join(str(p) for p in paths))
        log.info("Into: %s", Path(self.target_dir).resolve())

        target = ensure_dir(self.target_dir)
        RotationService(name=self.name, directory=target, capacity=self.max_backups).rotate()

        archive_name = encode(self.name, self.clock().replace(microsecond=0), 0)
        return self.tar.create(target / archive_name, paths)
