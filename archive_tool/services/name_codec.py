"""Filename grammar for backup generations: NAME-YYYYMMDD-HHMMSS.N.tar.gz"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional
import datetime
import re

from archive_tool.config.settings import validate_series_name
from archive_tool.exceptions.custom_exceptions import IOFailure, ValidationError
from archive_tool.utils.constants import ARCHIVE_SUFFIX
from archive_tool.utils.logger import get_logger

log = get_logger(__name__)

# Everything after "NAME-". The series name itself is never part of a pattern.
_TAIL_RE = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})-([0-9]{2})([0-9]{2})([0-9]{2})\.(0|[1-9][0-9]*)")

@dataclass(frozen=True)
class Generation:
    """One timestamped file of a series; index 0 is the newest."""
    name: str
    timestamp: datetime.datetime
    index: int

    @property
    def filename(self) -> str:
        return encode(self.name, self.timestamp, self.index)

    def with_index(self, index: int) -> "Generation":
        """Same backup, shifted to another index."""
        return Generation(name=self.name, timestamp=self.timestamp, index=index)

def encode(name: str, timestamp: datetime.datetime, index: int) -> str:
    """Build the filename for a generation."""
    validate_series_name(name)
    if index < 0:
        raise ValidationError(f"Generation index must be non-negative, got {index}.")
    if timestamp.tzinfo is not None or timestamp.microsecond:
        raise ValidationError(f"Timestamp must be naive with second resolution, got {timestamp.isoformat()}.")
    t = timestamp
    stamp = f"{t.year:04d}{t.month:02d}{t.day:02d}-{t.hour:02d}{t.minute:02d}{t.second:02d}"
    return f"{name}-{stamp}.{index}{ARCHIVE_SUFFIX}"

def decode(filename: str, name: str) -> Optional[Generation]:
    """Parse filename as a generation of series name, or None if it is not one."""
    prefix = f"{name}-"
    if not filename.startswith(prefix) or not filename.endswith(ARCHIVE_SUFFIX):
        return None
    tail = filename[len(prefix):len(filename) - len(ARCHIVE_SUFFIX)]
    m = _TAIL_RE.fullmatch(tail)
    if not m:
        return None
    try:
        ts = datetime.datetime(*(int(g) for g in m.groups()[:6]))
    except ValueError:
        return None
    return Generation(name=name, timestamp=ts, index=int(m.group(7)))

def iter_generations(name: str, directory: Path) -> Iterator[Generation]:
    """Yield the decoded generations of a series found in directory.

    A fresh scan runs on every call; entries belonging to other series or
    not following the grammar are skipped. Only regular files count.
    """
    validate_series_name(name)
    try:
        entries = sorted(Path(directory).iterdir())
    except OSError as e:
        raise IOFailure(f"Could not list {directory}: {e}") from e
    for entry in entries:
        gen = decode(entry.name, name)
        if gen is None or not entry.is_file():
            log.debug("Skipping %s", entry.name)
            continue
        yield gen
