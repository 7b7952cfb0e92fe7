"""Centralized configuration built once from CLI arguments with environment-variable fallbacks."""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple
import os
import re

from archive_tool.exceptions.custom_exceptions import ValidationError
from archive_tool.utils.constants import (
    ARCHIVE_MODE, BACKUP_MODE, DEFAULT_MAX_BACKUPS, SERIES_NAME_CHARS,
    MODE_REQUIRED, TARGET_REQUIRED, NAME_REQUIRED, INPUTS_REQUIRED, SOURCE_REQUIRED,
)

SERIES_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

def _env(key: str, default: str) -> str:
    """Read an environment variable with a fallback."""
    return os.getenv(key, default)

def _env_int(key: str, default: int) -> int:
    """Read an integer env var with fallback."""
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default

def validate_series_name(name: str) -> str:
    """Return name unchanged if it only uses the safe character set."""
    if not name or not SERIES_NAME_RE.fullmatch(name):
        raise ValidationError(f"Invalid backup name {name!r}: use only {SERIES_NAME_CHARS}.")
    return name

def validate_capacity(capacity: int) -> int:
    """Capacity is the number of generations kept per series."""
    if capacity < 1:
        raise ValidationError(f"Maximum number of backups must be at least 1, got {capacity}.")
    return capacity

@dataclass(frozen=True)
class Settings:
    """Run settings (one immutable value per invocation)."""
    mode: str
    target_dir: Path
    name: str
    capacity: int = DEFAULT_MAX_BACKUPS

    source_dir: Optional[Path] = None
    inputs: Tuple[Path, ...] = ()

    log_level: str = "INFO"
    interval_seconds: Optional[int] = None
    local_timezone: Optional[str] = None

    @staticmethod
    def from_args(args: Any) -> "Settings":
        """Build settings from an argparse namespace, validating mode and required values."""
        archive_mode = bool(getattr(args, "archive", False))
        backup_mode = bool(getattr(args, "backup", False))
        if archive_mode == backup_mode:
            raise ValidationError(MODE_REQUIRED)
        mode = ARCHIVE_MODE if archive_mode else BACKUP_MODE

        if not getattr(args, "target_dir", None):
            raise ValidationError(TARGET_REQUIRED)
        if not getattr(args, "name", None):
            raise ValidationError(NAME_REQUIRED)
        name = validate_series_name(args.name)

        capacity = getattr(args, "max_backups", None)
        if capacity is None:
            capacity = _env_int("MAX_BACKUPS", DEFAULT_MAX_BACKUPS)
        capacity = validate_capacity(capacity)

        inputs = tuple(Path(p) for p in (getattr(args, "inputs", None) or ()))
        source_dir = Path(args.source_dir) if getattr(args, "source_dir", None) else None
        if mode == BACKUP_MODE and not inputs:
            raise ValidationError(INPUTS_REQUIRED)
        if mode == ARCHIVE_MODE and (source_dir is None or not source_dir.is_dir()):
            raise ValidationError(SOURCE_REQUIRED)

        log_level = _env("LOG_LEVEL", "INFO").upper()
        if getattr(args, "verbose", False):
            log_level = "DEBUG"
        elif getattr(args, "quiet", False):
            log_level = "WARNING"

        interval = getattr(args, "every", None)
        if interval is not None and interval < 1:
            raise ValidationError(f"--every must be a positive number of seconds, got {interval}.")

        return Settings(
            mode=mode,
            target_dir=Path(args.target_dir),
            name=name,
            capacity=capacity,
            source_dir=source_dir,
            inputs=inputs,
            log_level=log_level,
            interval_seconds=interval,
            local_timezone=_env("LOCAL_TIMEZONE", "") or None,
        )
