"""General filesystem helpers."""
from __future__ import annotations
from pathlib import Path
import os
import shutil

from archive_tool.exceptions.custom_exceptions import IOFailure

def ensure_dir(path: str | Path) -> Path:
    """Ensure a directory exists and return it as a Path."""
    p = Path(path)
    try:
        p.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IOFailure(f"Could not create directory {p}: {e}") from e
    return p

def copy_file(src: str | Path, dest_dir: str | Path) -> Path:
    """Copy a file into a directory keeping its name; return the new path."""
    dest = Path(dest_dir) / Path(src).name
    try:
        shutil.copy2(str(src), str(dest))
    except (OSError, shutil.Error) as e:
        raise IOFailure(f"Failed to copy {src} to {dest}: {e}") from e
    return dest

def remove_file(path: str | Path) -> None:
    """Delete a file."""
    try:
        Path(path).unlink()
    except OSError as e:
        raise IOFailure(f"Failed to delete {path}: {e}") from e

def rename_no_clobber(src: str | Path, dest: str | Path) -> Path:
    """Rename src to dest, refusing to replace an existing file."""
    s, d = Path(src), Path(dest)
    if d.exists():
        raise IOFailure(f"Refusing to rename {s.name}: {d.name} already exists")
    try:
        os.rename(s, d)
    except OSError as e:
        raise IOFailure(f"Failed to rename {s} to {d}: {e}") from e
    return d
