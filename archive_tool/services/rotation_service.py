"""Shift the generations of a series up by one index, evicting the oldest."""
from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from archive_tool.config.settings import validate_capacity, validate_series_name
from archive_tool.services.name_codec import Generation, iter_generations
from archive_tool.utils.logger import get_logger
from archive_tool.utils.utils import remove_file, rename_no_clobber

log = get_logger(__name__)

@dataclass
class RotationService:
    """Rotates one series inside one directory.

    Not safe against concurrent runs on the same (series, directory) pair;
    callers must serialise those themselves.
    """
    name: str
    directory: Path
    capacity: int

    def __post_init__(self) -> None:
        validate_series_name(self.name)
        validate_capacity(self.capacity)
        self.directory = Path(self.directory)

    def _by_index(self) -> Dict[int, List[Generation]]:
        found: Dict[int, List[Generation]] = defaultdict(list)
        for gen in iter_generations(self.name, self.directory):
            found[gen.index].append(gen)
        for index, gens in found.items():
            if len(gens) > 1:
                log.warning("Found %d files for %s at index %d", len(gens), self.name, index)
        return found

    def rotate(self) -> bool:
        """Make room for a new generation 0.

        Returns False (and touches nothing) when the directory does not
        exist; callers are free to carry on. I/O errors raise IOFailure and
        may leave the series one generation short.
        """
        if not self.directory.is_dir():
            log.warning("Cannot rotate %s: %s is not a directory", self.name, self.directory)
            return False

        found = self._by_index()
        last = self.capacity - 1

        for index in sorted(i for i in found if i >= last):
            for gen in found[index]:
                if index > last:
                    log.warning("Evicting %s: index %d is beyond capacity %d", gen.filename, index, self.capacity)
                else:
                    log.info("Evicting %s", gen.filename)
                remove_file(self.directory / gen.filename)

        # Descending, so a file is only ever moved onto an index already vacated.
        for i in range(last - 1, -1, -1):
            for gen in found.get(i, []):
                moved = gen.with_index(i + 1)
                log.info("Rotating %s -> %s", gen.filename, moved.filename)
                rename_no_clobber(self.directory / gen.filename, self.directory / moved.filename)
        return True

def rotate(name: str, directory: Path, capacity: int) -> bool:
    """Convenience wrapper around RotationService.rotate."""
    return RotationService(name=name, directory=directory, capacity=capacity).rotate()
