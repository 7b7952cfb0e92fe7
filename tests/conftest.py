from __future__ import annotations

import datetime
from pathlib import Path

import pytest

from archive_tool.services.name_codec import encode


class StepClock:
    """Returns a new timestamp one minute later on every call."""

    def __init__(self, start: datetime.datetime) -> None:
        self.now = start
        self.calls = []

    def __call__(self) -> datetime.datetime:
        current = self.now
        self.calls.append(current)
        self.now = current + datetime.timedelta(minutes=1)
        return current


@pytest.fixture
def clock() -> StepClock:
    return StepClock(datetime.datetime(2024, 3, 1, 12, 0, 0))


@pytest.fixture
def make_generation():
    """Create an empty generation file and return its path."""

    def _make(directory: Path, name: str, ts: datetime.datetime, index: int) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        p = directory / encode(name, ts, index)
        p.write_bytes(f"{name} {ts:%Y%m%d-%H%M%S}".encode())
        return p

    return _make


def names(directory: Path) -> set:
    return {p.name for p in directory.iterdir()}
