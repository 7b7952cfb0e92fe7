import argparse
from pathlib import Path

import pytest

from archive_tool.config.settings import Settings
from archive_tool.exceptions.custom_exceptions import ValidationError


def _args(**kw):
    base = dict(archive=False, backup=True, target_dir="t", name="db", source_dir=None,
                max_backups=None, inputs=["f"], verbose=False, quiet=False, every=None)
    base.update(kw)
    return argparse.Namespace(**base)


def test_defaults(monkeypatch):
    monkeypatch.delenv("MAX_BACKUPS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings.from_args(_args())

    assert s.mode == "backup"
    assert s.capacity == 10
    assert s.inputs == (Path("f"),)
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MAX_BACKUPS", "4")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings.from_args(_args())

    assert s.capacity == 4
    assert s.log_level == "DEBUG"


def test_explicit_capacity_beats_env(monkeypatch):
    monkeypatch.setenv("MAX_BACKUPS", "4")
    assert Settings.from_args(_args(max_backups=2)).capacity == 2


def test_unparseable_env_capacity_falls_back(monkeypatch):
    monkeypatch.setenv("MAX_BACKUPS", "lots")
    assert Settings.from_args(_args()).capacity == 10


def test_quiet_flag(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert Settings.from_args(_args(quiet=True)).log_level == "WARNING"


def test_archive_mode_needs_existing_source(tmp_path):
    with pytest.raises(ValidationError):
        Settings.from_args(_args(archive=True, backup=False, inputs=[], source_dir=str(tmp_path / "nope")))

    s = Settings.from_args(_args(archive=True, backup=False, inputs=[], source_dir=str(tmp_path)))
    assert s.mode == "archive"
    assert s.source_dir == tmp_path


def test_settings_are_immutable():
    s = Settings.from_args(_args())
    with pytest.raises(AttributeError):
        s.capacity = 3


def test_every_must_be_positive():
    with pytest.raises(ValidationError):
        Settings.from_args(_args(every=0))
