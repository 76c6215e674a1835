"""Shared test fixtures for wal-show."""

import logging

import pytest
from rich.logging import RichHandler

from wal_show.models import BackupReference, TimelineInfo


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and WAL_SHOW_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in ("OUTPUT_TYPE", "INCLUDE_BACKUPS", "TABLE_WIDTH", "JSON_INDENT", "VERBOSITY", "LOG_FILE"):
        monkeypatch.delenv(f"WAL_SHOW_{name}", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers installed by setup_logging so files are closed per test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers and isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    logging.getLogger("wal_show").setLevel(logging.NOTSET)


def make_backups(count, timeline_id=1):
    return [
        BackupReference(
            backup_name=f"base_00000001000000000000000{i + 2}",
            start_segment=f"0000000{timeline_id}00000000000000{i + 2:02d}",
            end_segment=f"0000000{timeline_id}00000000000000{i + 3:02d}",
        )
        for i in range(count)
    ]


@pytest.fixture
def timelines():
    """Timeline 1 (three backups) and its child timeline 2 (none)."""
    return [
        TimelineInfo(
            id=1,
            parent_id=0,
            switch_point_lsn=0,
            start_segment="000000010000000000000001",
            end_segment="000000010000000000000009",
            segment_range_size=9,
            segments_count=9,
            status="OK",
            backups=make_backups(3),
        ),
        TimelineInfo(
            id=2,
            parent_id=1,
            switch_point_lsn=150994944,
            start_segment="000000020000000000000009",
            end_segment="00000002000000000000000C",
            segment_range_size=4,
            segments_count=3,
            status="LOST_SEGMENTS",
            backups=[],
        ),
    ]
