"""
wal-show - WAL timeline history rendering

Renders the timelines found in a backup archive either as a compact
table for humans or as a JSON document for scripts.
"""

__version__ = "0.1.0"

from .formatters import OutputType, TimelineWriter, get_writer
from .models import BackupReference, TimelineInfo

__all__ = [
    "get_writer",  # Main entry point
    "OutputType",
    "TimelineWriter",
    "TimelineInfo",
    "BackupReference",
]
