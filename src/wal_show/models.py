"""Data models for wal-show"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class BackupReference:
    """A backup and the segment range of the timeline it covers."""

    backup_name: str
    start_segment: str
    end_segment: str

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "BackupReference":
        return cls(
            backup_name=d["backup_name"],
            start_segment=d["start_segment"],
            end_segment=d["end_segment"],
        )


@dataclass(frozen=True)
class TimelineInfo:
    """One timeline of the WAL archive, as produced by the archive scanner.

    ``status`` is an opaque label (``OK``, ``LOST_SEGMENTS``, ...) and is
    rendered as-is.
    """

    id: int
    parent_id: int
    switch_point_lsn: int
    start_segment: str
    end_segment: str
    segment_range_size: int
    segments_count: int
    status: str
    backups: List[BackupReference] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "TimelineInfo":
        return cls(
            id=d["id"],
            parent_id=d["parent_id"],
            switch_point_lsn=d["switch_point_lsn"],
            start_segment=d["start_segment"],
            end_segment=d["end_segment"],
            segment_range_size=d["segment_range_size"],
            segments_count=d["segments_count"],
            status=d["status"],
            backups=[BackupReference.from_dict(b) for b in d.get("backups") or []],
        )
