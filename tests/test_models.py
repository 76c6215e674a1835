"""Tests for timeline data models."""

from wal_show.models import BackupReference, TimelineInfo


class TestTimelineInfo:
    def test_to_dict_keeps_attribute_names(self, timelines):
        data = timelines[0].to_dict()
        assert list(data) == [
            "id",
            "parent_id",
            "switch_point_lsn",
            "start_segment",
            "end_segment",
            "segment_range_size",
            "segments_count",
            "status",
            "backups",
        ]
        assert len(data["backups"]) == 3
        assert data["backups"][0]["backup_name"] == "base_000000010000000000000002"

    def test_from_dict_restores_record(self, timelines):
        for timeline in timelines:
            assert TimelineInfo.from_dict(timeline.to_dict()) == timeline

    def test_from_dict_defaults_missing_backups(self):
        record = TimelineInfo.from_dict(
            {
                "id": 3,
                "parent_id": 2,
                "switch_point_lsn": 201326592,
                "start_segment": "00000003000000000000000C",
                "end_segment": "00000003000000000000000C",
                "segment_range_size": 1,
                "segments_count": 1,
                "status": "OK",
            }
        )
        assert record.backups == []


class TestBackupReference:
    def test_from_dict(self):
        ref = BackupReference.from_dict(
            {
                "backup_name": "base_000000010000000000000002",
                "start_segment": "000000010000000000000002",
                "end_segment": "000000010000000000000003",
            }
        )
        assert ref.backup_name == "base_000000010000000000000002"
