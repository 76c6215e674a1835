"""Tests for loading timeline records."""

import io
import json

import pytest

from wal_show.exceptions import InputFileError, InvalidInputError
from wal_show.loader import load_timelines


def _dump(timelines):
    return json.dumps([t.to_dict() for t in timelines])


class TestLoadTimelines:
    def test_from_path(self, tmp_path, timelines):
        path = tmp_path / "timelines.json"
        path.write_text(_dump(timelines))
        assert load_timelines(path) == timelines
        assert load_timelines(str(path)) == timelines

    def test_from_stream(self, timelines):
        assert load_timelines(io.StringIO(_dump(timelines))) == timelines

    def test_empty_array(self):
        assert load_timelines(io.StringIO("[]")) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputFileError) as excinfo:
            load_timelines(tmp_path / "missing.json")
        assert excinfo.value.path.name == "missing.json"

    def test_malformed_json(self):
        with pytest.raises(InvalidInputError, match="malformed JSON"):
            load_timelines(io.StringIO("[{"))

    def test_not_an_array(self):
        with pytest.raises(InvalidInputError, match="expected a JSON array"):
            load_timelines(io.StringIO('{"id": 1}'))

    def test_item_not_an_object(self):
        with pytest.raises(InvalidInputError, match="item 0"):
            load_timelines(io.StringIO("[1]"))

    def test_missing_key(self, timelines):
        data = [t.to_dict() for t in timelines]
        del data[1]["status"]
        with pytest.raises(InvalidInputError, match="item 1 is missing key 'status'"):
            load_timelines(io.StringIO(json.dumps(data)))

    def test_malformed_backups(self, timelines):
        data = [t.to_dict() for t in timelines]
        data[0]["backups"] = ["base_000000010000000000000002"]
        with pytest.raises(InvalidInputError, match="backups"):
            load_timelines(io.StringIO(json.dumps(data)))
