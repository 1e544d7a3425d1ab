"""Unit tests for SnapshotStore and snapshot records."""
import json
from datetime import date, time

import pytest

from processor.exceptions import PersistenceError
from processor.models import Category, Show
from storage.snapshot_store import SnapshotStore


@pytest.fixture
def sample_shows():
    """Create sample shows."""
    return [
        Show("שחר חסון", date(2025, 1, 1), time(19, 0), Category.COMEDY),
        Show("Jazz Night", date(2025, 1, 2), time(20, 30), Category.MUSIC),
        Show(),
    ]


class TestShowRecords:
    """Test cases for Show serialization."""

    def test_to_dict(self):
        show = Show("B", date(2025, 1, 2), time(20, 0), Category.MUSIC)

        assert show.to_dict() == {
            'title': 'B',
            'date': '2025-01-02',
            'time': '20:00:00',
            'category': 'Music',
        }

    def test_from_dict_unknown_category(self):
        with pytest.raises(ValueError):
            Show.from_dict({
                'title': 'B', 'date': '2025-01-02', 'time': '20:00:00', 'category': 'Opera'
            })

    def test_str(self):
        show = Show("B", date(2025, 1, 2), time(20, 0), Category.MUSIC)

        assert str(show) == "Title: B, Date: 2025-01-02, Time: 20:00:00, Category: Music"


class TestSnapshotStore:
    """Test cases for SnapshotStore."""

    def test_save_then_load(self, tmp_path, sample_shows):
        store = SnapshotStore(tmp_path / "shows.json")

        store.save(sample_shows)

        assert store.load() == sample_shows

    def test_save_writes_json_array(self, tmp_path, sample_shows):
        path = tmp_path / "shows.json"

        SnapshotStore(path).save(sample_shows[:1])

        data = json.loads(path.read_text(encoding='utf-8'))
        assert data == [{
            'title': 'שחר חסון',
            'date': '2025-01-01',
            'time': '19:00:00',
            'category': 'Comedy',
        }]
        assert not (tmp_path / "shows.json.tmp").exists()

    def test_save_overwrites(self, tmp_path, sample_shows):
        store = SnapshotStore(tmp_path / "shows.json")
        store.save(sample_shows)

        store.save(sample_shows[1:2])

        assert store.load() == sample_shows[1:2]

    def test_save_creates_parent_directory(self, tmp_path, sample_shows):
        store = SnapshotStore(tmp_path / "state" / "shows.json")

        store.save(sample_shows)

        assert store.load() == sample_shows

    def test_load_missing_file(self, tmp_path):
        assert SnapshotStore(tmp_path / "missing.json").load() == []

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "shows.json"
        path.write_text("{not json", encoding='utf-8')

        assert SnapshotStore(path).load() == []

    def test_load_wrong_shape(self, tmp_path):
        path = tmp_path / "shows.json"
        path.write_text(json.dumps({"shows": []}), encoding='utf-8')

        assert SnapshotStore(path).load() == []

    def test_load_malformed_record(self, tmp_path):
        path = tmp_path / "shows.json"
        path.write_text(
            json.dumps([{'title': 'A', 'date': '2025-13-01', 'time': '19:00:00', 'category': 'Comedy'}]),
            encoding='utf-8'
        )

        assert SnapshotStore(path).load() == []

    def test_load_deeply_nested_json(self, tmp_path):
        """Input that overflows the JSON decoder still loads as empty."""
        path = tmp_path / "shows.json"
        path.write_text("[" * 100000 + "]" * 100000, encoding='utf-8')

        assert SnapshotStore(path).load() == []

    def test_load_missing_field(self, tmp_path):
        path = tmp_path / "shows.json"
        path.write_text(json.dumps([{'title': 'A'}]), encoding='utf-8')

        assert SnapshotStore(path).load() == []

    def test_save_failure_raises_persistence_error(self, tmp_path, sample_shows):
        # A directory at the target path cannot be replaced by a file
        path = tmp_path / "shows.json"
        path.mkdir()

        with pytest.raises(PersistenceError) as exc_info:
            SnapshotStore(path).save(sample_shows)

        assert exc_info.value.path == path
        assert not (tmp_path / "shows.json.tmp").exists()
