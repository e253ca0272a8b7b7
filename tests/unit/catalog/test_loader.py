"""Tests for catalog snapshot loading."""

import json
from pathlib import Path

import pytest
import yaml

from castscore.catalog.loader import load_snapshot
from castscore.utils.errors import SnapshotLoadError

SNAPSHOT = {
    "channels": [{"id": "ch-1", "name": "Kitchen Science", "type": "audio"}],
    "episodes": [
        {"id": "ep-1", "channel_id": "ch-1", "title": "Sourdough", "duration": "12:00"},
        {"id": "ep-2", "channel_id": "ch-1", "title": "Kimchi", "excluded": True},
    ],
}


class TestLoadSnapshot:
    """Tests for JSON and YAML snapshot files."""

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(SNAPSHOT))

        snapshot = load_snapshot(path)

        assert len(snapshot.channels) == 1
        assert [e.id for e in snapshot.episodes] == ["ep-1", "ep-2"]
        assert snapshot.episodes[1].excluded is True

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.safe_dump(SNAPSHOT))

        snapshot = load_snapshot(path)

        assert snapshot.episodes[0].duration_seconds == 720

    def test_empty_yaml_is_empty_snapshot(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.yml"
        path.write_text("")
        snapshot = load_snapshot(path)
        assert snapshot.channels == []
        assert snapshot.episodes == []

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SnapshotLoadError, match="not found"):
            load_snapshot(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("{not json")
        with pytest.raises(SnapshotLoadError, match="Could not read"):
            load_snapshot(path)

    def test_invalid_records(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"episodes": [{"title": "no ids"}]}))
        with pytest.raises(SnapshotLoadError, match="Invalid snapshot"):
            load_snapshot(path)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_bytes(b'{"channels": [], "episodes": [{"id": "\xff"}]}')
        with pytest.raises(SnapshotLoadError, match="Could not read"):
            load_snapshot(path)
