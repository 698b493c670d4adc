"""Tests for collection file reading and atomic writing."""
import json
from pathlib import Path
from unittest.mock import patch

import pandas as pd
import pytest

from recordstore.exceptions import StorageReadError, StorageWriteError
from recordstore.io.readers import read_collection
from recordstore.io.writers import atomic_write_csv, atomic_write_json, dumps_collection


SAMPLE = [
    {"id": "a1", "store_name": "Padaria São João", "status": "on"},
    {
        "id": "b2",
        "store_id": "a1",
        "items": [{"product_id": "101", "quantity": 2, "campaign_id": "301", "unit_price": 20.0}],
        "total_amount": 40,
        "date": "15/08/2023",
    },
]


class TestReadCollection:

    def test_missing_file_is_empty_collection(self, tmp_path):
        assert read_collection(tmp_path / "absent.json") == []

    def test_corrupt_json_raises(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[{\"id\": ", encoding="utf-8")
        with pytest.raises(StorageReadError) as exc_info:
            read_collection(path)
        assert exc_info.value.path == path

    def test_non_array_top_level_raises(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"id": "x"}), encoding="utf-8")
        with pytest.raises(StorageReadError, match="array"):
            read_collection(path)

    def test_non_object_record_raises(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps([{"id": "x"}, "oops"]), encoding="utf-8")
        with pytest.raises(StorageReadError, match="non-object"):
            read_collection(path)


class TestAtomicWriteJson:

    def test_round_trip_preserves_order_and_nesting(self, tmp_path):
        path = tmp_path / "order.json"
        atomic_write_json(SAMPLE, path)
        assert read_collection(path) == SAMPLE
        assert [r["id"] for r in read_collection(path)] == ["a1", "b2"]

    def test_human_readable_output(self, tmp_path):
        path = tmp_path / "store.json"
        atomic_write_json(SAMPLE[:1], path)
        text = path.read_text(encoding="utf-8")
        assert "São João" in text
        assert text.startswith("[\n  {")
        assert text.endswith("\n")
        assert text == dumps_collection(SAMPLE[:1])

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "db" / "nested" / "store.json"
        atomic_write_json([], path)
        assert read_collection(path) == []

    def test_failed_replace_keeps_previous_content(self, tmp_path):
        path = tmp_path / "store.json"
        atomic_write_json(SAMPLE[:1], path)
        before = path.read_bytes()

        with patch.object(Path, "replace", side_effect=OSError("disk full")):
            with pytest.raises(StorageWriteError):
                atomic_write_json(SAMPLE, path)

        assert path.read_bytes() == before
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    def test_unserializable_record_raises_write_error(self, tmp_path):
        path = tmp_path / "store.json"
        with pytest.raises(StorageWriteError):
            atomic_write_json([{"id": "x", "when": object()}], path)
        assert not path.exists()
        assert list(tmp_path.iterdir()) == []


def test_atomic_write_csv(tmp_path):
    path = tmp_path / "exports" / "stores.csv"
    atomic_write_csv(pd.DataFrame([{"id": "a1", "status": "on"}]), path)
    df = pd.read_csv(path)
    assert list(df.columns) == ["id", "status"]
    assert df.loc[0, "id"] == "a1"
