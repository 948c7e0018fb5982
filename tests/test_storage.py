import json

import pytest

from core.storage import JsonFileStore, MemoryStore, StorageError

def test_memory_store():
    store = MemoryStore({"a": "1"})
    store.set("b", "2")
    assert store.get("a") == "1"
    assert store.get("missing") is None
    assert sorted(store.keys()) == ["a", "b"]

def test_json_file_store_persists_between_instances(tmp_path):
    data_file = tmp_path / "data" / "store.json"

    JsonFileStore(data_file).set("k", "v")

    assert JsonFileStore(data_file).get("k") == "v"
    assert json.loads(data_file.read_text(encoding="utf-8")) == {"k": "v"}
    assert not data_file.with_suffix(".tmp").exists()

def test_json_file_store_missing_file_starts_empty(tmp_path):
    store = JsonFileStore(tmp_path / "absent.json")
    assert store.keys() == []

@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_corrupted_file_is_set_aside(tmp_path, content):
    data_file = tmp_path / "store.json"
    data_file.write_text(content, encoding="utf-8")

    store = JsonFileStore(data_file)

    assert store.keys() == []
    aside = list(tmp_path.glob("store.json.corrupted-*"))
    assert len(aside) == 1
    assert aside[0].read_text(encoding="utf-8") == content

def test_non_string_values_are_ignored(tmp_path):
    data_file = tmp_path / "store.json"
    data_file.write_text(json.dumps({"ok": "v", "bad": 5}), encoding="utf-8")

    assert JsonFileStore(data_file).keys() == ["ok"]

def test_failed_save_rolls_back_memory(tmp_path, monkeypatch):
    store = JsonFileStore(tmp_path / "store.json")
    store.set("k", "old")

    def broken_save():
        raise StorageError("disk full")

    monkeypatch.setattr(store, "_save_sync", broken_save)

    with pytest.raises(StorageError):
        store.set("k", "new")
    with pytest.raises(StorageError):
        store.set("other", "x")

    assert store.get("k") == "old"
    assert store.get("other") is None

def test_undecodable_file_is_set_aside(tmp_path):
    data_file = tmp_path / "store.json"
    data_file.write_bytes(b'{"k": "\xff\xfe"}')

    store = JsonFileStore(data_file)

    assert store.keys() == []
    assert len(list(tmp_path.glob("store.json.corrupted-*"))) == 1
