"""Tests for the JSON file store."""

import json

import pytest

from salon.domain.errors import StorageError
from salon.repositories.json_store.connection import JSONFileStore


def test_missing_file_reads_as_empty(tmp_path):
    store = JSONFileStore(str(tmp_path))

    assert store.read("customers") == []


def test_transaction_writes_document(tmp_path):
    store = JSONFileStore(str(tmp_path))

    with store.transaction("customers") as records:
        records.append({"id": "1", "name": "山田 花子"})

    document = json.loads((tmp_path / "customers.json").read_text(encoding="utf-8"))
    assert document == {"customers": [{"id": "1", "name": "山田 花子"}]}
    assert list(tmp_path.glob("*.tmp")) == []


def test_failed_transaction_writes_nothing(tmp_path):
    store = JSONFileStore(str(tmp_path))
    with store.transaction("customers") as records:
        records.append({"id": "1"})

    with pytest.raises(RuntimeError):
        with store.transaction("customers") as records:
            records.append({"id": "2"})
            raise RuntimeError("boom")

    assert store.read("customers") == [{"id": "1"}]


def test_corrupt_file_raises_storage_error(tmp_path):
    (tmp_path / "services.json").write_text("{not json", encoding="utf-8")
    store = JSONFileStore(str(tmp_path))

    with pytest.raises(StorageError):
        store.read("services")


def test_unexpected_shape_raises_storage_error(tmp_path):
    (tmp_path / "services.json").write_text('{"other": []}', encoding="utf-8")
    store = JSONFileStore(str(tmp_path))

    with pytest.raises(StorageError):
        store.read("services")


def test_numeric_legacy_ids_are_read_as_strings(container, data_dir):
    (data_dir / "services.json").write_text(
        json.dumps(
            {"services": [{"id": 3, "name": "カット", "duration": 40, "price": 4500, "category": "カット"}]}
        ),
        encoding="utf-8",
    )

    service = container.services.get_by_id("3")

    assert service is not None
    assert service.is_active


def test_failed_write_raises_storage_error_and_cleans_up(tmp_path, monkeypatch):
    store = JSONFileStore(str(tmp_path))
    with store.transaction("services") as records:
        records.append({"id": "1"})

    def refuse(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("salon.repositories.json_store.connection.os.replace", refuse)
    with pytest.raises(StorageError):
        with store.transaction("services") as records:
            records.append({"id": "2"})

    assert list(tmp_path.glob(".services.*.tmp")) == []
    monkeypatch.undo()
    assert store.read("services") == [{"id": "1"}]
