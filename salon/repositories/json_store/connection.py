"""JSON file store with per-collection single-writer transactions."""

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ...config import logger as log
from ...config.env import get_data_dir
from ...domain.errors import StorageError


class JSONFileStore:
    """Keeps each collection as one document: {"<name>": [ ...records ]}.

    Every read-modify-write happens inside transaction(), which holds the
    collection's lock from read to write. Check-then-write sequences that
    span several calls hold lock(collection) around all of them. A missing
    file reads as an empty collection; any other read or write failure
    raises StorageError.
    """

    def __init__(self, data_dir: Optional[str] = None):
        """Initializes the store.

        Args:
            data_dir: Directory for the JSON files. Uses SALON_DATA_DIR if not specified.
        """
        self.data_dir = Path(data_dir) if data_dir else get_data_dir()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _lock_for(self, collection: str) -> threading.RLock:
        with self._locks_guard:
            if collection not in self._locks:
                self._locks[collection] = threading.RLock()
            return self._locks[collection]

    def _read_file(self, collection: str) -> list[dict]:
        path = self.path_for(collection)
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            log.debug("store", "collection missing, treating as empty", collection=collection)
            return []
        except (OSError, json.JSONDecodeError) as e:
            log.error("store", "read failed", collection=collection, error=str(e))
            raise StorageError(f"Could not read {collection}") from e

        records = document.get(collection) if isinstance(document, dict) else None
        if not isinstance(records, list):
            log.error("store", "unexpected document shape", collection=collection)
            raise StorageError(f"Could not read {collection}")
        return records

    def _write_file(self, collection: str, records: list[dict]) -> None:
        path = self.path_for(collection)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{collection}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump({collection: records}, tmp, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            log.error("store", "write failed", collection=collection, error=str(e))
            raise StorageError(f"Could not write {collection}") from e
        log.debug("store", "collection written", collection=collection, count=len(records))

    def lock(self, collection: str) -> threading.RLock:
        """The collection's lock. Re-entrant, so transactions may run while it is held."""
        return self._lock_for(collection)

    def read(self, collection: str) -> list[dict]:
        """Returns a snapshot of the collection's records."""
        with self._lock_for(collection):
            return self._read_file(collection)

    @contextmanager
    def transaction(self, collection: str) -> Iterator[list[dict]]:
        """Yields the records for in-place mutation and writes them back on success."""
        with self._lock_for(collection):
            records = self._read_file(collection)
            yield records
            self._write_file(collection, records)
