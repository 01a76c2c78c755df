"""Shared file helpers for the JSON-backed repositories.

Each repository keeps its records in one file::

    {"last_id": 7, "records": [...]}

``last_id`` only ever grows, so an id is never handed out twice even after
the row holding it was deleted. Reads and read-modify-write cycles on the
same path are serialized twice over: a per-path ``RLock`` for threads of
this process, and a ``filelock`` lock file for other processes (every CLI
invocation is its own process).
"""

from __future__ import annotations

import json
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from filelock import FileLock, Timeout

from invoicer.domain.exceptions import InternalError

LOCK_TIMEOUT_SECONDS = 10

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self._lock = _lock_for(self._file_path)
        self._file_lock = FileLock(
            str(self._file_path) + ".lock", timeout=LOCK_TIMEOUT_SECONDS
        )
        self._last_id = 0
        self._ensure_file()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            try:
                self._file_lock.acquire()
            except Timeout as exc:
                raise InternalError(
                    f"Timed out waiting for a lock on {self._file_path.name}"
                ) from exc
            try:
                yield
            finally:
                self._file_lock.release()

    def load(self) -> list[dict]:
        with self.locked():
            try:
                raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise InternalError(
                    f"Cannot read {self._file_path.name}: {exc}"
                ) from exc
            if not isinstance(raw, dict) or not isinstance(raw.get("records"), list):
                raise InternalError(f"Corrupt data file {self._file_path.name}")
            records = raw["records"]
            self._last_id = max(
                [int(raw.get("last_id", 0))] + [r["id"] for r in records]
            )
        return records

    def persist(self, records: list[dict]) -> None:
        document = {"last_id": self._last_id, "records": records}
        try:
            self._file_path.write_text(
                json.dumps(document, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise InternalError(f"Cannot write {self._file_path.name}: {exc}") from exc

    def next_id(self) -> int:
        """Reserve the next id. Call inside ``locked()`` after ``load()``."""
        self._last_id += 1
        return self._last_id

    def _ensure_file(self) -> None:
        with self.locked():
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text(
                    json.dumps({"last_id": 0, "records": []}), encoding="utf-8"
                )
