"""JSON-file-backed store and Unit of Work.

The whole shop (clock, stock ledger, orders) is one JSON document:

    {
      "clock": {"current_date": "2024-05-01"},
      "stock_items": [...],
      "orders": [...]
    }

A ``JsonUnitOfWork`` holds the file's lock from the moment it loads the
document until it leaves its ``with`` block, so read-check-write
sequences of concurrent requests are serialised.  ``commit()`` writes the
document to a temporary file next to the original and swaps it in with
``os.replace``; a failure at any point leaves the previous file intact.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

import structlog

from flowershop.application.unit_of_work import UnitOfWork
from flowershop.domain.exceptions import StoreError
from flowershop.infrastructure.persistence.json_clock_repository import (
    JsonClockRepository,
)
from flowershop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from flowershop.infrastructure.persistence.json_stock_item_repository import (
    JsonStockItemRepository,
)

logger = structlog.get_logger(__name__)


def _empty_document() -> dict:
    return {"clock": None, "stock_items": [], "orders": []}


class JsonDataFile:
    """One JSON document on disk, guarded by a process-wide lock."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self.lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> dict:
        if not self._file_path.exists():
            return _empty_document()
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("store.load_failed", path=str(self._file_path), error=str(exc))
            raise StoreError(f"Cannot read store {self._file_path}") from exc

        for key, default in _empty_document().items():
            document.setdefault(key, default)
        return document

    def persist(self, document: dict) -> None:
        payload = json.dumps(document, indent=2) + "\n"
        tmp_path = None
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.error("store.commit_failed", path=str(self._file_path), error=str(exc))
            raise StoreError(f"Cannot write store {self._file_path}") from exc


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_file: JsonDataFile) -> None:
        self._data_file = data_file
        self._document: dict | None = None

    def __enter__(self) -> JsonUnitOfWork:
        self._data_file.lock.acquire()
        try:
            self._document = self._data_file.load()
        except BaseException:
            self._data_file.lock.release()
            raise

        self.orders = JsonOrderRepository(self._document["orders"])
        self.stock_items = JsonStockItemRepository(self._document["stock_items"])
        self.clock = JsonClockRepository(self._document)
        return self

    def __exit__(self, *args) -> None:
        try:
            super().__exit__(*args)
        finally:
            self._data_file.lock.release()

    def commit(self) -> None:
        if self._document is None:
            raise StoreError("Unit of work is not active")
        self._data_file.persist(self._document)

    def rollback(self) -> None:
        # Uncommitted changes only ever lived in the loaded document.
        self._document = None
