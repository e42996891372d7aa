"""In-memory inventory store."""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sheetstock.domain.entities import RECORD_TYPES, InventoryRecord, Sheet
from sheetstock.domain.exceptions import RecordNotFoundError
from sheetstock.domain.value_objects import MaterialKind

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = frozenset({"id", "created_at"})

StoreState = dict[MaterialKind, dict[str, InventoryRecord]]


class InMemoryInventoryStore:
    """Inventory records held in per-kind dictionaries.

    Insertion order is preserved. Every read and mutation holds one
    re-entrant lock, so callers on different threads see whole records.
    """

    def __init__(self) -> None:
        self._records: StoreState = {kind: {} for kind in MaterialKind}
        self._lock = threading.RLock()

    def list(self, kind: MaterialKind | str) -> list[InventoryRecord]:
        with self._lock:
            return list(self._records[MaterialKind(kind)].values())

    def get(self, kind: MaterialKind | str, record_id: str) -> InventoryRecord:
        kind = MaterialKind(kind)
        with self._lock:
            try:
                return self._records[kind][record_id]
            except KeyError:
                raise RecordNotFoundError(kind.value, record_id) from None

    def insert(self, kind: MaterialKind | str, record: InventoryRecord) -> None:
        kind = MaterialKind(kind)
        expected = RECORD_TYPES[kind]
        if not isinstance(record, expected):
            raise TypeError(
                f"Expected {expected.__name__} for {kind.value}, got {type(record).__name__}"
            )
        with self._lock:
            collection = self._records[kind]
            if record.id in collection:
                raise ValueError(f"Duplicate {kind.value} id {record.id!r}")
            collection[record.id] = record

    def update(
        self, kind: MaterialKind | str, record_id: str, changes: dict[str, Any]
    ) -> InventoryRecord:
        kind = MaterialKind(kind)
        frozen = IMMUTABLE_FIELDS.intersection(changes)
        if frozen:
            raise ValueError(f"Cannot change {', '.join(sorted(frozen))}")
        with self._lock:
            record = self.get(kind, record_id)
            try:
                updated = dataclasses.replace(record, **changes)
            except TypeError as e:
                raise ValueError(f"Invalid {kind.value} fields: {e}") from e
            self._records[kind][record_id] = updated
            return updated

    def remove(self, kind: MaterialKind | str, record_id: str) -> None:
        kind = MaterialKind(kind)
        with self._lock:
            if record_id not in self._records[kind]:
                raise RecordNotFoundError(kind.value, record_id)
            del self._records[kind][record_id]

    def decrement_quantity(self, record_id: str, by: int = 1) -> int:
        if by < 0:
            raise ValueError("Decrement must not be negative")
        with self._lock:
            sheet = self.get(MaterialKind.SHEET, record_id)
            assert isinstance(sheet, Sheet)
            new_quantity = max(sheet.quantity - by, 0)
            self._records[MaterialKind.SHEET][record_id] = dataclasses.replace(
                sheet, quantity=new_quantity
            )
        logger.debug(f"Sheet {record_id!r} quantity {sheet.quantity} -> {new_quantity}")
        return new_quantity

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Group several mutations. Nothing to defer for an in-memory store."""
        yield
