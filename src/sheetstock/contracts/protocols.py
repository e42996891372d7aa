"""Service protocols for dependency injection.

The cut-allocation engine never touches a concrete persistence layer. It
depends on the ``InventoryStore`` protocol below, plus two small injected
capabilities for fresh identifiers and timestamps, so tests can supply
deterministic values.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sheetstock.domain.entities import InventoryRecord
    from sheetstock.domain.value_objects import MaterialKind


class IdFactory(Protocol):
    """Callable producing a fresh unique record identifier."""

    def __call__(self) -> str: ...


class Clock(Protocol):
    """Callable producing the current timestamp."""

    def __call__(self) -> datetime: ...


@runtime_checkable
class InventoryStore(Protocol):
    """Synchronous key-value mapping of inventory records, per kind.

    Implementations keep insertion order in ``list`` and raise
    ``RecordNotFoundError`` for unknown ids in ``get``, ``update``,
    ``remove`` and ``decrement_quantity``.

    Example:
        ```python
        store = InMemoryInventoryStore()
        store.insert(MaterialKind.SHEET, sheet)
        store.decrement_quantity(sheet.id, 1)
        ```
    """

    def list(self, kind: MaterialKind) -> Sequence[InventoryRecord]:
        """Return every record of the given kind."""
        ...

    def get(self, kind: MaterialKind, record_id: str) -> InventoryRecord:
        """Return the record with the given id."""
        ...

    def insert(self, kind: MaterialKind, record: InventoryRecord) -> None:
        """Add a new record. Ids must be unique within a kind."""
        ...

    def update(
        self, kind: MaterialKind, record_id: str, changes: dict[str, Any]
    ) -> InventoryRecord:
        """Apply a partial update and return the updated record.

        ``id`` and ``created_at`` are immutable and cannot be changed.
        """
        ...

    def remove(self, kind: MaterialKind, record_id: str) -> None:
        """Delete a record."""
        ...

    def decrement_quantity(self, record_id: str, by: int = 1) -> int:
        """Lower a sheet's quantity, floored at zero, and return the new value."""
        ...

    def batch(self) -> AbstractContextManager[None]:
        """Group several mutations into one unit of persistence.

        Stores that write to durable media may defer the write until the
        block exits.
        """
        ...
