"""Contracts module - protocols shared across layers.

By depending on protocols rather than concrete implementations, the domain
services stay independent of how records are persisted.

Example:
    ```python
    from sheetstock.contracts import InventoryStore

    def count_sheets(store: InventoryStore) -> int:
        return len(store.list(MaterialKind.SHEET))
    ```
"""

from .protocols import (
    Clock as Clock,
    IdFactory as IdFactory,
    InventoryStore as InventoryStore,
)

__all__ = [
    "Clock",
    "IdFactory",
    "InventoryStore",
]
