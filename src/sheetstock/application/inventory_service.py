"""Record-level create/update/remove for the inventory."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sheetstock.domain import InventoryRecord, MaterialKind, Scrap, Sheet
from sheetstock.domain.identity import new_id, utc_now

if TYPE_CHECKING:
    from sheetstock.contracts import InventoryStore

logger = logging.getLogger(__name__)


class InventoryService:
    """Thin CRUD layer over the store.

    Identifiers and timestamps come from the injected factories. Cut and
    leftover records are only ever created by the allocation committer, so
    only sheets and scraps can be added here; existing cuts and leftovers
    can still be updated or removed.
    """

    def __init__(
        self,
        store: InventoryStore,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.store = store
        self.id_factory = id_factory
        self.clock = clock

    def add_sheet(
        self,
        width: int,
        height: int,
        thickness: float,
        color: str,
        quantity: int,
        location: str | None = None,
    ) -> Sheet:
        sheet = Sheet(
            id=self.id_factory(),
            width=width,
            height=height,
            thickness=thickness,
            color=color,
            created_at=self.clock(),
            quantity=quantity,
            location=location,
        )
        self.store.insert(MaterialKind.SHEET, sheet)
        logger.info(f"Added sheet {sheet.id!r} ({width}x{height}mm x{quantity})")
        return sheet

    def add_scrap(
        self,
        width: int,
        height: int,
        thickness: float,
        color: str,
        origin_sheet: str | None = None,
        location: str | None = None,
    ) -> Scrap:
        scrap = Scrap(
            id=self.id_factory(),
            width=width,
            height=height,
            thickness=thickness,
            color=color,
            created_at=self.clock(),
            origin_sheet=origin_sheet,
            location=location,
        )
        self.store.insert(MaterialKind.SCRAP, scrap)
        logger.info(f"Added scrap {scrap.id!r} ({width}x{height}mm)")
        return scrap

    def list(self, kind: MaterialKind | str) -> list[InventoryRecord]:
        return list(self.store.list(MaterialKind(kind)))

    def get(self, kind: MaterialKind | str, record_id: str) -> InventoryRecord:
        return self.store.get(MaterialKind(kind), record_id)

    def update(
        self, kind: MaterialKind | str, record_id: str, **changes: Any
    ) -> InventoryRecord:
        """Update fields of a record. ``id`` and ``created_at`` cannot change."""
        return self.store.update(MaterialKind(kind), record_id, changes)

    def remove(self, kind: MaterialKind | str, record_id: str) -> None:
        self.store.remove(MaterialKind(kind), record_id)
        logger.info(f"Removed {MaterialKind(kind).value} {record_id!r}")
