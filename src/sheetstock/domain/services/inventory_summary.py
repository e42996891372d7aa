"""Inventory summary figures (stock counts and areas)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..entities import Leftover, Scrap, Sheet
from ..value_objects import MaterialKind

if TYPE_CHECKING:
    from sheetstock.contracts import InventoryStore

__all__ = ["InventorySummary", "InventorySummarizer"]


@dataclass
class InventorySummary:
    """Aggregate figures over the whole inventory. Areas are in m²."""

    sheet_units: int
    sheet_area: float
    scrap_count: int
    scrap_area: float
    leftover_count: int
    leftover_area: float
    leftover_available_area: float
    cut_count: int
    sheets_by_color: dict[str, int] = field(default_factory=dict)

    @property
    def description(self) -> str:
        """Human-readable one-line summary."""
        return (
            f"{self.sheet_units} sheet(s) ({self.sheet_area:.2f} m²), "
            f"{self.scrap_count} scrap(s) ({self.scrap_area:.2f} m²), "
            f"{self.leftover_count} leftover(s) ({self.leftover_available_area:.2f} m² free)"
        )


class InventorySummarizer:
    """Computes stock totals from the store."""

    def __init__(self, store: InventoryStore) -> None:
        self.store = store

    def summarize(self) -> InventorySummary:
        sheets: list[Sheet] = list(self.store.list(MaterialKind.SHEET))  # type: ignore[arg-type]
        scraps: list[Scrap] = list(self.store.list(MaterialKind.SCRAP))  # type: ignore[arg-type]
        leftovers: list[Leftover] = list(self.store.list(MaterialKind.LEFTOVER))  # type: ignore[arg-type]

        return InventorySummary(
            sheet_units=sum(s.quantity for s in sheets),
            sheet_area=sum(s.total_area for s in sheets),
            scrap_count=len(scraps),
            scrap_area=sum(s.area for s in scraps),
            leftover_count=len(leftovers),
            leftover_area=sum(lo.area for lo in leftovers),
            leftover_available_area=sum(lo.available_area for lo in leftovers),
            cut_count=len(self.store.list(MaterialKind.CUT)),
            sheets_by_color=self.sheets_by_color(sheets),
        )

    @staticmethod
    def sheets_by_color(sheets: list[Sheet]) -> dict[str, int]:
        """Sheet units per color.

        Colors are grouped case-insensitively; the first spelling seen is
        used as the key.
        """
        display: dict[str, str] = {}
        totals: dict[str, int] = {}
        for sheet in sheets:
            key = sheet.color.casefold()
            label = display.setdefault(key, sheet.color)
            totals[label] = totals.get(label, 0) + sheet.quantity
        return totals
