"""Text formatters for inventory listings and cut reports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from sheetstock.domain.entities import Leftover, Sheet
from sheetstock.domain.value_objects import MaterialKind

if TYPE_CHECKING:
    from sheetstock.domain.entities import InventoryRecord, SourceItem
    from sheetstock.domain.services import CommitResult, InventorySummary
    from sheetstock.domain.value_objects import Rejection


class InventoryFormatter:
    """Formats the records of one kind as a table."""

    def format(self, kind: MaterialKind, records: Sequence[InventoryRecord]) -> str:
        title = f"{kind.value.upper()}S"
        if not records:
            return f"No {kind.value} records."

        lines = [
            title,
            "=" * 96,
            f"{'Id':<38} {'Size (mm)':<14} {'Thick':<7} {'Color':<14} {self._extra_header(kind)}",
            "-" * 96,
        ]
        for record in records:
            size = f"{record.width}x{record.height}"
            lines.append(
                f"{record.id:<38} {size:<14} {record.thickness:<7g} "
                f"{record.color:<14} {self._extra(record)}"
            )
        lines.append("-" * 96)
        lines.append(f"{len(records)} record(s)")
        return "\n".join(lines)

    @staticmethod
    def _extra_header(kind: MaterialKind) -> str:
        if kind is MaterialKind.SHEET:
            return "Qty"
        if kind is MaterialKind.LEFTOVER:
            return "Free (m²)"
        return "Origin"

    @staticmethod
    def _extra(record: InventoryRecord) -> str:
        if isinstance(record, Sheet):
            return str(record.quantity)
        if isinstance(record, Leftover):
            return f"{record.available_area:.3f}"
        return record.origin_sheet or "-"


class SourceFormatter:
    """Formats a resolved cut source."""

    def format(self, source: SourceItem) -> str:
        lines = [
            f"{source.label} [{source.kind.value} {source.id}]",
            f"  Thickness: {source.thickness:g}mm",
            f"  Area: {source.area:.3f} m² ({source.available_area:.3f} m² free)",
        ]
        if source.quantity is not None:
            lines.append(f"  Units available: {source.quantity}")
        if source.location:
            lines.append(f"  Location: {source.location}")
        if source.origin_sheet:
            lines.append(f"  Origin: {source.origin_sheet}")
        return "\n".join(lines)


class CommitReportFormatter:
    """Formats the outcome of a cut commit."""

    def format(self, result: CommitResult) -> str:
        lines = [
            "CUTS RECORDED",
            "=" * 60,
            f"Source: {result.source.label}",
        ]
        for index, cut in enumerate(result.cuts, start=1):
            lines.append(f"  {index}. {cut.width}x{cut.height}mm ({cut.area:.3f} m²)")

        leftover = result.leftover_created
        if leftover is not None:
            lines.append(
                f"Leftover: {leftover.width}x{leftover.height}mm, "
                f"cut area {leftover.cut_area:.3f} m², "
                f"free {leftover.available_area:.3f} m² [{leftover.id}]"
            )
        if result.source_quantity is not None:
            lines.append(f"Sheet units left: {result.source_quantity}")
        if result.source_removed:
            lines.append(f"Removed {result.source.kind.value} {result.source.id}")
        return "\n".join(lines)

    def format_rejection(self, rejection: Rejection) -> str:
        where = f" (cut #{rejection.cut_index + 1})" if rejection.cut_index is not None else ""
        return f"Rejected [{rejection.reason.value}]{where}: {rejection.message}"


class SummaryFormatter:
    """Formats inventory totals."""

    def format(self, summary: InventorySummary) -> str:
        lines = [
            "INVENTORY SUMMARY",
            "=" * 50,
            f"{'Sheets':<22} {summary.sheet_units:>6} units  {summary.sheet_area:>9.2f} m²",
            f"{'Scraps':<22} {summary.scrap_count:>6} pcs    {summary.scrap_area:>9.2f} m²",
            f"{'Leftovers':<22} {summary.leftover_count:>6} pcs    {summary.leftover_area:>9.2f} m²",
            f"{'  free for cutting':<22} {'':>6}          {summary.leftover_available_area:>9.2f} m²",
            f"{'Cuts recorded':<22} {summary.cut_count:>6}",
        ]
        if summary.sheets_by_color:
            lines.append("-" * 50)
            lines.append("Sheets by color:")
            for color, units in summary.sheets_by_color.items():
                lines.append(f"  {color:<20} {units:>6}")
        return "\n".join(lines)
