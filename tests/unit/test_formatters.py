"""Unit tests for text formatters."""

from sheetstock.domain import (
    CutRequest,
    InventorySummary,
    MaterialKind,
    Rejection,
    RejectionReason,
    Sheet,
)
from sheetstock.domain.services import AllocationCommitter
from sheetstock.infrastructure import (
    CommitReportFormatter,
    InMemoryInventoryStore,
    InventoryFormatter,
    SourceFormatter,
    SummaryFormatter,
)


def test_inventory_table(store: InMemoryInventoryStore, sheet: Sheet) -> None:
    output = InventoryFormatter().format(MaterialKind.SHEET, store.list(MaterialKind.SHEET))
    assert output.startswith("SHEETS")
    assert "2000x3000" in output
    assert "Qty" in output
    assert "1 record(s)" in output


def test_inventory_table_empty() -> None:
    assert InventoryFormatter().format(MaterialKind.CUT, []) == "No cut records."


def test_commit_report(store: InMemoryInventoryStore, sheet: Sheet) -> None:
    result = AllocationCommitter(store).commit(
        MaterialKind.SHEET, sheet.id, [CutRequest(700, 500)]
    )
    output = CommitReportFormatter().format(result)

    assert output.startswith("CUTS RECORDED")
    assert "1. 700x500mm (0.350 m²)" in output
    assert "cut area 0.350 m²" in output
    assert "Sheet units left: 9" in output

    source_output = SourceFormatter().format(result.source)
    assert "Units available: 10" in source_output
    assert "Location: Armazém A" in source_output


def test_rejection_line() -> None:
    line = CommitReportFormatter().format_rejection(
        Rejection(RejectionReason.EXCEEDS_SOURCE, "too big", cut_index=1)
    )
    assert line == "Rejected [exceeds_source] (cut #2): too big"


def test_summary() -> None:
    summary = InventorySummary(
        sheet_units=3,
        sheet_area=18.0,
        scrap_count=0,
        scrap_area=0.0,
        leftover_count=1,
        leftover_area=6.0,
        leftover_available_area=5.65,
        cut_count=1,
        sheets_by_color={"Transparente": 3},
    )
    output = SummaryFormatter().format(summary)
    assert output.startswith("INVENTORY SUMMARY")
    assert "Sheets by color:" in output
    assert "5.65 m²" in output
