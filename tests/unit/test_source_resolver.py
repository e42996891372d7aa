"""Unit tests for SourceResolver."""

import pytest

from conftest import make_sheet
from sheetstock.domain import (
    Leftover,
    MaterialKind,
    Scrap,
    Sheet,
    SourceNotFoundError,
    SourceResolver,
)
from sheetstock.infrastructure import InMemoryInventoryStore


class TestResolve:
    def test_resolves_sheet(self, store: InMemoryInventoryStore, sheet: Sheet) -> None:
        source = SourceResolver(store).resolve(MaterialKind.SHEET, sheet.id)
        assert source.id == sheet.id
        assert source.kind is MaterialKind.SHEET
        assert source.quantity == 10

    def test_accepts_kind_as_string(self, store: InMemoryInventoryStore, scrap: Scrap) -> None:
        source = SourceResolver(store).resolve("scrap", scrap.id)
        assert source.kind is MaterialKind.SCRAP
        assert (source.width, source.height) == (500, 800)

    def test_resolves_leftover(self, store: InMemoryInventoryStore) -> None:
        leftover = Leftover(
            id="lo-1",
            width=1000,
            height=1000,
            thickness=3,
            color="Branco",
            created_at=make_sheet().created_at,
            cut_area=0.2,
        )
        store.insert(MaterialKind.LEFTOVER, leftover)
        source = SourceResolver(store).resolve(MaterialKind.LEFTOVER, "lo-1")
        assert source.cut_area == pytest.approx(0.2)

    def test_unknown_id(self, store: InMemoryInventoryStore) -> None:
        with pytest.raises(SourceNotFoundError) as exc_info:
            SourceResolver(store).resolve(MaterialKind.SHEET, "missing")
        assert "missing" in exc_info.value.message

    def test_id_is_looked_up_in_the_named_collection_only(
        self, store: InMemoryInventoryStore, sheet: Sheet
    ) -> None:
        with pytest.raises(SourceNotFoundError):
            SourceResolver(store).resolve(MaterialKind.SCRAP, sheet.id)

    def test_depleted_sheet_is_not_found(self, store: InMemoryInventoryStore) -> None:
        store.insert(MaterialKind.SHEET, make_sheet("empty", quantity=0))
        with pytest.raises(SourceNotFoundError) as exc_info:
            SourceResolver(store).resolve(MaterialKind.SHEET, "empty")
        assert "no units left" in exc_info.value.message

    def test_cut_kind_is_not_a_source(self, store: InMemoryInventoryStore) -> None:
        with pytest.raises(SourceNotFoundError):
            SourceResolver(store).resolve(MaterialKind.CUT, "anything")


class TestListSelectable:
    def test_skips_depleted_sheets(self, store: InMemoryInventoryStore) -> None:
        store.insert(MaterialKind.SHEET, make_sheet("a", quantity=2))
        store.insert(MaterialKind.SHEET, make_sheet("b", quantity=0))
        store.insert(MaterialKind.SHEET, make_sheet("c", quantity=1))

        ids = [s.id for s in SourceResolver(store).list_selectable(MaterialKind.SHEET)]
        assert ids == ["a", "c"]

    def test_cut_kind_lists_nothing(self, store: InMemoryInventoryStore) -> None:
        assert SourceResolver(store).list_selectable("cut") == []
