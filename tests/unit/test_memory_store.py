"""Unit tests for InMemoryInventoryStore."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from conftest import make_sheet
from sheetstock.contracts import InventoryStore
from sheetstock.domain import MaterialKind, RecordNotFoundError, Scrap, Sheet
from sheetstock.infrastructure import InMemoryInventoryStore


def test_satisfies_protocol(store: InMemoryInventoryStore) -> None:
    assert isinstance(store, InventoryStore)


class TestInsertAndGet:
    def test_list_keeps_insertion_order(self, store: InMemoryInventoryStore) -> None:
        for sheet_id in ["c", "a", "b"]:
            store.insert(MaterialKind.SHEET, make_sheet(sheet_id))
        assert [s.id for s in store.list(MaterialKind.SHEET)] == ["c", "a", "b"]

    def test_duplicate_id(self, store: InMemoryInventoryStore, sheet: Sheet) -> None:
        with pytest.raises(ValueError):
            store.insert(MaterialKind.SHEET, make_sheet(sheet.id))

    def test_wrong_record_type(self, store: InMemoryInventoryStore) -> None:
        with pytest.raises(TypeError):
            store.insert(MaterialKind.SCRAP, make_sheet())

    def test_get_missing(self, store: InMemoryInventoryStore) -> None:
        with pytest.raises(RecordNotFoundError) as exc_info:
            store.get(MaterialKind.LEFTOVER, "x")
        assert exc_info.value.kind == "leftover"

    def test_kinds_are_separate(self, store: InMemoryInventoryStore, sheet: Sheet) -> None:
        with pytest.raises(RecordNotFoundError):
            store.get(MaterialKind.SCRAP, sheet.id)


class TestMutations:
    def test_update_replaces_record(self, store: InMemoryInventoryStore, scrap: Scrap) -> None:
        updated = store.update(MaterialKind.SCRAP, scrap.id, {"location": "Z9"})
        assert updated.location == "Z9"
        assert store.get(MaterialKind.SCRAP, scrap.id).location == "Z9"
        assert scrap.location == "Armazém C"

    def test_update_rejects_created_at(self, store: InMemoryInventoryStore, scrap: Scrap) -> None:
        with pytest.raises(ValueError) as exc_info:
            store.update(MaterialKind.SCRAP, scrap.id, {"created_at": None})
        assert "created_at" in str(exc_info.value)

    def test_update_revalidates(self, store: InMemoryInventoryStore, sheet: Sheet) -> None:
        with pytest.raises(ValueError):
            store.update(MaterialKind.SHEET, sheet.id, {"quantity": -1})
        assert store.get(MaterialKind.SHEET, sheet.id).quantity == 10

    def test_remove_missing(self, store: InMemoryInventoryStore) -> None:
        with pytest.raises(RecordNotFoundError):
            store.remove(MaterialKind.CUT, "x")

    def test_decrement_floors_at_zero(self, store: InMemoryInventoryStore) -> None:
        store.insert(MaterialKind.SHEET, make_sheet("s", quantity=2))
        assert store.decrement_quantity("s", 1) == 1
        assert store.decrement_quantity("s", 5) == 0
        assert store.get(MaterialKind.SHEET, "s").quantity == 0

    def test_decrement_rejects_negative(self, store: InMemoryInventoryStore, sheet: Sheet) -> None:
        with pytest.raises(ValueError):
            store.decrement_quantity(sheet.id, -1)


def test_batch_applies_changes_immediately(store: InMemoryInventoryStore, sheet: Sheet) -> None:
    with store.batch():
        store.decrement_quantity(sheet.id, 3)
        assert store.get(MaterialKind.SHEET, sheet.id).quantity == 7


def test_parallel_inserts(store: InMemoryInventoryStore) -> None:
    def insert_many(worker: int) -> None:
        for n in range(50):
            store.insert(MaterialKind.SHEET, make_sheet(f"w{worker}-{n}"))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(insert_many, range(8)))

    assert len(store.list(MaterialKind.SHEET)) == 400
