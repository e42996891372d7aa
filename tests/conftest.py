"""Pytest configuration and shared fixtures for sheetstock tests."""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import count

import pytest

from sheetstock.application import InventoryService, ServiceFactory
from sheetstock.domain import Scrap, Sheet, SourceItem
from sheetstock.domain.value_objects import MaterialKind
from sheetstock.infrastructure import InMemoryInventoryStore

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


class SequentialIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self._counter = count(1)

    def __call__(self) -> str:
        return f"{self.prefix}-{next(self._counter)}"


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_sheet(
    sheet_id: str = "sheet-1",
    width: int = 2000,
    height: int = 3000,
    quantity: int = 10,
    **kwargs,
) -> Sheet:
    kwargs.setdefault("thickness", 3)
    kwargs.setdefault("color", "Transparente")
    return Sheet(
        id=sheet_id,
        width=width,
        height=height,
        created_at=FIXED_NOW,
        quantity=quantity,
        **kwargs,
    )


def make_source(width: int = 2000, height: int = 3000, **kwargs) -> SourceItem:
    kwargs.setdefault("kind", MaterialKind.SHEET)
    kwargs.setdefault("id", "src-1")
    kwargs.setdefault("thickness", 3)
    kwargs.setdefault("color", "Transparente")
    return SourceItem(width=width, height=height, **kwargs)


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def store() -> InMemoryInventoryStore:
    return InMemoryInventoryStore()


@pytest.fixture
def factory(store: InMemoryInventoryStore, ids: SequentialIds) -> ServiceFactory:
    """ServiceFactory over an empty in-memory store with deterministic ids."""
    return ServiceFactory(store=store, id_factory=ids, clock=fixed_clock)


@pytest.fixture
def service(factory: ServiceFactory) -> InventoryService:
    return factory.get_inventory_service()


@pytest.fixture
def sheet(store: InMemoryInventoryStore) -> Sheet:
    """A 2000x3000mm sheet with 10 units, already in the store."""
    record = make_sheet(location="Armazém A")
    store.insert(MaterialKind.SHEET, record)
    return record


@pytest.fixture
def scrap(store: InMemoryInventoryStore) -> Scrap:
    """A 500x800mm scrap, already in the store."""
    record = Scrap(
        id="scrap-1",
        width=500,
        height=800,
        thickness=3,
        color="Transparente",
        created_at=FIXED_NOW,
        location="Armazém C",
    )
    store.insert(MaterialKind.SCRAP, record)
    return record
