"""Starter inventory used by ``sheetstock init``."""

from __future__ import annotations

from .inventory_service import InventoryService


def load_default_seed(service: InventoryService) -> int:
    """Add the demo stock (two acrylic sheets, two scraps).

    Returns:
        Number of records created.
    """
    service.add_sheet(
        width=2000,
        height=3000,
        thickness=3,
        color="Transparente",
        quantity=10,
        location="Armazém A - Prateleira 1",
    )
    service.add_sheet(
        width=1220,
        height=2440,
        thickness=5,
        color="Branco",
        quantity=5,
        location="Armazém B - Prateleira 3",
    )
    service.add_scrap(
        width=500,
        height=800,
        thickness=3,
        color="Transparente",
        location="Armazém C - Retalhos",
    )
    service.add_scrap(
        width=300,
        height=600,
        thickness=5,
        color="Preto",
        location="Armazém C - Retalhos",
    )
    return 4
