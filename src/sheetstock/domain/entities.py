"""Domain entities for sheet stock inventory.

Every record carries the shared physical attributes (width, height in mm,
thickness in mm, color label) plus an opaque id and a creation timestamp.
Sheets, scraps and leftovers are kept as separate record types; the
``MaterialKind`` tag selects between them wherever code needs to treat
them uniformly (see ``SourceItem``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from .value_objects import MaterialKind, area_m2

# Float slack when comparing accumulated areas in square meters.
AREA_TOLERANCE = 1e-9


def _check_geometry(width: int, height: int, thickness: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be positive")
    if thickness <= 0:
        raise ValueError("Thickness must be positive")


@dataclass
class Sheet:
    """Fungible stocked panel; one record stands for ``quantity`` identical units.

    Attributes:
        id: Opaque unique identifier.
        width: Width in millimeters.
        height: Height in millimeters.
        thickness: Thickness in millimeters.
        color: Free-text color label, case preserved.
        created_at: Creation timestamp, never changed after creation.
        quantity: Number of physical sheets in stock. A sheet at zero stays
            listed until it is explicitly removed.
        location: Optional storage location.
    """

    id: str
    width: int
    height: int
    thickness: float
    color: str
    created_at: datetime
    quantity: int = 0
    location: str | None = None

    def __post_init__(self) -> None:
        _check_geometry(self.width, self.height, self.thickness)
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")

    @property
    def area(self) -> float:
        """Area of one sheet in square meters."""
        return area_m2(self.width, self.height)

    @property
    def total_area(self) -> float:
        """Area of all units in stock in square meters."""
        return self.area * self.quantity

    @property
    def is_depleted(self) -> bool:
        return self.quantity == 0


@dataclass
class Scrap:
    """A single pre-existing offcut piece."""

    id: str
    width: int
    height: int
    thickness: float
    color: str
    created_at: datetime
    origin_sheet: str | None = None
    location: str | None = None

    def __post_init__(self) -> None:
        _check_geometry(self.width, self.height, self.thickness)

    @property
    def area(self) -> float:
        return area_m2(self.width, self.height)


@dataclass
class Cut:
    """Historical record of one rectangular piece removed from a source."""

    id: str
    width: int
    height: int
    thickness: float
    color: str
    created_at: datetime
    origin_sheet: str | None = None

    def __post_init__(self) -> None:
        _check_geometry(self.width, self.height, self.thickness)

    @property
    def area(self) -> float:
        return area_m2(self.width, self.height)


@dataclass
class Leftover:
    """Remnant piece produced by a cutting operation.

    Attributes:
        cut_area: Area in square meters already removed from this piece by
            later cuts. Always between zero and the piece's total area.
    """

    id: str
    width: int
    height: int
    thickness: float
    color: str
    created_at: datetime
    origin_sheet: str | None = None
    location: str | None = None
    cut_area: float = 0.0

    def __post_init__(self) -> None:
        _check_geometry(self.width, self.height, self.thickness)
        if self.cut_area < 0:
            raise ValueError("Cut area cannot be negative")
        if self.cut_area > self.area + AREA_TOLERANCE:
            raise ValueError(
                f"Cut area {self.cut_area} exceeds piece area {self.area}"
            )

    @property
    def area(self) -> float:
        """Total area of the piece in square meters."""
        return area_m2(self.width, self.height)

    @property
    def available_area(self) -> float:
        """Area still free for cutting, in square meters."""
        return max(self.area - self.cut_area, 0.0)


InventoryRecord = Union[Sheet, Scrap, Cut, Leftover]

RECORD_TYPES: dict[MaterialKind, type] = {
    MaterialKind.SHEET: Sheet,
    MaterialKind.SCRAP: Scrap,
    MaterialKind.CUT: Cut,
    MaterialKind.LEFTOVER: Leftover,
}

_LABEL_PREFIX = {
    MaterialKind.SHEET: "Chapa",
    MaterialKind.SCRAP: "Retalho",
    MaterialKind.LEFTOVER: "Sobra",
}


@dataclass(frozen=True)
class SourceItem:
    """Read-only view of a record that cuts can be taken from.

    The ``kind`` tag says which collection backs the view. ``quantity`` is
    only set for sheets; ``cut_area`` is only non-zero for leftovers.
    """

    kind: MaterialKind
    id: str
    width: int
    height: int
    thickness: float
    color: str
    location: str | None = None
    origin_sheet: str | None = None
    quantity: int | None = None
    cut_area: float = 0.0

    @classmethod
    def from_record(cls, kind: MaterialKind, record: InventoryRecord) -> "SourceItem":
        """Build a source view from a sheet, scrap or leftover record."""
        if not kind.is_source:
            raise ValueError(f"{kind.value} records cannot be cut from")
        return cls(
            kind=kind,
            id=record.id,
            width=record.width,
            height=record.height,
            thickness=record.thickness,
            color=record.color,
            location=getattr(record, "location", None),
            origin_sheet=getattr(record, "origin_sheet", None),
            quantity=record.quantity if isinstance(record, Sheet) else None,
            cut_area=record.cut_area if isinstance(record, Leftover) else 0.0,
        )

    @property
    def area(self) -> float:
        """Full footprint area in square meters."""
        return area_m2(self.width, self.height)

    @property
    def available_area(self) -> float:
        """Area not yet booked as cut, in square meters."""
        return self.area - self.cut_area

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def label(self) -> str:
        """Descriptive origin label written onto cuts and leftovers."""
        prefix = _LABEL_PREFIX[self.kind]
        return f"{prefix} {self.color} ({self.width}x{self.height}mm)"
