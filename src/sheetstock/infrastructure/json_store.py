"""JSON file persistence for the inventory store.

The document layout is validated with pydantic on load and on save:

    {
      "schema_version": "1.0",
      "sheets": [...], "scraps": [...], "cuts": [...], "leftovers": [...]
    }
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import datetime
from pathlib import Path
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from sheetstock.domain.entities import AREA_TOLERANCE, Cut, InventoryRecord, Leftover, Scrap, Sheet
from sheetstock.domain.value_objects import MaterialKind, area_m2

from .memory_store import InMemoryInventoryStore, StoreState

logger = logging.getLogger(__name__)

DOCUMENT_VERSION = "1.0"


class InventoryFileError(Exception):
    """Raised when an inventory file cannot be read or parsed.

    Attributes:
        path: Path to the inventory file.
        details: Validation error details, if any.
    """

    def __init__(
        self, message: str, path: Path, details: list[dict[str, Any]] | None = None
    ) -> None:
        self.message = message
        self.path = path
        self.details = details or []
        super().__init__(message)


class _RecordModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    width: int = Field(..., gt=0, description="Width in mm")
    height: int = Field(..., gt=0, description="Height in mm")
    thickness: float = Field(..., gt=0, description="Thickness in mm")
    color: str
    created_at: datetime


class SheetModel(_RecordModel):
    quantity: int = Field(0, ge=0)
    location: str | None = None


class ScrapModel(_RecordModel):
    origin_sheet: str | None = None
    location: str | None = None


class CutModel(_RecordModel):
    origin_sheet: str | None = None


class LeftoverModel(_RecordModel):
    origin_sheet: str | None = None
    location: str | None = None
    cut_area: float = Field(0.0, ge=0, description="Area already cut, in m²")

    @model_validator(mode="after")
    def validate_cut_area(self) -> "LeftoverModel":
        """Validate that cut_area does not exceed the piece area."""
        area = area_m2(self.width, self.height)
        if self.cut_area > area + AREA_TOLERANCE:
            raise ValueError(
                f"cut_area ({self.cut_area}) exceeds the piece area ({area})"
            )
        return self


class InventoryDocument(BaseModel):
    """Root model of an inventory file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = DOCUMENT_VERSION
    sheets: list[SheetModel] = Field(default_factory=list)
    scraps: list[ScrapModel] = Field(default_factory=list)
    cuts: list[CutModel] = Field(default_factory=list)
    leftovers: list[LeftoverModel] = Field(default_factory=list)


# kind -> (document attribute, pydantic model, domain type)
_MAPPING: dict[MaterialKind, tuple[str, type[_RecordModel], type]] = {
    MaterialKind.SHEET: ("sheets", SheetModel, Sheet),
    MaterialKind.SCRAP: ("scraps", ScrapModel, Scrap),
    MaterialKind.CUT: ("cuts", CutModel, Cut),
    MaterialKind.LEFTOVER: ("leftovers", LeftoverModel, Leftover),
}


def state_to_document(state: StoreState) -> InventoryDocument:
    """Convert store state to a validated document."""
    collections = {
        attr: [model.model_validate(dataclasses.asdict(r)) for r in state[kind].values()]
        for kind, (attr, model, _) in _MAPPING.items()
    }
    return InventoryDocument(**collections)


def document_to_records(
    document: InventoryDocument,
) -> dict[MaterialKind, list[InventoryRecord]]:
    """Convert a document to domain records grouped by kind."""
    records: dict[MaterialKind, list[InventoryRecord]] = {}
    for kind, (attr, _, domain_type) in _MAPPING.items():
        records[kind] = [domain_type(**m.model_dump()) for m in getattr(document, attr)]
    return records


class JsonFileInventoryStore(InMemoryInventoryStore):
    """In-memory store that writes itself to a JSON file after every change.

    The file is read once on construction; a missing file starts an empty
    inventory. Writes go through a temporary file that replaces the target,
    so a crash mid-write never leaves a truncated document. Inside
    ``batch()`` the write is deferred until the outermost batch exits.
    """

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)
        self._batch_depth = 0
        if self.path.exists():
            self._load()

    def _load(self) -> None:
        try:
            raw = self.path.read_text(encoding="utf-8")
            document = InventoryDocument.model_validate(json.loads(raw))
        except OSError as e:
            raise InventoryFileError(f"Cannot read {self.path}: {e}", self.path) from e
        except json.JSONDecodeError as e:
            raise InventoryFileError(
                f"Invalid JSON in {self.path}: {e.msg}",
                self.path,
                [{"line": e.lineno, "column": e.colno, "message": e.msg}],
            ) from e
        except PydanticValidationError as e:
            raise InventoryFileError(
                f"Invalid inventory document {self.path}",
                self.path,
                [
                    {"path": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                    for err in e.errors()
                ],
            ) from e

        # Domain checks the schema cannot express, such as duplicate ids.
        try:
            for kind, records in document_to_records(document).items():
                for record in records:
                    super().insert(kind, record)
        except (TypeError, ValueError) as e:
            raise InventoryFileError(
                f"Invalid inventory document {self.path}",
                self.path,
                [{"path": "", "message": str(e)}],
            ) from e
        logger.debug(f"Loaded inventory from {self.path}")

    def persist(self) -> None:
        """Write the current state to disk."""
        with self._lock:
            document = state_to_document(self._records)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        logger.debug(f"Saved inventory to {self.path}")

    def _changed(self) -> None:
        with self._lock:
            if self._batch_depth == 0:
                self.persist()

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Defer writing the file until the outermost batch exits.

        The file is written on exit even when the block raises, so it always
        matches the in-memory state.
        """
        with self._lock:
            self._batch_depth += 1
        try:
            yield
        finally:
            with self._lock:
                self._batch_depth -= 1
                if self._batch_depth == 0:
                    self.persist()

    def insert(self, kind: MaterialKind | str, record: InventoryRecord) -> None:
        super().insert(kind, record)
        self._changed()

    def update(
        self, kind: MaterialKind | str, record_id: str, changes: dict[str, Any]
    ) -> InventoryRecord:
        updated = super().update(kind, record_id, changes)
        self._changed()
        return updated

    def remove(self, kind: MaterialKind | str, record_id: str) -> None:
        super().remove(kind, record_id)
        self._changed()

    def decrement_quantity(self, record_id: str, by: int = 1) -> int:
        quantity = super().decrement_quantity(record_id, by)
        self._changed()
        return quantity
