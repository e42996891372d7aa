"""Pydantic response schemas for the REST API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from sheetstock.domain import (
    CommitResult,
    InventoryRecord,
    InventorySummary,
    Rejection,
    SourceItem,
)


class RecordSchema(BaseModel):
    """Any inventory record. Kind-specific fields are None when not applicable."""

    id: str
    width: int
    height: int
    thickness: float
    color: str
    created_at: datetime
    quantity: int | None = None
    location: str | None = None
    origin_sheet: str | None = None
    cut_area: float | None = None
    area: float = Field(..., description="Total area in m²")

    @classmethod
    def from_record(cls, record: InventoryRecord) -> "RecordSchema":
        return cls(
            id=record.id,
            width=record.width,
            height=record.height,
            thickness=record.thickness,
            color=record.color,
            created_at=record.created_at,
            quantity=getattr(record, "quantity", None),
            location=getattr(record, "location", None),
            origin_sheet=getattr(record, "origin_sheet", None),
            cut_area=getattr(record, "cut_area", None),
            area=record.area,
        )


class SourceSchema(BaseModel):
    """A resolved cut source."""

    kind: str
    id: str
    label: str
    width: int
    height: int
    thickness: float
    color: str
    location: str | None = None
    origin_sheet: str | None = None
    quantity: int | None = None
    area: float
    available_area: float

    @classmethod
    def from_source(cls, source: SourceItem) -> "SourceSchema":
        return cls(
            kind=source.kind.value,
            id=source.id,
            label=source.label,
            width=source.width,
            height=source.height,
            thickness=source.thickness,
            color=source.color,
            location=source.location,
            origin_sheet=source.origin_sheet,
            quantity=source.quantity,
            area=source.area,
            available_area=source.available_area,
        )


class RejectionSchema(BaseModel):
    """A refused cut or batch."""

    reason: str
    message: str
    cut_index: int | None = None

    @classmethod
    def from_rejection(cls, rejection: Rejection) -> "RejectionSchema":
        return cls(
            reason=rejection.reason.value,
            message=rejection.message,
            cut_index=rejection.cut_index,
        )


class CheckCutsSchema(BaseModel):
    """Result of validating a batch."""

    is_valid: bool
    accepted: list[dict[str, int]] = Field(default_factory=list)
    rejections: list[RejectionSchema] = Field(default_factory=list)


class CommitResultSchema(BaseModel):
    """Result of a committed batch."""

    source: SourceSchema
    cuts_created: int
    cuts: list[RecordSchema]
    leftover_created: RecordSchema
    source_quantity: int | None = None
    source_removed: bool = False

    @classmethod
    def from_result(cls, result: CommitResult) -> "CommitResultSchema":
        assert result.leftover_created is not None
        return cls(
            source=SourceSchema.from_source(result.source),
            cuts_created=result.cuts_created,
            cuts=[RecordSchema.from_record(cut) for cut in result.cuts],
            leftover_created=RecordSchema.from_record(result.leftover_created),
            source_quantity=result.source_quantity,
            source_removed=result.source_removed,
        )


class SummarySchema(BaseModel):
    """Inventory totals. Areas are in m²."""

    sheet_units: int
    sheet_area: float
    scrap_count: int
    scrap_area: float
    leftover_count: int
    leftover_area: float
    leftover_available_area: float
    cut_count: int
    sheets_by_color: dict[str, int]

    @classmethod
    def from_summary(cls, summary: InventorySummary) -> "SummarySchema":
        return cls(
            sheet_units=summary.sheet_units,
            sheet_area=summary.sheet_area,
            scrap_count=summary.scrap_count,
            scrap_area=summary.scrap_area,
            leftover_count=summary.leftover_count,
            leftover_area=summary.leftover_area,
            leftover_available_area=summary.leftover_available_area,
            cut_count=summary.cut_count,
            sheets_by_color=summary.sheets_by_color,
        )


class ErrorResponseSchema(BaseModel):
    """Body of every error response."""

    error: str
    error_type: str
    details: Any = None
