"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from sheetstock.domain import CutRequest, MaterialKind, RemnantPolicy


class CutSchema(BaseModel):
    """A requested cut, in millimeters.

    Non-positive values are accepted here so the engine can report them as
    an ``invalid_dimensions`` rejection.
    """

    width: int = Field(..., description="Cut width in mm")
    height: int = Field(..., description="Cut height in mm")

    def to_domain(self) -> CutRequest:
        return CutRequest(width=self.width, height=self.height)


class CheckCutsRequest(BaseModel):
    """Request for validating cuts against a source without committing."""

    source_kind: MaterialKind = Field(..., description="sheet, scrap or leftover")
    source_id: str = Field(..., description="Source record id")
    cuts: list[CutSchema] = Field(default_factory=list)


class CommitCutsRequest(BaseModel):
    """Request for committing a cut batch."""

    source_kind: MaterialKind = Field(..., description="sheet, scrap or leftover")
    source_id: str = Field(..., description="Source record id")
    cuts: list[CutSchema] = Field(default_factory=list)
    policy: RemnantPolicy | None = Field(
        default=None, description="Leftover policy; the configured default when omitted"
    )
    remnant: CutSchema | None = Field(
        default=None, description="Measured remnant dimensions for the manual policy"
    )
