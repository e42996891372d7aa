"""Pydantic schemas for the REST API."""

from sheetstock.web.schemas.requests import (
    CheckCutsRequest,
    CommitCutsRequest,
    CutSchema,
)
from sheetstock.web.schemas.responses import (
    CheckCutsSchema,
    CommitResultSchema,
    ErrorResponseSchema,
    RecordSchema,
    RejectionSchema,
    SourceSchema,
    SummarySchema,
)

__all__ = [
    "CheckCutsRequest",
    "CheckCutsSchema",
    "CommitCutsRequest",
    "CommitResultSchema",
    "CutSchema",
    "ErrorResponseSchema",
    "RecordSchema",
    "RejectionSchema",
    "SourceSchema",
    "SummarySchema",
]
