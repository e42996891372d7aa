"""Infrastructure layer - record persistence and formatters."""

from .formatters import (
    CommitReportFormatter,
    InventoryFormatter,
    SourceFormatter,
    SummaryFormatter,
)
from .json_store import InventoryDocument, InventoryFileError, JsonFileInventoryStore
from .memory_store import InMemoryInventoryStore

__all__ = [
    "CommitReportFormatter",
    "InMemoryInventoryStore",
    "InventoryDocument",
    "InventoryFileError",
    "InventoryFormatter",
    "JsonFileInventoryStore",
    "SourceFormatter",
    "SummaryFormatter",
]
