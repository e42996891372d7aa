"""Domain layer - core business logic."""

from .entities import Cut, InventoryRecord, Leftover, Scrap, Sheet, SourceItem
from .exceptions import (
    AllocationError,
    EmptyBatchError,
    ExceedsSourceError,
    InvalidDimensionsError,
    OverCutError,
    RecordNotFoundError,
    SourceNotFoundError,
)
from .services import (
    AllocationCommitter,
    CommitResult,
    CutValidator,
    InventorySummarizer,
    InventorySummary,
    RemnantCalculator,
    SourceResolver,
)
from .value_objects import (
    MM2_PER_M2,
    CutRequest,
    MaterialKind,
    Rejection,
    RejectionReason,
    RemnantPolicy,
    area_m2,
)

__all__ = [
    "AllocationCommitter",
    "AllocationError",
    "CommitResult",
    "Cut",
    "CutRequest",
    "CutValidator",
    "EmptyBatchError",
    "ExceedsSourceError",
    "InvalidDimensionsError",
    "InventoryRecord",
    "InventorySummarizer",
    "InventorySummary",
    "Leftover",
    "MM2_PER_M2",
    "MaterialKind",
    "OverCutError",
    "RecordNotFoundError",
    "Rejection",
    "RejectionReason",
    "RemnantCalculator",
    "RemnantPolicy",
    "Scrap",
    "Sheet",
    "SourceItem",
    "SourceNotFoundError",
    "area_m2",
]
