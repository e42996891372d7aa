"""Domain services for the cut-allocation engine."""

from .allocation_committer import AllocationCommitter, CommitResult
from .cut_validator import CutValidator
from .inventory_summary import InventorySummarizer, InventorySummary
from .remnant_calculator import (
    FullFootprintPolicy,
    ManualRemnantPolicy,
    ProportionalShrinkPolicy,
    RemnantCalculator,
    RemnantGeometry,
    RemnantStrategy,
)
from .source_resolver import SourceResolver

__all__ = [
    "AllocationCommitter",
    "CommitResult",
    "CutValidator",
    "FullFootprintPolicy",
    "InventorySummarizer",
    "InventorySummary",
    "ManualRemnantPolicy",
    "ProportionalShrinkPolicy",
    "RemnantCalculator",
    "RemnantGeometry",
    "RemnantStrategy",
    "SourceResolver",
]
