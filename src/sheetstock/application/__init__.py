"""Application layer - use cases and orchestration."""

from .commands import CheckCutsCommand, CommitCutsCommand
from .dtos import BatchCheckOutput, CommitInput, CommitOutput
from .factory import ServiceFactory, get_factory
from .inventory_service import InventoryService
from .pending_batch import PendingCutBatch
from .seed import load_default_seed

__all__ = [
    "BatchCheckOutput",
    "CheckCutsCommand",
    "CommitCutsCommand",
    "CommitInput",
    "CommitOutput",
    "InventoryService",
    "PendingCutBatch",
    "ServiceFactory",
    "get_factory",
    "load_default_seed",
]
