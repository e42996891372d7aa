"""Atomic application of a cut batch to the inventory."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from ..entities import Cut, InventoryRecord, Leftover, Sheet, SourceItem
from ..exceptions import EmptyBatchError, RecordNotFoundError, SourceNotFoundError
from ..identity import new_id, utc_now
from ..value_objects import CutRequest, MaterialKind, RemnantPolicy
from .cut_validator import CutValidator
from .remnant_calculator import RemnantCalculator
from .source_resolver import SourceResolver

if TYPE_CHECKING:
    from sheetstock.contracts import InventoryStore

__all__ = ["AllocationCommitter", "CommitResult"]

logger = logging.getLogger(__name__)


@dataclass
class CommitResult:
    """Outcome of a committed cut batch.

    Attributes:
        source: The source as it was resolved before the commit.
        cuts: Cut records written, in batch order.
        leftover_created: The leftover record written.
        source_quantity: Remaining units when the source is a sheet, else None.
        source_removed: True when the source record was deleted (scrap or leftover).
    """

    source: SourceItem
    cuts: list[Cut] = field(default_factory=list)
    leftover_created: Leftover | None = None
    source_quantity: int | None = None
    source_removed: bool = False

    @property
    def cuts_created(self) -> int:
        return len(self.cuts)


class AllocationCommitter:
    """Writes cut records, the leftover and the source change as one unit.

    Commits against the same source are serialized with a per-source lock.
    If any write fails, the commit undoes only its own writes: the cut and
    leftover records it inserted are removed and the source record is put
    back, so changes made meanwhile by other callers survive.
    """

    def __init__(
        self,
        store: InventoryStore,
        resolver: SourceResolver | None = None,
        validator: CutValidator | None = None,
        calculator: RemnantCalculator | None = None,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.store = store
        self.id_factory = id_factory
        self.clock = clock
        self.resolver = resolver or SourceResolver(store)
        self.validator = validator or CutValidator()
        self.calculator = calculator or RemnantCalculator(id_factory, clock)
        self._locks: dict[tuple[MaterialKind, str], threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _source_lock(self, kind: MaterialKind, source_id: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks.setdefault((kind, source_id), threading.Lock())

    def _forget_source(self, kind: MaterialKind, source_id: str) -> None:
        with self._registry_lock:
            self._locks.pop((kind, source_id), None)

    def commit(
        self,
        source_kind: MaterialKind | str,
        source_id: str,
        cuts: Sequence[CutRequest],
        policy: RemnantPolicy | str = RemnantPolicy.FULL_FOOTPRINT,
        remnant: CutRequest | None = None,
    ) -> CommitResult:
        """Apply a cut batch to a source.

        Args:
            source_kind: Collection of the source (sheet, scrap or leftover).
            source_id: Identifier of the source record.
            cuts: Non-empty list of requested cuts.
            policy: How the leftover geometry is derived.
            remnant: Measured remnant dimensions, required by the manual policy.

        Returns:
            CommitResult describing everything written.

        Raises:
            EmptyBatchError: If ``cuts`` is empty.
            SourceNotFoundError: If the source does not resolve.
            InvalidDimensionsError: If a cut has a non-positive dimension.
            ExceedsSourceError: If a cut is larger than the source.
            OverCutError: If the cuts leave no material for the leftover.
        """
        if not cuts:
            raise EmptyBatchError("A cut batch needs at least one cut")

        kind = MaterialKind(source_kind)
        policy = RemnantPolicy(policy)
        with self._source_lock(kind, source_id):
            try:
                source = self.resolver.resolve(kind, source_id)
            except SourceNotFoundError:
                self._forget_source(kind, source_id)
                raise
            self.validator.ensure_valid(source, cuts)
            leftover = self.calculator.compute_remnant(source, cuts, policy, remnant)

            with self.store.batch():
                result = self._write(source, cuts, leftover)
            if result.source_removed:
                self._forget_source(kind, source_id)

        logger.info(
            f"Committed {result.cuts_created} cut(s) from {kind.value} {source_id!r} "
            f"({policy.value}); leftover {leftover.width}x{leftover.height}mm"
        )
        return result

    def _write(
        self, source: SourceItem, cuts: Sequence[CutRequest], leftover: Leftover
    ) -> CommitResult:
        result = CommitResult(source=source, leftover_created=leftover)
        original = self.store.get(source.kind, source.id)
        written: list[tuple[MaterialKind, str]] = []
        try:
            for request in cuts:
                cut = Cut(
                    id=self.id_factory(),
                    width=request.width,
                    height=request.height,
                    thickness=source.thickness,
                    color=source.color,
                    created_at=self.clock(),
                    origin_sheet=source.label,
                )
                self.store.insert(MaterialKind.CUT, cut)
                written.append((MaterialKind.CUT, cut.id))
                result.cuts.append(cut)

            self.store.insert(MaterialKind.LEFTOVER, leftover)
            written.append((MaterialKind.LEFTOVER, leftover.id))

            if source.kind is MaterialKind.SHEET:
                result.source_quantity = self.store.decrement_quantity(source.id, 1)
            else:
                self.store.remove(source.kind, source.id)
                result.source_removed = True
        except Exception:
            logger.warning(
                f"Commit against {source.id!r} failed, undoing {len(written)} write(s)"
            )
            self._undo(source.kind, original, written)
            raise
        return result

    def _undo(
        self,
        kind: MaterialKind,
        original: InventoryRecord,
        written: list[tuple[MaterialKind, str]],
    ) -> None:
        for written_kind, record_id in reversed(written):
            self.store.remove(written_kind, record_id)

        try:
            current = self.store.get(kind, original.id)
        except RecordNotFoundError:
            self.store.insert(kind, original)
            return
        if isinstance(original, Sheet) and isinstance(current, Sheet):
            if current.quantity != original.quantity:
                self.store.update(kind, original.id, {"quantity": original.quantity})
