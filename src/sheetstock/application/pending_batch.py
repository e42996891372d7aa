"""In-progress cut batch bound to one source."""

from __future__ import annotations

from sheetstock.domain import (
    CommitResult,
    CutRequest,
    CutValidator,
    EmptyBatchError,
    Rejection,
    RemnantPolicy,
    SourceItem,
)
from sheetstock.domain.services import AllocationCommitter


class PendingCutBatch:
    """Collects cuts for a source before they are committed.

    Each cut is validated when it is added. A rejected cut is reported and
    dropped, and the cuts already accepted stay in the batch, so the user
    can correct one entry without re-entering the rest.

    Example:
        ```python
        batch = PendingCutBatch(resolver.resolve("sheet", sheet_id))
        rejection = batch.add(CutRequest(2500, 500))  # exceeds_source
        batch.add(CutRequest(700, 500))
        result = batch.commit(committer, RemnantPolicy.FULL_FOOTPRINT)
        ```
    """

    def __init__(self, source: SourceItem, validator: CutValidator | None = None) -> None:
        self.source = source
        self.validator = validator or CutValidator()
        self._cuts: list[CutRequest] = []

    @property
    def cuts(self) -> list[CutRequest]:
        return list(self._cuts)

    def __len__(self) -> int:
        return len(self._cuts)

    def add(self, cut: CutRequest) -> Rejection | None:
        """Validate and append a cut. Returns the rejection if it does not fit."""
        rejection = self.validator.validate(self.source, cut, cut_index=len(self._cuts))
        if rejection is None:
            self._cuts.append(cut)
        return rejection

    def remove(self, index: int) -> CutRequest:
        """Remove and return the cut at ``index``."""
        return self._cuts.pop(index)

    def clear(self) -> None:
        self._cuts.clear()

    def commit(
        self,
        committer: AllocationCommitter,
        policy: RemnantPolicy | str = RemnantPolicy.FULL_FOOTPRINT,
        remnant: CutRequest | None = None,
    ) -> CommitResult:
        """Commit the batch and clear it on success.

        The committer re-resolves and re-validates the source, so a source
        that changed since the batch was opened is still caught.
        """
        if not self._cuts:
            raise EmptyBatchError("A cut batch needs at least one cut")
        result = committer.commit(
            self.source.kind, self.source.id, self._cuts, policy=policy, remnant=remnant
        )
        self._cuts.clear()
        return result
