"""Domain exceptions for the cut-allocation engine."""

from __future__ import annotations

from .value_objects import Rejection, RejectionReason


class AllocationError(Exception):
    """Base class for recoverable cut-allocation failures.

    Attributes:
        reason: Category of the failure.
        message: Human-readable explanation.
        cut_index: Position of the offending cut in its batch, if any.
    """

    reason: RejectionReason = RejectionReason.NOT_FOUND

    def __init__(self, message: str, cut_index: int | None = None) -> None:
        self.message = message
        self.cut_index = cut_index
        super().__init__(message)

    def to_rejection(self) -> Rejection:
        """Convert to the typed result handed to callers."""
        return Rejection(reason=self.reason, message=self.message, cut_index=self.cut_index)

    @classmethod
    def from_rejection(cls, rejection: Rejection) -> "AllocationError":
        """Build the matching exception for a rejection."""
        error_cls = _BY_REASON[rejection.reason]
        return error_cls(rejection.message, cut_index=rejection.cut_index)


class SourceNotFoundError(AllocationError):
    """Source record is absent, or is a depleted sheet."""

    reason = RejectionReason.NOT_FOUND


class InvalidDimensionsError(AllocationError):
    """A cut (or manual remnant) has a non-positive dimension."""

    reason = RejectionReason.INVALID_DIMENSIONS


class ExceedsSourceError(AllocationError):
    """A cut is wider or taller than its source."""

    reason = RejectionReason.EXCEEDS_SOURCE


class EmptyBatchError(AllocationError):
    """A commit was attempted with no cuts."""

    reason = RejectionReason.EMPTY_BATCH


class OverCutError(AllocationError):
    """The cuts use up all of the source's area."""

    reason = RejectionReason.OVER_CUT


class RecordNotFoundError(KeyError):
    """Raised by stores when no record has the requested id."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"No {kind} record with id {record_id!r}")

    def __str__(self) -> str:
        return self.args[0]


_BY_REASON: dict[RejectionReason, type[AllocationError]] = {
    RejectionReason.NOT_FOUND: SourceNotFoundError,
    RejectionReason.INVALID_DIMENSIONS: InvalidDimensionsError,
    RejectionReason.EXCEEDS_SOURCE: ExceedsSourceError,
    RejectionReason.EMPTY_BATCH: EmptyBatchError,
    RejectionReason.OVER_CUT: OverCutError,
}
