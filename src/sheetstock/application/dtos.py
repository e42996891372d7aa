"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from sheetstock.domain import (
    CommitResult,
    CutRequest,
    MaterialKind,
    Rejection,
    RemnantPolicy,
)


@dataclass
class CommitInput:
    """Input DTO for committing a cut batch.

    Attributes:
        source_kind: Collection of the source (sheet, scrap or leftover).
        source_id: Identifier of the source record.
        cuts: Requested cuts, in millimeters.
        policy: Leftover policy to apply.
        remnant: Measured remnant dimensions for the manual policy.
    """

    source_kind: MaterialKind
    source_id: str
    cuts: list[CutRequest] = field(default_factory=list)
    policy: RemnantPolicy = RemnantPolicy.FULL_FOOTPRINT
    remnant: CutRequest | None = None


@dataclass
class CommitOutput:
    """Output DTO of a commit attempt.

    Exactly one of ``result`` and ``rejection`` is set.
    """

    result: CommitResult | None = None
    rejection: Rejection | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the batch was committed."""
        return self.rejection is None and self.result is not None


@dataclass
class BatchCheckOutput:
    """Output DTO of validating a batch without committing it."""

    accepted: list[CutRequest] = field(default_factory=list)
    rejections: list[Rejection] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.rejections
