"""Per-cut feasibility checks."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..entities import SourceItem
from ..exceptions import AllocationError
from ..value_objects import CutRequest, Rejection, RejectionReason

__all__ = ["CutValidator"]

logger = logging.getLogger(__name__)


class CutValidator:
    """Checks that a requested cut fits inside its source.

    Validation is stateless: every cut in a batch is compared against the
    original source footprint, not against what earlier cuts left over.
    Cuts are not rotated to fit.
    """

    def validate(
        self, source: SourceItem, cut: CutRequest, cut_index: int | None = None
    ) -> Rejection | None:
        """Validate one cut against a source.

        Returns:
            None if the cut is acceptable, else a Rejection with reason
            INVALID_DIMENSIONS or EXCEEDS_SOURCE.
        """
        if cut.width <= 0 or cut.height <= 0:
            return Rejection(
                reason=RejectionReason.INVALID_DIMENSIONS,
                message=f"Cut dimensions must be positive (got {cut.width}x{cut.height})",
                cut_index=cut_index,
            )
        if cut.width > source.width or cut.height > source.height:
            return Rejection(
                reason=RejectionReason.EXCEEDS_SOURCE,
                message=(
                    f"Cut {cut} exceeds source {source.width}x{source.height}mm"
                ),
                cut_index=cut_index,
            )
        return None

    def validate_all(
        self, source: SourceItem, cuts: Iterable[CutRequest]
    ) -> list[Rejection]:
        """Validate every cut and return all rejections, in batch order."""
        rejections = []
        for index, cut in enumerate(cuts):
            rejection = self.validate(source, cut, cut_index=index)
            if rejection is not None:
                rejections.append(rejection)
        if rejections:
            logger.debug(f"{len(rejections)} cut(s) rejected against {source.id!r}")
        return rejections

    def ensure_valid(self, source: SourceItem, cuts: Iterable[CutRequest]) -> None:
        """Raise the first rejection as an AllocationError."""
        rejections = self.validate_all(source, cuts)
        if rejections:
            raise AllocationError.from_rejection(rejections[0])
