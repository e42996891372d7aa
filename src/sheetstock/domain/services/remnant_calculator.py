"""Leftover geometry for a completed cut batch.

Three policies are supported and the caller picks one per commit:

- FULL_FOOTPRINT: the leftover keeps the source footprint and records the
  area taken by the batch in ``cut_area``.
- PROPORTIONAL_SHRINK: the leftover is the source reduced to its remaining
  area, keeping the source aspect ratio; ``cut_area`` starts at zero.
- MANUAL: the operator measures the remnant and passes its dimensions.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from ..entities import AREA_TOLERANCE, Leftover, SourceItem
from ..exceptions import ExceedsSourceError, InvalidDimensionsError, OverCutError
from ..identity import new_id, utc_now
from ..value_objects import MM2_PER_M2, CutRequest, RemnantPolicy

__all__ = [
    "FullFootprintPolicy",
    "ManualRemnantPolicy",
    "ProportionalShrinkPolicy",
    "RemnantCalculator",
    "RemnantGeometry",
    "RemnantStrategy",
]

logger = logging.getLogger(__name__)

# Slack added before flooring so that exact integers survive float error.
_FLOOR_EPSILON = 1e-9


@dataclass(frozen=True)
class RemnantGeometry:
    """Dimensions (mm) and booked cut area (m²) of a computed leftover."""

    width: int
    height: int
    cut_area: float = 0.0

    @property
    def area(self) -> float:
        return (self.width * self.height) / MM2_PER_M2


class RemnantStrategy(Protocol):
    """Protocol for leftover computation policies."""

    def compute(
        self,
        source: SourceItem,
        cuts: Sequence[CutRequest],
        remnant: CutRequest | None = None,
    ) -> RemnantGeometry:
        """Derive the leftover geometry for ``cuts`` taken from ``source``."""
        ...


class FullFootprintPolicy:
    """Leftover inherits the source footprint; cuts are booked as area.

    For a leftover source the area it had already booked is carried over,
    so ``cut_area`` stays cumulative across generations.
    """

    def compute(
        self,
        source: SourceItem,
        cuts: Sequence[CutRequest],
        remnant: CutRequest | None = None,
    ) -> RemnantGeometry:
        batch_area = sum(cut.area for cut in cuts)
        total_cut = source.cut_area + batch_area
        if total_cut > source.area + AREA_TOLERANCE:
            raise OverCutError(
                f"Cuts book {total_cut:.6f} m² but the source only has "
                f"{source.area:.6f} m²"
            )
        return RemnantGeometry(
            width=source.width,
            height=source.height,
            cut_area=min(total_cut, source.area),
        )


class ProportionalShrinkPolicy:
    """Leftover is the remaining area reshaped to the source aspect ratio.

    ``height = sqrt(remaining_mm2 / ratio)`` and ``width = height * ratio``
    with ``ratio = source.width / source.height``. Both are truncated to
    whole millimeters so the leftover never claims more material than is
    left.
    """

    def compute(
        self,
        source: SourceItem,
        cuts: Sequence[CutRequest],
        remnant: CutRequest | None = None,
    ) -> RemnantGeometry:
        remaining = source.available_area - sum(cut.area for cut in cuts)
        if remaining <= 0:
            raise OverCutError(
                f"Cuts leave no material on {source.label} "
                f"(remaining {remaining:.6f} m²)"
            )

        ratio = source.aspect_ratio
        remaining_mm2 = remaining * MM2_PER_M2
        height = math.floor(math.sqrt(remaining_mm2 / ratio) + _FLOOR_EPSILON)
        width = math.floor(height * ratio + _FLOOR_EPSILON)
        if width <= 0 or height <= 0:
            raise OverCutError(
                f"Remaining {remaining:.6f} m² is too small for a "
                f"{source.width}:{source.height} remnant"
            )
        logger.debug(
            f"Proportional remnant {width}x{height}mm from {remaining:.6f} m² "
            f"(ratio {ratio:.4f})"
        )
        return RemnantGeometry(width=width, height=height, cut_area=0.0)


class ManualRemnantPolicy:
    """Leftover dimensions are measured by the operator."""

    def compute(
        self,
        source: SourceItem,
        cuts: Sequence[CutRequest],
        remnant: CutRequest | None = None,
    ) -> RemnantGeometry:
        if remnant is None:
            raise InvalidDimensionsError("Manual policy requires remnant dimensions")
        if remnant.width <= 0 or remnant.height <= 0:
            raise InvalidDimensionsError(
                f"Remnant dimensions must be positive (got {remnant.width}x{remnant.height})"
            )
        if remnant.width > source.width or remnant.height > source.height:
            raise ExceedsSourceError(
                f"Remnant {remnant} exceeds source {source.width}x{source.height}mm"
            )
        return RemnantGeometry(width=remnant.width, height=remnant.height)


class RemnantCalculator:
    """Builds the leftover record produced by a cut batch.

    Example:
        ```python
        calculator = RemnantCalculator()
        leftover = calculator.compute_remnant(
            source, [CutRequest(700, 500)], RemnantPolicy.FULL_FOOTPRINT
        )
        ```
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.id_factory = id_factory
        self.clock = clock
        self.strategies: dict[RemnantPolicy, RemnantStrategy] = {
            RemnantPolicy.FULL_FOOTPRINT: FullFootprintPolicy(),
            RemnantPolicy.PROPORTIONAL_SHRINK: ProportionalShrinkPolicy(),
            RemnantPolicy.MANUAL: ManualRemnantPolicy(),
        }

    def compute_geometry(
        self,
        source: SourceItem,
        cuts: Sequence[CutRequest],
        policy: RemnantPolicy | str,
        remnant: CutRequest | None = None,
    ) -> RemnantGeometry:
        """Compute leftover dimensions and cut area without building a record.

        Raises:
            OverCutError: If the cuts use up all of the source.
            InvalidDimensionsError: If a manual remnant is missing or non-positive.
            ExceedsSourceError: If a manual remnant is larger than the source.
        """
        strategy = self.strategies[RemnantPolicy(policy)]
        return strategy.compute(source, cuts, remnant)

    def compute_remnant(
        self,
        source: SourceItem,
        cuts: Sequence[CutRequest],
        policy: RemnantPolicy | str,
        remnant: CutRequest | None = None,
    ) -> Leftover:
        """Compute the leftover record for ``cuts`` taken from ``source``.

        The returned Leftover is not persisted. It carries the source's
        thickness, color and location, and the source label as its origin.
        """
        geometry = self.compute_geometry(source, cuts, policy, remnant)
        return Leftover(
            id=self.id_factory(),
            width=geometry.width,
            height=geometry.height,
            thickness=source.thickness,
            color=source.color,
            created_at=self.clock(),
            origin_sheet=source.label,
            location=source.location,
            cut_area=geometry.cut_area,
        )
