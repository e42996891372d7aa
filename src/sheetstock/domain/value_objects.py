"""Value objects for the sheet stock domain.

All linear dimensions are millimeters and all areas are square meters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MM2_PER_M2 = 1_000_000


def area_m2(width: float, height: float) -> float:
    """Area of a width x height rectangle (mm) in square meters."""
    return (width * height) / MM2_PER_M2


class MaterialKind(str, Enum):
    """Kinds of inventory records held by the store."""

    SHEET = "sheet"
    SCRAP = "scrap"
    LEFTOVER = "leftover"
    CUT = "cut"

    @property
    def is_source(self) -> bool:
        """Whether records of this kind can be cut from."""
        return self is not MaterialKind.CUT


class RemnantPolicy(str, Enum):
    """Strategies for deriving the leftover of a cutting operation.

    FULL_FOOTPRINT keeps the source footprint and books the cut area.
    PROPORTIONAL_SHRINK shrinks the source to the remaining area, keeping
    its aspect ratio. MANUAL takes remnant dimensions measured by the operator.
    """

    FULL_FOOTPRINT = "full_footprint"
    PROPORTIONAL_SHRINK = "proportional_shrink"
    MANUAL = "manual"


class RejectionReason(str, Enum):
    """Why a cut or a cut batch was refused."""

    NOT_FOUND = "not_found"
    INVALID_DIMENSIONS = "invalid_dimensions"
    EXCEEDS_SOURCE = "exceeds_source"
    EMPTY_BATCH = "empty_batch"
    OVER_CUT = "over_cut"


@dataclass(frozen=True)
class CutRequest:
    """A requested rectangular cut, in millimeters.

    Dimensions are not checked here; the CutValidator reports bad values
    as a typed rejection instead of failing at construction.
    """

    width: int
    height: int

    @property
    def area(self) -> float:
        """Area of the cut in square meters."""
        return area_m2(self.width, self.height)

    @classmethod
    def parse(cls, text: str) -> "CutRequest":
        """Parse a ``WIDTHxHEIGHT`` string such as ``700x500``."""
        parts = text.lower().replace("×", "x").split("x")
        if len(parts) != 2:
            raise ValueError(f"Expected WIDTHxHEIGHT, got {text!r}")
        try:
            return cls(width=int(parts[0].strip()), height=int(parts[1].strip()))
        except ValueError as e:
            raise ValueError(f"Expected integer millimeters in {text!r}") from e

    def __str__(self) -> str:
        return f"{self.width}x{self.height}mm"


@dataclass(frozen=True)
class Rejection:
    """Typed refusal returned to callers instead of raising.

    Attributes:
        reason: Category of the refusal.
        message: Human-readable explanation.
        cut_index: Position of the offending cut in its batch, if any.
    """

    reason: RejectionReason
    message: str
    cut_index: int | None = None
