"""Input and output records for the digit-encoding transform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class YearSummary:
    """Per-year Bechdel aggregate consumed by the digit encoder."""

    year: int
    median_score: float
    pass_fraction: float


@dataclass(frozen=True)
class GlyphStyle:
    """Styling for a single digit of a year label."""

    year: int
    position: int
    character: str
    is_emphasized: bool
    emphasis_color_value: Optional[float]
    horizontal_offset: float


__all__ = ["GlyphStyle", "YearSummary"]
